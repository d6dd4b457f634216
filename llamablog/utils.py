import math
import re
import unicodedata
from typing import Iterable, List

_APOSTROPHES = re.compile(r"['’]")

# Latin letters with no Unicode decomposition, spelled the way lodash deburrs them
_LATIN_LETTERS = str.maketrans(
    {
        "Æ": "Ae",
        "æ": "ae",
        "Ð": "D",
        "ð": "d",
        "Ø": "O",
        "ø": "o",
        "Þ": "Th",
        "þ": "th",
        "ß": "ss",
        "×": " ",
        "÷": " ",
        "Đ": "D",
        "đ": "d",
        "Ħ": "H",
        "ħ": "h",
        "ı": "i",
        "Ĳ": "IJ",
        "ĳ": "ij",
        "ĸ": "k",
        "Ŀ": "L",
        "ŀ": "l",
        "Ł": "L",
        "ł": "l",
        "ŉ": "'n",
        "Ŋ": "N",
        "ŋ": "n",
        "Œ": "Oe",
        "œ": "oe",
        "ſ": "s",
    }
)

_WORD_RE = re.compile(
    r"""
    \d*(?:1st|2nd|3rd|(?![123])\dth)(?=\b|[A-Z_])  # ordinals: 1st, 22nd, 4th
    | \d*(?:1ST|2ND|3RD|(?![123])\dTH)(?=\b|[a-z_])  # ordinals: 1ST, 22ND, 4TH
    | [A-Z]+(?=[A-Z][^\W\dA-Z_])                   # acronym before a word: XMLHttp
    | [A-Z]?[^\W\dA-Z_]+                           # Capitalised or lower word
    | [A-Z]+                                       # trailing acronym
    | \d+
    """,
    re.VERBOSE,
)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def _deburr(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value.translate(_LATIN_LETTERS))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def kebab_case(value: str) -> str:
    """
    Split a string into words and join them lowercased with hyphens.

    Words break on anything that is not a letter or digit, on lower-to-upper
    case changes, inside acronyms followed by a capitalised word and between
    letters and digits. Ordinals such as "21st" stay whole.
    """
    value = _APOSTROPHES.sub("", _deburr(value))
    return "-".join(_deburr(word.lower()) for word in _WORD_RE.findall(value))


def slugify_str(value: str) -> str:
    """Turn a post title or tag into a URL-safe slug ("C++" becomes "cpp")."""
    return kebab_case(value.replace("C++", "cpp", 1))


def slugify_all(values: Iterable[str]) -> List[str]:
    return [slugify_str(value) for value in values]


slugify = slugify_str
