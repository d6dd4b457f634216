import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

LIGHT = "light"
DARK = "dark"


class UnknownImage(KeyError):
    pass


@dataclass(frozen=True)
class ThemedImage:
    light: str
    dark: str

    def for_theme(self, theme: Optional[str]) -> str:
        """Dark asset only when dark mode is asked for; light otherwise."""
        if theme == DARK:
            return self.dark
        return self.light


class ImageRegistry:
    def __init__(self):
        self._images: Dict[str, ThemedImage] = {}

    def register(self, name: str, light: str, dark: str) -> ThemedImage:
        image = ThemedImage(light=light, dark=dark)
        self._images[name] = image
        return image

    def get(self, name: str) -> ThemedImage:
        try:
            return self._images[name]
        except KeyError:
            raise UnknownImage(name)

    def select(self, name: str, theme: Optional[str] = None) -> str:
        return self.get(name).for_theme(theme)

    def __contains__(self, name: str) -> bool:
        return name in self._images


def default_registry() -> ImageRegistry:
    """Images that have a light and a dark rendition on the site."""
    registry = ImageRegistry()
    registry.register(
        "debugger-architecture",
        light="debugger-architecture-light.png",
        dark="debugger-architecture-dark.png",
    )
    registry.register(
        "og-image",
        light="astropaper-og.jpg",
        dark="astropaper-og-dark.jpg",
    )
    return registry


def read_image(
    images_dir: Path | str, file_name: str
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Read an image asset from disk
    """
    root = Path(images_dir).resolve()
    target = (root / file_name).resolve()
    if not target.is_relative_to(root):
        logger.warning(f"Refusing image path outside {root}: {file_name}")
        return None, None

    try:
        data = target.read_bytes()
    except FileNotFoundError:
        logger.warning(f"Image not found: {file_name}")
        return None, None
    except OSError as e:
        logger.error(f"Error reading image {file_name}: {e}")
        return None, None

    return data, get_content_type_from_filename(file_name)


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    else:
        return "application/octet-stream"
