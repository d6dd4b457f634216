import logging
import urllib.parse
from typing import Dict, List, Mapping, Optional

from llamablog.schemas.blog import Redirect

logger = logging.getLogger(__name__)


class RedirectService:
    def __init__(self, redirects: Mapping[str, str]):
        self.redirects: Dict[str, str] = dict(redirects)

    def resolve(self, path: str) -> Optional[str]:
        """Map a legacy URL path to its current location, if one is known."""
        if not path:
            return None
        for candidate in _candidates(path):
            destination = self.redirects.get(candidate)
            if destination is not None:
                logger.debug(f"Redirect {path} -> {destination}")
                return destination
        return None

    def list_redirects(self) -> List[Redirect]:
        return [
            Redirect(source=source, destination=self.redirects[source])
            for source in sorted(self.redirects)
        ]

    def validate(self) -> List[str]:
        problems = []
        for source, destination in sorted(self.redirects.items()):
            if not destination.startswith("/"):
                problems.append(
                    f"{source}: destination {destination!r} is not absolute"
                )
            if self.resolve(destination) is not None:
                problems.append(
                    f"{source}: destination {destination} is itself redirected"
                )
        return problems


def _candidates(path: str) -> List[str]:
    if not path.startswith("/"):
        path = f"/{path}"
    decoded = urllib.parse.unquote(path)
    candidates = []
    for p in (path, decoded):
        for variant in (p, p.rstrip("/") or "/", f"{p.rstrip('/')}/"):
            if variant not in candidates:
                candidates.append(variant)
    return candidates
