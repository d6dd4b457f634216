from pathlib import Path
from typing import List, Optional


class FilesystemPostsRepo:
    def __init__(self, content_dir: Path | str):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            return []
        return sorted(
            path
            for path in self.content_dir.rglob("*.md")
            if path.is_file() and not path.name.startswith("_")
        )

    def get_post_file(self, post_id: str) -> Optional[Path]:
        for path in self.list_post_files():
            if self.post_id(path) == post_id:
                return path
        return None

    def post_id(self, path: Path) -> str:
        """Relative path without extension, always "/"-separated."""
        return path.relative_to(self.content_dir).with_suffix("").as_posix()

    def relative_path(self, path: Path) -> str:
        return path.relative_to(self.content_dir).as_posix()
