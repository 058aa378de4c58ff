# src/drevo/store/bio.py

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

BIO_KINDS = ("open", "lock")


class BioDirectory:
    """
    Biography text files, one per person and kind: ``open#<id>`` / ``lock#<id>``.
    """

    def __init__(self, info_dir: Union[str, Path, None]) -> None:
        self.info_dir = Path(info_dir) if info_dir else None

    def _path(self, person_id: int, kind: str) -> Optional[Path]:
        if kind not in BIO_KINDS:
            raise ValueError(f"Unknown biography kind: {kind!r}")
        if self.info_dir is None:
            return None
        return self.info_dir / f"{kind}#{person_id}"

    def has(self, person_id: int, kind: str = "open") -> bool:
        path = self._path(person_id, kind)
        return path is not None and path.is_file()

    def read(self, person_id: int, kind: str = "open") -> Optional[str]:
        path = self._path(person_id, kind)
        if path is None or not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, person_id: int, text: str, kind: str = "open") -> None:
        path = self._path(person_id, kind)
        if path is None:
            raise ValueError("No info directory configured for biographies")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    def delete(self, person_id: int, kind: str = "open") -> bool:
        path = self._path(person_id, kind)
        if path is None or not path.is_file():
            return False
        path.unlink()
        return True
