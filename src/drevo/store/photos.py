# src/drevo/store/photos.py

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from drevo.logging import get_logger
from drevo.models import Sex

log = get_logger("photos")

PHOTO_NAME_RE = re.compile(r"^(\d+)#(\d+)\.jpg$", re.IGNORECASE)

MALE_PLACEHOLDER = "m.jpg"
FEMALE_PLACEHOLDER = "w.jpg"


def photo_index_of(filename: str) -> int:
    """Numeric index of ``<id>#<index>.jpg``; 0 when the name does not follow the pattern."""
    match = PHOTO_NAME_RE.match(filename)
    return int(match.group(2)) if match else 0


def placeholder_for(sex: Sex) -> str:
    return MALE_PLACEHOLDER if sex == Sex.MALE else FEMALE_PLACEHOLDER


class PhotoIndex:
    """
    Person id -> photo filenames, each list sorted by the numeric photo index.

    Only filenames live here; the bytes belong to the media directory owner.
    """

    def __init__(self, photos: Optional[Dict[int, List[str]]] = None) -> None:
        self._photos: Dict[int, List[str]] = {}
        for person_id, names in (photos or {}).items():
            for name in names:
                self.add(person_id, name)

    @classmethod
    def from_filenames(cls, filenames: Iterable[str]) -> "PhotoIndex":
        index = cls()
        for name in filenames:
            match = PHOTO_NAME_RE.match(name)
            if match:
                index.add(int(match.group(1)), name)
        return index

    @classmethod
    def scan(cls, media_dir: Union[str, Path, None]) -> "PhotoIndex":
        """Index every ``<id>#<index>.jpg`` file in ``media_dir`` (missing dir -> empty)."""
        if media_dir is None:
            return cls()
        path = Path(media_dir)
        if not path.is_dir():
            log.info("Media directory %s not found; photo index is empty", path)
            return cls()
        index = cls.from_filenames(entry.name for entry in path.iterdir() if entry.is_file())
        log.info("Indexed photos for %d person(s) from %s", len(index), path)
        return index

    def __len__(self) -> int:
        return len(self._photos)

    def get(self, person_id: int) -> List[str]:
        return list(self._photos.get(person_id, []))

    def count(self, person_id: int) -> int:
        return len(self._photos.get(person_id, []))

    def default_photo(self, person_id: int, sex: Sex) -> str:
        photos = self._photos.get(person_id)
        if photos:
            return photos[0]
        return placeholder_for(sex)

    def next_filename(self, person_id: int) -> str:
        photos = self._photos.get(person_id)
        next_index = max(photo_index_of(f) for f in photos) + 1 if photos else 0
        return f"{person_id}#{next_index}.jpg"

    def add(self, person_id: int, filename: str) -> None:
        photos = self._photos.setdefault(person_id, [])
        if filename not in photos:
            photos.append(filename)
            photos.sort(key=photo_index_of)

    def remove(self, person_id: int, filename: str) -> bool:
        photos = self._photos.get(person_id)
        if not photos or filename not in photos:
            return False
        photos.remove(filename)
        if not photos:
            del self._photos[person_id]
        return True

    def drop_person(self, person_id: int) -> None:
        self._photos.pop(person_id, None)
