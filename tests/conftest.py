import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from drevo.codecs.csv_codec import parse_persons_csv_string  # noqa: E402
from drevo.store import PersonStore, PhotoIndex  # noqa: E402

# Ivan + Maria -> Petr; Petr + Anna -> Alexey
FAMILY_CSV = "\n".join(
    [
        "1;1;Иванов;Иван;;;Москва;01.01.1930;Москва;15.03.2000;ул. Ленина 1;2;3;0;0;0;12.06.1955",
        "2;0;Иванова;Мария;;;Тула;05.05.1932;;10.10.2005;;1;3;0;0;0;12.06.1955",
        "3;1;Иванов;Петр;1;2;Москва;20.07.1960;;;Москва;4;5;1;1;0;",
        "4;0;Иванова;Анна;;;;1962;;;;3;5;0;0;0;",
        "5;1;Иванов;Алексей;3;4;;15.03.1990;;;;;;1;1;0;",
    ]
)

FAMILY_PHOTOS = ["1#1.jpg", "1#2.jpg", "3#1.jpg"]


@pytest.fixture
def family_csv() -> str:
    return FAMILY_CSV


@pytest.fixture
def family_files(tmp_path: Path) -> dict:
    """Population CSV, favorites CSV, media and info directories on disk."""
    csv_path = tmp_path / "fam.csv"
    csv_path.write_text(FAMILY_CSV, encoding="utf-8")

    favorites_path = tmp_path / "fav.csv"
    favorites_path.write_text("5;0;1", encoding="utf-8")

    media_dir = tmp_path / "media"
    media_dir.mkdir()
    for name in FAMILY_PHOTOS + ["notes.txt"]:
        (media_dir / name).write_bytes(b"")

    info_dir = tmp_path / "info"
    info_dir.mkdir()
    (info_dir / "open#1").write_text("Родился в Москве.", encoding="utf-8")

    return {
        "csv": csv_path,
        "favorites": favorites_path,
        "media": media_dir,
        "info": info_dir,
    }


@pytest.fixture
def store(family_files: dict) -> PersonStore:
    return PersonStore.from_csv(
        family_files["csv"],
        favorites_path=family_files["favorites"],
        media_path=family_files["media"],
        info_path=family_files["info"],
    )


@pytest.fixture
def memory_store() -> PersonStore:
    """Same family without any files on disk."""
    parsed = parse_persons_csv_string(FAMILY_CSV)
    return PersonStore(parsed.persons, photos=PhotoIndex.from_filenames(FAMILY_PHOTOS))
