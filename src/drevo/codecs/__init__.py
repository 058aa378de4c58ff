"""
Flat interchange formats for the person population: the 17-field semicolon
CSV (read and write) and GEDCOM 5.5.1 (write only).
"""

from __future__ import annotations

from .csv_codec import (
    export_favorites_csv,
    export_to_csv,
    parse_favorites_csv,
    parse_persons_csv,
    parse_persons_csv_string,
)
from .gedcom_writer import GEDCOMWriter, export_to_gedcom

__all__ = [
    "GEDCOMWriter",
    "export_favorites_csv",
    "export_to_csv",
    "export_to_gedcom",
    "parse_favorites_csv",
    "parse_persons_csv",
    "parse_persons_csv_string",
]
