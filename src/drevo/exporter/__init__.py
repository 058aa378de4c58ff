"""
Exporter package.

JSON rendering of view objects, used by the CLI ``--json`` switch.
"""

from __future__ import annotations

from .json_exporter import dumps, to_json_compatible

__all__ = ["dumps", "to_json_compatible"]
