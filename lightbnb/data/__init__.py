"""
Static sample users and properties for local databases.
Files are keyed by the fixture id; property ``owner_id`` refers to those ids.
"""

from pathlib import Path
from typing import Any, Dict
import json

DATA_DIR = Path(__file__).parent


def _load(filename: str) -> Dict[int, Dict[str, Any]]:
    with open(DATA_DIR / filename, encoding="utf-8") as fh:
        records = json.load(fh)
    return {int(key): value for key, value in records.items()}


def load_sample_users() -> Dict[int, Dict[str, Any]]:
    """Sample users keyed by fixture id."""
    return _load("users.json")


def load_sample_properties() -> Dict[int, Dict[str, Any]]:
    """Sample properties keyed by fixture id, prices in dollars."""
    return _load("properties.json")
