from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class DataSourceConfig:
    """
    Location of the CSV sources and the cleanup applied while loading them.
    """

    cuisines_path: Path = field(
        default_factory=lambda: Path(os.getenv("CUISINES_CSV", _DATA_DIR / "cuisines.csv"))
    )
    restaurants_path: Path = field(
        default_factory=lambda: Path(os.getenv("RESTAURANTS_CSV", _DATA_DIR / "restaurants.csv"))
    )
    # Boilerplate that occasionally ends up pasted into the name columns.
    contamination: tuple[str, ...] = ("Click to check domain availability.",)


DEFAULT_SOURCE_CONFIG = DataSourceConfig()
