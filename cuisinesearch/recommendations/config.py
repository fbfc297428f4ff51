from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class SearchConfig:
    top_limit: int = field(default_factory=lambda: int(os.getenv("SEARCH_TOP_LIMIT", "5")))


DEFAULT_SEARCH_CONFIG = SearchConfig()
