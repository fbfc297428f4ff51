from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from cuisinesearch.data_ingestion.config import DataSourceConfig

CUISINES_CSV = """\
id,name
1,Italian
2,Chinese
"""

RESTAURANTS_CSV = """\
name,customer_rating,distance,price,cuisine_id
Pizza Place,4,2,10,1
Noodle Bar,3,5,20,2
Pasta House,5,1,30,1
"""


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def source_config(write_csv) -> DataSourceConfig:
    return DataSourceConfig(
        cuisines_path=write_csv("cuisines.csv", CUISINES_CSV),
        restaurants_path=write_csv("restaurants.csv", RESTAURANTS_CSV),
    )
