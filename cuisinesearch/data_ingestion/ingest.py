from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from ..errors import FormatError, ParseError, SourceReadError
from ..recommendations.cuisines import CuisineTable
from ..recommendations.models import RestaurantRecord
from .config import DEFAULT_SOURCE_CONFIG, DataSourceConfig

logger = logging.getLogger(__name__)

CUISINE_COLUMNS: List[str] = ["id", "name"]

RESTAURANT_COLUMNS: List[str] = [
    "name",
    "rating",
    "distance",
    "price",
    "cuisine_id",
]

# pandas reports ragged rows as "Expected <n> fields in line <row>, saw <m>"
_BAD_LINE_RE = re.compile(r"Expected \d+ fields in line (\d+), saw (\d+)")


def parse_non_negative_int(value: str) -> int:
    """Parse a base-10 unsigned integer made of ASCII digits only."""
    if not value or not value.isascii() or not value.isdigit():
        raise ValueError(f"invalid non-negative integer: {value!r}")
    return int(value)


def clean_contamination(text: str, blocklist: Iterable[str]) -> str:
    """Remove each blocklisted substring from ``text`` in a single pass."""
    for unwanted in blocklist:
        if unwanted:
            text = text.replace(unwanted, "")
    return text


def read_table(path: Path | str, columns: int) -> list[list[str]]:
    """
    Read a CSV source into rows of raw text, header row included.

    Every row must have exactly ``columns`` fields; the whole read fails
    otherwise. Values are never coerced to numbers or NA.
    """
    source = str(path)
    try:
        df = pd.read_csv(
            path,
            header=None,
            dtype=str,
            keep_default_na=False,
            engine="python",
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as exc:
        match = _BAD_LINE_RE.search(str(exc))
        if match is None:
            raise SourceReadError(source, str(exc)) from exc
        raise FormatError(
            source, int(match.group(1)), columns, int(match.group(2))
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(source, str(exc)) from exc

    if df.shape[1] != columns:
        raise FormatError(source, 1, columns, df.shape[1])

    # Short rows are padded with NA by the parser.
    short = df.isna().any(axis=1)
    if short.any():
        position = int(short.to_numpy().argmax())
        actual = int(df.iloc[position].notna().sum())
        raise FormatError(source, position + 1, columns, actual)

    return df.values.tolist()


def _parse_field(source: str, row: int, field: str, value: str) -> int:
    try:
        return parse_non_negative_int(value)
    except ValueError:
        raise ParseError(source, row, field, value) from None


def load_cuisines(
    path: Path | str,
    config: DataSourceConfig = DEFAULT_SOURCE_CONFIG,
) -> CuisineTable:
    """Build a frozen cuisine table from an ``id,name`` CSV source."""
    source = str(path)
    rows = read_table(path, len(CUISINE_COLUMNS))

    table = CuisineTable()
    # Row 1 is the header; file rows are reported 1-based.
    for row_number, (raw_id, name) in enumerate(rows[1:], start=2):
        cuisine_id = _parse_field(source, row_number, "id", raw_id)
        table.add(cuisine_id, clean_contamination(name, config.contamination))
    table.freeze()

    logger.debug("Loaded %d cuisines from %s", len(table), source)
    return table


def load_restaurants(
    path: Path | str,
    cuisines: CuisineTable,
    config: DataSourceConfig = DEFAULT_SOURCE_CONFIG,
) -> list[RestaurantRecord]:
    """
    Build restaurant records from a CSV source.

    Ids are assigned 1..n in file order, which is also the tie-break order
    used when ranking. Any malformed row aborts the whole load.
    """
    source = str(path)
    rows = read_table(path, len(RESTAURANT_COLUMNS))

    records: list[RestaurantRecord] = []
    for row_number, row in enumerate(rows[1:], start=2):
        name, rating, distance, price, cuisine_id = row
        values = {
            field: _parse_field(source, row_number, field, raw)
            for field, raw in zip(RESTAURANT_COLUMNS[1:], (rating, distance, price, cuisine_id))
        }
        records.append(
            RestaurantRecord(
                id=len(records) + 1,
                name=clean_contamination(name, config.contamination),
                rating=values["rating"],
                distance=values["distance"],
                price=values["price"],
                cuisine_id=values["cuisine_id"],
                cuisine_name=cuisines.resolve(values["cuisine_id"]),
            )
        )

    logger.debug("Loaded %d restaurants from %s", len(records), source)
    return records


def load_snapshot(config: DataSourceConfig = DEFAULT_SOURCE_CONFIG) -> list[RestaurantRecord]:
    """Load a fresh, independent snapshot of every restaurant."""
    cuisines = load_cuisines(config.cuisines_path, config)
    return load_restaurants(config.restaurants_path, cuisines, config)
