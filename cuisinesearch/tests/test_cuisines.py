from concurrent.futures import ThreadPoolExecutor

import pytest

from cuisinesearch.recommendations.cuisines import UNKNOWN_CUISINE, CuisineTable, resolve


def _table(**names: str) -> CuisineTable:
    table = CuisineTable()
    for key, name in names.items():
        table.add(int(key.lstrip("_")), name)
    table.freeze()
    return table


def test_resolve_known_id():
    table = _table(_1="Italian", _2="Chinese")
    assert resolve(table, 1) == "Italian"
    assert table.resolve(2) == "Chinese"


def test_resolve_unknown_id():
    table = _table(_1="Italian")
    assert resolve(table, 99) == UNKNOWN_CUISINE == "unknown"


def test_blank_name_falls_back_to_unknown():
    table = _table(_3="")
    assert resolve(table, 3) == "unknown"


def test_frozen_table_rejects_writes():
    table = _table(_1="Italian")
    assert table.frozen
    with pytest.raises(RuntimeError):
        table.add(2, "Chinese")


def test_concurrent_population():
    table = CuisineTable()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: table.add(i, f"cuisine-{i}"), range(1, 201)))
    table.freeze()

    assert len(table) == 200
    assert 150 in table
    assert table.resolve(150) == "cuisine-150"
