from __future__ import annotations

import pytest

from cuisinesearch.data_ingestion.config import DataSourceConfig
from cuisinesearch.errors import EmptyQueryError, FormatError
from cuisinesearch.recommendations.config import SearchConfig
from cuisinesearch.recommendations.retrieval import list_restaurants, search_restaurants


def test_list_restaurants_in_load_order(source_config):
    records = list_restaurants(source_config)
    assert [r.id for r in records] == [1, 2, 3]


def test_search_single_italian_restaurant(write_csv):
    config = DataSourceConfig(
        cuisines_path=write_csv("c.csv", "id,name\n1,Italian\n"),
        restaurants_path=write_csv(
            "r.csv", "name,customer_rating,distance,price,cuisine_id\nPizza Place,4,2,10,1\n"
        ),
    )

    results = search_restaurants({"rating": "5"}, config)

    assert len(results) == 1
    result = results[0]
    assert result.rank == 3
    assert (result.id, result.name, result.rating, result.distance, result.price) == (
        1, "Pizza Place", 4, 2, 10,
    )
    assert result.cuisine_name == "Italian"


def test_search_ties_keep_load_order(source_config):
    results = search_restaurants({"cuisine": "Italian"}, source_config)
    assert [r.id for r in results[:2]] == [1, 3]
    assert results[0].rank == results[1].rank == 1
    assert results[2].id == 2


def test_search_respects_top_limit(source_config):
    results = search_restaurants({"name": "Pizza"}, source_config, SearchConfig(top_limit=2))
    assert len(results) == 2


def test_search_rejects_empty_query(source_config):
    with pytest.raises(EmptyQueryError):
        search_restaurants({"unknown": "x"}, source_config)


def test_search_propagates_load_errors(write_csv):
    config = DataSourceConfig(
        cuisines_path=write_csv("c.csv", "id,name,extra\n1,Italian,x\n"),
        restaurants_path=write_csv("r.csv", ""),
    )
    with pytest.raises(FormatError):
        search_restaurants({"name": "Pizza"}, config)
