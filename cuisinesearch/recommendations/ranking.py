from __future__ import annotations

from operator import attrgetter
from typing import Mapping, Sequence

from ..data_ingestion.ingest import parse_non_negative_int
from ..errors import CriteriaDecodeError
from .distance import integer_distance, string_distance
from .models import RestaurantRecord, SearchCriteria

# Query parameter -> SearchCriteria field
TEXT_PARAMS: dict[str, str] = {"name": "name", "cuisine": "cuisine_name"}
NUMERIC_PARAMS: dict[str, str] = {"distance": "distance", "price": "price", "rating": "rating"}

# Added for the name and cuisine terms when the query leaves them out.
MISSING_TEXT_PENALTY = 1

DEFAULT_TOP_LIMIT = 5


def _parse_value(raw: str) -> int | str:
    try:
        return parse_non_negative_int(raw)
    except ValueError:
        return raw


def build_criteria(raw_query: Mapping[str, str]) -> SearchCriteria:
    """
    Interpret raw query parameters as sparse search criteria.

    Empty values count as absent and unrecognized parameters are ignored.
    Numeric parameters must hold a non-negative integer.
    """
    fields: dict[str, int | str] = {}

    for param, field in TEXT_PARAMS.items():
        raw = raw_query.get(param)
        if raw:
            fields[field] = raw

    for param, field in NUMERIC_PARAMS.items():
        raw = raw_query.get(param)
        if not raw:
            continue
        value = _parse_value(raw)
        if isinstance(value, str):
            raise CriteriaDecodeError(param, raw)
        fields[field] = value

    return SearchCriteria(**fields)


def score(record: RestaurantRecord, criteria: SearchCriteria) -> int:
    """Compute the rank of one restaurant; lower is a better match."""
    rank = 0

    if criteria.name:
        rank += string_distance(criteria.name, record.name)
    else:
        rank += MISSING_TEXT_PENALTY

    if criteria.cuisine_name:
        rank += string_distance(criteria.cuisine_name, record.cuisine_name)
    else:
        rank += MISSING_TEXT_PENALTY

    if criteria.rating:
        if criteria.rating < record.rating:
            rank += integer_distance(criteria.rating, record.rating)
        else:
            rank += 1

    # Closer than requested is rewarded by how much closer it is.
    if criteria.distance:
        if criteria.distance < record.distance:
            rank += integer_distance(criteria.distance, record.distance)
        else:
            rank -= integer_distance(criteria.distance, record.distance)

    if criteria.price:
        if criteria.price <= record.price:
            rank += integer_distance(criteria.price, record.price)
        else:
            rank -= 1

    return rank


def rank_restaurants(
    records: Sequence[RestaurantRecord],
    criteria: SearchCriteria,
) -> list[RestaurantRecord]:
    """
    Score every record and order them by ascending rank.

    Returns ranked copies; the input records are left untouched. The sort
    is stable, so equal ranks keep their load order.
    """
    ranked = [
        record.model_copy(update={"rank": score(record, criteria)})
        for record in records
    ]
    return sorted(ranked, key=attrgetter("rank"))


def select_top(
    records: Sequence[RestaurantRecord],
    limit: int = DEFAULT_TOP_LIMIT,
) -> list[RestaurantRecord]:
    """Return the first ``min(limit, len(records))`` records."""
    end = min(max(limit, 0), len(records))
    return list(records[:end])
