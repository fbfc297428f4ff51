from __future__ import annotations

import logging
import time
from typing import Mapping

from ..data_ingestion.config import DEFAULT_SOURCE_CONFIG, DataSourceConfig
from ..data_ingestion.ingest import load_snapshot
from ..errors import EmptyQueryError
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import RestaurantRecord
from .ranking import build_criteria, rank_restaurants, select_top

logger = logging.getLogger(__name__)


def list_restaurants(
    source_config: DataSourceConfig = DEFAULT_SOURCE_CONFIG,
) -> list[RestaurantRecord]:
    """Return every restaurant in load order, unranked."""
    return load_snapshot(source_config)


def search_restaurants(
    raw_query: Mapping[str, str],
    source_config: DataSourceConfig = DEFAULT_SOURCE_CONFIG,
    search_config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[RestaurantRecord]:
    """
    Rank a freshly loaded snapshot against the query and keep the best matches.

    The dataset is reloaded on every call; nothing is shared between searches.
    """
    start_time = time.time()

    criteria = build_criteria(raw_query)
    if criteria.is_empty():
        raise EmptyQueryError()

    records = load_snapshot(source_config)
    ranked = rank_restaurants(records, criteria)
    top = select_top(ranked, search_config.top_limit)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.debug(
        "Search %s ranked %d candidates, returned %d in %sms",
        criteria.model_dump(exclude_none=True),
        len(ranked),
        len(top),
        elapsed_ms,
    )
    return top
