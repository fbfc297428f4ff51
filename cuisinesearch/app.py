from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .data_ingestion.config import DEFAULT_SOURCE_CONFIG, DataSourceConfig
from .errors import CuisineSearchError
from .recommendations.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .recommendations.models import ErrorResponse, RestaurantRecord
from .recommendations.retrieval import list_restaurants, search_restaurants

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = ["restaurants", "restaurants/search"]

app = FastAPI(title="Restaurant Search API", version="1.0.0")


def get_source_config() -> DataSourceConfig:
    return DEFAULT_SOURCE_CONFIG


def get_search_config() -> SearchConfig:
    return DEFAULT_SEARCH_CONFIG


def _host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _uri(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(
        method=request.method,
        status_code=status_code,
        host=_host(request),
        error=message,
        endpoints=AVAILABLE_ENDPOINTS,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _log_ok(request: Request) -> None:
    logger.info("[%s] HTTP status 200 on '%s'", _host(request), _uri(request))


# ── Error handlers ──────────────────────────────────────────────────────


@app.exception_handler(CuisineSearchError)
def search_error_handler(request: Request, exc: CuisineSearchError) -> JSONResponse:
    message = f"HTTP status {exc.http_status} on '{_uri(request)}': {exc}"
    logger.error("[%s] %s", _host(request), message)
    return _error_response(request, exc.http_status, str(exc))


@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        message = f"endpoint '{_uri(request)}' could not be found"
    else:
        message = str(exc.detail)
    logger.error("[%s] %s", _host(request), message)
    return _error_response(request, exc.status_code, message)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/restaurants", response_model=list[RestaurantRecord])
def restaurants(
    request: Request,
    source_config: DataSourceConfig = Depends(get_source_config),
) -> list[RestaurantRecord]:
    records = list_restaurants(source_config)
    _log_ok(request)
    return records


@app.get("/restaurants/search", response_model=list[RestaurantRecord])
def restaurant_search(
    request: Request,
    source_config: DataSourceConfig = Depends(get_source_config),
    search_config: SearchConfig = Depends(get_search_config),
) -> list[RestaurantRecord]:
    # Raw query mapping: unrecognized parameters are dropped by the ranker.
    top = search_restaurants(dict(request.query_params), source_config, search_config)
    _log_ok(request)
    return top
