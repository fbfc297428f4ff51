from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RestaurantRecord(BaseModel):
    id: int
    name: str
    rating: int = Field(ge=0)
    distance: int = Field(ge=0)
    price: int = Field(ge=0)
    cuisine_id: int = Field(ge=0)
    cuisine_name: str = Field(
        ..., min_length=1, serialization_alias="cuisine",
        description="Display name resolved from the cuisine table",
    )
    rank: int = Field(default=0, description="Lower is a better match; set by ranking")


class SearchCriteria(BaseModel):
    """Sparse query; ``None`` means the caller did not supply the field."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    cuisine_name: str | None = None
    rating: int | None = None
    distance: int | None = None
    price: int | None = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.name, self.cuisine_name, self.rating, self.distance, self.price)
        )


class ErrorResponse(BaseModel):
    method: str
    status_code: int
    host: str
    error: str
    endpoints: list[str]
