"""
Shared Pydantic models for Apillon API responses.

Every endpoint answers with the same envelope, `{"id", "status", "data"}`,
where only the shape of `data` varies per endpoint.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class ApiModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(ApiModel, Generic[T]):
    """Generic API response wrapper for all endpoints."""

    id: Optional[str] = None
    status: Optional[int] = None
    data: T

    @property
    def is_success(self) -> bool:
        """Check if the envelope status is a 2xx code (absent counts as success)."""
        return self.status is None or 200 <= self.status < 300


class ListData(ApiModel, Generic[T]):
    """Paginated list payload."""

    items: List[T] = Field(default_factory=list)
    total: int = 0


class Timestamps(ApiModel):
    """Common creation and update timestamps (ISO8601 strings)."""

    create_time: Optional[str] = None
    update_time: Optional[str] = None
