from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InventoryItem(BaseModel):
    """Caller-supplied inventory row; numeric fields stay raw until normalized."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    code: Any = None
    name: Any = None
    category: Any = None
    stock: Any = None
    min_stock: Any = Field(default=None, alias="minStock")
    price: Any = None
    location: Any = None

    def to_payload(self) -> dict:
        """Serialize with the JSON field names the caller sent (minStock, extras)."""
        return self.model_dump(by_alias=True)


class AssistantRequest(BaseModel):
    """Request payload for the assistant API."""
    message: str = Field(default="")
    inventory: List[InventoryItem] = Field(default_factory=list)

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: Any) -> str:
        # Non-string scalars are treated as text, null as an empty message.
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            raise ValueError("message must be a string")
        return str(value)

    @field_validator("inventory", mode="before")
    @classmethod
    def _coerce_inventory(cls, value: Any) -> List[Any]:
        return [] if value is None else value


class AssistantResponse(BaseModel):
    """Response payload returned by the assistant API."""
    reply: str


class ErrorResponse(BaseModel):
    """Generic error payload for unexpected failures."""
    error: str
