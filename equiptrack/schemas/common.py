"""Base model and response envelope shared by every API schema."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Serialises as camelCase while accepting snake_case input too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(CamelModel, Generic[T]):
    success: bool = True
    data: T


class MessageOut(CamelModel):
    message: str


def ok(data: Any) -> dict[str, Any]:
    return {"success": True, "data": data}


__all__ = ["CamelModel", "Envelope", "MessageOut", "ok"]
