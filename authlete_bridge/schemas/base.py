"""Shared building blocks for Authlete API payload models."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, AnyUrl, BaseModel, BeforeValidator, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel

_URL_ADAPTER = TypeAdapter(AnyUrl)


class ApiModel(BaseModel):
    """Base model using camelCase aliases on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump the payload with wire aliases, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _lowercase(value: Any) -> Any:
    """Lowercase non-empty strings before enum validation."""
    if value and isinstance(value, str):
        return value.lower()
    return value


def _validate_url(value: str) -> str:
    """Validate URL syntax while keeping the original string."""
    _URL_ADAPTER.validate_python(value)
    return value


Lowercased = BeforeValidator(_lowercase)
UrlString = Annotated[str, AfterValidator(_validate_url)]
