"""
Pydantic schemas for vPIC lookup requests and responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())


class SearchByVinResultDto(CamelModel):
    """Decoded vehicle: canonical identity fields plus the attribute bag."""

    vin: str
    suggested_vin: str | None = None  # only set when the provider offered one
    make_id: int
    make: str
    model_id: int
    model: str
    year: int
    attributes: dict[str, str | int | float] = Field(default_factory=dict)


class LookupDto(BaseModel):
    """Minimal id/name projection of a make or model."""

    id: int
    name: str


class LookupEntity(BaseModel):
    """Reference record from the lookup store. Extra columns are kept."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str


class MakeEntity(LookupEntity):
    created_at: str | None = None


class ModelEntity(LookupEntity):
    make_id: int
    make_name: str | None = None
    created_at: str | None = None
