"""Projection of reference entities onto the public lookup shape."""

from app.schemas.vpic import LookupDto, LookupEntity


def to_lookup_dto(entity: LookupEntity) -> LookupDto:
    """Keep only id and name; every other field of the entity is dropped."""
    return LookupDto(id=entity.id, name=entity.name)
