"""Tests for the make/model lookup projection."""

from app.schemas.vpic import LookupDto, MakeEntity, ModelEntity
from app.utils.lookup import to_lookup_dto


def test_drops_extra_fields():
    entity = MakeEntity(id=1, name="Ford", extra="x", created_at="2024-01-01 00:00:00")
    dto = to_lookup_dto(entity)

    assert dto == LookupDto(id=1, name="Ford")
    assert dto.model_dump() == {"id": 1, "name": "Ford"}


def test_model_entity():
    entity = ModelEntity(id=1801, name="F-150", make_id=460, make_name="FORD")
    assert to_lookup_dto(entity).model_dump() == {"id": 1801, "name": "F-150"}
