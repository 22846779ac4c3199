"""
Reference lookups (years, makes, models) served from the local SQLite store.
"""

from app.db import get_makes_for_year, get_models_for_make_year, get_years
from app.repositories.base import MakeRepository, ModelRepository, YearRepository
from app.schemas.vpic import MakeEntity, ModelEntity


class SqliteYearRepository(YearRepository):
    async def get_all_years(self) -> list[int]:
        return await get_years()


class SqliteMakeRepository(MakeRepository):
    async def get_makes_by_year(self, year: int) -> list[MakeEntity]:
        rows = await get_makes_for_year(year)
        return [MakeEntity(**row) for row in rows]


class SqliteModelRepository(ModelRepository):
    async def get_models_by_make_year(self, make_id: int, year: int) -> list[ModelEntity]:
        rows = await get_models_for_make_year(make_id, year)
        return [ModelEntity(**row) for row in rows]
