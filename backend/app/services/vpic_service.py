"""
vPIC lookup service: VIN search plus year/make/model reference lookups.

Each operation makes one collaborator call and reshapes its answer.
Collaborator failures propagate unchanged; nothing is retried or cached.
"""

import logging

from app.config import settings
from app.errors import SearchByVinError
from app.repositories.base import MakeRepository, ModelRepository, VinRepository, YearRepository
from app.schemas.vpic import LookupDto, SearchByVinResultDto
from app.services.vin_normalizer import EmptyPolicy, normalize_vin_decode
from app.utils.lookup import to_lookup_dto

logger = logging.getLogger(__name__)


class VPICService:
    def __init__(
        self,
        vin_repository: VinRepository,
        year_repository: YearRepository,
        make_repository: MakeRepository,
        model_repository: ModelRepository,
        empty_attribute_policy: EmptyPolicy | None = None,
    ):
        self.vin_repository = vin_repository
        self.year_repository = year_repository
        self.make_repository = make_repository
        self.model_repository = model_repository
        self.empty_attribute_policy = empty_attribute_policy or settings.empty_attribute_policy

    async def search_by_vin(self, vin: str) -> SearchByVinResultDto:
        """Decode a VIN through vPIC and normalize the result."""
        elements = await self.vin_repository.vin_decode(vin)
        try:
            return normalize_vin_decode(vin, elements, self.empty_attribute_policy)
        except SearchByVinError as e:
            logger.info(f"VIN {vin} not decodable ({e.reason}): {e.data}")
            raise

    async def get_all_supported_years(self) -> list[int]:
        return await self.year_repository.get_all_years()

    async def get_makes_by_year(self, year: int) -> list[LookupDto]:
        makes = await self.make_repository.get_makes_by_year(year)
        return [to_lookup_dto(make) for make in makes]

    async def get_models_by_make_id_and_year(self, make_id: int, year: int) -> list[LookupDto]:
        models = await self.model_repository.get_models_by_make_year(make_id, year)
        return [to_lookup_dto(model) for model in models]
