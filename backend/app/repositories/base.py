"""
Collaborator interfaces the vPIC service depends on.

Implementations raise their own failures (e.g. VpicProviderError); the
service passes those through untouched.
"""

from abc import ABC, abstractmethod
from typing import Any

from app.schemas.vpic import MakeEntity, ModelEntity


class VinRepository(ABC):
    """Decodes a VIN into vPIC's flat element mapping."""

    @abstractmethod
    async def vin_decode(self, vin: str) -> dict[str, Any]:
        """
        Return the provider's named vehicle elements for a VIN.

        Decode problems are reported through the ErrorCode/ErrorText/
        SuggestedVIN elements, not by raising.
        """
        pass


class YearRepository(ABC):
    @abstractmethod
    async def get_all_years(self) -> list[int]:
        pass


class MakeRepository(ABC):
    @abstractmethod
    async def get_makes_by_year(self, year: int) -> list[MakeEntity]:
        pass


class ModelRepository(ABC):
    @abstractmethod
    async def get_models_by_make_year(self, make_id: int, year: int) -> list[ModelEntity]:
        pass
