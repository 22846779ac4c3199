"""
vPIC lookup API routes.

Provides VIN -> vehicle lookup via NHTSA vPIC plus the year/make/model
reference lists used to build vehicle pickers.
"""

from fastapi import APIRouter, Depends, Path, Query

from app.repositories.nhtsa import NhtsaVinRepository
from app.repositories.reference import SqliteMakeRepository, SqliteModelRepository, SqliteYearRepository
from app.schemas.vpic import LookupDto, SearchByVinResultDto
from app.services.vpic_service import VPICService

router = APIRouter(prefix="/vpic", tags=["vpic"])


def get_vpic_service() -> VPICService:
    """Wire the service to the live vPIC API and the local reference store."""
    return VPICService(
        vin_repository=NhtsaVinRepository(),
        year_repository=SqliteYearRepository(),
        make_repository=SqliteMakeRepository(),
        model_repository=SqliteModelRepository(),
    )


@router.get("/vin/{vin}", response_model=SearchByVinResultDto, response_model_exclude_none=True)
async def search_by_vin(
    vin: str = Path(..., description="VIN to decode"),
    service: VPICService = Depends(get_vpic_service),
):
    """Decode a VIN into make/model/year and a camelCased attribute bag."""
    return await service.search_by_vin(vin)


@router.get("/years", response_model=list[int])
async def supported_years(service: VPICService = Depends(get_vpic_service)):
    """All model years with reference data, newest first."""
    return await service.get_all_supported_years()


@router.get("/makes", response_model=list[LookupDto])
async def makes_by_year(
    year: int = Query(..., description="Model year"),
    service: VPICService = Depends(get_vpic_service),
):
    """Makes offering at least one model in the given year."""
    return await service.get_makes_by_year(year)


@router.get("/models", response_model=list[LookupDto])
async def models_by_make_and_year(
    make_id: int = Query(..., alias="makeId", description="vPIC make id"),
    year: int = Query(..., description="Model year"),
    service: VPICService = Depends(get_vpic_service),
):
    """Models of a make offered in the given year."""
    return await service.get_models_by_make_id_and_year(make_id, year)
