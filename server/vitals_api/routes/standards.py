"""Regional standards API routes."""
from fastapi import APIRouter

from vitals_engine.standards import GLOBAL_DEFAULT, known_country_codes, resolve_standard

from ..models.standard import CountryListOut, RegionalStandardOut

router = APIRouter(prefix="/api", tags=["Standards"])


@router.get("/standards", response_model=CountryListOut)
async def list_standards():
    """List country codes with their own standard, plus the global default."""
    return CountryListOut(
        country_codes=known_country_codes(),
        default=RegionalStandardOut.model_validate(GLOBAL_DEFAULT.to_dict()),
    )


@router.get("/standards/{country_code}", response_model=RegionalStandardOut)
async def get_standard(country_code: str):
    """
    Get the standard for a country.

    Unknown countries resolve to the global default (isDefault is true).
    """
    return RegionalStandardOut.model_validate(resolve_standard(country_code).to_dict())
