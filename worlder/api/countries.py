"""Routes Pays / Country API routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError

from worlder.api.deps import get_country_service
from worlder.models.country import Country
from worlder.schemas.country import CountryCreate, CountryRead, CountryUpdate
from worlder.services.country_service import CountryService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[CountryRead])
async def list_countries(service: CountryService = Depends(get_country_service)):
    """Lister tous les pays / List all countries."""
    return await service.get_all_countries()


@router.get("/continents", response_model=list[str])
async def list_continents(service: CountryService = Depends(get_country_service)):
    """Lister les continents distincts / List distinct continents."""
    return await service.get_all_continents()


@router.get("/count", response_model=int)
async def count_countries(service: CountryService = Depends(get_country_service)):
    """Nombre total de pays / Total number of countries."""
    return await service.get_total_countries_count()


@router.get("/name/{name}", response_model=CountryRead)
async def get_country_by_name(name: str, service: CountryService = Depends(get_country_service)):
    """Obtenir un pays par nom / Get country by name."""
    country = await service.get_country_by_name(name)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.get("/code/{iso_code}", response_model=CountryRead)
async def get_country_by_iso_code(iso_code: str, service: CountryService = Depends(get_country_service)):
    """Obtenir un pays par code ISO / Get country by ISO code."""
    country = await service.get_country_by_iso_code(iso_code)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.get("/continent/{continent}", response_model=list[CountryRead])
async def list_countries_by_continent(continent: str, service: CountryService = Depends(get_country_service)):
    """Pays d'un continent / Countries of a continent."""
    return await service.get_countries_by_continent(continent)


@router.get("/population/min/{min_population}", response_model=list[CountryRead])
async def list_countries_with_min_population(
    min_population: int,
    service: CountryService = Depends(get_country_service),
):
    """Pays dont la population dépasse le seuil / Countries with population above the threshold."""
    return await service.get_countries_with_population_greater_than(min_population)


@router.get("/area/min/{min_area}", response_model=list[CountryRead])
async def list_countries_with_min_area(
    min_area: float,
    service: CountryService = Depends(get_country_service),
):
    """Pays dont la superficie dépasse le seuil / Countries with area above the threshold."""
    return await service.get_countries_with_area_greater_than(min_area)


@router.get("/{country_id}", response_model=CountryRead)
async def get_country(country_id: int, service: CountryService = Depends(get_country_service)):
    """Obtenir un pays par ID / Get country by ID."""
    country = await service.get_country_by_id(country_id)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.post("", response_model=CountryRead, status_code=status.HTTP_201_CREATED)
async def create_country(data: CountryCreate, service: CountryService = Depends(get_country_service)):
    """Créer un pays / Create a country."""
    try:
        return await service.save_country(Country(**data.model_dump()))
    except SQLAlchemyError as exc:
        logger.warning("Country creation rejected (%s): %s", data.iso_code, exc.__class__.__name__)
        raise HTTPException(status_code=400) from exc


@router.put("/{country_id}", response_model=CountryRead)
async def update_country(
    country_id: int,
    data: CountryUpdate,
    service: CountryService = Depends(get_country_service),
):
    """Remplacer un pays / Replace a country."""
    if not await service.exists_by_id(country_id):
        raise HTTPException(status_code=404, detail="Country not found")
    return await service.save_country(Country(id=country_id, **data.model_dump()))


@router.delete("/{country_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_country(country_id: int, service: CountryService = Depends(get_country_service)):
    """Supprimer un pays / Delete a country."""
    if not await service.exists_by_id(country_id):
        raise HTTPException(status_code=404, detail="Country not found")
    if not await service.delete_country(country_id):
        # Supprimé entre-temps par une autre requête / Removed meanwhile by another request
        logger.info("Country %s already gone at delete time", country_id)
    else:
        logger.info("Country %s deleted", country_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
