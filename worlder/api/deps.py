"""
Dépendances des routes / Route dependencies.
Injectées dans les routes via Depends().
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from worlder.database import get_db
from worlder.repositories.country_repository import CountryRepository
from worlder.services.country_service import CountryService


async def get_country_service(db: AsyncSession = Depends(get_db)) -> CountryService:
    """Service Pays lié à la session de la requête / Country service bound to the request session."""
    return CountryService(CountryRepository(db))
