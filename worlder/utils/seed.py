"""
Seed des pays / Country seeding.
Insère quelques pays d'exemple au premier démarrage si la table est vide.
Inserts a few sample countries on first startup if the table is empty.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from worlder.models.country import Country
from worlder.repositories.country_repository import CountryRepository

logger = logging.getLogger(__name__)

SAMPLE_COUNTRIES = [
    {"name": "France", "iso_code": "FRA", "capital": "Paris", "continent": "Europe",
     "population": 68_000_000, "area": 551_695.0, "currency": "Euro", "official_language": "French"},
    {"name": "Germany", "iso_code": "DEU", "capital": "Berlin", "continent": "Europe",
     "population": 84_000_000, "area": 357_022.0, "currency": "Euro", "official_language": "German"},
    {"name": "Spain", "iso_code": "ESP", "capital": "Madrid", "continent": "Europe",
     "population": 48_000_000, "area": 505_990.0, "currency": "Euro", "official_language": "Spanish"},
    {"name": "Japan", "iso_code": "JPN", "capital": "Tokyo", "continent": "Asia",
     "population": 124_000_000, "area": 377_975.0, "currency": "Yen", "official_language": "Japanese"},
    {"name": "Brazil", "iso_code": "BRA", "capital": "Brasilia", "continent": "South America",
     "population": 203_000_000, "area": 8_515_767.0, "currency": "Real", "official_language": "Portuguese"},
    {"name": "Nigeria", "iso_code": "NGA", "capital": "Abuja", "continent": "Africa",
     "population": 223_000_000, "area": 923_768.0, "currency": "Naira", "official_language": "English"},
]


async def seed_countries(session: AsyncSession) -> int:
    """Créer les pays d'exemple si aucun pays n'existe / Create sample countries if none exist.

    Renvoie le nombre de pays insérés / Returns the number of inserted countries.
    """
    repository = CountryRepository(session)
    count = await repository.count()

    if count:
        logger.info("%d existing country(ies), seed skipped", count)
        return 0

    for data in SAMPLE_COUNTRIES:
        await repository.save(Country(**data))
    await session.commit()
    logger.info("%d sample countries seeded", len(SAMPLE_COUNTRIES))
    return len(SAMPLE_COUNTRIES)
