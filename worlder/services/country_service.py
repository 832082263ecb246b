"""
Service Pays / Country service.
Délègue chaque cas d'usage au repository / Delegates each use case to the repository.
"""

from typing import Sequence

from worlder.models.country import Country
from worlder.repositories.country_repository import CountryRepository


class CountryService:
    """Cas d'usage Pays / Country use cases."""

    def __init__(self, repository: CountryRepository):
        self.repository = repository

    async def get_all_countries(self) -> Sequence[Country]:
        return await self.repository.find_all()

    async def get_country_by_id(self, country_id: int) -> Country | None:
        return await self.repository.find_by_id(country_id)

    async def get_country_by_name(self, name: str) -> Country | None:
        return await self.repository.find_by_name(name)

    async def get_country_by_iso_code(self, iso_code: str) -> Country | None:
        return await self.repository.find_by_iso_code(iso_code)

    async def get_countries_by_continent(self, continent: str) -> Sequence[Country]:
        return await self.repository.find_by_continent(continent)

    async def get_countries_with_population_greater_than(self, min_population: int) -> Sequence[Country]:
        return await self.repository.find_with_population_greater_than(min_population)

    async def get_countries_with_area_greater_than(self, min_area: float) -> Sequence[Country]:
        return await self.repository.find_with_area_greater_than(min_area)

    async def get_all_continents(self) -> list[str]:
        return await self.repository.find_all_continents()

    async def save_country(self, country: Country) -> Country:
        return await self.repository.save(country)

    async def delete_country(self, country_id: int) -> bool:
        return await self.repository.delete_by_id(country_id)

    async def exists_by_id(self, country_id: int) -> bool:
        return await self.repository.exists_by_id(country_id)

    async def get_total_countries_count(self) -> int:
        return await self.repository.count()
