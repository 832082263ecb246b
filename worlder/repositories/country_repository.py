"""
Accès aux données Pays / Country data access.
Une requête SQL paramétrée par opération / One parameterized SQL query per operation.
"""

from typing import Sequence

from sqlalchemy import delete, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from worlder.models.country import Country


class CountryRepository:
    """Requêtes sur la table countries / Queries against the countries table.

    Les recherches unitaires renvoient None si absent, les listes sont triées par id.
    Single lookups return None when absent, lists are ordered by id.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, country: Country) -> Country:
        """Insérer ou remplacer / Insert or replace (upsert on id presence).

        Un id inconnu crée la ligne à cet id / An unknown id creates the row at that id.
        """
        if country.id is None:
            self.session.add(country)
        else:
            # Chaque colonne est recopiée, y compris les None / Every column is copied, Nones included
            values = {attr.key: getattr(country, attr.key) for attr in inspect(Country).column_attrs}
            country = await self.session.merge(Country(**values))
        await self.session.flush()
        await self.session.refresh(country)
        return country

    async def find_by_id(self, country_id: int) -> Country | None:
        return await self.session.get(Country, country_id)

    async def find_by_name(self, name: str) -> Country | None:
        result = await self.session.execute(select(Country).where(Country.name == name))
        return result.scalar_one_or_none()

    async def find_by_iso_code(self, iso_code: str) -> Country | None:
        result = await self.session.execute(select(Country).where(Country.iso_code == iso_code))
        return result.scalar_one_or_none()

    async def find_all(self) -> Sequence[Country]:
        result = await self.session.execute(select(Country).order_by(Country.id))
        return result.scalars().all()

    async def find_by_continent(self, continent: str) -> Sequence[Country]:
        result = await self.session.execute(
            select(Country).where(Country.continent == continent).order_by(Country.id)
        )
        return result.scalars().all()

    async def find_with_population_greater_than(self, min_population: int) -> Sequence[Country]:
        """Population strictement supérieure / Strictly greater population."""
        result = await self.session.execute(
            select(Country).where(Country.population > min_population).order_by(Country.id)
        )
        return result.scalars().all()

    async def find_with_area_greater_than(self, min_area: float) -> Sequence[Country]:
        """Superficie strictement supérieure / Strictly greater area."""
        result = await self.session.execute(
            select(Country).where(Country.area > min_area).order_by(Country.id)
        )
        return result.scalars().all()

    async def find_all_continents(self) -> list[str]:
        """Continents distincts non nuls, triés / Distinct non-null continents, sorted."""
        result = await self.session.execute(
            select(Country.continent)
            .where(Country.continent.is_not(None))
            .distinct()
            .order_by(Country.continent)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(Country.id)))
        return result.scalar_one()

    async def delete_by_id(self, country_id: int) -> bool:
        """Supprimer par id / Delete by id.

        Un id absent est un no-op qui renvoie False / A missing id is a no-op returning False.
        """
        result = await self.session.execute(delete(Country).where(Country.id == country_id))
        return result.rowcount > 0

    async def exists_by_id(self, country_id: int) -> bool:
        result = await self.session.execute(
            select(Country.id).where(Country.id == country_id).limit(1)
        )
        return result.scalar_one_or_none() is not None
