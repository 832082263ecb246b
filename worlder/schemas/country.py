"""Schémas Pays / Country schemas.

Les champs circulent en camelCase sur le fil (isoCode, officialLanguage) /
Fields travel as camelCase on the wire (isoCode, officialLanguage).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CountryBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1, max_length=255)
    iso_code: str = Field(min_length=1, max_length=3)
    capital: str | None = None
    continent: str | None = None
    population: int | None = None
    area: float | None = None
    currency: str | None = None
    official_language: str | None = None


class CountryCreate(CountryBase):
    pass


class CountryUpdate(CountryBase):
    """Remplacement complet, l'id vient du chemin / Full replacement, id comes from the path."""


class CountryRead(CountryBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
    id: int
