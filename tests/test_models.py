"""Tests des modèles et schémas / Model and schema tests."""

import pytest
from pydantic import ValidationError

from worlder.models.country import Country
from worlder.schemas.country import CountryCreate, CountryRead


def test_country_repr():
    c = Country(id=1, name="France", iso_code="FRA")
    assert "FRA" in repr(c)
    assert "France" in repr(c)


def test_country_unique_columns():
    columns = Country.__table__.columns
    assert columns["name"].unique
    assert columns["iso_code"].unique
    assert not columns["name"].nullable
    assert columns["capital"].nullable
    assert columns["official_language"].nullable


def test_create_schema_accepts_camel_case():
    data = CountryCreate.model_validate({"name": "France", "isoCode": "FRA", "officialLanguage": "French"})
    assert data.iso_code == "FRA"
    assert data.official_language == "French"
    assert data.population is None


def test_create_schema_ignores_id():
    data = CountryCreate.model_validate({"id": 42, "name": "France", "isoCode": "FRA"})
    assert "id" not in data.model_dump()


def test_create_schema_rejects_long_iso_code():
    with pytest.raises(ValidationError):
        CountryCreate.model_validate({"name": "France", "isoCode": "FRAN"})


def test_read_schema_dumps_camel_case():
    c = Country(id=3, name="Japan", iso_code="JPN", population=124_000_000, area=377_975.0)
    dumped = CountryRead.model_validate(c).model_dump(by_alias=True)
    assert dumped["id"] == 3
    assert dumped["isoCode"] == "JPN"
    assert dumped["officialLanguage"] is None


def test_country_table_uses_sqlite_autoincrement():
    assert Country.__table__.dialect_options["sqlite"]["autoincrement"] is True
