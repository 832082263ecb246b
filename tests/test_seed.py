"""Tests du seed / Seeding tests."""

import pytest

from worlder.repositories.country_repository import CountryRepository
from worlder.utils.seed import SAMPLE_COUNTRIES, seed_countries


@pytest.mark.asyncio
async def test_seed_populates_empty_table(session):
    inserted = await seed_countries(session)
    assert inserted == len(SAMPLE_COUNTRIES)
    assert await CountryRepository(session).count() == len(SAMPLE_COUNTRIES)


@pytest.mark.asyncio
async def test_seed_skipped_when_populated(session):
    await seed_countries(session)
    assert await seed_countries(session) == 0
    assert await CountryRepository(session).count() == len(SAMPLE_COUNTRIES)
