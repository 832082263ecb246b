"""Routes API / API routes."""

from fastapi import APIRouter

from worlder.api import countries
from worlder.config import settings

api_router = APIRouter(prefix=settings.API_PREFIX)

api_router.include_router(countries.router, prefix="/countries", tags=["countries"])
