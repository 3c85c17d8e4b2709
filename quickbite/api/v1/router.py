"""
Central v1 API router – registers all endpoint sub-routers.
"""
from fastapi import APIRouter
import logging

from quickbite.api.v1.endpoints import menu_items
from quickbite.core.config import settings

logger = logging.getLogger(__name__)

api_router = APIRouter(prefix=settings.API_PREFIX)

logger.info("Registering v1 API routers")
api_router.include_router(menu_items.router)
