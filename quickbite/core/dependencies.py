"""
FastAPI dependency injection helpers.
"""
from typing import AsyncGenerator
import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from quickbite.db.database import get_db
from quickbite.services.menu_item_service import MenuItemService

logger = logging.getLogger(__name__)


async def db_dependency() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for the duration of a request."""
    logger.trace("Creating database dependency session")
    async with get_db() as session:
        yield session


def get_menu_item_service(session: AsyncSession = Depends(db_dependency)) -> MenuItemService:
    """Build a MenuItemService bound to the request's session."""
    return MenuItemService(session)
