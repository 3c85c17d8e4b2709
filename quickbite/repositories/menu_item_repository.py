"""
Repository layer for MenuItem persistence.
All ORM queries for the `menu_items` table live here.

Case-insensitive comparisons fold with ``str.lower`` in Python: SQLite's
``lower()`` only folds ASCII letters.
"""
from typing import Optional
import logging

from sqlalchemy import delete, exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from quickbite.core.logging_config import log_db_timing
from quickbite.db.database import save_changes
from quickbite.models.menu_item import MenuItem

logger = logging.getLogger(__name__)

# Signed 64-bit INTEGER range of the primary key column.
MIN_ROW_ID = -(2 ** 63)
MAX_ROW_ID = 2 ** 63 - 1


def _is_storable_id(menu_item_id: int) -> bool:
    return MIN_ROW_ID <= menu_item_id <= MAX_ROW_ID


class MenuItemRepository:
    """Data access layer for menu item records."""

    def __init__(self, session: AsyncSession) -> None:
        logger.trace("Initializing MenuItemRepository")
        self._session = session

    async def _select_all(self, *order_by) -> list[MenuItem]:
        result = await self._session.execute(select(MenuItem).order_by(*order_by))
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @log_db_timing
    async def get_by_id(self, menu_item_id: int) -> Optional[MenuItem]:
        if not _is_storable_id(menu_item_id):
            return None
        return await self._session.get(MenuItem, menu_item_id)

    @log_db_timing
    async def exists(self, menu_item_id: int) -> bool:
        if not _is_storable_id(menu_item_id):
            return False
        return bool(
            await self._session.scalar(
                select(exists().where(MenuItem.id == menu_item_id))
            )
        )

    @log_db_timing
    async def list_all(self) -> list[MenuItem]:
        """Return every menu item ordered by category, then name."""
        return await self._select_all(MenuItem.category, MenuItem.name)

    @log_db_timing
    async def list_by_category(self, category: str) -> list[MenuItem]:
        """Case-insensitive category match, ordered by name."""
        needle = category.lower()
        items = await self._select_all(MenuItem.name)
        return [item for item in items if item.category.lower() == needle]

    @log_db_timing
    async def list_by_dietary_tag(self, dietary_tag: str) -> list[MenuItem]:
        """Case-insensitive dietary tag match, ordered by category, then name."""
        needle = dietary_tag.lower()
        items = await self._select_all(MenuItem.category, MenuItem.name)
        return [item for item in items if item.dietary_tag.lower() == needle]

    @log_db_timing
    async def list_by_name_containing(self, name: str) -> list[MenuItem]:
        """Case-sensitive substring match on the name, ordered by name."""
        # LIKE is case-insensitive on SQLite, so the database narrows the
        # candidates and the exact containment check runs here.
        result = await self._session.execute(
            select(MenuItem)
            .where(MenuItem.name.contains(name, autoescape=True))
            .order_by(MenuItem.name)
        )
        return [item for item in result.scalars().all() if name in item.name]

    @log_db_timing
    async def search_exact(self, term: str) -> list[MenuItem]:
        """Items whose lowered name or description equals the lowered term."""
        needle = term.lower()
        items = await self._select_all(MenuItem.name, MenuItem.category)
        return [
            item
            for item in items
            if needle in (item.name.lower(), item.description.lower())
        ]

    @log_db_timing
    async def search_partial(self, term: str) -> list[MenuItem]:
        """Items whose lowered name, description or category contains the term."""
        needle = term.lower()
        items = await self._select_all(MenuItem.name, MenuItem.category)
        return [
            item
            for item in items
            if needle in item.name.lower()
            or needle in item.description.lower()
            or needle in item.category.lower()
        ]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @log_db_timing
    async def add(self, menu_item: MenuItem) -> MenuItem:
        """Insert a menu item row and return it as stored."""
        logger.info("Creating menu item record name=%s", menu_item.name)
        self._session.add(menu_item)
        await save_changes(self._session)
        await self._session.refresh(menu_item)
        return menu_item

    @log_db_timing
    async def save(self, menu_item: MenuItem) -> MenuItem:
        """Persist modifications of a loaded menu item and return it as stored."""
        logger.info("Updating menu item record id=%s", menu_item.id)
        await save_changes(self._session)
        await self._session.refresh(menu_item)
        return menu_item

    @log_db_timing
    async def delete(self, menu_item_id: int) -> bool:
        """Delete a menu item by id and return True if a row was removed."""
        logger.info("Deleting menu item record id=%s", menu_item_id)
        if not _is_storable_id(menu_item_id):
            return False
        result = await self._session.execute(
            delete(MenuItem).where(MenuItem.id == menu_item_id)
        )
        await self._session.commit()
        logger.info("Menu item delete affected %s rows", result.rowcount)
        return result.rowcount > 0
