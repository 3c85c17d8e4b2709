"""
Menu item service.

Business rules:
- String fields are trimmed before they are stored; inner whitespace is kept.
- Category and dietary tag lookups ignore case; blank lookups return nothing
  without touching the database.
- Missing items are reported as None/False, never as exceptions.
- Updates replace every mutable field; the last committed write wins.

Field-length and price-range validation happen at the API boundary; the
service trusts the payloads it receives.
"""
from typing import Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from quickbite.models.menu_item import MenuItem
from quickbite.repositories.menu_item_repository import MenuItemRepository
from quickbite.schemas.menu_item import MenuItemCreate, MenuItemResponse, MenuItemUpdate

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _to_response(menu_item: MenuItem) -> MenuItemResponse:
    return MenuItemResponse.model_validate(menu_item)


class MenuItemService:
    """Business logic for menu item operations."""

    def __init__(self, session: AsyncSession) -> None:
        logger.trace("Initializing MenuItemService")
        self._repo = MenuItemRepository(session)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_menu_items(self) -> list[MenuItemResponse]:
        """Return every menu item ordered by category, then name."""
        logger.info("Listing menu items")
        return [_to_response(item) for item in await self._repo.list_all()]

    async def get_menu_item(self, menu_item_id: int) -> Optional[MenuItemResponse]:
        """Return a menu item by id or None if missing."""
        logger.info("Fetching menu item id=%s", menu_item_id)
        menu_item = await self._repo.get_by_id(menu_item_id)
        if menu_item is None:
            logger.warning("Menu item id=%s not found", menu_item_id)
            return None
        return _to_response(menu_item)

    async def list_by_category(self, category: Optional[str]) -> list[MenuItemResponse]:
        logger.info("Listing menu items category=%s", category)
        if _is_blank(category):
            return []
        items = await self._repo.list_by_category(category)
        return [_to_response(item) for item in items]

    async def list_by_dietary_tag(self, dietary_tag: Optional[str]) -> list[MenuItemResponse]:
        logger.info("Listing menu items dietary_tag=%s", dietary_tag)
        if _is_blank(dietary_tag):
            return []
        items = await self._repo.list_by_dietary_tag(dietary_tag)
        return [_to_response(item) for item in items]

    async def find_by_name(self, name: Optional[str]) -> list[MenuItemResponse]:
        """Return items whose name contains *name* (case-sensitive)."""
        logger.info("Finding menu items name=%s", name)
        if _is_blank(name):
            return []
        items = await self._repo.list_by_name_containing(name)
        return [_to_response(item) for item in items]

    async def search(
        self, search_term: Optional[str], exact_match: bool = False
    ) -> list[MenuItemResponse]:
        """
        Search menu items ignoring case.

        An exact search matches the whole name or description; a partial
        search matches a substring of the name, description or category.
        """
        logger.info("Searching menu items term=%s exact=%s", search_term, exact_match)
        if _is_blank(search_term):
            return []
        term = search_term.strip()
        if exact_match:
            items = await self._repo.search_exact(term)
        else:
            items = await self._repo.search_partial(term)
        return [_to_response(item) for item in items]

    async def menu_item_exists(self, menu_item_id: int) -> bool:
        logger.trace("Checking menu item existence id=%s", menu_item_id)
        return await self._repo.exists(menu_item_id)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create_menu_item(self, data: MenuItemCreate) -> MenuItemResponse:
        """Create a menu item from a trimmed copy of *data*."""
        logger.info("Creating menu item %s", data.name)
        menu_item = MenuItem(
            name=data.name.strip(),
            description=data.description.strip(),
            price=data.price,
            category=data.category.strip(),
            dietary_tag=data.dietary_tag.strip(),
        )
        menu_item = await self._repo.add(menu_item)
        logger.info("Menu item created id=%s", menu_item.id)
        return _to_response(menu_item)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    async def update_menu_item(
        self, menu_item_id: int, data: MenuItemUpdate
    ) -> Optional[MenuItemResponse]:
        """Replace every mutable field of a menu item; None if it does not exist."""
        logger.info("Updating menu item id=%s", menu_item_id)
        menu_item = await self._repo.get_by_id(menu_item_id)
        if menu_item is None:
            logger.warning("Menu item id=%s not found for update", menu_item_id)
            return None

        menu_item.name = data.name.strip()
        menu_item.description = data.description.strip()
        menu_item.price = data.price
        menu_item.category = data.category.strip()
        menu_item.dietary_tag = data.dietary_tag.strip()

        menu_item = await self._repo.save(menu_item)
        logger.info("Menu item updated id=%s", menu_item_id)
        return _to_response(menu_item)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def delete_menu_item(self, menu_item_id: int) -> bool:
        """Delete a menu item and return False if it did not exist."""
        logger.info("Deleting menu item id=%s", menu_item_id)
        deleted = await self._repo.delete(menu_item_id)
        if not deleted:
            logger.warning("Menu item id=%s not found for deletion", menu_item_id)
            return False
        logger.info("Menu item deleted id=%s", menu_item_id)
        return True
