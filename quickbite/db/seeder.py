"""
Database seeder – inserts the starter menu on first startup.

Seeding runs only when the `menu_items` table is empty, so it is safe to call
on every startup. Disable it with SEED_ON_STARTUP=false.
"""
import logging
from decimal import Decimal

from sqlalchemy import func, select

from quickbite.db.database import get_db, save_changes
from quickbite.models.menu_item import MenuItem

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Seed data – change these values freely during development
# ---------------------------------------------------------------------------
SEED_MENU_ITEMS = [
    {
        "name": "Margherita Pizza",
        "description": "Classic pizza with tomato sauce, mozzarella, and fresh basil",
        "price": Decimal("12.99"),
        "category": "Main Course",
        "dietary_tag": "Vegetarian",
    },
    {
        "name": "Caesar Salad",
        "description": "Fresh romaine lettuce with Caesar dressing, croutons, and parmesan",
        "price": Decimal("8.99"),
        "category": "Appetizer",
        "dietary_tag": "Vegetarian",
    },
    {
        "name": "Grilled Chicken Breast",
        "description": "Tender grilled chicken breast with herbs and spices",
        "price": Decimal("16.99"),
        "category": "Main Course",
        "dietary_tag": "Gluten-Free",
    },
]


async def seed_menu_items() -> int:
    """
    Insert the seed menu items if the table is empty.
    Returns the number of rows inserted (0 when the menu already has items).
    """
    async with get_db() as session:
        count = await session.scalar(select(func.count()).select_from(MenuItem))
        if count:
            logger.info("Seeder: %s menu items already present – skipping.", count)
            return 0

        session.add_all([MenuItem(**data) for data in SEED_MENU_ITEMS])
        await save_changes(session)
        logger.info("Seeder: created %s menu items.", len(SEED_MENU_ITEMS))
        return len(SEED_MENU_ITEMS)
