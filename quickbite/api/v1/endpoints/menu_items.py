"""
Menu item endpoints:
  GET    /menuitem                          – List all menu items
  GET    /menuitem/category/{category}      – Menu items in a category
  GET    /menuitem/dietary/{dietaryTag}     – Menu items with a dietary tag
  GET    /menuitem/name/{name}              – Menu items whose name contains a value
  GET    /menuitem/search                   – Search by name, description or category
  GET    /menuitem/{id}                     – Get a specific menu item
  HEAD   /menuitem/{id}                     – Check that a menu item exists
  POST   /menuitem                          – Create a menu item
  PUT    /menuitem/{id}                     – Replace a menu item
  DELETE /menuitem/{id}                     – Delete a menu item
"""
from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from quickbite.core.dependencies import get_menu_item_service
from quickbite.schemas.menu_item import (
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
    ValidationErrorResponse,
)
from quickbite.services.menu_item_service import MenuItemService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menuitem", tags=["Menu Items"])

_VALIDATION_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse, "description": "Invalid input"}
}


def _not_found(menu_item_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Menu item with id={menu_item_id} not found",
    )


@router.get(
    "",
    response_model=list[MenuItemResponse],
    summary="List all menu items",
)
async def list_menu_items(service: MenuItemService = Depends(get_menu_item_service)):
    """Return every menu item, sorted by category and then name."""
    return await service.list_menu_items()


@router.get(
    "/category/{category}",
    response_model=list[MenuItemResponse],
    summary="List menu items by category",
)
async def list_menu_items_by_category(
    category: str,
    service: MenuItemService = Depends(get_menu_item_service),
):
    """Return the items in *category* (case-insensitive), sorted by name."""
    return await service.list_by_category(category)


@router.get(
    "/dietary/{dietary_tag}",
    response_model=list[MenuItemResponse],
    summary="List menu items by dietary tag",
)
async def list_menu_items_by_dietary_tag(
    dietary_tag: str,
    service: MenuItemService = Depends(get_menu_item_service),
):
    return await service.list_by_dietary_tag(dietary_tag)


@router.get(
    "/name/{name}",
    response_model=list[MenuItemResponse],
    summary="Find menu items by name",
)
async def find_menu_items_by_name(
    name: str,
    service: MenuItemService = Depends(get_menu_item_service),
):
    """Return the items whose name contains *name* (case-sensitive)."""
    return await service.find_by_name(name)


@router.get(
    "/search",
    response_model=list[MenuItemResponse],
    summary="Search menu items",
)
async def search_menu_items(
    search_term: Optional[str] = Query(None, alias="searchTerm", description="Text to look for"),
    exact_match: bool = Query(False, alias="exactMatch", description="Match the whole name or description"),
    service: MenuItemService = Depends(get_menu_item_service),
):
    """
    Search menu items ignoring case.
    A partial search also looks inside the category.
    """
    return await service.search(search_term, exact_match=exact_match)


@router.get(
    "/{menu_item_id}",
    response_model=MenuItemResponse,
    summary="Get a specific menu item",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Menu item not found"}},
)
async def get_menu_item(
    menu_item_id: int,
    service: MenuItemService = Depends(get_menu_item_service),
):
    menu_item = await service.get_menu_item(menu_item_id)
    if menu_item is None:
        raise _not_found(menu_item_id)
    return menu_item


@router.head(
    "/{menu_item_id}",
    status_code=status.HTTP_200_OK,
    summary="Check that a menu item exists",
)
async def check_menu_item(
    menu_item_id: int,
    service: MenuItemService = Depends(get_menu_item_service),
):
    if not await service.menu_item_exists(menu_item_id):
        raise _not_found(menu_item_id)
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "",
    response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a menu item",
    responses=_VALIDATION_RESPONSE,
)
async def create_menu_item(
    data: MenuItemCreate,
    request: Request,
    response: Response,
    service: MenuItemService = Depends(get_menu_item_service),
):
    """Create a menu item. Leading and trailing whitespace is removed from text fields."""
    created = await service.create_menu_item(data)
    response.headers["Location"] = str(
        request.url_for("get_menu_item", menu_item_id=created.id)
    )
    return created


@router.put(
    "/{menu_item_id}",
    response_model=MenuItemResponse,
    summary="Replace a menu item",
    responses={
        **_VALIDATION_RESPONSE,
        status.HTTP_404_NOT_FOUND: {"description": "Menu item not found"},
    },
)
async def update_menu_item(
    menu_item_id: int,
    data: MenuItemUpdate,
    service: MenuItemService = Depends(get_menu_item_service),
):
    """Replace every mutable field of a menu item."""
    updated = await service.update_menu_item(menu_item_id, data)
    if updated is None:
        raise _not_found(menu_item_id)
    return updated


@router.delete(
    "/{menu_item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a menu item",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Menu item not found"}},
)
async def delete_menu_item(
    menu_item_id: int,
    service: MenuItemService = Depends(get_menu_item_service),
):
    if not await service.delete_menu_item(menu_item_id):
        raise _not_found(menu_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
