from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from database import get_session
from models.menu import MenuNode, SimpleMenuNode
from services.errors import MenuError
from services.menu_repository import MenuRepository
from services.menu_service import MenuService
from helpers.errors import to_http_exception
from .schemas.menu import CreateMenuRequest, UpdateMenuRequest, MenuResponse
from .schemas.common import MessageResponse
from typing import List, Optional

router = APIRouter(prefix="/menu", tags=["menu"])


def get_menu_service(db_session: Session) -> MenuService:
    return MenuService(MenuRepository(db_session))


@router.get("/tree")
async def get_menu_tree(
    name: Optional[str] = Query(default=None, description="Keep branches whose names contain this text"),
    db_session: Session = Depends(get_session)
) -> List[MenuNode]:
    """Full menu tree ordered by sort, optionally filtered by name."""
    try:
        return get_menu_service(db_session).tree(name)
    except MenuError as e:
        raise to_http_exception(e) from e


@router.get("/simple-tree")
async def get_simple_menu_tree(
    name: Optional[str] = Query(default=None, description="Keep branches whose names contain this text"),
    db_session: Session = Depends(get_session)
) -> List[SimpleMenuNode]:
    """Menu tree reduced to id, name and children."""
    try:
        return get_menu_service(db_session).simple_tree(name)
    except MenuError as e:
        raise to_http_exception(e) from e


@router.get("/role-tree")
async def get_role_menu_tree(
    role_id: str = Query(default="", description="Role whose menus are returned"),
    db_session: Session = Depends(get_session)
) -> List[MenuNode]:
    """Menu tree granted to a role. An empty role yields an empty tree."""
    try:
        return get_menu_service(db_session).tree_by_role(role_id)
    except MenuError as e:
        raise to_http_exception(e) from e


@router.post("/")
async def create_menu_item(
    menu_data: CreateMenuRequest,
    db_session: Session = Depends(get_session)
) -> MenuResponse:
    """Create new menu item."""
    try:
        menu = get_menu_service(db_session).create(menu_data.model_dump())
    except MenuError as e:
        raise to_http_exception(e) from e

    return MenuResponse.model_validate(menu)


@router.get("/{menu_id}")
async def get_menu_item(
    menu_id: str,
    db_session: Session = Depends(get_session)
) -> MenuResponse:
    """Get specific menu item."""
    try:
        menu = get_menu_service(db_session).get(menu_id)
    except MenuError as e:
        raise to_http_exception(e) from e

    return MenuResponse.model_validate(menu)


@router.put("/{menu_id}")
async def update_menu_item(
    menu_id: str,
    menu_data: UpdateMenuRequest,
    db_session: Session = Depends(get_session)
) -> MenuResponse:
    """Update menu item. Only fields present in the body are changed.

    The new parent_id is not validated; a menu made its own parent (or a
    descendant's child) no longer appears in the tree.
    """
    try:
        menu = get_menu_service(db_session).save(menu_id, menu_data.model_dump(exclude_none=True))
    except MenuError as e:
        raise to_http_exception(e) from e

    return MenuResponse.model_validate(menu)


@router.delete("/{menu_id}")
async def delete_menu_item(
    menu_id: str,
    db_session: Session = Depends(get_session)
) -> MessageResponse:
    """Delete a menu item that has no children, removing its role links."""
    try:
        get_menu_service(db_session).delete(menu_id)
    except MenuError as e:
        raise to_http_exception(e) from e

    return MessageResponse(message="Menu item deleted successfully")
