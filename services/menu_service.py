from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from models.menu import Menu, MenuNode, SimpleMenuNode
from settings import logger
from .errors import (
    FAIL_CREATE, FAIL_DELETE, FAIL_READ, FAIL_UPDATE,
    HasChildrenError, NotFoundError, StoreError
)
from .menu_repository import MenuRepository
from .menu_tree import build_tree, filter_by_name, to_simple_forest


class MenuService:
    """Menu tree queries and mutations on top of a :class:`MenuRepository`."""

    def __init__(self, repository: MenuRepository):
        self.repository = repository

    def tree(self, name: Optional[str] = None) -> List[MenuNode]:
        """Full menu forest ordered by ``sort``, optionally filtered by name."""
        try:
            menus = self.repository.list_all()
        except SQLAlchemyError as e:
            logger.error("Failed to read menus", extra={"error": str(e)})
            raise StoreError(FAIL_READ, "Failed to read menus") from e

        tree = build_tree(menus)
        if name:
            tree = filter_by_name(name, tree)
        return tree

    def simple_tree(self, name: Optional[str] = None) -> List[SimpleMenuNode]:
        return to_simple_forest(self.tree(name))

    def tree_by_role(self, role_id: str) -> List[MenuNode]:
        """Forest of the menus granted to ``role_id``; empty for an empty id."""
        if not role_id:
            return []
        try:
            menus = self.repository.list_by_role(role_id)
        except SQLAlchemyError as e:
            logger.error("Failed to read role menus", extra={"role_id": role_id, "error": str(e)})
            raise StoreError(FAIL_READ, "Failed to read menus of role") from e
        return build_tree(menus)

    def get(self, menu_id: str) -> Menu:
        try:
            menu = self.repository.get(menu_id)
        except SQLAlchemyError as e:
            logger.error("Failed to read menu", extra={"menu_id": menu_id, "error": str(e)})
            raise StoreError(FAIL_READ, "Failed to read menu") from e
        if not menu:
            raise NotFoundError()
        return menu

    def create(self, values: Dict[str, Any]) -> Menu:
        menu = Menu(**values)
        try:
            with self.repository.transaction():
                self.repository.insert(menu)
        except SQLAlchemyError as e:
            logger.error("Failed to create menu", extra={"menu_name": menu.name, "error": str(e)})
            raise StoreError(FAIL_CREATE, "Failed to create menu") from e

        logger.info("Menu created", extra={"menu_id": menu.id, "parent_id": menu.parent_id})
        return menu

    def save(self, menu_id: str, values: Dict[str, Any]) -> Menu:
        """Update the supplied fields of a menu.

        Raises:
            NotFoundError: no row with ``menu_id`` exists.
            StoreError: the update failed.
        """
        try:
            with self.repository.transaction():
                if self.repository.update_by_id(menu_id, values) == 0:
                    raise NotFoundError()
                menu = self.repository.get(menu_id)
        except SQLAlchemyError as e:
            logger.error("Failed to update menu", extra={"menu_id": menu_id, "error": str(e)})
            raise StoreError(FAIL_UPDATE, "Failed to update menu") from e

        logger.info("Menu updated", extra={"menu_id": menu_id, "fields": sorted(values)})
        return menu

    def delete(self, menu_id: str) -> None:
        """Delete a childless menu together with its role associations.

        The lookup, the child check, the association clear and the row delete
        run in one transaction.
        """
        try:
            with self.repository.transaction():
                menu_type = self.repository.find_menu_type(menu_id)

                child_id = self.repository.first_child_id(menu_id)
                if child_id is not None:
                    logger.warning("Refused to delete menu with children", extra={
                        "menu_id": menu_id,
                        "child_id": child_id
                    })
                    raise HasChildrenError(menu_id, child_id)

                self.repository.clear_role_associations(menu_id)
                self.repository.delete_by_id(menu_id)
        except SQLAlchemyError as e:
            logger.error("Failed to delete menu", extra={"menu_id": menu_id, "error": str(e)})
            raise StoreError(FAIL_DELETE, "Failed to delete menu") from e

        logger.info("Menu deleted", extra={"menu_id": menu_id, "menu_type": menu_type.value})
