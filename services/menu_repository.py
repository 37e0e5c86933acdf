from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from models.menu import Menu, MenuNode, MenuType
from models.role import RoleMenuLink
from .errors import AssociationClearError, NotFoundError


class MenuRepository:
    """Relational access to ``sys_menu`` and its role links.

    Methods flush but never commit; callers group writes with
    :meth:`transaction`. Low-level failures surface as ``SQLAlchemyError``.
    """

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self):
        """Commit the enclosed writes, or roll all of them back on any error."""
        try:
            yield self
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def list_all(self) -> List[MenuNode]:
        statement = select(Menu).order_by(Menu.sort, Menu.id)
        menus = self.session.exec(statement).all()
        return [MenuNode.model_validate(menu) for menu in menus]

    def list_by_role(self, role_id: str) -> List[MenuNode]:
        if not role_id:
            return []
        statement = (
            select(Menu)
            .join(RoleMenuLink, RoleMenuLink.menu_id == Menu.id)
            .where(RoleMenuLink.role_id == role_id)
            .order_by(Menu.sort, Menu.id)
        )
        menus = self.session.exec(statement).all()
        return [MenuNode.model_validate(menu) for menu in menus]

    def get(self, menu_id: str) -> Optional[Menu]:
        return self.session.get(Menu, menu_id)

    def find_menu_type(self, menu_id: str) -> MenuType:
        statement = select(Menu.menu_type).where(Menu.id == menu_id)
        menu_type = self.session.exec(statement).first()
        if menu_type is None:
            raise NotFoundError()
        return menu_type

    def first_child_id(self, parent_id: str) -> Optional[str]:
        """Return the id of one direct child of ``parent_id``, if any."""
        statement = select(Menu.id).where(Menu.parent_id == parent_id).limit(1)
        return self.session.exec(statement).first()

    def clear_role_associations(self, menu_id: str) -> None:
        try:
            statement = select(RoleMenuLink).where(RoleMenuLink.menu_id == menu_id)
            for link in self.session.exec(statement).all():
                self.session.delete(link)
            self.session.flush()
        except SQLAlchemyError as e:
            raise AssociationClearError() from e

    def insert(self, menu: Menu) -> Menu:
        self.session.add(menu)
        self.session.flush()
        return menu

    def update_by_id(self, menu_id: str, values: Dict[str, Any]) -> int:
        """Apply ``values`` to the menu row; return the number of rows affected."""
        menu = self.session.get(Menu, menu_id)
        if not menu:
            return 0

        for field, value in values.items():
            if field in ("id", "created_at"):
                continue
            setattr(menu, field, value)
        menu.updated_at = datetime.now(timezone.utc)

        self.session.add(menu)
        self.session.flush()
        return 1

    def delete_by_id(self, menu_id: str) -> int:
        menu = self.session.get(Menu, menu_id)
        if not menu:
            return 0
        self.session.delete(menu)
        self.session.flush()
        return 1
