from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from .helper import id_generator


class Role(SQLModel, table=True):
    """Back-office role that is granted a set of menus."""
    __tablename__ = "sys_role"

    id: str = Field(default_factory=id_generator('role', 10), primary_key=True)
    name: str = Field(unique=True, index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class RoleMenuLink(SQLModel, table=True):
    """Intermediate table linking roles to the menus they may see."""
    __tablename__ = "sys_role_menu"

    role_id: str = Field(foreign_key="sys_role.id", primary_key=True)
    menu_id: str = Field(foreign_key="sys_menu.id", primary_key=True)
