from sqlmodel import SQLModel, Field
from pydantic import BaseModel
from enum import Enum
from typing import List
from datetime import datetime, timezone
from .helper import id_generator


class MenuType(str, Enum):
    """Kinds of menu entries."""
    CATEGORY = "CATEGORY"
    PAGE = "PAGE"
    BUTTON = "BUTTON"


class Menu(SQLModel, table=True):
    """Navigation/permission entry stored as a parent-pointer row."""
    __tablename__ = "sys_menu"

    id: str = Field(default_factory=id_generator('menu', 10), primary_key=True)
    parent_id: str = Field(default="", index=True, description="Parent menu ID, empty for root menus")
    name: str = Field(index=True, description="Display name for menu item")
    sort: int = Field(default=0, index=True, description="Ordering among siblings")
    menu_type: MenuType = Field(default=MenuType.PAGE)
    path: str = Field(default="", description="URL path for navigation")
    icon: str = Field(default="", description="MDI string name")
    component: str = Field(default="", description="Front-end component path")
    permission: str = Field(default="", description="Permission key, used by buttons")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class MenuNode(BaseModel):
    """Request-scoped tree view of a menu row."""
    id: str
    parent_id: str = ""
    name: str
    sort: int = 0
    menu_type: MenuType = MenuType.PAGE
    path: str = ""
    icon: str = ""
    component: str = ""
    permission: str = ""
    children: List["MenuNode"] = []

    model_config = {"from_attributes": True}


class SimpleMenuNode(BaseModel):
    """Lightweight projection used by navigation pickers."""
    id: str
    name: str
    children: List["SimpleMenuNode"] = []
