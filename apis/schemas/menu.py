from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from models.menu import MenuType


class CreateMenuRequest(BaseModel):
    """Schema for creating a new menu item."""
    name: str = Field(..., description="Display name for menu item")
    parent_id: str = Field(default="", description="Parent menu ID, empty for a root menu")
    sort: int = Field(default=0, description="Ordering among siblings")
    menu_type: MenuType = Field(default=MenuType.PAGE, description="CATEGORY, PAGE or BUTTON")
    path: str = Field(default="", description="URL path for navigation")
    icon: str = Field(default="", description="MDI string name")
    component: str = Field(default="", description="Front-end component path")
    permission: str = Field(default="", description="Permission key, used by buttons")


class UpdateMenuRequest(BaseModel):
    """Schema for updating menu item; omitted fields stay unchanged."""
    name: Optional[str] = Field(default=None, description="New display name")
    parent_id: Optional[str] = Field(default=None, description="New parent menu ID")
    sort: Optional[int] = Field(default=None, description="New sibling order")
    menu_type: Optional[MenuType] = Field(default=None, description="New menu type")
    path: Optional[str] = Field(default=None, description="New URL path")
    icon: Optional[str] = Field(default=None, description="New MDI icon name")
    component: Optional[str] = Field(default=None, description="New component path")
    permission: Optional[str] = Field(default=None, description="New permission key")


class MenuResponse(BaseModel):
    """Schema for menu item responses."""
    id: str = Field(..., description="Menu item ID")
    parent_id: str = Field(..., description="Parent menu ID, empty for root menus")
    name: str = Field(..., description="Display name")
    sort: int = Field(..., description="Ordering among siblings")
    menu_type: MenuType = Field(..., description="CATEGORY, PAGE or BUTTON")
    path: str = Field(..., description="URL path for navigation")
    icon: str = Field(..., description="MDI string name")
    component: str = Field(..., description="Front-end component path")
    permission: str = Field(..., description="Permission key")
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
