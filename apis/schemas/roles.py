from pydantic import BaseModel, Field
from typing import List


class CreateRoleRequest(BaseModel):
    """Schema for creating a new role."""
    name: str = Field(..., description="Unique role name")


class RoleResponse(BaseModel):
    """Schema for role responses."""
    id: str = Field(..., description="Role ID")
    name: str = Field(..., description="Role name")

    model_config = {"from_attributes": True}


class SetRoleMenusRequest(BaseModel):
    """Schema for replacing the menus granted to a role."""
    menu_ids: List[str] = Field(default_factory=list, description="IDs of the menus the role may see")
