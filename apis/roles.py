from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select
from database import get_session
from models.menu import Menu
from models.role import Role, RoleMenuLink
from settings import logger
from .schemas.roles import CreateRoleRequest, RoleResponse, SetRoleMenusRequest
from .schemas.common import MessageResponse

router = APIRouter(prefix="/roles", tags=["roles"])


@router.post("/")
async def create_role(
    role_data: CreateRoleRequest,
    db_session: Session = Depends(get_session)
) -> RoleResponse:
    """Create a new role."""

    # Role names are unique
    existing = db_session.exec(select(Role).where(Role.name == role_data.name)).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Role name already exists"
        )

    new_role = Role(name=role_data.name)

    db_session.add(new_role)
    db_session.commit()
    db_session.refresh(new_role)

    logger.info("Role created", extra={"role_id": new_role.id})
    return RoleResponse.model_validate(new_role)


@router.put("/{role_id}/menus")
async def set_role_menus(
    role_id: str,
    menus_data: SetRoleMenusRequest,
    db_session: Session = Depends(get_session)
) -> MessageResponse:
    """Replace the set of menus granted to a role."""

    role = db_session.get(Role, role_id)
    if not role:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Role not found"
        )

    # Every requested menu must exist
    menu_ids = list(dict.fromkeys(menus_data.menu_ids))
    if menu_ids:
        found = db_session.exec(select(Menu.id).where(Menu.id.in_(menu_ids))).all()
        missing = sorted(set(menu_ids) - set(found))
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Menu items not found: {', '.join(missing)}"
            )

    links = db_session.exec(select(RoleMenuLink).where(RoleMenuLink.role_id == role_id)).all()
    for link in links:
        db_session.delete(link)
    db_session.flush()

    for menu_id in menu_ids:
        db_session.add(RoleMenuLink(role_id=role_id, menu_id=menu_id))
    db_session.commit()

    logger.info("Role menus replaced", extra={"role_id": role_id, "menu_count": len(menu_ids)})
    return MessageResponse(message="Role menus updated successfully")
