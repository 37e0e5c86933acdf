"""
Feature: Delete a menu
  As an administrator
  I want to delete menus that are no longer needed
  So that navigation stays clean without breaking the tree

Scenario: Delete a leaf menu
  Given a leaf menu granted to a role
  When they delete it with DELETE /menu/{menu_id}
  Then the system removes the role links
  And removes the menu
  And returns success confirmation message

Scenario: Delete a menu with a child
  Given a menu that has a child menu
  When they try to delete it
  Then the system returns 409 Conflict naming the child
  And does not delete anything

Scenario: Delete non-existent menu
  When they try to delete a non-existent menu
  Then the system returns 404 Not Found error
"""

import pytest
from fastapi import HTTPException
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, Session, SQLModel, select
from models.menu import Menu, MenuType
from models.role import Role, RoleMenuLink
from apis.menu import delete_menu_item


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.mark.asyncio
async def test_delete_leaf_menu(session):
    # Given a leaf menu granted to a role
    parent = Menu(id="sys", name="System", menu_type=MenuType.CATEGORY)
    leaf = Menu(id="sys_users", parent_id="sys", name="Users")
    role = Role(id="role_ops", name="ops")
    session.add_all([parent, leaf, role])
    session.commit()
    session.add(RoleMenuLink(role_id="role_ops", menu_id="sys_users"))
    session.commit()

    # When they delete it
    result = await delete_menu_item(menu_id="sys_users", db_session=session)

    # Then the menu and its role links are gone
    assert result.message == "Menu item deleted successfully"
    assert session.get(Menu, "sys_users") is None
    assert session.exec(select(RoleMenuLink)).all() == []
    # And the parent remains
    assert session.get(Menu, "sys") is not None


@pytest.mark.asyncio
async def test_delete_menu_with_child(session):
    # Given a menu that has a child menu
    session.add_all([
        Menu(id="sys", name="System", menu_type=MenuType.CATEGORY),
        Menu(id="sys_users", parent_id="sys", name="Users"),
    ])
    session.commit()

    # When they try to delete it
    with pytest.raises(HTTPException) as exc_info:
        await delete_menu_item(menu_id="sys", db_session=session)

    # Then the system refuses naming the child
    assert exc_info.value.status_code == 409
    assert exc_info.value.detail["code"] == "HAS_CHILDREN"
    assert "[sys_users]" in exc_info.value.detail["message"]
    assert session.get(Menu, "sys") is not None


@pytest.mark.asyncio
async def test_delete_menu_not_found(session):
    with pytest.raises(HTTPException) as exc_info:
        await delete_menu_item(menu_id="nonexistent_id", db_session=session)

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail["code"] == "RECORD_NOT_FOUND"
