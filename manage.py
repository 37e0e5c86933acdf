#!/usr/bin/env python3
"""
Management commands for Menu Admin.

Usage:
    python manage.py init_db
    python manage.py check_db
    python manage.py reset_db
    python manage.py seed_menus
"""

import sys
from typing import List
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session
from database import engine
from settings import logger
# Import all models so their tables are registered on the metadata
from models.menu import Menu, MenuType
from models.role import Role, RoleMenuLink


def list_tables(bind=engine) -> List[str]:
    return sorted(inspect(bind).get_table_names())


def init_db():
    SQLModel.metadata.create_all(engine)
    logger.info("Menu tables ready", extra={"tables": list_tables()})


def check_db():
    try:
        tables = list_tables()
    except SQLAlchemyError as e:
        logger.error("Database connection failed", extra={"error": str(e)})
        sys.exit(1)

    missing = sorted(set(SQLModel.metadata.tables) - set(tables))
    if missing:
        logger.warning("Database is missing tables, run init_db", extra={"missing": missing})
    else:
        logger.info("Database connected", extra={"tables": tables})


def reset_db():
    logger.warning("Dropping menu and role tables...")
    SQLModel.metadata.drop_all(engine)
    init_db()


def seed_menus(session: Session) -> Role:
    """Insert a default System menu tree and an admin role granted all of it."""
    system = Menu(name="System", menu_type=MenuType.CATEGORY, sort=1, icon="mdi-cog")
    session.add(system)
    session.flush()

    children = [
        Menu(parent_id=system.id, name="Users", menu_type=MenuType.PAGE, sort=1, path="/system/users"),
        Menu(parent_id=system.id, name="Roles", menu_type=MenuType.PAGE, sort=2, path="/system/roles"),
        Menu(parent_id=system.id, name="Menus", menu_type=MenuType.PAGE, sort=3, path="/system/menus"),
    ]
    session.add_all(children)

    admin = Role(name="admin")
    session.add(admin)
    session.flush()

    session.add_all([RoleMenuLink(role_id=admin.id, menu_id=menu.id) for menu in [system] + children])
    session.commit()

    logger.info("Seeded default menus", extra={"role_id": admin.id, "menu_count": len(children) + 1})
    return admin


def seed():
    with Session(engine) as session:
        try:
            seed_menus(session)
        except SQLAlchemyError as e:
            logger.error("Failed to seed menus", extra={"error": str(e)})
            sys.exit(1)


COMMANDS = {
    "init_db": (init_db, "Create missing tables"),
    "check_db": (check_db, "Check the connection and list tables"),
    "reset_db": (reset_db, "Drop and recreate all tables"),
    "seed_menus": (seed, "Insert a default menu tree and admin role"),
}


def main(argv: List[str]) -> int:
    if len(argv) != 2 or argv[1] not in COMMANDS:
        print("Usage: python manage.py <command>")
        for name, (_, help_text) in COMMANDS.items():
            print(f"  {name:<12} - {help_text}")
        return 1

    command, _ = COMMANDS[argv[1]]
    command()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
