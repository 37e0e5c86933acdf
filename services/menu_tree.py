"""In-memory assembly of menu rows into trees.

Rows come from the repository as a flat list sorted by ``sort``. Nodes are
linked by reference: the children list attached to a node is the same list
object found in the parent-id grouping, so every level keeps input order.
"""
from typing import Dict, List
from models.menu import MenuNode, SimpleMenuNode


ROOT_PARENT_ID = ""


def build_tree(menus: List[MenuNode]) -> List[MenuNode]:
    """Turn a parent-pointer list into a forest rooted at the empty parent id.

    Nodes whose parent is missing (or that sit on a cycle) are unreachable
    from the roots and are left out of the result.
    """
    groups: Dict[str, List[MenuNode]] = {}
    for menu in menus:
        groups.setdefault(menu.parent_id, []).append(menu)

    for menu in menus:
        menu.children = groups.get(menu.id, [])

    return groups.get(ROOT_PARENT_ID, [])


def _has_match(name: str, menus: List[MenuNode]) -> bool:
    for menu in menus:
        if name in menu.name:
            return True
        if menu.children and _has_match(name, menu.children):
            return True
    return False


def filter_by_name(name: str, tree: List[MenuNode]) -> List[MenuNode]:
    """Keep top-level nodes whose name, or any descendant's name, contains ``name``.

    Kept nodes retain all of their children; only the top-level list is
    filtered.
    """
    if not name:
        return tree
    return [
        menu for menu in tree
        if name in menu.name or _has_match(name, menu.children)
    ]


def to_simple_forest(tree: List[MenuNode]) -> List[SimpleMenuNode]:
    """Project a forest onto id, name and children."""
    return [
        SimpleMenuNode(id=menu.id, name=menu.name, children=to_simple_forest(menu.children))
        for menu in tree
    ]
