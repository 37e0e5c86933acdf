"""
Feature: Assemble menu rows into trees
  As the menu service
  I want to turn a flat, sort-ordered list of menus into a forest
  So that clients receive navigation trees they can render directly
"""

from models.menu import MenuNode, MenuType
from services.menu_tree import build_tree, filter_by_name, to_simple_forest


def make_menu(menu_id, parent_id, name, sort=0):
    return MenuNode(id=menu_id, parent_id=parent_id, name=name, sort=sort)


def sample_rows():
    return [
        make_menu("1", "", "Sys", sort=1),
        make_menu("2", "1", "User", sort=1),
        make_menu("3", "1", "Role", sort=2),
    ]


def flatten(tree):
    for menu in tree:
        yield menu
        yield from flatten(menu.children)


def test_build_tree_groups_children_under_parent():
    tree = build_tree(sample_rows())

    assert [menu.id for menu in tree] == ["1"]
    assert [child.id for child in tree[0].children] == ["2", "3"]
    assert tree[0].children[0].children == []
    assert tree[0].children[1].children == []


def test_build_tree_empty_input():
    assert build_tree([]) == []


def test_build_tree_attaches_original_nodes():
    rows = sample_rows()
    tree = build_tree(rows)

    assert tree[0] is rows[0]
    assert tree[0].children[0] is rows[1]
    assert tree[0].children[1] is rows[2]


def test_build_tree_keeps_sibling_order_at_every_level():
    rows = [
        make_menu("a", "", "Dashboard", sort=1),
        make_menu("b", "", "System", sort=2),
        make_menu("c", "b", "Users", sort=1),
        make_menu("d", "a", "Overview", sort=2),
        make_menu("e", "b", "Roles", sort=3),
        make_menu("f", "c", "Add user", sort=4),
        make_menu("g", "b", "Menus", sort=5),
    ]
    tree = build_tree(rows)

    flat = list(flatten(tree))
    assert sorted(menu.id for menu in flat) == sorted(menu.id for menu in rows)

    # Relative order of siblings matches the input order
    for parent_id in {menu.parent_id for menu in rows}:
        expected = [menu.id for menu in rows if menu.parent_id == parent_id]
        actual = [menu.id for menu in flat if menu.parent_id == parent_id]
        assert actual == expected


def test_build_tree_drops_dangling_and_cyclic_nodes():
    rows = [
        make_menu("root", "", "Home"),
        make_menu("orphan", "missing", "Lost"),
        make_menu("x", "y", "Loop X"),
        make_menu("y", "x", "Loop Y"),
    ]
    tree = build_tree(rows)

    assert [menu.id for menu in flatten(tree)] == ["root"]


def test_filter_by_name_keeps_ancestor_with_all_children():
    tree = build_tree(sample_rows())

    filtered = filter_by_name("Use", tree)

    assert [menu.id for menu in filtered] == ["1"]
    assert [child.id for child in filtered[0].children] == ["2", "3"]


def test_filter_by_name_empty_needle_returns_forest_unchanged():
    tree = build_tree(sample_rows())

    assert filter_by_name("", tree) is tree


def test_filter_by_name_is_case_sensitive():
    tree = build_tree(sample_rows())

    assert filter_by_name("use", tree) == []
    assert filter_by_name("sys", tree) == []
    assert [menu.id for menu in filter_by_name("Sys", tree)] == ["1"]


def test_filter_by_name_matches_deep_descendants():
    rows = [
        make_menu("a", "", "Dashboard"),
        make_menu("b", "", "System"),
        make_menu("c", "b", "Users"),
        make_menu("d", "c", "Reset password"),
    ]
    tree = build_tree(rows)

    filtered = filter_by_name("password", tree)

    assert [menu.id for menu in filtered] == ["b"]
    assert filtered[0].children[0].children[0].id == "d"


def test_filter_by_name_only_keeps_nodes_with_matches():
    rows = [
        make_menu("a", "", "Dashboard"),
        make_menu("b", "a", "Charts"),
        make_menu("c", "", "System"),
        make_menu("d", "c", "Users"),
        make_menu("e", "", "Reports"),
    ]
    tree = build_tree(rows)

    filtered = filter_by_name("art", tree)

    def matches(menu):
        return "art" in menu.name or any(matches(child) for child in menu.children)

    assert [menu.id for menu in filtered] == ["a"]
    assert all(matches(menu) for menu in filtered)
    assert filtered[0].children is tree[0].children


def test_to_simple_forest_projects_id_name_and_children():
    tree = build_tree(sample_rows())
    tree[0].menu_type = MenuType.CATEGORY

    simple = to_simple_forest(tree)

    assert [menu.model_dump() for menu in simple] == [
        {
            "id": "1",
            "name": "Sys",
            "children": [
                {"id": "2", "name": "User", "children": []},
                {"id": "3", "name": "Role", "children": []},
            ],
        }
    ]


def test_to_simple_forest_empty_input():
    assert to_simple_forest([]) == []


def test_to_simple_forest_keeps_shape():
    rows = [
        make_menu("a", "", "Dashboard"),
        make_menu("b", "a", "Charts"),
        make_menu("c", "b", "Line"),
        make_menu("d", "b", "Bar"),
        make_menu("e", "", "Reports"),
    ]
    tree = build_tree(rows)
    simple = to_simple_forest(tree)

    def same_shape(menus, simple_menus):
        assert len(menus) == len(simple_menus)
        for menu, simple_menu in zip(menus, simple_menus):
            assert (menu.id, menu.name) == (simple_menu.id, simple_menu.name)
            same_shape(menu.children, simple_menu.children)

    same_shape(tree, simple)
