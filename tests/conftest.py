import pytest

from datasource import dict_to_tree


SALES = {
    "name": "Video Game Sales Data Top 100",
    "children": [
        {
            "name": "Wii",
            "children": [
                {"name": "Wii Sports", "category": "Wii", "value": "82.53"},
                {"name": "Mario Kart Wii", "category": "Wii", "value": "35.52"},
                {"name": "Wii Sports Resort", "category": "Wii", "value": "32.77"},
            ],
        },
        {
            "name": "PS2",
            "children": [
                {"name": "Grand Theft Auto: San Andreas", "category": "PS2", "value": "20.81"},
                {"name": "Grand Theft Auto V", "category": "PS2", "value": 20.32},
            ],
        },
        {
            "name": "DS",
            "children": [
                {"name": "New Super Mario Bros.", "category": "DS", "value": "29.80"},
                {"name": "Nintendogs", "category": "DS", "value": "24.67"},
            ],
        },
    ],
}


def make_tree(groups, root="root"):
    """groups: {group name: {leaf name: value}}"""
    return dict_to_tree({
        "name": root,
        "children": [
            {"name": g, "children": [{"name": n, "value": v} for n, v in leaves.items()]}
            for g, leaves in groups.items()
        ],
    })


@pytest.fixture
def sales_dict():
    return SALES


@pytest.fixture
def sales_tree():
    return dict_to_tree(SALES)


@pytest.fixture
def tree_factory():
    return make_tree
