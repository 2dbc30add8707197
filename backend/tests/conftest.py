import pytest

from layout_planner.models.room import FurnitureItem, RoomSpec
from layout_planner.services.catalog import FurnitureCatalog


def make_item(name, category, width, depth, price, item_id=None):
    return FurnitureItem(
        id=item_id, name=name, category=category, width=width, depth=depth, price=price
    )


@pytest.fixture
def sofa():
    return make_item("Oslo Sofa", "sofa", 2.0, 0.9, 800, 1)


@pytest.fixture
def coffee():
    return make_item("Oak Coffee Table", "coffee", 1.0, 0.5, 200, 2)


@pytest.fixture
def tv_stand():
    return make_item("Media Console", "tvstand", 1.5, 0.4, 300, 3)


@pytest.fixture
def bookshelf():
    return make_item("Corner Bookshelf", "bookshelf", 0.8, 0.3, 250, 4)


@pytest.fixture
def side_table():
    return make_item("Round Side Table", "sidetable", 0.5, 0.5, 120, 5)


@pytest.fixture
def armchair():
    return make_item("Wingback Armchair", "armchair", 0.8, 0.8, 450, 6)


@pytest.fixture
def core_furniture(sofa, coffee, tv_stand):
    return [sofa, coffee, tv_stand]


@pytest.fixture
def full_furniture(core_furniture, bookshelf, side_table, armchair):
    rug = make_item("Wool Rug", "rug", 2.0, 1.4, 180, 7)
    return core_furniture + [bookshelf, side_table, armchair, rug]


@pytest.fixture
def living_room():
    return RoomSpec(length=6.0, width=4.0, budget=3000)


@pytest.fixture
def catalog(full_furniture):
    return FurnitureCatalog(full_furniture)
