import pytest

from quadkit.inventory import (
    DEFAULT_SLOT_LABELS,
    Fit,
    Inventory,
    Refit,
    Unfit,
)


def test_default_slots_start_empty():
    inv = Inventory()
    assert [label for label, _ in inv.slots] == list(DEFAULT_SLOT_LABELS)
    assert all(slot.item is None for _, slot in inv.slots)
    assert len({slot.id for _, slot in inv.slots}) == len(DEFAULT_SLOT_LABELS)


def test_buy_appends_named_item():
    inv = Inventory()
    inv.buy(3)
    inv.buy(5)
    assert inv.items == ["Item 3", "Item 5"]


def test_fit_places_item():
    inv = Inventory()
    inv.apply(Fit(target_slot=2, item="Item 1"))
    assert inv.slot(2).item == "Item 1"


def test_unfit_clears_slot():
    inv = Inventory()
    inv.set_item(1, "Item 4")
    inv.apply(Unfit(target_slot=1))
    assert inv.slot(1).item is None


def test_refit_moves_item():
    inv = Inventory()
    inv.set_item(0, "Item 9")
    inv.apply(Refit(target_slot=4, origin_slot=0))
    assert inv.slot(4).item == "Item 9"
    assert inv.slot(0).item is None


def test_refit_onto_same_slot_clears_it():
    inv = Inventory()
    inv.set_item(0, "Item 9")
    inv.apply(Refit(target_slot=0, origin_slot=0))
    assert inv.slot(0).item is None


def test_set_item_on_unknown_slot_is_ignored():
    inv = Inventory()
    inv.set_item(99, "Item 1")
    assert inv.slot(99) is None
    assert all(slot.item is None for _, slot in inv.slots)


def test_apply_none_changes_nothing():
    inv = Inventory()
    inv.set_item(0, "Item 2")
    inv.apply(None)
    assert inv.slot(0).item == "Item 2"


def test_apply_rejects_other_objects():
    with pytest.raises(TypeError):
        Inventory().apply("fit")


def test_slot_drop_commands():
    inv = Inventory()
    inv.set_item(0, "Item 1")
    assert inv.slot_drop_command(0, None) == Unfit(target_slot=0)
    assert inv.slot_drop_command(0, 3) == Refit(target_slot=3, origin_slot=0)


def test_dragging_empty_slot_is_an_error():
    with pytest.raises(ValueError):
        Inventory().slot_drop_command(0, 2)


def test_inventory_drop_command():
    inv = Inventory()
    inv.buy(7)
    assert inv.inventory_drop_command(0, 5) == Fit(target_slot=5, item="Item 7")
    assert inv.inventory_drop_command(0, None) is None