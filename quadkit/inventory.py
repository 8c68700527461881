"""Equipment slots and an inventory, changed by fitting commands."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """An equipment slot that may hold one item."""

    id: int
    item: str | None = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an item from the inventory into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move the item from one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Unfit | Fit | Refit


class Inventory:
    """Bought items and labelled equipment slots."""

    def __init__(self, labels=DEFAULT_SLOT_LABELS) -> None:
        self.items: list[str] = []
        self.slots: list[tuple[str, Slot]] = [
            (label, Slot(slot_id)) for slot_id, label in enumerate(labels)
        ]

    def slot(self, slot_id: int) -> Slot | None:
        return next((slot for _, slot in self.slots if slot.id == slot_id), None)

    def buy(self, index: int) -> str:
        """Add the shop item with this index to the inventory."""
        item = f"Item {index}"
        self.items.append(item)
        return item

    def set_item(self, slot_id: int, item: str | None) -> None:
        """Put item into the slot; unknown slots are ignored."""
        slot = self.slot(slot_id)
        if slot is not None:
            slot.item = item

    def slot_drop_command(self, slot_id: int, target: int | None) -> FittingCommand:
        """Command for dragging a slot's item onto another slot, or off all slots."""
        slot = self.slot(slot_id)
        if slot is None or slot.item is None:
            raise ValueError(f"slot {slot_id} holds no item to drag")
        if target is None:
            return Unfit(target_slot=slot_id)
        return Refit(target_slot=target, origin_slot=slot_id)

    def inventory_drop_command(self, index: int, target: int | None) -> Fit | None:
        """Command for dragging an inventory item onto a slot; None when dropped elsewhere."""
        item = self.items[index]
        if target is None:
            return None
        return Fit(target_slot=target, item=item)

    def apply(self, command: FittingCommand | None) -> None:
        """Carry out a fitting command; None does nothing."""
        match command:
            case None:
                return
            case Unfit(target_slot=target):
                self.set_item(target, None)
            case Fit(target_slot=target, item=item):
                self.set_item(target, item)
            case Refit(target_slot=target, origin_slot=origin):
                origin_slot = self.slot(origin)
                origin_item = origin_slot.item if origin_slot is not None else None
                self.set_item(target, origin_item)
                self.set_item(origin, None)
            case _:
                raise TypeError(f"not a fitting command: {command!r}")