# hooksys/plugins/state.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from hooksys.core.system import HooksSystem, make_hooks_system


class SlotStateHolder:
    """
    Instance type for use_state. Values are stored by slot index; the cursor
    advances once per use_state call, so the order of hook calls within a
    scope decides which slot each call owns.
    """

    def __init__(self) -> None:
        self.state_slots: Dict[int, Any] = {}
        self.current_slot = 0

    def advance_slot(self) -> None:
        self.current_slot += 1

    def reset_cursor(self) -> None:
        self.current_slot = 0

    def get_or_init_slot(self, index: int, initial_value: Any) -> Any:
        if index not in self.state_slots:
            self.set_slot(index, initial_value)
        return self.state_slots[index]

    def set_slot(self, index: int, value: Any) -> None:
        self.state_slots[index] = value


def use_state_factory(holder: SlotStateHolder) -> Callable[[Any], Tuple[Any, Callable[[Any], None]]]:
    def use_state(initial_value: Any) -> Tuple[Any, Callable[[Any], None]]:
        """Return the value of the next state slot and a setter for it."""
        slot = holder.current_slot
        value = holder.get_or_init_slot(slot, initial_value)

        def set_value(next_value: Any) -> None:
            holder.set_slot(slot, next_value)

        holder.advance_slot()
        return value, set_value

    return use_state


def reset_cursor(holder: SlotStateHolder) -> None:
    holder.reset_cursor()


STATE_HOOKS = {"use_state": use_state_factory}


def make_state_system(**options: Any) -> HooksSystem:
    """
    Build a hooks system exposing use_state over SlotStateHolder instances.
    The slot cursor is rewound each time a holder is activated.
    """
    if "prepare_instance" not in options and "prepareInstance" not in options:
        options["prepare_instance"] = reset_cursor
    return make_hooks_system(STATE_HOOKS, **options)
