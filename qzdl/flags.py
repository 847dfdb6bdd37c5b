"""Deathmatch flag checkboxes and their combined bit value."""

from __future__ import annotations

from typing import Callable


class DMFlagCheckbox:
    """A checkbox standing for one flag bit, active when checked or unchecked."""

    def __init__(self, dmvalue: int, high_on: bool, text: str = ""):
        self.flag = dmvalue
        self.high_on = bool(high_on)
        self.text = text
        self._checked = False
        self._listeners: list[Callable[[bool], None]] = []
        self.set_value(0)

    @property
    def checked(self) -> bool:
        return self._checked

    def set_checked(self, checked: bool) -> None:
        """Change the check state, notifying listeners if it changed."""
        checked = bool(checked)
        if checked == self._checked:
            return
        self._checked = checked
        for listener in list(self._listeners):
            listener(checked)

    def on_change(self, callback: Callable[[bool], None]) -> None:
        self._listeners.append(callback)

    def set_value(self, value: int) -> None:
        """Set the check state from a combined flag value."""
        present = bool(value & self.flag)
        self.set_checked(present if self.high_on else not present)

    def get_value(self) -> int:
        """Return this box's contribution to the combined flag value."""
        if self._checked == self.high_on:
            return self.flag
        return 0


class DMFlagManager:
    """Combines a set of flag checkboxes into one integer value."""

    def __init__(self):
        self.checkboxes: list[DMFlagCheckbox] = []
        self._listeners: list[Callable[[int], None]] = []

    def add_checkbox(self, box: DMFlagCheckbox) -> None:
        box.on_change(self._state_changed)
        self.checkboxes.append(box)

    def connect(self, callback: Callable[[int], None]) -> None:
        """Register a callback that receives the combined value on each change."""
        self._listeners.append(callback)

    def _state_changed(self, _checked: bool) -> None:
        self.force_recalc()

    def force_recalc(self) -> None:
        value = self.get_value()
        for listener in list(self._listeners):
            listener(value)

    def get_value(self) -> int:
        value = 0
        for box in self.checkboxes:
            value |= box.get_value()
        return value

    def set_value(self, value: int) -> None:
        for box in self.checkboxes:
            box.set_value(value)