"""Tree of configuration components that rebuild and reload together."""

from __future__ import annotations


class Component:
    """A node that passes rebuild and reload requests along its tree.

    ``rebuild`` writes the component's state into the active configuration;
    ``new_config`` reads it back. Requests carry the component they started
    from, and that component does not act on its own request.
    """

    def __init__(self, parent: Component | None = None):
        self.parent: Component | None = None
        self.children: list[Component] = []
        if parent is not None:
            self.set_parent(parent)

    def set_parent(self, parent: Component | None) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)
        self.parent = parent
        if parent is not None:
            parent.children.append(self)

    def rebuild(self) -> None:
        """Write this component's state into the configuration."""

    def new_config(self) -> None:
        """Refresh this component from the configuration."""

    def build_children(self, origin: Component) -> None:
        for child in list(self.children):
            child.notify_from_parent(origin)

    def _build_parent(self, origin: Component) -> None:
        if self.parent is not None:
            self.parent.notify_from_child(origin)

    def read_children(self, origin: Component) -> None:
        for child in list(self.children):
            child.read_from_parent(origin)

    def _read_parent(self, origin: Component) -> None:
        if self.parent is not None:
            self.parent.read_from_child(origin)

    def notify_from_child(self, origin: Component) -> None:
        if origin is not self:
            self.build_children(origin)
            self._build_parent(origin)
            self.rebuild()

    def notify_from_parent(self, origin: Component) -> None:
        if origin is not self:
            self.build_children(origin)
            self.rebuild()

    def read_from_child(self, origin: Component) -> None:
        if origin is not self:
            self.read_children(origin)
            self._read_parent(origin)
            self.new_config()

    def read_from_parent(self, origin: Component) -> None:
        if origin is not self:
            self.read_children(origin)
            self.new_config()