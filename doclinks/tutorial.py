"""Data models for the tutorial graph."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Tutorial:
    """Represents a tutorial node; the root node has no name."""

    name: str = ""
    title: str = ""
    children: list["Tutorial"] = field(default_factory=list)

    def add_child(self, child: "Tutorial") -> None:
        """Attach a child tutorial."""
        self.children.append(child)

    def get_by_name(self, name: str) -> "Tutorial | None":
        """Find a tutorial anywhere below this node by its name."""
        for child in self.children:
            if child.name == name:
                return child
            found = child.get_by_name(name)
            if found is not None:
                return found
        return None


def tutorials_from_dict(raw: dict[str, Any] | None) -> Tutorial:
    """Build a tutorial tree from a mapping of name -> {title, children}."""
    root = Tutorial()
    for name, info in (raw or {}).items():
        root.add_child(_tutorial_from_entry(str(name), info or {}))
    return root


def _tutorial_from_entry(name: str, info: dict[str, Any]) -> Tutorial:
    node = Tutorial(name=name, title=str(info.get("title") or name))
    for child_name, child_info in (info.get("children") or {}).items():
        node.add_child(_tutorial_from_entry(str(child_name), child_info or {}))
    return node
