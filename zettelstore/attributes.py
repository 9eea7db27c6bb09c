"""Attributes attached to some syntax tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

_DEFAULT_KEY = "-"
_CLASS_KEY = "class"


@dataclass
class Attributes:
    """Key/value attributes of a node."""

    attrs: dict[str, str] = field(default_factory=dict)

    def has_default(self) -> bool:
        """Return True if the default attribute '-' is set."""
        return _DEFAULT_KEY in self.attrs

    def remove_default(self) -> None:
        """Remove the default attribute."""
        self.remove(_DEFAULT_KEY)

    def get(self, key: str) -> str | None:
        """Return the value of an attribute, or None if it is not set."""
        return self.attrs.get(key)

    def clone(self) -> Attributes:
        """Return an independent copy."""
        return Attributes(dict(self.attrs))

    def set(self, key: str, value: str) -> Attributes:
        """Set an attribute and return self."""
        self.attrs[key] = value
        return self

    def remove(self, key: str) -> None:
        """Remove an attribute if present."""
        self.attrs.pop(key, None)

    def add_class(self, class_name: str) -> Attributes:
        """Add a value to the class attribute unless already present."""
        classes = self.get_classes()
        if class_name not in classes:
            classes.append(class_name)
            self.attrs[_CLASS_KEY] = " ".join(classes)
        return self

    def get_classes(self) -> list[str]:
        """Return the values of the class attribute."""
        return self.attrs.get(_CLASS_KEY, "").split()