"""Naming and visibility shared by all model elements."""

from __future__ import annotations

from faulttree.errors import InvalidArgument


class Element:
    """Named model element.

    Attributes:
        name (str): Original name with capitalization preserved.
        label (str): Optional human-readable description.
    """

    def __init__(self, name: str) -> None:
        if not name:
            raise InvalidArgument("The element name cannot be empty.")
        self._name = name
        self.label = ""

    @property
    def name(self) -> str:
        """Original name with capitalization preserved."""
        return self._name


class Role:
    """Placement of an element inside containers and its visibility.

    Attributes:
        base_path (str): Dot-separated series of containers holding the element.
        is_public (bool): Whether the element is visible outside its container.
    """

    def __init__(self, base_path: str = "", is_public: bool = True) -> None:
        if not is_public and not base_path:
            raise InvalidArgument("Private elements require a base path.")
        self._base_path = base_path
        self._is_public = is_public

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def is_public(self) -> bool:
        return self._is_public


def make_id(name: str, base_path: str = "", is_public: bool = True) -> str:
    """Return the case-normalized identifier of an element.

    Public elements are identified by their name alone; private elements are
    qualified with the path of their container.
    """
    if is_public:
        return name.lower()
    return f"{base_path}.{name}".lower()
