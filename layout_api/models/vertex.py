"""
    Vertex model - identity-keyed node of the graph.
"""
from typing import Generic, Optional, TypeVar

TData = TypeVar('TData')


class Vertex:
    """
    Opaque graph node.

    Two vertices are equal only if they are the same object; the optional
    label is used for display only.
    """

    __slots__ = ('_label',)

    def __init__(self, label: Optional[str] = None):
        self._label = label

    @property
    def label(self) -> Optional[str]:
        return self._label

    def __eq__(self, other) -> bool:
        """Vertices compare by identity; other types decide for themselves."""
        if not isinstance(other, Vertex):
            return NotImplemented
        return self is other

    def __hash__(self) -> int:
        """Hash vertex by identity"""
        return id(self)

    def __repr__(self) -> str:
        if self._label is not None:
            return f"Vertex({self._label})"
        return f"Vertex(0x{id(self):x})"


class DataVertex(Vertex, Generic[TData]):
    """
    Vertex carrying an arbitrary payload.

    Equality and hash are inherited from ``Vertex``: the payload never makes
    two distinct vertices equal.
    """

    __slots__ = ('_data',)

    def __init__(self, data: TData, label: Optional[str] = None):
        super().__init__(label if label is not None else str(data))
        self._data = data

    @property
    def data(self) -> TData:
        return self._data

    def __repr__(self) -> str:
        return f"DataVertex({self._data!r})"
