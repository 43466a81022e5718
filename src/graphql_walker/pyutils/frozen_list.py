from typing import Iterable, Tuple, TypeVar

__all__ = ["FrozenList"]


T = TypeVar("T", covariant=True)


class FrozenList(Tuple[T, ...]):
    """Ordered sequence of child nodes that can only be read, but not changed.

    Appending to a node's children creates a new FrozenList, so a sequence that has
    been handed out before always stays a complete snapshot.
    """

    def __repr__(self) -> str:
        return f"FrozenList({list(self)!r})"

    def extended(self, items: Iterable[T]) -> "FrozenList[T]":
        """Get a new FrozenList with the given items appended in order."""
        return self.__class__((*self, *items))
