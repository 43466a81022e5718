__all__ = ["PruneError"]


class PruneError(Exception):
    """Prune signal

    Raising a PruneError from an enter method tells the walker not to visit the child
    nodes of the node being entered. The matching leave method is still called.

    The walker does not check for this class, but for a boolean ``prune`` attribute,
    so any other exception providing one works the same way. An exception with
    ``prune`` set to False lets the walk continue as if nothing had been raised.
    """

    prune: bool

    def __init__(self, message: str = "prune", prune: bool = True) -> None:
        super().__init__(message)
        self.prune = prune

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(prune={self.prune!r})"
