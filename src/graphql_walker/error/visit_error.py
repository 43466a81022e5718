from sys import exc_info
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING

from ..pyutils import inspect

if TYPE_CHECKING:
    from ..language.ast import Node  # noqa: F401

__all__ = ["VisitError", "wrap_error"]


class VisitError(Exception):
    """Visit Error

    A VisitError describes a fatal error that aborted the walk over an AST. Besides
    the message of the original error, it records the stages of the walk the error
    passed through while it was propagated, so that the place in the tree where the
    walk failed can be recovered without depending on the type of the original error.
    """

    message: str
    """A message describing the original error"""

    stages: List[str]
    """Breadcrumbs of the walk

    One short description per propagation hop, starting with the outermost stage
    (closest to the root) and ending with the stage in which the error was raised.
    """

    node: Optional["Node"]
    """The AST node whose visitor method raised the original error, if any"""

    original_error: Optional[Exception]
    """The original error raised by a visitor method"""

    __hash__ = Exception.__hash__

    def __init__(
        self,
        message: str,
        stages: Optional[Sequence[str]] = None,
        node: Optional["Node"] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.stages = list(stages) if stages else []
        self.node = node
        self.original_error = original_error
        if original_error:
            self.__cause__ = original_error
            self.__traceback__ = original_error.__traceback__
        if not self.__traceback__:
            self.__traceback__ = exc_info()[2]

    def __str__(self) -> str:
        return ": ".join([*self.stages, self.message])

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.stages:
            args.append(f"stages={self.stages!r}")
        if self.node is not None:
            args.append(f"node={inspect(self.node)}")
        return f"{self.__class__.__name__}({', '.join(args)})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, VisitError)
            and self.__class__ == other.__class__
            and self.message == other.message
            and self.stages == other.stages
        ) or (
            isinstance(other, dict)
            and "message" in other
            and other == self.formatted
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def add_stage(self, stage: str) -> None:
        """Record an enclosing stage of the walk."""
        self.stages.insert(0, stage)

    @property
    def formatted(self) -> Dict[str, Any]:
        """Get the error formatted as a dictionary."""
        return {"message": self.message, "stages": self.stages}


def wrap_error(
    error: Exception, stage: str, node: Optional["Node"] = None
) -> VisitError:
    """Wrap an error raised during a walk with the stage in which it was caught.

    A VisitError gets the stage added as its new outermost breadcrumb and is returned
    as it is. Any other exception becomes the original error of a new VisitError.
    """
    if isinstance(error, VisitError):
        error.add_stage(stage)
        return error
    message = str(error) or inspect(error)
    return VisitError(message, [stage], node, error)
