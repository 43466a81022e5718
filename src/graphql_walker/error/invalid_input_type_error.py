from typing import Any

from ..pyutils import inspect

__all__ = ["InvalidInputTypeError"]


class InvalidInputTypeError(TypeError):
    """Error when the root passed to the walker is neither a document nor a schema."""

    value: Any

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid input type for visit: {inspect(value)}.")
        self.value = value
