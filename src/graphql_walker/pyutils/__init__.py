"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .convert_case import camel_to_snake, snake_to_camel
from .frozen_list import FrozenList
from .inspect import inspect

__all__ = [
    "camel_to_snake",
    "snake_to_camel",
    "FrozenList",
    "inspect",
]
