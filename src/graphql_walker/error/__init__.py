"""Walk Errors

The :mod:`graphql_walker.error` package is responsible for the errors raised while
walking an AST, and for the signal a visitor can raise to prune a subtree.
"""

from .visit_error import VisitError, wrap_error

from .prune_error import PruneError

from .invalid_input_type_error import InvalidInputTypeError

__all__ = [
    "InvalidInputTypeError",
    "PruneError",
    "VisitError",
    "wrap_error",
]
