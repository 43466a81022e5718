"""GraphQL Utilities

The :mod:`graphql_walker.utilities` package contains helpers for working with ASTs.
"""

from .ast_to_dict import ast_to_dict

__all__ = ["ast_to_dict"]
