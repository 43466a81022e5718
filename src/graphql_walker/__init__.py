"""GraphQL-Walker

GraphQL-Walker represents GraphQL documents (queries, mutations and fragments) and
schemas (object types, interfaces, enums, unions and input types) as abstract syntax
trees, and walks these trees calling the enter and leave methods of visitors.

Building the trees (parsing), validating and executing them are left to the
consumers of this package.
"""

# The GraphQL-Walker version info.
from .version import version, version_info

# Create, walk and inspect GraphQL ASTs.
from .language import (
    # Visit
    visit,
    get_prune_signal,
    Visitor,
    ParallelVisitor,
    VisitorAction,
    SKIP,
    IDLE,
    WALK_KEYS,
    # Predicates
    is_definition_node,
    is_executable_definition_node,
    is_selection_node,
    is_value_node,
    is_type_node,
    is_type_system_definition_node,
    # AST nodes
    Node,
    DocumentNode,
    SchemaNode,
    DefinitionNode,
    ExecutableDefinitionNode,
    OperationType,
    OperationDefinitionNode,
    FragmentDefinitionNode,
    VariableDefinitionNode,
    SelectionNode,
    SelectionFieldNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    ArgumentNode,
    DirectiveNode,
    ValueNode,
    VariableNode,
    IntValueNode,
    FloatValueNode,
    StringValueNode,
    BoolValueNode,
    NullValueNode,
    EnumValueNode,
    ObjectValueNode,
    ObjectFieldNode,
    TypeNode,
    NamedTypeNode,
    ListTypeNode,
    TypeSystemDefinitionNode,
    ObjectDefinitionNode,
    ObjectFieldDefinitionNode,
    ObjectFieldArgumentDefinitionNode,
    InterfaceDefinitionNode,
    InterfaceFieldDefinitionNode,
    EnumDefinitionNode,
    EnumElementDefinitionNode,
    UnionDefinitionNode,
    InputDefinitionNode,
    InputFieldDefinitionNode,
)

# Errors raised while walking.
from .error import InvalidInputTypeError, PruneError, VisitError, wrap_error

# Utilities for working with ASTs.
from .utilities import ast_to_dict

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "visit",
    "get_prune_signal",
    "Visitor",
    "ParallelVisitor",
    "VisitorAction",
    "SKIP",
    "IDLE",
    "WALK_KEYS",
    "is_definition_node",
    "is_executable_definition_node",
    "is_selection_node",
    "is_value_node",
    "is_type_node",
    "is_type_system_definition_node",
    "Node",
    "DocumentNode",
    "SchemaNode",
    "DefinitionNode",
    "ExecutableDefinitionNode",
    "OperationType",
    "OperationDefinitionNode",
    "FragmentDefinitionNode",
    "VariableDefinitionNode",
    "SelectionNode",
    "SelectionFieldNode",
    "FragmentSpreadNode",
    "InlineFragmentNode",
    "ArgumentNode",
    "DirectiveNode",
    "ValueNode",
    "VariableNode",
    "IntValueNode",
    "FloatValueNode",
    "StringValueNode",
    "BoolValueNode",
    "NullValueNode",
    "EnumValueNode",
    "ObjectValueNode",
    "ObjectFieldNode",
    "TypeNode",
    "NamedTypeNode",
    "ListTypeNode",
    "TypeSystemDefinitionNode",
    "ObjectDefinitionNode",
    "ObjectFieldDefinitionNode",
    "ObjectFieldArgumentDefinitionNode",
    "InterfaceDefinitionNode",
    "InterfaceFieldDefinitionNode",
    "EnumDefinitionNode",
    "EnumElementDefinitionNode",
    "UnionDefinitionNode",
    "InputDefinitionNode",
    "InputFieldDefinitionNode",
    "InvalidInputTypeError",
    "PruneError",
    "VisitError",
    "wrap_error",
    "ast_to_dict",
]
