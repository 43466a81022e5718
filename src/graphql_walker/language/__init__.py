"""GraphQL Language

The :mod:`graphql_walker.language` package is responsible for representing GraphQL
documents and schemas as abstract syntax trees, and for walking these trees.
"""

from .ast import (
    Node,
    # Each kind of AST node
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
    # Closed sets of node variants
    Definition,
    Selection,
    Value,
    Type,
)

from .visitor import (
    visit,
    get_prune_signal,
    Visitor,
    ParallelVisitor,
    VisitorAction,
    SKIP,
    IDLE,
    WALK_KEYS,
    VARIANT_KINDS,
)

from .predicates import (
    is_definition_node,
    is_executable_definition_node,
    is_selection_node,
    is_value_node,
    is_type_node,
    is_type_system_definition_node,
)

__all__ = [
    "visit",
    "get_prune_signal",
    "Visitor",
    "ParallelVisitor",
    "VisitorAction",
    "SKIP",
    "IDLE",
    "WALK_KEYS",
    "VARIANT_KINDS",
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
    "Definition",
    "Selection",
    "Value",
    "Type",
    "is_definition_node",
    "is_executable_definition_node",
    "is_selection_node",
    "is_value_node",
    "is_type_node",
    "is_type_system_definition_node",
]
