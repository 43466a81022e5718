from .ast import (
    Node,
    DefinitionNode,
    ExecutableDefinitionNode,
    SelectionNode,
    TypeNode,
    TypeSystemDefinitionNode,
    ValueNode,
)

__all__ = [
    "is_definition_node",
    "is_executable_definition_node",
    "is_selection_node",
    "is_value_node",
    "is_type_node",
    "is_type_system_definition_node",
]


def is_definition_node(node: Node) -> bool:
    """Check whether the node can be an element of a definition list."""
    return isinstance(node, DefinitionNode)


def is_executable_definition_node(node: Node) -> bool:
    """Check whether the node is an operation or fragment definition."""
    return isinstance(node, ExecutableDefinitionNode)


def is_selection_node(node: Node) -> bool:
    """Check whether the node can be an element of a selection list."""
    return isinstance(node, SelectionNode)


def is_value_node(node: Node) -> bool:
    """Check whether the node is a literal or variable value."""
    return isinstance(node, ValueNode)


def is_type_node(node: Node) -> bool:
    """Check whether the node is a named or list type reference."""
    return isinstance(node, TypeNode)


def is_type_system_definition_node(node: Node) -> bool:
    """Check whether the node defines an object, interface, enum, union or input."""
    return isinstance(node, TypeSystemDefinitionNode)
