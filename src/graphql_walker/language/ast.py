from copy import deepcopy
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..pyutils import camel_to_snake, FrozenList

__all__ = [
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
]


class OperationType(Enum):

    QUERY = "query"
    MUTATION = "mutation"


# Base AST Node


class Node:
    """AST nodes

    Nodes are created once with keyword arguments and are read-only afterwards, except
    that container nodes can have children appended while the tree is being built.
    Ordered child sequences are stored as a FrozenList, and appending replaces the
    sequence, so a sequence obtained earlier stays an unchanged snapshot.
    """

    # allow custom attributes and weak references (not used internally)
    __slots__ = "__dict__", "__weakref__", "_hash"

    kind: str = "ast"  # the kind of the node as a snake_case string
    keys: List[str] = []  # the names of the attributes of this node
    sequence_keys: Tuple[str, ...] = ()  # the keys holding ordered child sequences

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the node with the given keyword arguments."""
        sequence_keys = self.sequence_keys
        for key in self.keys:
            value = kwargs.get(key)
            if key in sequence_keys:
                value = FrozenList(value or ())
            setattr(self, key, value)

    def __repr__(self) -> str:
        """Get a simple representation of the node."""
        cls_name, name = self.__class__.__name__, getattr(self, "name", None)
        return f"{cls_name} {name!r}" if isinstance(name, str) else cls_name

    def __inspect__(self) -> str:
        return f"<{self!r}>"

    def __eq__(self, other: Any) -> bool:
        """Test whether two nodes are equal (recursively)."""
        return (
            isinstance(other, Node)
            and self.__class__ == other.__class__
            and all(getattr(self, key) == getattr(other, key) for key in self.keys)
        )

    def __hash__(self) -> int:
        """Get a cached hash value for the node."""
        hashed = getattr(self, "_hash", None)
        if hashed is None:
            hashed = hash((self.__class__, *(getattr(self, key) for key in self.keys)))
            self._hash = hashed
        return hashed

    def __setattr__(self, key: str, value: Any) -> None:
        # reset cached hash value if attributes are changed
        if hasattr(self, "_hash") and key in self.keys:
            del self._hash
        super().__setattr__(key, value)

    def __copy__(self) -> "Node":
        """Create a shallow copy of the node."""
        return self.__class__(**{key: getattr(self, key) for key in self.keys})

    def __deepcopy__(self, memo: Dict) -> "Node":
        """Create a deep copy of the node"""
        # noinspection PyArgumentList
        return self.__class__(
            **{key: deepcopy(getattr(self, key), memo) for key in self.keys}
        )

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()
        name = cls.__name__
        if name.endswith("Node"):
            name = name[:-4]
        cls.kind = camel_to_snake(name)
        keys: List[str] = []
        sequence_keys: List[str] = []
        for base in cls.__bases__:
            # noinspection PyUnresolvedReferences
            keys.extend(base.keys)  # type: ignore
            sequence_keys.extend(base.sequence_keys)  # type: ignore
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        keys.extend(slots)
        annotations = getattr(cls, "__annotations__", None) or {}
        for key in slots:
            if getattr(annotations.get(key), "__origin__", None) is FrozenList:
                sequence_keys.append(key)
        cls.keys = keys
        cls.sequence_keys = tuple(sequence_keys)

    def _append(self, key: str, nodes: Iterable["Node"]) -> None:
        """Append nodes to the ordered child sequence stored under the given key."""
        setattr(self, key, getattr(self, key).extended(nodes))


# Document


class DocumentNode(Node):
    __slots__ = ("definitions",)

    definitions: FrozenList["Definition"]

    def add_definitions(self, *definitions: "Definition") -> None:
        self._append("definitions", definitions)


class SchemaNode(Node):
    """Root of a type system description.

    The query root type is held separately from the other types. Nothing prevents
    the query root from also being added to the other types.
    """

    __slots__ = "query", "types"

    query: Optional["ObjectDefinitionNode"]
    types: FrozenList["ObjectDefinitionNode"]

    @property
    def components(self) -> FrozenList["ObjectDefinitionNode"]:
        """Get the other types followed by the query root type (if it is set)."""
        query = self.query
        return self.types if query is None else self.types.extended((query,))

    def set_query(self, query: "ObjectDefinitionNode") -> None:
        self.query = query

    def add_types(self, *types: "ObjectDefinitionNode") -> None:
        self._append("types", types)


class DefinitionNode(Node):
    __slots__ = ()


class ExecutableDefinitionNode(DefinitionNode):
    __slots__ = "name", "directives", "selections"

    name: Optional[str]
    directives: FrozenList["DirectiveNode"]
    selections: FrozenList["Selection"]

    def add_directives(self, *directives: "DirectiveNode") -> None:
        self._append("directives", directives)

    def add_selections(self, *selections: "Selection") -> None:
        self._append("selections", selections)


class OperationDefinitionNode(ExecutableDefinitionNode):
    __slots__ = "operation", "variable_definitions"

    operation: OperationType
    variable_definitions: FrozenList["VariableDefinitionNode"]

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("operation", OperationType.QUERY)
        super().__init__(**kwargs)

    @property
    def has_name(self) -> bool:
        return self.name is not None

    def add_variable_definitions(
        self, *variable_definitions: "VariableDefinitionNode"
    ) -> None:
        self._append("variable_definitions", variable_definitions)


class FragmentDefinitionNode(ExecutableDefinitionNode):
    __slots__ = ("type_condition",)

    name: str
    type_condition: "NamedTypeNode"


class VariableDefinitionNode(Node):
    __slots__ = "name", "type", "default_value"

    name: str
    type: "Type"
    default_value: Optional["Value"]

    @property
    def has_default_value(self) -> bool:
        return self.default_value is not None


# Selections


class SelectionNode(Node):
    __slots__ = ("directives",)

    directives: FrozenList["DirectiveNode"]

    def add_directives(self, *directives: "DirectiveNode") -> None:
        self._append("directives", directives)


class SelectionFieldNode(SelectionNode):
    __slots__ = "alias", "name", "arguments", "selections"

    alias: Optional[str]
    name: str
    arguments: FrozenList["ArgumentNode"]
    selections: FrozenList["Selection"]

    @property
    def has_alias(self) -> bool:
        return self.alias is not None

    def add_arguments(self, *arguments: "ArgumentNode") -> None:
        self._append("arguments", arguments)

    def add_selections(self, *selections: "Selection") -> None:
        self._append("selections", selections)


class FragmentSpreadNode(SelectionNode):
    __slots__ = ("name",)

    name: str


class InlineFragmentNode(SelectionNode):
    __slots__ = "type_condition", "selections"

    type_condition: Optional["NamedTypeNode"]
    selections: FrozenList["Selection"]

    def add_selections(self, *selections: "Selection") -> None:
        self._append("selections", selections)


class ArgumentNode(Node):
    __slots__ = "name", "value"

    name: str
    value: "Value"


# Directives


class DirectiveNode(Node):
    __slots__ = "name", "arguments"

    name: str
    arguments: FrozenList[ArgumentNode]

    def add_arguments(self, *arguments: ArgumentNode) -> None:
        self._append("arguments", arguments)


# Values


class ValueNode(Node):
    __slots__ = ()


class VariableNode(ValueNode):
    __slots__ = ("name",)

    name: str

    @property
    def value(self) -> str:
        return self.name


class IntValueNode(ValueNode):
    __slots__ = ("value",)

    value: int


class FloatValueNode(ValueNode):
    __slots__ = ("value",)

    value: float


class StringValueNode(ValueNode):
    __slots__ = ("value",)

    value: str


class BoolValueNode(ValueNode):
    __slots__ = ("value",)

    value: bool


class NullValueNode(ValueNode):
    __slots__ = ()

    @property
    def value(self) -> None:
        return None


class EnumValueNode(ValueNode):
    __slots__ = ("name",)

    name: str

    @property
    def value(self) -> str:
        return self.name


class ObjectValueNode(ValueNode):
    __slots__ = ("fields",)

    fields: FrozenList["ObjectFieldNode"]

    @property
    def value(self) -> Dict[str, Any]:
        """Get the plain Python value of the object literal."""
        return {field.name: field.value.value for field in self.fields}

    def add_fields(self, *fields: "ObjectFieldNode") -> None:
        self._append("fields", fields)


class ObjectFieldNode(Node):
    """A field of an object literal (not of an object type)"""

    __slots__ = "name", "value"

    name: str
    value: "Value"


# Type Reference


class TypeNode(Node):
    __slots__ = ("nullable",)

    nullable: bool

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("nullable", True)
        super().__init__(**kwargs)

    def mark_non_null(self) -> None:
        """Mark the type as non-null.

        Types are nullable unless marked otherwise, and can be marked only once.
        """
        if not self.nullable:
            raise ValueError(f"Type {self!r} is already marked as non-null.")
        self.nullable = False


class NamedTypeNode(TypeNode):
    __slots__ = ("name",)

    name: str


class ListTypeNode(TypeNode):
    __slots__ = ("type",)

    type: "Type"


# Type System Definition


class TypeSystemDefinitionNode(DefinitionNode):
    __slots__ = ("name",)

    name: str


class ObjectDefinitionNode(TypeSystemDefinitionNode):
    __slots__ = "implements", "fields"

    implements: Optional[NamedTypeNode]
    fields: FrozenList["ObjectFieldDefinitionNode"]

    @property
    def has_implements(self) -> bool:
        return self.implements is not None

    def set_implements(self, type_: NamedTypeNode) -> None:
        self.implements = type_

    def add_fields(self, *fields: "ObjectFieldDefinitionNode") -> None:
        self._append("fields", fields)


class ObjectFieldDefinitionNode(Node):
    __slots__ = "name", "type", "arguments"

    name: str
    type: "Type"
    arguments: FrozenList["ObjectFieldArgumentDefinitionNode"]

    def add_arguments(self, *arguments: "ObjectFieldArgumentDefinitionNode") -> None:
        self._append("arguments", arguments)


class ObjectFieldArgumentDefinitionNode(Node):
    __slots__ = "name", "type", "default_value"

    name: str
    type: "Type"
    default_value: Optional["Value"]

    @property
    def has_default_value(self) -> bool:
        return self.default_value is not None


class InterfaceDefinitionNode(TypeSystemDefinitionNode):
    __slots__ = ("fields",)

    fields: FrozenList["InterfaceFieldDefinitionNode"]

    # Interface type resolution is not supported yet. The resolver is accepted
    # and ignored, and never returned.

    @property
    def type_resolver(self) -> None:
        return None

    def set_type_resolver(self, _resolver: Any) -> None:
        pass

    def add_fields(self, *fields: "InterfaceFieldDefinitionNode") -> None:
        self._append("fields", fields)


class InterfaceFieldDefinitionNode(Node):
    __slots__ = "name", "type"

    name: str
    type: "Type"


class EnumDefinitionNode(TypeSystemDefinitionNode):
    __slots__ = ("elements",)

    elements: FrozenList["EnumElementDefinitionNode"]

    def add_elements(self, *elements: "EnumElementDefinitionNode") -> None:
        self._append("elements", elements)


class EnumElementDefinitionNode(Node):
    __slots__ = "name", "value"

    name: str
    value: "Value"


class UnionDefinitionNode(TypeSystemDefinitionNode):
    __slots__ = ("types",)

    types: FrozenList["Type"]

    def add_types(self, *types: "Type") -> None:
        self._append("types", types)


class InputDefinitionNode(TypeSystemDefinitionNode):
    __slots__ = ("fields",)

    fields: FrozenList["InputFieldDefinitionNode"]

    def add_fields(self, *fields: "InputFieldDefinitionNode") -> None:
        self._append("fields", fields)


class InputFieldDefinitionNode(Node):
    __slots__ = "name", "type"

    name: str
    type: "Type"


Definition = Union[
    OperationDefinitionNode,
    FragmentDefinitionNode,
    ObjectDefinitionNode,
    InterfaceDefinitionNode,
    EnumDefinitionNode,
    UnionDefinitionNode,
    InputDefinitionNode,
]

Selection = Union[SelectionFieldNode, FragmentSpreadNode, InlineFragmentNode]

Value = Union[
    IntValueNode,
    FloatValueNode,
    StringValueNode,
    BoolValueNode,
    NullValueNode,
    EnumValueNode,
    VariableNode,
    ObjectValueNode,
]

Type = Union[NamedTypeNode, ListTypeNode]
