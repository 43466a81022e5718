"""Fixtures for graphql_walker tests

There is no parser in this package, so the kitchen sink ASTs are built by hand. The
GraphQL source each of them corresponds to is given in the docstrings.
"""

import pytest

from graphql_walker import (
    ArgumentNode,
    BoolValueNode,
    DirectiveNode,
    DocumentNode,
    EnumDefinitionNode,
    EnumElementDefinitionNode,
    EnumValueNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    InputDefinitionNode,
    InputFieldDefinitionNode,
    IntValueNode,
    InterfaceDefinitionNode,
    InterfaceFieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    ObjectDefinitionNode,
    ObjectFieldArgumentDefinitionNode,
    ObjectFieldDefinitionNode,
    ObjectFieldNode,
    ObjectValueNode,
    OperationDefinitionNode,
    OperationType,
    SchemaNode,
    SelectionFieldNode,
    StringValueNode,
    UnionDefinitionNode,
    VariableDefinitionNode,
    VariableNode,
)

__all__ = [
    "big_document",
    "build_big_document",
    "build_kitchen_sink_document",
    "build_kitchen_sink_schema",
    "build_type_system_document",
    "kitchen_sink_document",
    "kitchen_sink_schema",
    "type_system_document",
]


def non_null(type_):
    type_.mark_non_null()
    return type_


def build_kitchen_sink_document() -> DocumentNode:
    """Build the AST of the following document:

    query queryName($foo: ComplexType, $site: Site = MOBILE) @onQuery {
      whoever123is: node(id: 123) {
        id
        ... on User @onInlineFragment {
          field2 {
            alias: field1(first: 10) @include(if: $foo) {
              id
              ...frag @onFragmentSpread
            }
          }
        }
        ... @skip(unless: $foo) {
          id
        }
      }
    }

    mutation likeStory {
      like(story: 123) @onField {
        story {
          id
        }
      }
    }

    fragment frag on Friend @onFragmentDefinition {
      foo(size: $size, obj: {key: "value", flag: true})
    }
    """
    query = OperationDefinitionNode(operation=OperationType.QUERY, name="queryName")
    query.add_variable_definitions(
        VariableDefinitionNode(name="foo", type=NamedTypeNode(name="ComplexType")),
        VariableDefinitionNode(
            name="site",
            type=NamedTypeNode(name="Site"),
            default_value=EnumValueNode(name="MOBILE"),
        ),
    )
    query.add_directives(DirectiveNode(name="onQuery"))

    inner_alias = SelectionFieldNode(
        alias="alias",
        name="field1",
        arguments=[ArgumentNode(name="first", value=IntValueNode(value=10))],
        directives=[
            DirectiveNode(
                name="include",
                arguments=[ArgumentNode(name="if", value=VariableNode(name="foo"))],
            )
        ],
    )
    inner_alias.add_selections(
        SelectionFieldNode(name="id"),
        FragmentSpreadNode(
            name="frag", directives=[DirectiveNode(name="onFragmentSpread")]
        ),
    )
    field2 = SelectionFieldNode(name="field2", selections=[inner_alias])
    on_user = InlineFragmentNode(
        type_condition=NamedTypeNode(name="User"),
        directives=[DirectiveNode(name="onInlineFragment")],
        selections=[field2],
    )
    untyped = InlineFragmentNode(
        directives=[
            DirectiveNode(
                name="skip",
                arguments=[
                    ArgumentNode(name="unless", value=VariableNode(name="foo"))
                ],
            )
        ],
        selections=[SelectionFieldNode(name="id")],
    )
    node = SelectionFieldNode(
        alias="whoever123is",
        name="node",
        arguments=[ArgumentNode(name="id", value=IntValueNode(value=123))],
    )
    node.add_selections(SelectionFieldNode(name="id"), on_user, untyped)
    query.add_selections(node)

    story = SelectionFieldNode(name="story", selections=[SelectionFieldNode(name="id")])
    like = SelectionFieldNode(
        name="like",
        arguments=[ArgumentNode(name="story", value=IntValueNode(value=123))],
        directives=[DirectiveNode(name="onField")],
        selections=[story],
    )
    mutation = OperationDefinitionNode(
        operation=OperationType.MUTATION, name="likeStory", selections=[like]
    )

    obj = ObjectValueNode()
    obj.add_fields(
        ObjectFieldNode(name="key", value=StringValueNode(value="value")),
        ObjectFieldNode(name="flag", value=BoolValueNode(value=True)),
    )
    fragment = FragmentDefinitionNode(
        name="frag",
        type_condition=NamedTypeNode(name="Friend"),
        directives=[DirectiveNode(name="onFragmentDefinition")],
    )
    fragment.add_selections(
        SelectionFieldNode(
            name="foo",
            arguments=[
                ArgumentNode(name="size", value=VariableNode(name="size")),
                ArgumentNode(name="obj", value=obj),
            ],
        )
    )

    document = DocumentNode()
    document.add_definitions(query, mutation)
    document.add_definitions(fragment)
    return document


def build_type_system_document() -> DocumentNode:
    """Build the AST of the following type system document:

    type Foo implements Bar {
      one: Type
      two(argument: InputType!): Type
      three(argument: InputType, other: String = "string"): Int
    }

    interface Bar {
      one: Type
      four: [String]
    }

    enum Site {
      DESKTOP
      MOBILE
    }

    union Feed = Story | Article

    input InputType {
      key: String!
      answer: Int
    }
    """
    foo = ObjectDefinitionNode(name="Foo")
    foo.set_implements(NamedTypeNode(name="Bar"))
    two = ObjectFieldDefinitionNode(name="two", type=NamedTypeNode(name="Type"))
    two.add_arguments(
        ObjectFieldArgumentDefinitionNode(
            name="argument", type=non_null(NamedTypeNode(name="InputType"))
        )
    )
    three = ObjectFieldDefinitionNode(name="three", type=NamedTypeNode(name="Int"))
    three.add_arguments(
        ObjectFieldArgumentDefinitionNode(
            name="argument", type=NamedTypeNode(name="InputType")
        ),
        ObjectFieldArgumentDefinitionNode(
            name="other",
            type=NamedTypeNode(name="String"),
            default_value=StringValueNode(value="string"),
        ),
    )
    foo.add_fields(
        ObjectFieldDefinitionNode(name="one", type=NamedTypeNode(name="Type")),
        two,
        three,
    )

    bar = InterfaceDefinitionNode(name="Bar")
    bar.add_fields(
        InterfaceFieldDefinitionNode(name="one", type=NamedTypeNode(name="Type")),
        InterfaceFieldDefinitionNode(
            name="four", type=ListTypeNode(type=NamedTypeNode(name="String"))
        ),
    )

    site = EnumDefinitionNode(name="Site")
    site.add_elements(
        EnumElementDefinitionNode(name="DESKTOP", value=EnumValueNode(name="DESKTOP")),
        EnumElementDefinitionNode(name="MOBILE", value=EnumValueNode(name="MOBILE")),
    )

    feed = UnionDefinitionNode(name="Feed")
    feed.add_types(NamedTypeNode(name="Story"), NamedTypeNode(name="Article"))

    input_type = InputDefinitionNode(name="InputType")
    input_type.add_fields(
        InputFieldDefinitionNode(
            name="key", type=non_null(NamedTypeNode(name="String"))
        ),
        InputFieldDefinitionNode(name="answer", type=NamedTypeNode(name="Int")),
    )

    return DocumentNode(definitions=[foo, bar, site, feed, input_type])


def build_kitchen_sink_schema() -> SchemaNode:
    """Build the AST of the following schema:

    schema {
      query: Query
    }

    type Query {
      user(id: ID!): User
      story: Story
    }

    type User {
      id: ID!
      name: String
    }

    type Story {
      id: ID!
      author: User
    }

    type Empty
    """
    query = ObjectDefinitionNode(name="Query")
    user_field = ObjectFieldDefinitionNode(name="user", type=NamedTypeNode(name="User"))
    user_field.add_arguments(
        ObjectFieldArgumentDefinitionNode(
            name="id", type=non_null(NamedTypeNode(name="ID"))
        )
    )
    query.add_fields(
        user_field,
        ObjectFieldDefinitionNode(name="story", type=NamedTypeNode(name="Story")),
    )

    user = ObjectDefinitionNode(name="User")
    user.add_fields(
        ObjectFieldDefinitionNode(name="id", type=non_null(NamedTypeNode(name="ID"))),
        ObjectFieldDefinitionNode(name="name", type=NamedTypeNode(name="String")),
    )
    story = ObjectDefinitionNode(name="Story")
    story.add_fields(
        ObjectFieldDefinitionNode(name="id", type=non_null(NamedTypeNode(name="ID"))),
        ObjectFieldDefinitionNode(name="author", type=NamedTypeNode(name="User")),
    )

    schema = SchemaNode()
    schema.set_query(query)
    schema.add_types(user, story)
    schema.add_types(ObjectDefinitionNode(name="Empty"))
    return schema


def build_big_document(num_operations: int = 50, width: int = 10) -> DocumentNode:
    """Build a document with many operations with wide and nested selections."""
    document = DocumentNode()
    for i in range(num_operations):
        operation = OperationDefinitionNode(name=f"operation{i}")
        for j in range(width):
            field = SelectionFieldNode(
                name=f"field{j}", directives=[DirectiveNode(name="cached")]
            )
            field.add_selections(
                *(SelectionFieldNode(name=f"leaf{k}") for k in range(width))
            )
            operation.add_selections(field)
        document.add_definitions(operation)
    return document


@pytest.fixture
def kitchen_sink_document():
    return build_kitchen_sink_document()


@pytest.fixture
def type_system_document():
    return build_type_system_document()


@pytest.fixture
def kitchen_sink_schema():
    return build_kitchen_sink_schema()


@pytest.fixture(scope="module")
def big_document():
    return build_big_document()
