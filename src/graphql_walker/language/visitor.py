import logging
from enum import Enum
from functools import partial
from typing import (
    Any,
    Callable,
    Collection,
    Dict,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
    get_args,
)

from ..error import InvalidInputTypeError, VisitError, wrap_error
from ..pyutils import inspect, snake_to_camel
from . import ast

from .ast import Definition, DocumentNode, Node, SchemaNode, Selection

__all__ = [
    "Visitor",
    "ParallelVisitor",
    "VisitorAction",
    "visit",
    "get_prune_signal",
    "SKIP",
    "IDLE",
    "WALK_KEYS",
    "VARIANT_KINDS",
]

log = logging.getLogger(__name__)


class VisitorActionEnum(Enum):
    """Special return values for the enter methods of a visitor."""

    SKIP = False


VisitorAction = Optional[VisitorActionEnum]

SKIP = VisitorActionEnum.SKIP
IDLE = None

WalkKeys = Dict[str, Tuple[Tuple[str, str], ...]]

# Default map from node kinds to the ordered child sequences that are walked,
# as pairs of node attribute and kind of the list grouping:
WALK_KEYS: WalkKeys = {
    "document": (("definitions", "definition"),),
    "schema": (("components", "definition"),),
    # variable definitions and directives of operations are not walked
    "operation_definition": (("selections", "selection"),),
    "fragment_definition": (
        ("directives", "directive"),
        ("selections", "selection"),
    ),
    "selection_field": (
        ("directives", "directive"),
        ("selections", "selection"),
    ),
    "inline_fragment": (
        ("directives", "directive"),
        ("selections", "selection"),
    ),
    "object_definition": (("fields", "object_field_definition"),),
    "interface_definition": (("fields", "interface_field_definition"),),
    "input_definition": (("fields", "input_field_definition"),),
}

# List groupings whose elements belong to a closed set of node classes and are
# dispatched by their runtime kind:
VARIANT_KINDS: Dict[str, Tuple[type, ...]] = {
    "definition": get_args(Definition),
    "selection": get_args(Selection),
}


def is_visitor_kind(kind: str) -> bool:
    """Check whether visitor methods can be defined for the given kind."""
    if kind.endswith("_list"):
        kind = kind[:-5]
    if kind in VARIANT_KINDS:
        return True
    node_cls = getattr(ast, snake_to_camel(kind) + "Node", None)
    return isinstance(node_cls, type) and issubclass(node_cls, Node)


def get_prune_signal(error: BaseException) -> Optional[bool]:
    """Get the prune signal carried by an error raised from a visitor method.

    Errors are recognized as prune signals by a boolean ``prune`` attribute or by a
    ``prune()`` method returning a boolean, not by their type. Returns None for any
    other error, which means that the error is fatal.
    """
    prune = getattr(error, "prune", None)
    if callable(prune):
        try:
            prune = prune()
        except Exception:
            # a failing prune method carries no signal
            return None
    return prune if isinstance(prune, bool) else None


class Visitor:
    """Visitor that walks through an AST.

    Visitors define node kind specific methods by prefixing the kind of the node with
    ``enter_`` or ``leave_``. For instance, to visit selection field nodes, you would
    define the methods ``enter_selection_field()`` and/or ``leave_selection_field()``.
    No method needs to be defined; missing methods are simply not called.
    These methods have the following signature::

        def enter_selection_field(self, node, context):
            # The return value has the following meaning:
            # IDLE (None): no action
            # SKIP (or False): do not visit the child nodes of this node
            return

        def leave_selection_field(self, node, context):
            # The return value is ignored.
            return

    The ``context`` is the value that has been passed to :func:`~.visit` and is the
    same for all calls.

    The methods ``enter_definition()`` and ``leave_definition()`` are called for every
    element of a definition list before its actual kind is determined, and the same
    holds for ``enter_selection()`` and ``leave_selection()``.

    Ordered sequences of child nodes can be visited as a whole by appending ``_list``
    to the kind of the list grouping, as in ``enter_selection_list()``. These methods
    get only the context and are only called if the sequence is not empty.

    Raising an error that carries a ``prune`` flag, such as
    :class:`~graphql_walker.error.PruneError`, has the same effect as returning SKIP
    (if the flag is set) or IDLE (if it is not set). Raising any other error aborts the
    whole walk, and :func:`~.visit` raises a
    :class:`~graphql_walker.error.VisitError` wrapping it.
    """

    # Provide special return values as attributes
    SKIP, IDLE = SKIP, IDLE

    def __init_subclass__(cls) -> None:
        """Verify that all defined visitor methods are valid."""
        super().__init_subclass__()
        for attr in cls.__dict__:
            if attr.startswith("_"):
                continue
            method, _sep, kind = attr.partition("_")
            if method in ("enter", "leave") and kind and not is_visitor_kind(kind):
                raise TypeError(f"Invalid AST node kind: {kind}.")

    def get_visit_fn(self, kind: str, is_leaving: bool = False) -> Optional[Callable]:
        """Get the visit function for the given node kind and direction."""
        method = "leave" if is_leaving else "enter"
        return getattr(self, f"{method}_{kind}", None)


def describe_kind(kind: str) -> str:
    """Describe the kind of a node or list grouping in breadcrumbs."""
    return kind.replace("_", " ")


class Walker:
    """Depth-first walk over an AST calling the methods of a visitor."""

    __slots__ = "visitor", "context", "walk_keys"

    visitor: Visitor
    context: Any
    walk_keys: WalkKeys

    def __init__(self, visitor: Visitor, context: Any, walk_keys: WalkKeys) -> None:
        self.visitor = visitor
        self.context = context
        self.walk_keys = walk_keys

    def enter(self, kind: str, node: Optional[Node] = None) -> bool:
        """Call the enter method for the given kind and report whether to prune."""
        visit_fn = self.visitor.get_visit_fn(kind)
        if not visit_fn:
            return False
        args = (self.context,) if node is None else (node, self.context)
        try:
            result = visit_fn(*args)
        except Exception as error:
            prune = get_prune_signal(error)
            if prune is None:
                stage = f"failed to visit {describe_kind(kind)} (enter)"
                raise wrap_error(error, stage, node)
            result = SKIP if prune else IDLE
        if result is SKIP or result is False:
            if log.isEnabledFor(logging.DEBUG):
                log.debug("Pruning %s.", kind if node is None else inspect(node))
            return True
        return False

    def leave(self, kind: str, node: Optional[Node] = None) -> None:
        """Call the leave method for the given kind."""
        visit_fn = self.visitor.get_visit_fn(kind, is_leaving=True)
        if not visit_fn:
            return
        args = (self.context,) if node is None else (node, self.context)
        try:
            visit_fn(*args)
        except Exception as error:
            # there is nothing left to prune when leaving
            if get_prune_signal(error) is None:
                stage = f"failed to visit {describe_kind(kind)} (leave)"
                raise wrap_error(error, stage, node)

    def visit_node(self, node: Node) -> None:
        kind = node.kind
        if not self.enter(kind, node):
            for key, list_kind in self.walk_keys.get(kind, ()):
                try:
                    self.visit_list(list_kind, getattr(node, key))
                except VisitError as error:
                    error.add_stage(f"failed to visit {describe_kind(list_kind)} list")
                    raise
        self.leave(kind, node)

    def visit_list(self, kind: str, nodes: Optional[Sequence[Node]]) -> None:
        if not nodes:
            return
        list_kind = f"{kind}_list"
        if not self.enter(list_kind):
            variants = VARIANT_KINDS.get(kind)
            for node in nodes:
                try:
                    if variants:
                        self.visit_variant(kind, variants, node)
                    elif isinstance(node, Node):
                        self.visit_node(node)
                    else:
                        raise VisitError(
                            f"Invalid {describe_kind(kind)}: {inspect(node)}."
                        )
                except VisitError as error:
                    error.add_stage(f"failed to visit {describe_kind(kind)}")
                    raise
        self.leave(list_kind)

    def visit_variant(
        self, kind: str, variants: Tuple[type, ...], node: Node
    ) -> None:
        if not isinstance(node, variants):
            raise VisitError(f"Invalid {describe_kind(kind)}: {inspect(node)}.")
        if not self.enter(kind, node):
            try:
                self.visit_node(node)
            except VisitError as error:
                error.add_stage(f"failed to visit {describe_kind(node.kind)}")
                raise
        self.leave(kind, node)


def visit(
    root: Union[DocumentNode, SchemaNode],
    visitor: Visitor,
    context: Any = None,
    walk_keys: Optional[WalkKeys] = None,
) -> None:
    """Visit each node in an AST.

    :func:`~.visit` will walk through a document or a schema using a depth-first
    traversal, calling the visitor's enter methods at each node in the traversal, and
    calling the leave methods after visiting that node and all of its child nodes.
    Ordered child sequences are visited in the order in which they have been built.

    By returning SKIP from an enter method, the visitor can skip over the child nodes
    of the entered node. The leave method of that node is called nevertheless. Any
    error raised by a visitor method stops the whole traversal, and is re-raised as a
    :class:`~graphql_walker.error.VisitError` describing the stages of the walk that
    were left on the way up.

    A schema is walked as if its query root type were appended to the list of its
    other types.

    To customize the child sequences to be walked, you can provide a dictionary
    walk_keys mapping node kinds to pairs of node attributes and list kinds.
    """
    if not isinstance(root, (DocumentNode, SchemaNode)):
        raise InvalidInputTypeError(root)
    if not isinstance(visitor, Visitor):
        raise TypeError(f"Not an AST Visitor: {inspect(visitor)}.")
    if walk_keys is None:
        walk_keys = WALK_KEYS
    try:
        Walker(visitor, context, walk_keys).visit_node(root)
    except VisitError as error:
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Walk over %s aborted: %s", inspect(root), error)
        raise


class ParallelVisitor(Visitor):
    """A Visitor which delegates to many visitors to run in parallel.

    Each visitor will be visited for each node before moving on.

    A visitor that skips a node does not get any calls for the child nodes of that
    node, but its leave method for that node is still called. The other visitors are
    not affected. If all visitors skip a node, the walk skips the child nodes.
    """

    def __init__(self, visitors: Collection[Visitor]):
        """Create a new visitor from the given list of parallel visitors."""
        self.visitors = visitors
        self.skipping: List[int] = [0] * len(visitors)
        self.depth = 0

    def get_visit_fn(self, kind: str, is_leaving: bool = False) -> Optional[Callable]:
        if kind in ("document", "schema") and not is_leaving:
            # drop what an aborted walk may have left behind
            self.skipping = [0] * len(self.visitors)
            self.depth = 0
        visit_fns = [
            visitor.get_visit_fn(kind, is_leaving) for visitor in self.visitors
        ]
        return partial(self.leave if is_leaving else self.enter, visit_fns)

    def enter(self, visit_fns: List[Optional[Callable]], *args: Any) -> VisitorAction:
        self.depth += 1
        depth, skipping = self.depth, self.skipping
        for i, fn in enumerate(visit_fns):
            if fn and not skipping[i]:
                try:
                    result = fn(*args)
                except Exception as error:
                    prune = get_prune_signal(error)
                    if prune is None:
                        raise
                    result = SKIP if prune else IDLE
                if result is SKIP or result is False:
                    skipping[i] = depth
        return SKIP if all(skipping) else IDLE

    def leave(self, visit_fns: List[Optional[Callable]], *args: Any) -> None:
        depth, skipping = self.depth, self.skipping
        self.depth -= 1
        for i, fn in enumerate(visit_fns):
            if skipping[i] == depth:
                skipping[i] = 0
            if fn and not skipping[i]:
                try:
                    fn(*args)
                except Exception as error:
                    if get_prune_signal(error) is None:
                        raise
