"""Python dictionary creation from GraphQL AST"""

from typing import Any, Collection, Dict, List, overload

from ..language import Node, OperationType

__all__ = ["ast_to_dict"]


@overload
def ast_to_dict(node: Node) -> Dict: ...


@overload
def ast_to_dict(node: Collection[Node]) -> List[Dict]: ...


@overload
def ast_to_dict(node: OperationType) -> str: ...


def ast_to_dict(node: Any) -> Any:
    """Convert a GraphQL AST to a nested Python dictionary.

    Every node becomes a dictionary with its kind and all of its attributes, ordered
    child sequences become lists, and operation types become their string values.
    """
    if isinstance(node, Node):
        res: Dict[str, Any] = {"kind": node.kind}
        res.update((key, ast_to_dict(getattr(node, key))) for key in node.keys)
        return res
    if isinstance(node, (list, tuple)):
        return [ast_to_dict(sub_node) for sub_node in node]
    if isinstance(node, OperationType):
        return node.value
    return node
