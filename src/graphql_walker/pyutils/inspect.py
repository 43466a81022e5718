from inspect import (
    isclass,
    ismethod,
    isfunction,
    isgeneratorfunction,
    isgenerator,
)
from typing import Any, List

__all__ = ["inspect"]

max_recursive_depth = 2
max_str_size = 240
max_list_size = 10


def inspect(value: Any) -> str:
    """Inspect value and a return string representation for error messages.

    Used to print values in error messages. We do not use repr() in order to not
    leak too much of the inner Python representation of unknown objects, and we
    do not use json.dumps() because not all objects can be serialized as JSON and
    we want to output strings with single quotes like Python repr() does it.
    """
    return inspect_recursive(value, [])


def inspect_recursive(value: Any, seen_values: List) -> str:
    if value is None or isinstance(value, (bool, float, complex)):
        return repr(value)
    if isinstance(value, (int, str, bytes, bytearray)):
        return trunc_str(repr(value))
    # check if we have a custom inspect method (AST nodes have one)
    inspect_method = getattr(value, "__inspect__", None)
    if inspect_method is not None and callable(inspect_method) and not isclass(value):
        return inspect_method()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        if not value:
            if isinstance(value, (list, tuple, dict)):
                return repr(value)
            return "<empty set>"
        if len(seen_values) >= max_recursive_depth or any(
            value is seen for seen in seen_values
        ):
            return inspect_limit(value)
        seen_values = [*seen_values, value]
        if isinstance(value, dict):
            items = trunc_list(
                [
                    inspect_recursive(k, seen_values)
                    + ": "
                    + inspect_recursive(v, seen_values)
                    for k, v in value.items()
                ]
            )
            return "{" + ", ".join(items) + "}"
        items = trunc_list([inspect_recursive(v, seen_values) for v in value])
        if isinstance(value, list):
            return "[" + ", ".join(items) + "]"
        if isinstance(value, tuple):
            if len(items) == 1:
                return f"({items[0]},)"
            return "(" + ", ".join(items) + ")"
        return "{" + ", ".join(items) + "}"
    if isinstance(value, Exception):
        type_ = "exception"
        value = type(value)
    elif isclass(value):
        type_ = "exception class" if issubclass(value, Exception) else "class"
    elif ismethod(value):
        type_ = "method"
    elif isgeneratorfunction(value):
        type_ = "generator function"
    elif isfunction(value):
        type_ = "function"
    elif isgenerator(value):
        type_ = "generator"
    else:
        try:
            name = type(value).__name__
            if not name or "<" in name or ">" in name:
                raise AttributeError
        except AttributeError:
            return "<object>"
        else:
            return f"<{name} instance>"
    try:
        name = value.__name__
        if not name or "<" in name or ">" in name:
            raise AttributeError
    except AttributeError:
        return f"<{type_}>"
    else:
        return f"<{type_} {name}>"


def inspect_limit(value: Any) -> str:
    """Inspect a collection that is nested too deeply or recursive."""
    if isinstance(value, list):
        return "[...]"
    if isinstance(value, tuple):
        return "(...)"
    return "{...}"


def trunc_str(s: str) -> str:
    """Truncate strings to maximum length."""
    if len(s) > max_str_size:
        i = max(0, (max_str_size - 3) // 2)
        j = max(0, max_str_size - 3 - i)
        s = s[:i] + "..." + s[-j:]
    return s


def trunc_list(s: List[str]) -> List[str]:
    """Truncate lists of inspected items to maximum length."""
    if len(s) > max_list_size:
        i = max_list_size // 2
        j = i - 1
        s = s[:i] + ["..."] + s[-j:]
    return s
