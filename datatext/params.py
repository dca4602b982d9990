"""Flexible argument normalization for text mutators.

Every mutator accepts its text the same three ways, so these calls are
equivalent when the default field is `text`:

    text.set("x")
    text.set(text="x")
    text.set({"text": "x"})

Positional name/value pairs (`text.set("text", "x")`) are accepted too.
"""

from __future__ import annotations

from typing import Any, Mapping

from .errors import UsageError


def get_params(
    default: str | None,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any],
    *,
    method: str,
) -> dict[str, Any]:
    """Collapse positional, keyword, or mapping arguments into one record.

    Args:
        default: Field name a single bare positional value is stored under.
        args: Positional arguments as received by the caller.
        kwargs: Keyword arguments as received by the caller.
        method: Caller method name used in usage errors.

    Returns:
        A new dict holding the normalized fields.

    Raises:
        UsageError: If the argument shape cannot be interpreted.
    """

    if args and kwargs:
        raise UsageError(method=method, usage="value | **fields | {fields}")

    if kwargs:
        return dict(kwargs)

    if len(args) == 1:
        if isinstance(args[0], Mapping):
            return dict(args[0])
        if default is None:
            raise UsageError(method=method, usage="")
        return {default: args[0]}

    if not args:
        if default is not None:
            raise UsageError(method=method, usage=f"{default}=value")
        return {}

    if len(args) % 2:
        raise UsageError(method=method, usage="name, value, ...")

    names = args[::2]
    if not all(isinstance(name, str) for name in names):
        raise UsageError(method=method, usage="name, value, ...")
    return dict(zip(names, args[1::2]))
