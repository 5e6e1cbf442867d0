"""HTTP methods understood by Request and their wire-level verbs."""

from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping


class Method(IntEnum):
    """Supported request methods."""
    GET = 0
    POST = 1
    PATCH = 2
    PUT = 3
    DELETE = 4


DEFAULT_VERB = "GET"

# Total over Method by construction
METHOD_VERBS: Mapping[Method, str] = MappingProxyType({m: m.name for m in Method})


def method_to_verb(method: Any) -> str:
    """
    Map a method to the verb sent on the wire.

    Accepts a Method member, its integer value or its name (any case).
    Anything unrecognized maps to "GET".

    Examples:
        >>> method_to_verb(Method.PATCH)
        'PATCH'
        >>> method_to_verb("delete")
        'DELETE'
        >>> method_to_verb(42)
        'GET'
    """
    if isinstance(method, str):
        member = Method.__members__.get(method.strip().upper())
        return METHOD_VERBS[member] if member is not None else DEFAULT_VERB

    try:
        return METHOD_VERBS[Method(method)]
    except (ValueError, TypeError):
        return DEFAULT_VERB
