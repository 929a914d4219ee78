"""
Mock data model for shapemock

A Mocked bundles the target-shaped instance, an optional constructor and the
six call lookup tables filled in by the operators. Verification code reads the
tables; only the operators write them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

CallRecord = list
FunctionCallLookup = dict[str, list[CallRecord]]


class LookupType(str, Enum):
    """Kind of member a lookup table records calls for."""

    FUNCTION = "function"
    STATIC_FUNCTION = "staticFunction"
    GETTER = "getter"
    SETTER = "setter"
    STATIC_GETTER = "staticGetter"
    STATIC_SETTER = "staticSetter"


# Kinds installed on the instance; the others go on the constructor
INSTANCE_TYPES = (LookupType.FUNCTION, LookupType.GETTER, LookupType.SETTER)

# Setter kind paired with each getter kind
PAIRED_SETTER_TYPES = {
    LookupType.GETTER: LookupType.SETTER,
    LookupType.STATIC_GETTER: LookupType.STATIC_SETTER,
}

_LOOKUP_ATTRIBUTES = {
    LookupType.FUNCTION: "function_call_lookup",
    LookupType.STATIC_FUNCTION: "static_function_call_lookup",
    LookupType.GETTER: "getter_call_lookup",
    LookupType.SETTER: "setter_call_lookup",
    LookupType.STATIC_GETTER: "static_getter_call_lookup",
    LookupType.STATIC_SETTER: "static_setter_call_lookup",
}


class MockShapeError(TypeError):
    """The mock shell cannot host the requested member."""


class ShapeMeta(type):
    """
    Metaclass for constructor shells that need static properties.

    Static accessors are installed on a private subclass of the constructor's
    metaclass, which Python only allows when that metaclass is itself a
    Python class rather than the builtin ``type``.
    """


@dataclass
class Mocked:
    """A test double and the calls recorded against it."""

    instance: Any
    constructor: Any = None
    function_call_lookup: FunctionCallLookup = field(default_factory=dict)
    static_function_call_lookup: FunctionCallLookup = field(default_factory=dict)
    getter_call_lookup: FunctionCallLookup = field(default_factory=dict)
    setter_call_lookup: FunctionCallLookup = field(default_factory=dict)
    static_getter_call_lookup: FunctionCallLookup = field(default_factory=dict)
    static_setter_call_lookup: FunctionCallLookup = field(default_factory=dict)

    def target(self, lookup_type: LookupType | str) -> Any:
        """
        Return the object members of the given kind are installed on.

        Raises:
            MockShapeError: for a static kind when there is no constructor
        """
        if LookupType(lookup_type) in INSTANCE_TYPES:
            return self.instance
        if self.constructor is None:
            raise MockShapeError(
                f"Cannot set up a {LookupType(lookup_type).value} member: "
                "the mock has no constructor"
            )
        return self.constructor


OperatorFunction = Callable[[Mocked], Mocked]


def get_lookup(mocked: Mocked, lookup_type: LookupType | str) -> FunctionCallLookup:
    """
    Return the lookup table of the given kind.

    Args:
        mocked: The mock owning the tables
        lookup_type: A LookupType or its string value

    Raises:
        ValueError: if lookup_type is not a known kind
    """
    return getattr(mocked, _LOOKUP_ATTRIBUTES[LookupType(lookup_type)])
