"""
Mock operators

Each operator takes the configuration of one member and returns a transform
that installs the instrumented member on a Mocked and (re)initializes its
lookup slot(s). Setting the same member up again replaces it and empties its
tables.
"""

from __future__ import annotations

from typing import Any, Callable

from shapemock.config import get_config
from shapemock.log import logger
from shapemock.members import install_accessor, install_function
from shapemock.mock import (
    PAIRED_SETTER_TYPES,
    LookupType,
    Mocked,
    OperatorFunction,
    get_lookup,
)
from shapemock.recorder import track_function_call, track_getter_call, track_setter_call


def setup_function(
    function_name: str, mock_function: Callable | None = None
) -> OperatorFunction:
    """
    Mock a function on the instance of an existing Mocked.

    Calls are recorded for later verification. If mock_function is given,
    it is called with the same arguments and its return value is returned.
    A call whose mock_function raises is not recorded.

    mock_function is called as given, not bound to the mock's instance;
    close over mocked.instance when it needs the object.

    Args:
        function_name: Name of the member to replace
        mock_function: Optional implementation
    """

    def operator(mocked: Mocked) -> Mocked:
        return _setup_function(mocked, LookupType.FUNCTION, function_name, mock_function)

    return operator


def setup_static_function(
    function_name: str, mock_function: Callable | None = None
) -> OperatorFunction:
    """
    Mock a static function on the constructor of an existing Mocked.

    Args:
        function_name: Name of the member to replace
        mock_function: Optional implementation
    """

    def operator(mocked: Mocked) -> Mocked:
        return _setup_function(
            mocked, LookupType.STATIC_FUNCTION, function_name, mock_function
        )

    return operator


def setup_property(property_name: str, value: Any = None) -> OperatorFunction:
    """
    Set up a property returning a fixed value on the instance of a Mocked.

    Reads and writes are both recorded; writes have no other effect.
    """
    return define_property(property_name, lambda: value)


def setup_static_property(property_name: str, value: Any = None) -> OperatorFunction:
    """Set up a static property returning a fixed value on the constructor of a Mocked."""
    return define_static_property(property_name, lambda: value)


def define_property(
    property_name: str,
    getter: Callable[[], Any] | None = None,
    setter: Callable[[Any], None] | None = None,
) -> OperatorFunction:
    """
    Set up a property with custom getter and setter on the instance of a Mocked.

    The getter and setter are not bound to the instance: the getter takes no
    arguments and the setter only the assigned value. Close over
    mocked.instance when they need the object.

    Args:
        property_name: Name of the property
        getter: Called without arguments on each read, its result is returned
        setter: Called with the assigned value on each write
    """

    def operator(mocked: Mocked) -> Mocked:
        return _define_property(mocked, LookupType.GETTER, property_name, getter, setter)

    return operator


def define_static_property(
    property_name: str,
    getter: Callable[[], Any] | None = None,
    setter: Callable[[Any], None] | None = None,
) -> OperatorFunction:
    """Set up a property with custom getter and setter on the constructor of a Mocked."""

    def operator(mocked: Mocked) -> Mocked:
        return _define_property(
            mocked, LookupType.STATIC_GETTER, property_name, getter, setter
        )

    return operator


def _setup_function(
    mocked: Mocked,
    lookup_type: LookupType,
    function_name: str,
    mock_function: Callable | None,
) -> Mocked:
    target = mocked.target(lookup_type)
    lookup = get_lookup(mocked, lookup_type)
    record_kwargs = get_config().recorder_record_kwargs

    def function_replacement(*args, **kwargs):
        return_value = None
        if callable(mock_function):
            return_value = mock_function(*args, **kwargs)
        track_function_call(
            lookup, function_name, args, kwargs if record_kwargs else None
        )
        return return_value

    function_replacement.__name__ = function_name
    function_replacement.__qualname__ = function_name

    install_function(target, function_name, function_replacement)
    lookup[function_name] = []

    logger.debug(
        "Set up %s %r on %s", lookup_type.value, function_name, _target_name(target)
    )
    return mocked


def _define_property(
    mocked: Mocked,
    lookup_type: LookupType,
    property_name: str,
    getter: Callable[[], Any] | None,
    setter: Callable[[Any], None] | None,
) -> Mocked:
    target = mocked.target(lookup_type)
    getter_lookup = get_lookup(mocked, lookup_type)
    setter_lookup_type = PAIRED_SETTER_TYPES[lookup_type]
    setter_lookup = get_lookup(mocked, setter_lookup_type)

    def property_getter(owner):
        track_getter_call(getter_lookup, property_name)
        return getter() if callable(getter) else None

    def property_setter(owner, value):
        track_setter_call(setter_lookup, property_name, value)
        if callable(setter):
            setter(value)

    install_accessor(target, property_name, property_getter, property_setter)
    getter_lookup[property_name] = []
    setter_lookup[property_name] = []

    logger.debug(
        "Set up %s/%s %r on %s",
        lookup_type.value,
        setter_lookup_type.value,
        property_name,
        _target_name(target),
    )
    return mocked


def _target_name(target: Any) -> str:
    if isinstance(target, type):
        return target.__name__
    return f"{type(target).__name__} instance"
