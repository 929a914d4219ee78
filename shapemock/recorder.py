"""Call recording for instrumented members."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from shapemock.log import logger
from shapemock.mock import CallRecord, FunctionCallLookup


def track_function_call(
    lookup: FunctionCallLookup,
    function_name: str,
    args: Sequence[Any],
    kwargs: Mapping[str, Any] | None = None,
) -> None:
    """Record the arguments of a function or static function call."""
    record = list(args)
    if kwargs:
        record.append(dict(kwargs))
    track_call(lookup, function_name, record)


def track_getter_call(lookup: FunctionCallLookup, property_name: str) -> None:
    # One empty record per read, same list shape as setters and functions.
    track_call(lookup, property_name, [])


def track_setter_call(lookup: FunctionCallLookup, property_name: str, value: Any) -> None:
    track_call(lookup, property_name, [value])


def track_call(lookup: FunctionCallLookup, name: str, record: CallRecord) -> None:
    """
    Append a call record to the lookup slot for name.

    The slot is created when missing, so recording does not depend on the
    member having been set up first.
    """
    function_calls = lookup.get(name)
    if function_calls is None:
        function_calls = []
        lookup[name] = function_calls

    function_calls.append(record)
    logger.debug("Recorded call %s%r", name, record)
