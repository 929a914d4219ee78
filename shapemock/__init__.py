"""
shapemock: instrumented test doubles built from a plain object/class shape.

Operators replace functions, static functions and properties of a mock with
wrappers that record every call, optionally delegating to an implementation.
"""

from shapemock.config import (
    ConfigError,
    ShapeMockConfig,
    get_config,
    reset_config,
    set_config,
)
from shapemock.log import configure_logging
from shapemock.mock import (
    CallRecord,
    LookupType,
    Mocked,
    MockShapeError,
    OperatorFunction,
    ShapeMeta,
    get_lookup,
)
from shapemock.operators import (
    define_property,
    define_static_property,
    setup_function,
    setup_property,
    setup_static_function,
    setup_static_property,
)
from shapemock.recorder import (
    track_call,
    track_function_call,
    track_getter_call,
    track_setter_call,
)
from shapemock.version import VERSION
