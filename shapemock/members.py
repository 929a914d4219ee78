"""
Member installation for shapemock

Python looks accessors up on an object's type, so a property can only be put
"on" a single object by giving that object a type of its own. The first
accessor installed on a target swaps its class for a private subclass that
keeps the original name; later installs reuse it. For a class target the
private type is a subclass of its metaclass.
"""

from __future__ import annotations

import types
from typing import Any, Callable

from shapemock.mock import MockShapeError

_PRIVATE_MARKER = "__shapemock_private__"


def is_private_type(cls: type) -> bool:
    return bool(cls.__dict__.get(_PRIVATE_MARKER, False))


def private_type(target: Any) -> type:
    """
    Return the type owned by target alone, creating it on first use.

    Raises:
        MockShapeError: if the class of target cannot be swapped, e.g. for
            instances of builtin types or classes whose metaclass is ``type``
    """
    current = type(target)
    if is_private_type(current):
        return current

    namespace = {
        "__slots__": (),
        "__module__": current.__module__,
        "__qualname__": current.__qualname__,
        _PRIVATE_MARKER: True,
    }
    try:
        owned = type(current)(current.__name__, (current,), namespace)
        target.__class__ = owned
    except TypeError as err:
        raise MockShapeError(
            f"Cannot install accessors on {target!r}: {err}"
        ) from err
    return owned


def has_data_descriptor(cls: type, name: str) -> bool:
    """Return True if name resolves to a data descriptor other than a slot on cls."""
    for klass in cls.__mro__:
        if name in klass.__dict__:
            attr = klass.__dict__[name]
            if isinstance(attr, types.MemberDescriptorType):
                return False
            return hasattr(type(attr), "__set__")
    return False


def discard_accessor(target: Any, name: str) -> None:
    """Remove an accessor previously installed on the private type of target."""
    owned = type(target)
    if is_private_type(owned) and name in owned.__dict__:
        delattr(owned, name)


def remove_own_member(target: Any, name: str) -> None:
    if isinstance(target, type):
        if name in target.__dict__:
            delattr(target, name)
        return
    namespace = getattr(target, "__dict__", None)
    if namespace is not None:
        namespace.pop(name, None)


def install_function(target: Any, name: str, function: Callable) -> None:
    """
    Install function as the member name of target, replacing whatever was there.

    On a class the function becomes a staticmethod so it is never bound.
    Instances without a __dict__, or whose class defines a data descriptor
    for name, get the staticmethod on their private type instead.
    """
    discard_accessor(target, name)
    if isinstance(target, type):
        setattr(target, name, staticmethod(function))
    elif (
        getattr(target, "__dict__", None) is None
        or has_data_descriptor(type(target), name)
    ):
        setattr(private_type(target), name, staticmethod(function))
        remove_own_member(target, name)
    else:
        setattr(target, name, function)


def install_accessor(
    target: Any,
    name: str,
    fget: Callable[[Any], Any],
    fset: Callable[[Any, Any], None],
) -> None:
    """Install a getter/setter pair as the property name visible on target."""
    owned = private_type(target)
    discard_accessor(target, name)
    remove_own_member(target, name)
    setattr(owned, name, property(fget, fset))
