"""Built in objects: the root of prototype chains and integers"""

import logging

import protoobj


__all__ = ["root_object", "integer_object"]


logger = logging.getLogger("protoobj.objects")
logger.addHandler(logging.NullHandler())


def root_object(strict=True):
    """Create an object that does nothing.

    This is meant to sit at the end of a prototype chain. It answers every
    selector with method missing and never implements anything itself.

    A strict root treats reaching it as a bug, asking it for its fallback
    raises MethodMissingError. A lenient root has no fallback, so lookups
    that reach it resolve to None and the caller decides what that means.

    Args:
        strict: (bool) Raise when a selector reaches this object
    Returns:
        (callable) The root object
    """
    if not strict:
        terminal = protoobj.method_missing(lambda: None)

        def lenient(selector):
            return terminal

        return lenient

    def strict_root(selector):
        return protoobj.method_missing(_Missing(selector))

    return strict_root


class _Missing:
    """Fallback for a strict root, raises when asked for the next object.

    Compares by selector so dispatching the same selector twice gives
    equal Imps.
    """

    __slots__ = ("selector",)

    def __init__(self, selector):
        self.selector = selector

    def __call__(self):
        logger.debug("Method missing at root: %s", self.selector)
        raise protoobj.MethodMissingError(self.selector)

    def __repr__(self):
        return f"Missing<{self.selector}>"

    def __eq__(self, other):
        if not isinstance(other, _Missing):
            return NotImplemented
        return self.selector == other.selector

    def __hash__(self):
        return hash(self.selector)


def integer_object(value, proto):
    """Create an object wrapping a Python int.

    Understands `intValue` and `description`, everything else is forwarded
    to `proto`.

    Args:
        value: (int) Captured integer
        proto: (callable | None) Prototype that receives unknown selectors
    Returns:
        (callable) The integer object
    Raises:
        TypeError: If value is not an int or proto is not an object
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Integer object needs an int, got {type(value).__name__}")
    if proto is not None and not callable(proto):
        raise TypeError(f"Prototype must be an object, got {type(proto).__name__}")

    methods = {
        "intValue": protoobj.integer_accessor(lambda: value),
        "description": protoobj.description_accessor(lambda: str(value)),
    }
    forward = protoobj.method_missing(lambda: proto)

    def integer(selector):
        return methods.get(selector, forward)

    return integer
