"""Method implementation values and their kinds"""

import protoobj


__all__ = [
    "Selector",
    "Kind",
    "Imp",
    "kind_integer",
    "kind_description",
    "kind_object",
    "kind_mutator",
    "kind_missing",
    "integer_accessor",
    "description_accessor",
    "object_accessor",
    "mutator",
    "method_missing",
    "validate",
]


Selector = str


class Kind:
    """Discriminant for the shape of a method implementation.

    The set of kinds is closed. The package creates one instance for each
    supported shape and compares them by identity.

    Args:
        name: (str) Name of the implementation shape
        concrete: (bool) Kind carries a real method rather than a fallback

    Attributes:
        name: (str) Name of the implementation shape
        concrete: (bool) Kind carries a real method rather than a fallback
    """

    __slots__ = ("name", "concrete")

    def __init__(self, name, concrete):
        self.name = name
        self.concrete = concrete

    def __repr__(self):
        return f"Kind<{self.name}>"


kind_integer = Kind("integer", True)
kind_description = Kind("description", True)
kind_object = Kind("object", True)
kind_mutator = Kind("mutator", True)
kind_missing = Kind("missing", False)

_kinds = (kind_integer, kind_description, kind_object, kind_mutator, kind_missing)


class Imp:
    """Method implementation returned by an object's dispatch function.

    Pairs a kind with the callable that implements it. Accessors take no
    arguments, a mutator takes the object being assigned, and a method
    missing takes no arguments and returns the fallback object to retry.

    Imps are immutable, assigning to an attribute raises AttributeError.
    Two Imps are equal when they share the same kind and equal callables,
    which for plain functions means the same function.

    Use the variant constructors like `integer_accessor` rather than
    creating these directly.

    Args:
        kind: (Kind) Shape of the implementation
        func: (callable) The implementation itself

    Attributes:
        kind: (Kind) Shape of the implementation
        func: (callable) The implementation itself
    """

    __slots__ = ("kind", "func")

    def __init__(self, kind, func):
        if not callable(func):
            raise TypeError(
                f"{kind.name} implementation must be callable, got {type(func).__name__}"
            )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "func", func)

    def __setattr__(self, name, value):
        raise AttributeError(f"Imp is immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"Imp is immutable, cannot delete {name}")

    @property
    def concrete(self):
        """(bool) Implementation answers the selector itself."""
        return self.kind.concrete

    def expect(self, kind, selector=None):
        """Decode this implementation as the given kind.

        Args:
            kind: (Kind) Kind the caller requires
            selector: (str | None) Selector that produced this, for messages
        Returns:
            (callable) The contained implementation
        Raises:
            ContractError: If this implementation is a different kind
        """
        if self.kind is not kind:
            where = f" for {selector}" if selector is not None else ""
            raise protoobj.ContractError(
                f"Expected {kind.name} implementation{where}, got {self.kind.name}",
                selector,
                expected=kind,
                actual=self.kind,
            )
        return self.func

    def __repr__(self):
        return f"Imp<{self.kind.name}>"

    def __eq__(self, other):
        if not isinstance(other, Imp):
            return NotImplemented
        return self.kind is other.kind and self.func == other.func

    def __hash__(self):
        return hash((self.kind.name, self.func))


def integer_accessor(func):
    """Accessor returning an int (or None)."""
    return Imp(kind_integer, func)


def description_accessor(func):
    """Accessor returning a text description (or None)."""
    return Imp(kind_description, func)


def object_accessor(func):
    """Accessor returning another object (or None)."""
    return Imp(kind_object, func)


def mutator(func):
    """Setter called with a single object argument."""
    return Imp(kind_mutator, func)


def method_missing(func):
    """Selector is not understood by this receiver.

    The callable returns the fallback object that should receive the
    same selector, or None when there is nowhere left to look.
    """
    return Imp(kind_missing, func)


def validate(imp):
    """Validate that an implementation is in a proper state.

    This isn't done during dispatch for efficiency. It can be used by tests
    or tools that want to check objects they did not build.

    Args:
        imp: (Imp) implementation to check
    Raises:
        (TypeError) if any type of problem is found
    """
    if not isinstance(imp, Imp):
        raise TypeError(f"Expected Imp, got {type(imp).__name__}")
    if not any(imp.kind is kind for kind in _kinds):
        raise TypeError(f"Unknown implementation kind {imp.kind!r}")
    if not callable(imp.func):
        raise TypeError(f"Implementation {imp!r} holds non-callable {imp.func!r}")
