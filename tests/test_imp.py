"""Tests for implementation values and kind decoding."""

import pytest

import protoobj
import objtest


@objtest.params(
    "make kind",
    integer=(protoobj.integer_accessor, protoobj.kind_integer),
    description=(protoobj.description_accessor, protoobj.kind_description),
    object=(protoobj.object_accessor, protoobj.kind_object),
    mutator=(protoobj.mutator, protoobj.kind_mutator),
    missing=(protoobj.method_missing, protoobj.kind_missing),
)
def test_constructors(key, make, kind):
    """Each variant constructor tags its Imp with the matching kind."""
    func = lambda: None
    imp = make(func)
    assert imp.kind is kind
    assert imp.func is func
    assert imp.expect(kind) is func
    protoobj.validate(imp)


def test_concrete():
    """Only method missing is not concrete."""
    assert protoobj.integer_accessor(lambda: 1).concrete
    assert protoobj.mutator(lambda obj: None).concrete
    assert not protoobj.method_missing(lambda: None).concrete


def test_not_callable():
    """Implementations must hold callables."""
    with pytest.raises(TypeError):
        protoobj.integer_accessor(5)
    with pytest.raises(TypeError):
        protoobj.method_missing(None)


def test_expect_mismatch():
    """Decoding as the wrong kind is a contract violation, not None."""
    imp = protoobj.description_accessor(lambda: "five")
    with pytest.raises(protoobj.ContractError) as info:
        imp.expect(protoobj.kind_integer, "intValue")
    err = info.value
    assert err.selector == "intValue"
    assert err.expected is protoobj.kind_integer
    assert err.actual is protoobj.kind_description
    assert "intValue" in err.message


def test_equality():
    """Imps compare by kind and callable identity."""
    func = lambda: 3
    assert protoobj.integer_accessor(func) == protoobj.integer_accessor(func)
    assert hash(protoobj.integer_accessor(func)) == hash(protoobj.integer_accessor(func))
    assert protoobj.integer_accessor(func) != protoobj.object_accessor(func)
    assert protoobj.integer_accessor(func) != protoobj.integer_accessor(lambda: 3)
    assert protoobj.integer_accessor(func) != func


def test_validate_rejects():
    """Validation catches things that only look like Imps."""
    with pytest.raises(TypeError):
        protoobj.validate(lambda: 1)

    rogue = protoobj.integer_accessor(lambda: 1)
    object.__setattr__(rogue, "kind", protoobj.Kind("rogue", True))
    with pytest.raises(TypeError):
        protoobj.validate(rogue)

    broken = protoobj.integer_accessor(lambda: 1)
    object.__setattr__(broken, "func", "not callable")
    with pytest.raises(TypeError):
        protoobj.validate(broken)


def test_repr():
    assert repr(protoobj.kind_mutator) == "Kind<mutator>"
    assert repr(protoobj.method_missing(lambda: None)) == "Imp<missing>"


def test_immutable():
    """Imps cannot be changed after they are built."""
    imp = protoobj.integer_accessor(lambda: 1)
    with pytest.raises(AttributeError):
        imp.kind = protoobj.kind_description
    with pytest.raises(AttributeError):
        imp.func = lambda: 2
    with pytest.raises(AttributeError):
        del imp.func
    assert imp.kind is protoobj.kind_integer


def test_equality_other_types():
    """Comparing against a non-Imp defers to the other operand."""
    imp = protoobj.integer_accessor(lambda: 1)
    assert imp.__eq__(1) is NotImplemented
    assert imp != 1
    assert not (imp == "intValue")
