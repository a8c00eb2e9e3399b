"""Typed helpers for sending messages and unpacking the results"""

import protoobj


__all__ = [
    "read_integer",
    "read_description",
    "read_object",
    "write_object",
    "read_fallback",
]


def _decode(receiver, selector, kind):
    """Resolve a selector and unpack the implementation as `kind`.

    Returns None when nothing along the chain answers. A receiver that
    answers with a different kind raises ContractError.
    """
    imp = protoobj.resolve(receiver, selector)
    if imp is None:
        return None
    return imp.expect(kind, selector)


def read_integer(receiver, selector="intValue"):
    """Integer value of an object.

    Args:
        receiver: (callable | None) Object to ask
        selector: (str) Message answering with an integer accessor
    Returns:
        (int | None) The value, or None if no object answered
    Raises:
        ContractError: If the selector is answered with another kind
    """
    func = _decode(receiver, selector, protoobj.kind_integer)
    if func is None:
        return None
    return func()


def read_description(receiver, selector="description"):
    """Text description of an object.

    Args:
        receiver: (callable | None) Object to ask
        selector: (str) Message answering with a description accessor
    Returns:
        (str | None) The description, or None if no object answered
    Raises:
        ContractError: If the selector is answered with another kind
    """
    func = _decode(receiver, selector, protoobj.kind_description)
    if func is None:
        return None
    return func()


def read_object(receiver, selector):
    """Object valued property of an object.

    Args:
        receiver: (callable | None) Object to ask
        selector: (str) Message answering with an object accessor
    Returns:
        (callable | None) The object, or None
    Raises:
        ContractError: If the selector is answered with another kind
    """
    func = _decode(receiver, selector, protoobj.kind_object)
    if func is None:
        return None
    return func()


def write_object(receiver, selector, value):
    """Send an object to a mutator.

    Args:
        receiver: (callable | None) Object to ask
        selector: (str) Message answering with a mutator
        value: (callable | None) Object passed to the mutator
    Returns:
        (bool | None) True once the mutator has run, None if no object answered
    Raises:
        ContractError: If the selector is answered with another kind
    """
    func = _decode(receiver, selector, protoobj.kind_mutator)
    if func is None:
        return None
    func(value)
    return True


def read_fallback(receiver, selector):
    """Fallback object a receiver forwards a selector to.

    Only the receiver itself is asked, there is no delegation. This is the
    way to look at a prototype link, which only exists as the result of a
    method missing answer.

    Args:
        receiver: (callable | None) Object to ask
        selector: (str) Message the receiver should not understand
    Returns:
        (callable | None) The fallback object, or None
    Raises:
        ContractError: If the receiver understands the selector
        MethodMissingError: If the receiver is a strict root object
    """
    imp = protoobj.lookup(receiver, selector)
    if imp is None:
        return None
    return imp.expect(protoobj.kind_missing, selector)()
