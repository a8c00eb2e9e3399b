"""Message lookup across prototype chains.

An object is any callable taking a selector and returning an `Imp`. When
the receiver does not understand the selector it answers with a method
missing implementation, whose callable names the next object to ask. The
functions here follow those fallbacks until something answers.

There is no cycle detection. An object that delegates back to one of its
own ancestors will loop forever unless a `limit` is given. Keeping chains
acyclic is the job of whoever wires the prototypes together.
"""

import logging

import protoobj


__all__ = ["lookup", "resolve", "chain"]


logger = logging.getLogger("protoobj.dispatch")
logger.addHandler(logging.NullHandler())


def lookup(receiver, selector):
    """Ask a single receiver for a selector without delegating.

    Args:
        receiver: (callable | None) Object to ask
        selector: (str) Message name
    Returns:
        (Imp | None) Whatever the receiver answered, None for no receiver
    Raises:
        ContractError: If the receiver answers with something not an Imp
    """
    if receiver is None:
        return None
    imp = receiver(selector)
    if not isinstance(imp, protoobj.Imp):
        raise protoobj.ContractError(
            f"Dispatch for {selector} returned {type(imp).__name__}, not Imp",
            selector,
        )
    return imp


def resolve(receiver, selector, limit=None):
    """Find the implementation of a selector along a prototype chain.

    The receiver is asked first. A method missing answer is followed to
    its fallback object, which is asked the same selector, until some
    object answers concretely or the fallback is None.

    Args:
        receiver: (callable | None) Object receiving the message
        selector: (str) Message name
        limit: (int | None) Maximum delegation hops, None for unbounded
    Returns:
        (Imp | None) Concrete implementation, or None if nothing answered
    Raises:
        ContractError: If any object answers with something not an Imp
        DelegationError: If more than `limit` fallbacks were followed
        MethodMissingError: If the chain ends at a strict root object
    """
    for _, imp in chain(receiver, selector, limit):
        if imp.concrete:
            return imp
    return None


def chain(receiver, selector, limit=None):
    """Iterate the objects consulted while resolving a selector.

    This is the walk `resolve` performs, which makes it easy to see which
    prototype ends up answering a message. Iteration stops after the first
    concrete answer or when a fallback is None.

    Args:
        receiver: (callable | None) Object receiving the message
        selector: (str) Message name
        limit: (int | None) Maximum delegation hops, None for unbounded
    Yields:
        (tuple[callable, Imp]) Each receiver and the implementation it gave
    Raises:
        ContractError: If any object answers with something not an Imp
        DelegationError: If more than `limit` fallbacks were followed
    """
    hops = 0
    while receiver is not None:
        imp = lookup(receiver, selector)
        yield receiver, imp
        if imp.kind is not protoobj.kind_missing:
            return

        receiver = imp.func()
        if receiver is None:
            return

        hops += 1
        if limit is not None and hops > limit:
            logger.debug("Delegation limit %d hit resolving %s", limit, selector)
            raise protoobj.DelegationError(selector, limit)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Delegating %s to %r (hop %d)", selector, receiver, hops)
