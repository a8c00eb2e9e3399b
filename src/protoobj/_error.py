"""Error classes and helpers"""

__all__ = ["ContractError", "MethodMissingError", "DelegationError"]


class ContractError(Exception):
    """Object definition broke the dispatch contract.

    Raised when a receiver answers a selector with the wrong shape of
    implementation. This is a bug in how an object was built, not a
    selector that is legitimately unsupported.

    Args:
        message: (str) Error description
        selector: (str | None) Selector being resolved when it happened
        expected: (Kind | None) Kind the caller asked for
        actual: (Kind | None) Kind the receiver answered with

    Attributes:
        message: (str) Error description
        selector: (str | None) Selector being resolved
        expected: (Kind | None) Kind the caller asked for
        actual: (Kind | None) Kind the receiver answered with
    """

    def __init__(self, message, selector=None, expected=None, actual=None):
        self.message = message
        self.selector = selector
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class MethodMissingError(ContractError):
    """Selector reached a strict root object without being answered."""

    def __init__(self, selector):
        super().__init__(f"method missing: {selector}", selector)


class DelegationError(ContractError):
    """Prototype chain was longer than the requested delegation limit.

    Args:
        selector: (str) Selector being resolved
        limit: (int) Maximum number of delegation hops allowed
    """

    def __init__(self, selector, limit):
        self.limit = limit
        super().__init__(
            f"delegation limit of {limit} exceeded resolving {selector}", selector
        )
