"""Custom exceptions for selkit."""

DUPLICATE_SINGLETON_MESSAGE = (
    'Element, id and pseudo-element should not occur more then one time inside the selector'
)
OUT_OF_ORDER_MESSAGE = (
    'Selector parts should be arranged in the following order: '
    'element, id, class, attribute, pseudo-class, pseudo-element'
)


class SelkitError(Exception):
    """Base class for all selkit exceptions."""

    pass


class ValidationError(SelkitError):
    """Raised when a fragment cannot be appended to a selector."""

    def __init__(self, kind: str, message: str):
        """Initialize validation error.

        Args:
            kind: Fragment kind that was rejected
            message: Human readable reason

        """
        self.kind = kind
        super().__init__(message)


class DuplicateSingletonError(ValidationError):
    """Raised when a second element, id or pseudo-element is appended."""

    def __init__(self, kind: str):
        super().__init__(kind, DUPLICATE_SINGLETON_MESSAGE)


class OutOfOrderError(ValidationError):
    """Raised when a fragment is appended after a later-ranked fragment."""

    def __init__(self, kind: str, previous_kind: str):
        """Initialize out-of-order error.

        Args:
            kind: Fragment kind that was rejected
            previous_kind: Kind of the last fragment already in the selector

        """
        self.previous_kind = previous_kind
        super().__init__(kind, OUT_OF_ORDER_MESSAGE)


class AssemblyError(SelkitError):
    """Raised when a token list cannot be assembled into a selector."""

    def __init__(self, tokens: list[str], reason: str):
        self.tokens = tokens
        self.reason = reason
        super().__init__(f'Cannot assemble selector from {tokens!r}: {reason}')


class DecodeError(SelkitError):
    """Raised when JSON text cannot be decoded into an object."""

    pass
