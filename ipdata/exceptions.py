"""Exceptions raised while decoding and pairing API responses."""


class IpdataError(Exception):
    """Base class for all errors raised by this package."""


class DecodeError(IpdataError, ValueError):
    """Raised when decoded JSON does not have the expected shape."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize the exception with the offending wire key path.

        Args:
            path: Dotted wire key path, e.g. ``threat.is_tor`` or ``[3].asn``.
            reason: What was wrong with the value at *path*.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"{path or '<root>'}: {reason}")


class BulkResponseMismatchError(IpdataError):
    """Raised when a bulk response does not answer every requested IP."""

    def __init__(self, requested: int, received: int) -> None:
        self.requested = requested
        self.received = received
        super().__init__(
            f"Requested {requested} IP(s) but bulk response has {received} record(s)"
        )
