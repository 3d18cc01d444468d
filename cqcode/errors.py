"""Exception hierarchy for cqcode."""


class CQCodeError(Exception):
    """Base class for all cqcode errors."""
    pass


class DecodeError(CQCodeError):
    """Raw message could not be converted to segments.

    Raised only for internal faults. A malformed CQ code is not a fault:
    it decodes to a plain text segment.
    """
    pass
