"""Custom exception classes for the Registry."""


class ScribeException(Exception):
    """
    Base exception class for all registry errors.
    """
    pass


class PausedError(ScribeException):
    """
    Raised when a mutating operation is attempted while the registry is paused.
    """
    pass


class UnauthorizedError(ScribeException):
    """
    Raised when an operator-only operation is called by another identity.
    """
    pass


class InvalidInputError(ScribeException):
    """
    Raised for an empty identifier or name, an oversized identifier, or a non-positive size.
    """
    pass


class AlreadyRegisteredError(ScribeException):
    """
    Raised when registering an identifier that already has a record.
    """
    pass


class OutOfRangeError(ScribeException):
    """
    Raised when an ordinal is greater than or equal to the record count.
    """
    pass


class ArithmeticOverflowError(ScribeException):
    """
    Raised when checked 256-bit arithmetic would wrap.
    """
    pass
