"""Exceptions raised while parsing and deriving ADSPath values."""


class ADSPathError(Exception):
    """Base class for ADSPath failures."""


class InvalidArgumentError(ADSPathError, ValueError):
    """An argument passed to an operation is not acceptable."""


class MalformedInputError(ADSPathError, ValueError):
    """The stored distinguished name does not follow the expected grammar."""
