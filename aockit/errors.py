"""Exception hierarchy shared by the puzzle toolkit."""


class AocError(RuntimeError):
    """Base class for every error raised by the toolkit."""


class OutOfRangeError(AocError, IndexError):
    """Raised when a value or position lies outside the valid range."""


class InvalidArgumentError(AocError, ValueError):
    """Raised when a function is given an argument it cannot use."""


class InputError(AocError, ValueError):
    """Raised when input text cannot be read or parsed."""