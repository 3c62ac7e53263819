"""
Exception types raised by reqline.
"""


class ReqlineError(Exception):
    """Base class for reqline errors."""


class CommandRegistrationError(ReqlineError):
    """A command variant cannot join its namespace."""


class UnclosedQuoteError(ReqlineError, ValueError):
    """Argument text ends inside a quoted string or after a dangling escape."""

    def __init__(self, text: str, reason: str = "No closing quotation"):
        super().__init__(f"{reason}: {text}")
        self.text = text
        self.reason = reason


class InvalidRequestError(ReqlineError, ValueError):
    """A request transform was given a value it cannot apply."""
