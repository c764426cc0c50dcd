"""Diagnostics raised by the private class member extension."""

from ..parser.core import (
    GetterParamsError, ParseError, SetterArityError, SetterRestParamError,
)


class DuplicatePrivateElementError(ParseError):
    pass


class ReservedPrivateNameError(ParseError):
    pass


class UndeclaredPrivateNameError(ParseError):
    pass


class InvalidDeletePrivateError(ParseError):
    pass


class InvalidArgumentsInFieldInitError(ParseError):
    pass


class InvalidSuperInFieldInitError(ParseError):
    pass


class InvalidDirectSuperCallError(ParseError):
    pass


class StaticConstructorFieldError(ParseError):
    pass


# Recoverable: appended to Parser.recoverable instead of raised
RECOVERABLE_ERRORS = (GetterParamsError, SetterArityError, SetterRestParamError)

__all__ = [
    "DuplicatePrivateElementError", "ReservedPrivateNameError",
    "UndeclaredPrivateNameError", "InvalidDeletePrivateError",
    "InvalidArgumentsInFieldInitError", "InvalidSuperInFieldInitError",
    "InvalidDirectSuperCallError", "StaticConstructorFieldError",
    "GetterParamsError", "SetterArityError", "SetterRestParamError",
    "RECOVERABLE_ERRORS",
]
