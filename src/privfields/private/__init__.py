from .errors import (
    DuplicatePrivateElementError, InvalidArgumentsInFieldInitError,
    InvalidDeletePrivateError, InvalidDirectSuperCallError,
    InvalidSuperInFieldInitError, ReservedPrivateNameError,
    StaticConstructorFieldError, UndeclaredPrivateNameError,
)
from .lexer import PrivateNameLexer
from .parser import PrivateNameParser
from .scope import PrivateNameScope

__all__ = [
    "PrivateNameLexer", "PrivateNameParser", "PrivateNameScope",
    "DuplicatePrivateElementError", "InvalidArgumentsInFieldInitError",
    "InvalidDeletePrivateError", "InvalidDirectSuperCallError",
    "InvalidSuperInFieldInitError", "ReservedPrivateNameError",
    "StaticConstructorFieldError", "UndeclaredPrivateNameError",
]
