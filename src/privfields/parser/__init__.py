from .core import (
    GetterParamsError, ParseError, SetterArityError, SetterRestParamError,
    StaticPrototypeError,
)
from .parser import Parser

__all__ = [
    "Parser", "ParseError", "StaticPrototypeError",
    "GetterParamsError", "SetterArityError", "SetterRestParamError",
]
