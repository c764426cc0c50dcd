"""privfields: a JavaScript class parser with private members and static fields."""

from .lexer import Lexer as Lexer, LexerError as LexerError
from .options import Options as Options
from .parser import Parser as Parser, ParseError as ParseError
from .private import (
    PrivateNameLexer as PrivateNameLexer,
    PrivateNameParser as PrivateNameParser,
)
from .api import (
    parse as parse,
    parse_with_diagnostics as parse_with_diagnostics,
    tokenize as tokenize,
)
