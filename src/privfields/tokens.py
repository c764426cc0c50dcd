"""Token type definitions for the privfields JavaScript grammar.

The keyword and operator tables here are the single source of truth for the
lexer; the parser only ever compares against TokenType members.
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    # Literals
    NUM = auto()
    STRING = auto()
    NAME = auto()
    PRIVATE_NAME = auto()

    # Keywords
    BREAK = auto()
    CASE = auto()
    CATCH = auto()
    CLASS = auto()
    CONST = auto()
    CONTINUE = auto()
    DEBUGGER = auto()
    DEFAULT = auto()
    DELETE = auto()
    DO = auto()
    ELSE = auto()
    EXPORT = auto()
    EXTENDS = auto()
    FALSE = auto()
    FINALLY = auto()
    FOR = auto()
    FUNCTION = auto()
    IF = auto()
    IMPORT = auto()
    IN = auto()
    INSTANCEOF = auto()
    NEW = auto()
    NULL = auto()
    RETURN = auto()
    SUPER = auto()
    SWITCH = auto()
    THIS = auto()
    THROW = auto()
    TRUE = auto()
    TRY = auto()
    TYPEOF = auto()
    VAR = auto()
    VOID = auto()
    WHILE = auto()
    WITH = auto()

    # Operators
    PLUS = auto()          # +
    MINUS = auto()         # -
    STAR = auto()          # *
    STAR_STAR = auto()     # **
    SLASH = auto()         # /
    PERCENT = auto()       # %
    EQ = auto()            # =
    EQ_EQ = auto()         # ==
    EQ_EQ_EQ = auto()      # ===
    BANG_EQ = auto()       # !=
    BANG_EQ_EQ = auto()    # !==
    LT = auto()            # <
    GT = auto()            # >
    LT_EQ = auto()         # <=
    GT_EQ = auto()         # >=
    AMP_AMP = auto()       # &&
    PIPE_PIPE = auto()     # ||
    QUESTION_QUESTION = auto()  # ??
    BANG = auto()          # !
    AMP = auto()           # &
    PIPE = auto()          # |
    CARET = auto()         # ^
    TILDE = auto()         # ~
    LT_LT = auto()         # <<
    GT_GT = auto()         # >>
    GT_GT_GT = auto()      # >>>
    PLUS_EQ = auto()       # +=
    MINUS_EQ = auto()      # -=
    STAR_EQ = auto()       # *=
    STAR_STAR_EQ = auto()  # **=
    SLASH_EQ = auto()      # /=
    PERCENT_EQ = auto()    # %=
    AMP_EQ = auto()        # &=
    PIPE_EQ = auto()       # |=
    CARET_EQ = auto()      # ^=
    LT_LT_EQ = auto()      # <<=
    GT_GT_EQ = auto()      # >>=
    GT_GT_GT_EQ = auto()   # >>>=
    AMP_AMP_EQ = auto()    # &&=
    PIPE_PIPE_EQ = auto()  # ||=
    QUESTION_QUESTION_EQ = auto()  # ??=
    PLUS_PLUS = auto()     # ++
    MINUS_MINUS = auto()   # --
    FAT_ARROW = auto()     # =>
    DOT = auto()           # .
    ELLIPSIS = auto()      # ...
    QUESTION = auto()      # ?
    COLON = auto()         # :
    COMMA = auto()         # ,
    SEMICOLON = auto()     # ;

    # Delimiters
    LPAREN = auto()        # (
    RPAREN = auto()        # )
    LBRACKET = auto()      # [
    RBRACKET = auto()      # ]
    LBRACE = auto()        # {
    RBRACE = auto()        # }

    EOF = auto()


@dataclass
class Token:
    type: TokenType
    value: str
    line: int
    col: int
    pos: int = 0
    nl_before: bool = False

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.col})"


KEYWORDS: dict[str, TokenType] = {
    "break": TokenType.BREAK,
    "case": TokenType.CASE,
    "catch": TokenType.CATCH,
    "class": TokenType.CLASS,
    "const": TokenType.CONST,
    "continue": TokenType.CONTINUE,
    "debugger": TokenType.DEBUGGER,
    "default": TokenType.DEFAULT,
    "delete": TokenType.DELETE,
    "do": TokenType.DO,
    "else": TokenType.ELSE,
    "export": TokenType.EXPORT,
    "extends": TokenType.EXTENDS,
    "false": TokenType.FALSE,
    "finally": TokenType.FINALLY,
    "for": TokenType.FOR,
    "function": TokenType.FUNCTION,
    "if": TokenType.IF,
    "import": TokenType.IMPORT,
    "in": TokenType.IN,
    "instanceof": TokenType.INSTANCEOF,
    "new": TokenType.NEW,
    "null": TokenType.NULL,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "switch": TokenType.SWITCH,
    "this": TokenType.THIS,
    "throw": TokenType.THROW,
    "true": TokenType.TRUE,
    "try": TokenType.TRY,
    "typeof": TokenType.TYPEOF,
    "var": TokenType.VAR,
    "void": TokenType.VOID,
    "while": TokenType.WHILE,
    "with": TokenType.WITH,
}

# Keyword tokens, for "any word" positions such as property names
KEYWORD_TYPES: set[TokenType] = set(KEYWORDS.values())

# Words that are reserved even though the lexer emits them as NAME
RESERVED_WORDS: set[str] = {"enum"}
STRICT_RESERVED_WORDS: set[str] = {
    "implements", "interface", "let", "package", "private", "protected",
    "public", "static", "yield",
}

OPERATORS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "**": TokenType.STAR_STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "=": TokenType.EQ,
    "==": TokenType.EQ_EQ,
    "===": TokenType.EQ_EQ_EQ,
    "!=": TokenType.BANG_EQ,
    "!==": TokenType.BANG_EQ_EQ,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "<=": TokenType.LT_EQ,
    ">=": TokenType.GT_EQ,
    "&&": TokenType.AMP_AMP,
    "||": TokenType.PIPE_PIPE,
    "??": TokenType.QUESTION_QUESTION,
    "!": TokenType.BANG,
    "&": TokenType.AMP,
    "|": TokenType.PIPE,
    "^": TokenType.CARET,
    "~": TokenType.TILDE,
    "<<": TokenType.LT_LT,
    ">>": TokenType.GT_GT,
    ">>>": TokenType.GT_GT_GT,
    "+=": TokenType.PLUS_EQ,
    "-=": TokenType.MINUS_EQ,
    "*=": TokenType.STAR_EQ,
    "**=": TokenType.STAR_STAR_EQ,
    "/=": TokenType.SLASH_EQ,
    "%=": TokenType.PERCENT_EQ,
    "&=": TokenType.AMP_EQ,
    "|=": TokenType.PIPE_EQ,
    "^=": TokenType.CARET_EQ,
    "<<=": TokenType.LT_LT_EQ,
    ">>=": TokenType.GT_GT_EQ,
    ">>>=": TokenType.GT_GT_GT_EQ,
    "&&=": TokenType.AMP_AMP_EQ,
    "||=": TokenType.PIPE_PIPE_EQ,
    "??=": TokenType.QUESTION_QUESTION_EQ,
    "++": TokenType.PLUS_PLUS,
    "--": TokenType.MINUS_MINUS,
    "=>": TokenType.FAT_ARROW,
    ".": TokenType.DOT,
    "...": TokenType.ELLIPSIS,
    "?": TokenType.QUESTION,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

ASSIGN_OPS: set[TokenType] = {
    TokenType.EQ, TokenType.PLUS_EQ, TokenType.MINUS_EQ, TokenType.STAR_EQ,
    TokenType.STAR_STAR_EQ, TokenType.SLASH_EQ, TokenType.PERCENT_EQ,
    TokenType.AMP_EQ, TokenType.PIPE_EQ, TokenType.CARET_EQ,
    TokenType.LT_LT_EQ, TokenType.GT_GT_EQ, TokenType.GT_GT_GT_EQ,
    TokenType.AMP_AMP_EQ, TokenType.PIPE_PIPE_EQ,
    TokenType.QUESTION_QUESTION_EQ,
}
