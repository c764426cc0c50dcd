"""Lexer that recognises `#name` private names."""

from ..lexer import Lexer
from ..tokens import TokenType


class PrivateNameLexer(Lexer):

    def _read_token(self, ch: str):
        if ch == '#':
            line, col, start = self.line, self.col, self.pos
            self._advance()  # #
            # An empty word is left for the parser to reject
            self._emit(TokenType.PRIVATE_NAME, self.read_word(), line, col, start)
            return
        super()._read_token(ch)
