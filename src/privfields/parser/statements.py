"""Statement dispatch, blocks, and variable declarations."""

from ..tokens import TokenType
from ..ast_nodes import (
    Block, DebuggerStmt, EmptyStmt, ExprStmt, VarDeclarator, VarDeclStmt,
)


class StatementsMixin:

    def _parse_block(self) -> Block:
        tok = self._expect(TokenType.LBRACE)
        stmts = []
        while not self._check(TokenType.RBRACE) and not self._at_end():
            stmts.append(self._parse_statement())
        self._expect(TokenType.RBRACE)
        return Block(statements=stmts, line=tok.line, col=tok.col)

    def _parse_statement(self):
        tok = self._peek()

        if tok.type == TokenType.LBRACE:
            return self._parse_block()
        if tok.type == TokenType.SEMICOLON:
            self._advance()
            return EmptyStmt(line=tok.line, col=tok.col)
        if tok.type in (TokenType.VAR, TokenType.CONST) or self._is_let_declaration():
            decl = self._parse_var_decl()
            self._semicolon()
            return decl
        if tok.type == TokenType.FUNCTION:
            return self._parse_function(is_statement=True)
        if self._is_async_function():
            self._advance()
            return self._parse_function(is_statement=True, is_async=True)
        if tok.type == TokenType.CLASS:
            return self._parse_class(is_statement=True)
        if tok.type == TokenType.RETURN:
            return self._parse_return_stmt()
        if tok.type == TokenType.IF:
            return self._parse_if_stmt()
        if tok.type == TokenType.WHILE:
            return self._parse_while_stmt()
        if tok.type == TokenType.DO:
            return self._parse_do_while_stmt()
        if tok.type == TokenType.FOR:
            return self._parse_for_stmt()
        if tok.type == TokenType.SWITCH:
            return self._parse_switch_stmt()
        if tok.type in (TokenType.BREAK, TokenType.CONTINUE):
            return self._parse_break_continue()
        if tok.type == TokenType.TRY:
            return self._parse_try_catch()
        if tok.type == TokenType.THROW:
            return self._parse_throw()
        if tok.type == TokenType.DEBUGGER:
            self._advance()
            self._semicolon()
            return DebuggerStmt(line=tok.line, col=tok.col)
        if tok.type in (TokenType.IMPORT, TokenType.EXPORT, TokenType.WITH):
            raise self._error(f"'{tok.value}' statements are not supported")

        return self._parse_expr_stmt()

    def _parse_expr_stmt(self) -> ExprStmt:
        tok = self._peek()
        expr = self._parse_expression()
        self._semicolon()
        return ExprStmt(expr=expr, line=tok.line, col=tok.col)

    # ---- Variable declarations ----

    def _is_let_declaration(self) -> bool:
        return self._is_contextual("let") and self._peek(1).type == TokenType.NAME

    def _is_async_function(self) -> bool:
        nxt = self._peek(1)
        return (self.options.ecma_version >= 8 and self._is_contextual("async")
                and nxt.type == TokenType.FUNCTION and not nxt.nl_before)

    def _parse_var_decl(self) -> VarDeclStmt:
        tok = self._advance()  # var / let / const
        kind = tok.value
        declarations = []
        while True:
            name = self._parse_ident()
            if kind != "var" and name.name == "let":
                raise self._error("let is disallowed as a lexically bound name")
            init = None
            if self._match(TokenType.EQ):
                init = self._parse_maybe_assign()
            elif kind == "const":
                raise self._error("Missing initializer in const declaration")
            declarations.append(VarDeclarator(name=name, init=init,
                                              line=name.line, col=name.col))
            if not self._match(TokenType.COMMA):
                break
        return VarDeclStmt(kind=kind, declarations=declarations,
                           line=tok.line, col=tok.col)
