"""Control flow statement parsing: if, loops, switch, try, throw, return."""

from ..tokens import TokenType
from ..ast_nodes import (
    BreakStmt, ContinueStmt, DoWhileStmt, ForInStmt, ForStmt, IfStmt,
    ReturnStmt, SwitchCase, SwitchStmt, ThrowStmt, TryCatchStmt,
    VarDeclarator, VarDeclStmt, WhileStmt,
)


class ControlFlowMixin:

    def _parse_paren_expr(self):
        self._expect(TokenType.LPAREN)
        expr = self._parse_expression()
        self._expect(TokenType.RPAREN)
        return expr

    def _parse_return_stmt(self) -> ReturnStmt:
        tok = self._expect(TokenType.RETURN)
        if not self.in_function:
            raise self._error("'return' outside of function", tok)
        value = None
        if not self._check(TokenType.SEMICOLON) and not self._can_insert_semicolon():
            value = self._parse_expression()
        self._semicolon()
        return ReturnStmt(value=value, line=tok.line, col=tok.col)

    def _parse_if_stmt(self) -> IfStmt:
        tok = self._expect(TokenType.IF)
        condition = self._parse_paren_expr()
        then_block = self._parse_statement()
        else_block = None
        if self._match(TokenType.ELSE):
            else_block = self._parse_statement()
        return IfStmt(condition=condition, then_block=then_block,
                      else_block=else_block, line=tok.line, col=tok.col)

    def _parse_while_stmt(self) -> WhileStmt:
        tok = self._expect(TokenType.WHILE)
        condition = self._parse_paren_expr()
        body = self._parse_statement()
        return WhileStmt(condition=condition, body=body, line=tok.line, col=tok.col)

    def _parse_do_while_stmt(self) -> DoWhileStmt:
        tok = self._expect(TokenType.DO)
        body = self._parse_statement()
        self._expect(TokenType.WHILE)
        condition = self._parse_paren_expr()
        self._match(TokenType.SEMICOLON)
        return DoWhileStmt(body=body, condition=condition, line=tok.line, col=tok.col)

    # ---- for / for-in / for-of ----

    def _is_for_in_of(self, offset: int) -> bool:
        """Check whether the tokens at ``offset`` read `name in` or `name of`."""
        name = self._peek(offset)
        after = self._peek(offset + 1)
        if name.type != TokenType.NAME:
            return False
        return after.type == TokenType.IN or (
            after.type == TokenType.NAME and after.value == "of"
            and self.options.ecma_version >= 6)

    def _parse_for_stmt(self):
        tok = self._expect(TokenType.FOR)
        self._expect(TokenType.LPAREN)

        is_decl = self._check(TokenType.VAR, TokenType.CONST) or self._is_let_declaration()
        if is_decl and self._is_for_in_of(1):
            kind_tok = self._advance()
            name = self._parse_ident()
            left = VarDeclStmt(kind=kind_tok.value,
                               declarations=[VarDeclarator(name=name, line=name.line,
                                                           col=name.col)],
                               line=kind_tok.line, col=kind_tok.col)
            return self._parse_for_in_rest(tok, left)
        if not is_decl and self._is_for_in_of(0):
            return self._parse_for_in_rest(tok, self._parse_ident())

        init = None
        if is_decl:
            init = self._parse_var_decl()
        elif not self._check(TokenType.SEMICOLON):
            init = self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        condition = None
        if not self._check(TokenType.SEMICOLON):
            condition = self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        update = None
        if not self._check(TokenType.RPAREN):
            update = self._parse_expression()
        self._expect(TokenType.RPAREN)
        body = self._parse_statement()
        return ForStmt(init=init, condition=condition, update=update, body=body,
                       line=tok.line, col=tok.col)

    def _parse_for_in_rest(self, tok, left) -> ForInStmt:
        of = not self._match(TokenType.IN)
        if of:
            self._advance()  # of
            right = self._parse_maybe_assign()
        else:
            right = self._parse_expression()
        self._expect(TokenType.RPAREN)
        body = self._parse_statement()
        return ForInStmt(left=left, right=right, body=body, of=of,
                         line=tok.line, col=tok.col)

    # ---- switch ----

    def _parse_switch_stmt(self) -> SwitchStmt:
        tok = self._expect(TokenType.SWITCH)
        discriminant = self._parse_paren_expr()
        self._expect(TokenType.LBRACE)
        cases = []
        saw_default = False
        while not self._check(TokenType.RBRACE) and not self._at_end():
            case_tok = self._peek()
            if self._match(TokenType.CASE):
                test = self._parse_expression()
            elif self._match(TokenType.DEFAULT):
                if saw_default:
                    raise self._error("Multiple default clauses", case_tok)
                saw_default = True
                test = None
            else:
                raise self._unexpected()
            self._expect(TokenType.COLON)
            body = []
            while not self._check(TokenType.CASE, TokenType.DEFAULT, TokenType.RBRACE) \
                    and not self._at_end():
                body.append(self._parse_statement())
            cases.append(SwitchCase(test=test, body=body,
                                    line=case_tok.line, col=case_tok.col))
        self._expect(TokenType.RBRACE)
        return SwitchStmt(discriminant=discriminant, cases=cases,
                          line=tok.line, col=tok.col)

    # ---- break / continue / throw / try ----

    def _parse_break_continue(self):
        tok = self._advance()
        self._semicolon()
        if tok.type == TokenType.BREAK:
            return BreakStmt(line=tok.line, col=tok.col)
        return ContinueStmt(line=tok.line, col=tok.col)

    def _parse_throw(self) -> ThrowStmt:
        tok = self._expect(TokenType.THROW)
        if self._peek().nl_before:
            raise self._error("Illegal newline after throw", tok)
        expr = self._parse_expression()
        self._semicolon()
        return ThrowStmt(expr=expr, line=tok.line, col=tok.col)

    def _parse_try_catch(self) -> TryCatchStmt:
        tok = self._expect(TokenType.TRY)
        try_block = self._parse_block()
        catch_param = None
        catch_block = None
        finally_block = None
        if self._match(TokenType.CATCH):
            if self._match(TokenType.LPAREN):
                catch_param = self._parse_ident()
                self._expect(TokenType.RPAREN)
            catch_block = self._parse_block()
        if self._match(TokenType.FINALLY):
            finally_block = self._parse_block()
        if catch_block is None and finally_block is None:
            raise self._error("Missing catch or finally clause", tok)
        return TryCatchStmt(try_block=try_block, catch_param=catch_param,
                            catch_block=catch_block, finally_block=finally_block,
                            line=tok.line, col=tok.col)
