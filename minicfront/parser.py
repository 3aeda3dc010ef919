"""Recursive-descent parser that builds an AST for MiniC source text."""

from __future__ import annotations

from typing import List, Optional

from .ast_nodes import (
    ASTNode,
    NodeKind,
    add_var_decl_node,
    create_contain_node,
    create_func_call,
    create_func_def,
    create_var_decl_stmt_node,
)
from .lexer import Lexer
from .tokens import Token, TokenType

_EXPR_START = (TokenType.ID, TokenType.L_PAREN, TokenType.DIGIT)


class ParseError(Exception):
    """Raised when the source text has syntax errors.

    ``errors`` holds every message reported during the parse, each in the
    form ``Line(n): message``.
    """

    def __init__(self, errors: List[str]) -> None:
        super().__init__("\n".join(errors))
        self.errors = list(errors)


class Parser:
    """LL(1) parser over the tokens of one source text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._lexer = Lexer(text)
        self._look = Token(TokenType.EMPTY, "", 1)
        self._errors: List[str] = []

    # -- token handling -------------------------------------------------

    def _advance(self) -> None:
        self._look = self._lexer.next_token()

    def _at(self, *kinds: TokenType) -> bool:
        return self._look.kind in kinds

    def _match(self, kind: TokenType) -> bool:
        if self._look.kind is kind:
            self._advance()
            return True
        return False

    def _error(self, message: str) -> None:
        self._errors.append(f"Line({self._lexer.line}): {message}")

    # -- expressions ----------------------------------------------------

    def _real_param_list(self, params: ASTNode) -> None:
        """realParamList : expr (T_COMMA expr)*"""
        param = self._expr()
        if param is None:
            return
        params.insert_son_node(param)
        while self._match(TokenType.COMMA):
            params.insert_son_node(self._expr())

    def _id_tail(self, tok: Token) -> ASTNode:
        """idTail : T_L_PAREN realParamList? T_R_PAREN | empty"""
        node = ASTNode(NodeKind.LEAF_VAR_ID, line=tok.line, name=tok.value)
        if self._match(TokenType.L_PAREN):
            params = create_contain_node(NodeKind.FUNC_REAL_PARAMS)
            if self._match(TokenType.R_PAREN):
                # A call without arguments yields just the parameter list node.
                return params
            self._real_param_list(params)
            if not self._match(TokenType.R_PAREN):
                self._error("missing right parenthesis in function call")
            node = create_func_call(node, params)
        return node

    def _unary_exp(self) -> Optional[ASTNode]:
        """unaryExp : T_DIGIT | T_L_PAREN expr T_R_PAREN | T_ID idTail"""
        if self._at(TokenType.DIGIT):
            tok = self._look
            self._advance()
            return ASTNode(NodeKind.LEAF_LITERAL_UINT, line=tok.line, value=tok.value)
        if self._match(TokenType.L_PAREN):
            node = self._expr()
            if not self._match(TokenType.R_PAREN):
                self._error("missing right parenthesis")
            return node
        if self._at(TokenType.ID):
            tok = self._look
            self._advance()
            return self._id_tail(tok)
        return None

    def _add_op(self) -> Optional[NodeKind]:
        """addOp : T_ADD | T_SUB"""
        if self._match(TokenType.ADD):
            return NodeKind.ADD
        if self._match(TokenType.SUB):
            return NodeKind.SUB
        return None

    def _add_exp(self) -> Optional[ASTNode]:
        """addExp : unaryExp (addOp unaryExp)*"""
        left = self._unary_exp()
        if left is None:
            return None
        while True:
            op = self._add_op()
            if op is None:
                break
            right = self._unary_exp()
            if right is None:
                break
            left = create_contain_node(op, left, right)
        return left

    def _expr(self) -> Optional[ASTNode]:
        return self._add_exp()

    # -- statements -----------------------------------------------------

    def _return_statement(self) -> Optional[ASTNode]:
        if not self._match(TokenType.RETURN):
            return None
        value = self._expr()
        if not self._match(TokenType.SEMICOLON):
            self._error("missing semicolon after return statement")
        return create_contain_node(NodeKind.RETURN, value)

    def _assign_expr_stmt(self) -> Optional[ASTNode]:
        """assignExprStmt : expr (T_ASSIGN expr)?"""
        left = self._expr()
        if self._match(TokenType.ASSIGN):
            if left is None:
                self._error("left side of assignment must not be empty")
                return None
            right = self._expr()
            return create_contain_node(NodeKind.ASSIGN, left, right)
        return left

    def _statement(self) -> Optional[ASTNode]:
        if self._at(TokenType.RETURN):
            return self._return_statement()
        if self._at(TokenType.L_BRACE):
            return self._block()
        if self._at(TokenType.SEMICOLON):
            self._advance()
            return None
        if self._at(*_EXPR_START):
            node = self._assign_expr_stmt()
            if not self._match(TokenType.SEMICOLON):
                self._error("missing semicolon after statement")
            return node
        return None

    def _var_decl_list(self, stmt: ASTNode) -> None:
        """varDeclList : T_COMMA T_ID varDeclList | T_SEMICOLON"""
        while True:
            if self._match(TokenType.COMMA):
                if not self._at(TokenType.ID):
                    self._error("an identifier must follow a comma")
                    return
                tok = self._look
                add_var_decl_node(stmt, tok.value, tok.line)
                self._advance()
            elif self._match(TokenType.SEMICOLON):
                return
            else:
                self._error(f"illegal token: {int(self._look.kind)}")
                if self._at(TokenType.EOF):
                    return
                self._advance()

    def _var_decl(self) -> Optional[ASTNode]:
        """varDecl : T_INT T_ID varDeclList"""
        if not self._at(TokenType.INT):
            return None
        type_name = self._look.value
        self._advance()
        if not self._at(TokenType.ID):
            self._error("an identifier must follow the type")
            return None
        tok = self._look
        stmt = create_var_decl_stmt_node(type_name, tok.value, tok.line)
        self._advance()
        self._var_decl_list(stmt)
        return stmt

    def _block_item(self) -> Optional[ASTNode]:
        if self._at(TokenType.INT):
            return self._var_decl()
        return self._statement()

    def _block_item_list(self, block: ASTNode) -> None:
        while not self._at(TokenType.R_BRACE):
            item = self._block_item()
            if item is None:
                break
            block.insert_son_node(item)

    def _block(self) -> Optional[ASTNode]:
        """block : T_L_BRACE blockItemList? T_R_BRACE"""
        if not self._match(TokenType.L_BRACE):
            return None
        block = create_contain_node(NodeKind.BLOCK)
        if self._match(TokenType.R_BRACE):
            return block
        self._block_item_list(block)
        if not self._match(TokenType.R_BRACE):
            self._error("missing right brace")
        return block

    # -- top level ------------------------------------------------------

    def _top_tail(self, type_name: str, tok: Token) -> Optional[ASTNode]:
        """idtail : varDeclList | T_L_PAREN T_R_PAREN block"""
        if self._match(TokenType.L_PAREN):
            if self._match(TokenType.R_PAREN):
                block = self._block()
                return create_func_def(type_name, tok.value, tok.line, block, None)
            self._error("missing right parenthesis in function definition")
            return None
        stmt = create_var_decl_stmt_node(type_name, tok.value, tok.line)
        self._var_decl_list(stmt)
        return stmt

    def _compile_unit(self) -> ASTNode:
        """compileUnit : { T_INT T_ID idtail } EOF"""
        root = create_contain_node(NodeKind.COMPILE_UNIT)
        while self._at(TokenType.INT):
            type_name = self._look.value
            self._advance()
            if self._at(TokenType.ID):
                tok = self._look
                self._advance()
                root.insert_son_node(self._top_tail(type_name, tok))
            else:
                self._error("an identifier must follow the type")
        return root

    def parse(self) -> ASTNode:
        """Parse the whole text and return the compile-unit node.

        Raises ParseError if any syntax error was found.
        """
        self._lexer = Lexer(self._text)
        self._errors = []
        self._advance()
        root = self._compile_unit()
        if self._errors:
            raise ParseError(self._errors)
        return root


def parse(text: str) -> ASTNode:
    """Parse ``text`` and return the root of its syntax tree."""
    return Parser(text).parse()