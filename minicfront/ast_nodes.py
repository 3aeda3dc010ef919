"""Abstract syntax tree nodes and the helpers that build them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class NodeKind(Enum):
    """Operator or leaf kind of an AST node."""

    COMPILE_UNIT = auto()
    FUNC_DEF = auto()
    FUNC_FORMAL_PARAMS = auto()
    FUNC_CALL = auto()
    FUNC_REAL_PARAMS = auto()
    BLOCK = auto()
    RETURN = auto()
    ASSIGN = auto()
    ADD = auto()
    SUB = auto()
    DECL_STMT = auto()
    VAR_DECL = auto()
    LEAF_LITERAL_UINT = auto()
    LEAF_VAR_ID = auto()
    LEAF_TYPE = auto()


@dataclass(eq=False)
class ASTNode:
    """A node of the syntax tree; interior nodes keep their children in ``sons``."""

    kind: NodeKind
    line: int = -1
    name: Optional[str] = None
    value: Optional[int] = None
    type_name: Optional[str] = None
    sons: List["ASTNode"] = field(default_factory=list)
    parent: Optional["ASTNode"] = field(default=None, repr=False)

    def insert_son_node(self, node: Optional["ASTNode"]) -> Optional["ASTNode"]:
        """Append ``node`` as the last child; ``None`` is ignored."""
        if node is None:
            return None
        node.parent = self
        self.sons.append(node)
        return node


def create_contain_node(kind: NodeKind, *args: Optional[ASTNode]) -> ASTNode:
    """Create an interior node holding the given children, skipping ``None``."""
    node = ASTNode(kind)
    for son in args:
        node.insert_son_node(son)
    if node.sons:
        node.line = node.sons[0].line
    return node


def create_func_call(name_node: ASTNode, params_node: Optional[ASTNode]) -> ASTNode:
    """Create a function-call node from the callee name and actual parameters."""
    if params_node is None:
        params_node = ASTNode(NodeKind.FUNC_REAL_PARAMS, line=name_node.line)
    node = ASTNode(NodeKind.FUNC_CALL, line=name_node.line, name=name_node.name)
    node.insert_son_node(name_node)
    node.insert_son_node(params_node)
    return node


def _var_decl(type_name: str, name: str, line: int) -> ASTNode:
    decl = ASTNode(NodeKind.VAR_DECL, line=line, name=name, type_name=type_name)
    decl.insert_son_node(ASTNode(NodeKind.LEAF_TYPE, line=line, type_name=type_name))
    decl.insert_son_node(ASTNode(NodeKind.LEAF_VAR_ID, line=line, name=name))
    return decl


def create_var_decl_stmt_node(type_name: str, name: str, line: int) -> ASTNode:
    """Create a declaration statement holding its first variable declaration."""
    stmt = ASTNode(NodeKind.DECL_STMT, line=line, type_name=type_name)
    stmt.insert_son_node(_var_decl(type_name, name, line))
    return stmt


def add_var_decl_node(stmt_node: ASTNode, name: str, line: int) -> ASTNode:
    """Add another variable of the statement's type to a declaration statement."""
    if stmt_node.kind is not NodeKind.DECL_STMT:
        raise ValueError("variables can only be added to a declaration statement")
    type_name = stmt_node.type_name
    if type_name is None:
        if not stmt_node.sons:
            raise ValueError("declaration statement has no type")
        type_name = stmt_node.sons[0].type_name
    decl = _var_decl(type_name, name, line)
    stmt_node.insert_son_node(decl)
    return decl


def create_func_def(
    type_name: str,
    name: str,
    line: int,
    block: Optional[ASTNode],
    params: Optional[ASTNode],
) -> ASTNode:
    """Create a function definition: return type, name, formal parameters, body."""
    if params is None:
        params = ASTNode(NodeKind.FUNC_FORMAL_PARAMS, line=line)
    if block is None:
        block = ASTNode(NodeKind.BLOCK, line=line)
    node = ASTNode(NodeKind.FUNC_DEF, line=line, name=name, type_name=type_name)
    node.insert_son_node(ASTNode(NodeKind.LEAF_TYPE, line=line, type_name=type_name))
    node.insert_son_node(ASTNode(NodeKind.LEAF_VAR_ID, line=line, name=name))
    node.insert_son_node(params)
    node.insert_son_node(block)
    return node