from __future__ import annotations

import logging

import rcomp.rcomp_ast as ast
from rcomp.errors import InternalCompilerError
from rcomp.symbol_table import SymbolTable

logger = logging.getLogger(__name__)


def rename(name: str, suffix: int) -> str:
    """Final name of a binding: "." never appears in a source symbol."""
    return f"{name}.{suffix}"


class Uniquifier:
    """Give every let binding a program-wide unique name, in place.

    A reference takes the suffix of its innermost enclosing binding; a free
    reference takes suffix 0. By default the bound expression of a let is
    not visited (its references keep their source names); set
    ``rename_let_initializers`` to rewrite it in the enclosing scope.
    """

    def __init__(self, table: SymbolTable | None = None, rename_let_initializers: bool = False) -> None:
        self.table = table if table is not None else SymbolTable()
        self.rename_let_initializers = rename_let_initializers

    def visit(self, node: ast.Expression) -> ast.Expression:
        if isinstance(node, ast.Var):
            node.name = rename(node.name, self.table.get(node.name))
        elif isinstance(node, ast.Let):
            if self.rename_let_initializers:
                self.visit(node.bound_expr)
            with self.table.scope(node.name) as suffix:
                self.visit(node.body)
            logger.debug(f"let {node.name} -> {rename(node.name, suffix)}")
            node.name = rename(node.name, suffix)
        elif isinstance(node, (ast.Neg, ast.Add)):
            for child in node.children:
                self.visit(child)
        elif not isinstance(node, (ast.Fixnum, ast.Read)):
            raise InternalCompilerError(
                message=f"Cannot uniquify node of kind {type(node).__name__}",
                node=node,
            )
        return node


def uniquify(node: ast.Expression, table: SymbolTable | None = None,
             rename_let_initializers: bool = False) -> ast.Expression:
    return Uniquifier(table, rename_let_initializers).visit(node)
