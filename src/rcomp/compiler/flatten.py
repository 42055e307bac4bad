from __future__ import annotations

import logging
from typing import Set

import rcomp.rcomp_ast as ast
from rcomp.errors import InternalCompilerError
from .ir import Assign, FlatProgram

logger = logging.getLogger(__name__)


class _FlattenState:
    def __init__(self) -> None:
        self.counter = 0
        self.defined: Set[str] = set()

    def fresh(self) -> str:
        # "$" never appears in a source symbol or a uniquified name
        self.counter += 1
        return f"$tmp{self.counter}"


class Flattener:
    """Linearize a uniquified tree into assignments plus a tail.

    Operands are reduced to atoms (literals and variables); any compound
    operand, ``(read)`` included, is computed into a fresh temporary first.
    A let is eliminated by assigning its bound expression to its name ahead
    of the statements of its body.
    """

    def __init__(self) -> None:
        self.state = _FlattenState()
        self.statements: list[Assign] = []

    def emit(self, target: str, expr: ast.Expression) -> None:
        if target in self.state.defined:
            raise InternalCompilerError(
                message=f"Variable '{target}' is assigned twice",
                node=expr,
                notes=["Run uniquify before flatten"],
            )
        logger.debug(f"emit {target} := {expr!r}")
        self.statements.append(Assign(target, expr))
        self.state.defined.add(target)

    def flatten(self, node: ast.Expression) -> FlatProgram:
        tail = self.flatten_expr(node)
        return FlatProgram(statements=self.statements, tail=tail)

    def flatten_expr(self, node: ast.Expression, atomic: bool = False) -> ast.Expression:
        """Emit the statements node needs; return its value as a simple expression.

        With ``atomic`` set, a compound value is spilled to a fresh temporary
        and the temporary is returned instead.
        """
        if isinstance(node, ast.Fixnum):
            simple = ast.Fixnum(node.value)
        elif isinstance(node, ast.Var):
            if node.name not in self.state.defined:
                raise InternalCompilerError(
                    message=f"Unresolved variable '{node.name}'",
                    location=node.location,
                    node=node,
                    notes=["Every reference must follow the assignment of its binding;"
                           " was uniquify skipped, or is the variable free?"],
                )
            simple = ast.Var(node.name)
        elif isinstance(node, ast.Read):
            simple = ast.Read()
        elif isinstance(node, ast.Neg):
            simple = ast.Neg(self.flatten_expr(node.operand, atomic=True))
        elif isinstance(node, ast.Add):
            left = self.flatten_expr(node.left, atomic=True)
            right = self.flatten_expr(node.right, atomic=True)
            simple = ast.Add(left, right)
        elif isinstance(node, ast.Let):
            self.emit(node.name, self.flatten_expr(node.bound_expr))
            return self.flatten_expr(node.body, atomic)
        else:
            raise InternalCompilerError(
                message=f"Cannot flatten node of kind {type(node).__name__}",
                node=node,
            )
        if atomic and not simple.is_atomic:
            tmp = self.state.fresh()
            self.emit(tmp, simple)
            return ast.Var(tmp)
        return simple


def flatten(node: ast.Expression) -> FlatProgram:
    return Flattener().flatten(node)
