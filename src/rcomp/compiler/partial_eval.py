from __future__ import annotations

import logging

import rcomp.rcomp_ast as ast

logger = logging.getLogger(__name__)


def partial_eval(node: ast.Expression, fold_let_bodies: bool = False) -> ast.Expression:
    """Fold constant Neg/Add subtrees post-order, in place.

    A folded node is replaced in its parent by a new Fixnum and its operands
    are dropped. Returns the root, which is itself a new node when the whole
    tree folds.

    Let nodes are left alone unless ``fold_let_bodies`` is set; by default
    neither the bound expression nor the body of a let is visited.
    """
    if isinstance(node, ast.Neg):
        operand = partial_eval(node.operand, fold_let_bodies)
        if isinstance(operand, ast.Fixnum):
            return _fold(node, -operand.value)
    elif isinstance(node, ast.Add):
        left = partial_eval(node.left, fold_let_bodies)
        right = partial_eval(node.right, fold_let_bodies)
        if isinstance(left, ast.Fixnum) and isinstance(right, ast.Fixnum):
            return _fold(node, left.value + right.value)
    elif isinstance(node, ast.Let) and fold_let_bodies:
        partial_eval(node.bound_expr, fold_let_bodies)
        partial_eval(node.body, fold_let_bodies)
    return node


def _fold(node: ast.Expression, value: int) -> ast.Fixnum:
    folded = ast.Fixnum(value)
    folded.location = node.location
    logger.debug("fold %s -> %d", type(node).__name__, value)
    node.replace_with(folded)
    return folded
