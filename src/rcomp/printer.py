"""Render trees and flattened programs back to concrete syntax."""
import rcomp.rcomp_ast as ast
from rcomp.compiler.ir import Assign, FlatProgram

def print_ast(node) -> str:
    if isinstance(node, ast.Fixnum):
        return str(node.value)
    if isinstance(node, ast.Read):
        return "(read)"
    if isinstance(node, ast.Var):
        return node.name
    if isinstance(node, ast.Neg):
        return f"(- {print_ast(node.operand)})"
    if isinstance(node, ast.Add):
        return f"(+ {print_ast(node.left)} {print_ast(node.right)})"
    if isinstance(node, ast.Let):
        return f"(let ([{node.name} {print_ast(node.bound_expr)}]) {print_ast(node.body)})"
    if isinstance(node, Assign):
        return f"(assign {node.target} {print_ast(node.expr)})"
    raise TypeError(f"print_ast: cannot render {type(node).__name__}")

def dump_flat(program: FlatProgram) -> str:
    """One line per statement, tail last"""
    return "\n".join(print_ast(item) for item in program)
