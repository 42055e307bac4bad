from __future__ import annotations

import rcomp.rcomp_ast as ast
from rcomp.compiler.flatten import flatten
from rcomp.compiler.pipeline import run_pipeline
from rcomp.printer import dump_flat


def make_binop_tree() -> ast.Expression:
    # (+ (- (read)) (+ 1 2)), built by hand
    left = ast.Neg(ast.Read())
    right = ast.Add(ast.Fixnum(1), ast.Fixnum(2))
    return ast.Add(left, right)


def test_flat_binop_golden():
    got = dump_flat(flatten(make_binop_tree()))
    golden = "\n".join([
        "(assign $tmp1 (read))",
        "(assign $tmp2 (- $tmp1))",
        "(assign $tmp3 (+ 1 2))",
        "(+ $tmp2 $tmp3)",
    ])
    assert got.strip() == golden


def test_pipeline_folds_before_flattening():
    stages: list[str] = []
    result = run_pipeline(make_binop_tree(), on_stage=lambda name, _result: stages.append(name))
    assert stages == ["parse", "partial_eval", "uniquify", "flatten"]
    assert dump_flat(result) == "(assign $tmp1 (read))\n(assign $tmp2 (- $tmp1))\n(+ $tmp2 3)"
