from __future__ import annotations

import logging
from typing import Callable, Union

import rcomp.rcomp_ast as ast
from rcomp.symbol_table import SymbolTable
from .partial_eval import partial_eval
from .uniquify import uniquify
from .flatten import flatten
from .ir import FlatProgram

logger = logging.getLogger(__name__)

STAGES = ("parse", "partial_eval", "uniquify", "flatten")

StageResult = Union[ast.Expression, FlatProgram]


def run_pipeline(
    root: ast.Expression,
    stop_after: str = "flatten",
    fold_let_bodies: bool = False,
    rename_let_initializers: bool = False,
    on_stage: Callable[[str, StageResult], None] | None = None,
) -> StageResult:
    """Run the passes over a parsed tree, in order, up to and including stop_after.

    on_stage is called with each stage's name and result as soon as the stage
    completes; the tree passes rewrite in place, so render it there if an
    intermediate form must be kept.
    """
    if stop_after not in STAGES:
        raise ValueError(f"Unknown stage {stop_after!r}; expected one of {', '.join(STAGES)}")

    result: StageResult = root
    passes: list[tuple[str, Callable[[ast.Expression], StageResult]]] = [
        ("partial_eval", lambda t: partial_eval(t, fold_let_bodies=fold_let_bodies)),
        ("uniquify", lambda t: uniquify(t, SymbolTable(), rename_let_initializers=rename_let_initializers)),
        ("flatten", flatten),
    ]
    if on_stage:
        on_stage("parse", result)
    for name, run in passes:
        if STAGES.index(name) > STAGES.index(stop_after):
            break
        logger.debug(f"running {name}")
        result = run(result)
        if on_stage:
            on_stage(name, result)
    return result


def run_pipeline_from_source(source: str, file_path: str = "<mem>") -> tuple[str, str, str, str]:
    """Parse, then run every pass.

    Returns the rendering after each stage: (ast_txt, partial_eval_txt, uniquify_txt, flat_txt).
    """
    from rcomp.parser import Parser
    from rcomp.printer import print_ast, dump_flat

    texts: dict[str, str] = {}

    def record(stage: str, result: StageResult) -> None:
        texts[stage] = dump_flat(result) if isinstance(result, FlatProgram) else print_ast(result)

    root = Parser().parse(source, file_path=file_path)
    run_pipeline(root, on_stage=record)
    return texts["parse"], texts["partial_eval"], texts["uniquify"], texts["flatten"]
