from __future__ import annotations

from pathlib import Path

import pytest

from rcomp.compiler.pipeline import run_pipeline_from_source

GOLDEN = Path(__file__).parent / "golden"


@pytest.mark.parametrize("sample", ["sample1", "sample2", "sample3"])
def test_pipeline_golden(sample: str) -> None:
    source = (GOLDEN / f"{sample}.src").read_text()
    ast_txt, pe_txt, uniq_txt, flat_txt = run_pipeline_from_source(source, file_path=f"{sample}.src")

    assert ast_txt.strip() == (GOLDEN / f"{sample}.ast.txt").read_text().strip()
    assert pe_txt.strip() == (GOLDEN / f"{sample}.pe.txt").read_text().strip()
    assert uniq_txt.strip() == (GOLDEN / f"{sample}.uniq.txt").read_text().strip()
    assert flat_txt.strip() == (GOLDEN / f"{sample}.flat.txt").read_text().strip()
