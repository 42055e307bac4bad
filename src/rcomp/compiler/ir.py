from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import rcomp.rcomp_ast as ast


@dataclass(slots=True)
class Assign:
    """target := expr, where expr is atomic or one primitive over atoms."""
    target: str
    expr: ast.Expression


@dataclass(slots=True)
class FlatProgram:
    statements: list[Assign] = field(default_factory=list)
    tail: ast.Expression | None = None

    def __iter__(self) -> Iterator[Assign | ast.Expression]:
        """Walk the statements in order, then the tail."""
        yield from self.statements
        if self.tail is not None:
            yield self.tail

    def __len__(self) -> int:
        return len(self.statements) + (self.tail is not None)

    def assigned(self) -> list[str]:
        return [stmt.target for stmt in self.statements]

