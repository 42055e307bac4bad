from dataclasses import dataclass, field
from traceback import format_exception
from typing import List, Optional, Any

@dataclass
class SourceLocation:
    """Location in source code"""
    file: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"

@dataclass
class CompileError(Exception):
    """An error reported to the user of the compiler.

    Rendered as a header line followed by optional sections: the offending
    source line with a caret, the offending expression, notes, and (for
    internal errors) the Python traceback.
    """
    message: str
    error_type: str = "CompilationError"  # "ParseError", "InternalError", ...
    location: Optional[SourceLocation] = None
    node: Optional[Any] = None  # expression the error is about
    context: Optional[str] = None  # from get_source_context
    notes: List[str] = field(default_factory=list)
    traceback: Optional[str] = None

    def header(self) -> str:
        where = self.location if self.location else "unknown location"
        return f"{self.error_type} at {where}: {self.message}"

    def caret(self) -> str:
        if not (self.location and self.location.column):
            return ""
        # context lines are prefixed with "> NNNN | "
        return "\n" + " " * (self.location.column + 8) + "^"

    def sections(self) -> List[str]:
        found = [self.header()]
        if self.context:
            found.append("Context:\n" + self.context + self.caret())
        if self.node is not None:
            found.append(f"In expression: {describe_node(self.node)}")
        if self.notes:
            found.append("Notes:\n" + "\n".join(f"  - {note}" for note in self.notes))
        if self.traceback:
            found.append("Python traceback:\n" + self.traceback.rstrip())
        return found

    def __str__(self) -> str:
        return "\n\n".join(self.sections())

    @classmethod
    def from_exception(cls, exc: Exception, location: Optional[SourceLocation] = None) -> 'CompileError':
        """Wrap an unexpected Python exception as an internal compiler error"""
        return cls(
            message=f"{type(exc).__name__}: {exc}",
            error_type="InternalError",
            location=location,
            traceback="".join(format_exception(type(exc), exc, exc.__traceback__)),
            notes=["This is a bug in rcomp, not in the program being compiled"],
        )

@dataclass
class ParseError(CompileError):
    """Malformed source text. Fatal: no AST is produced."""
    error_type: str = "ParseError"

@dataclass
class InternalCompilerError(CompileError):
    """A rewriting pass was handed input that breaks its preconditions."""
    error_type: str = "InternalError"

def describe_node(node: Any, limit: int = 60) -> str:
    """Concrete syntax of node, shortened to at most limit characters"""
    from rcomp.printer import print_ast
    try:
        text = print_ast(node)
    except TypeError:
        return f"<{type(node).__name__}>"
    if len(text) > limit:
        text = text[:limit - 3] + "..."
    return text

def get_source_context(source: str, line: int, context_lines: int = 0) -> Optional[str]:
    """The given line of in-memory source, with context_lines either side"""
    lines = source.splitlines()
    if not 1 <= line <= len(lines):
        return None
    first = max(1, line - context_lines)
    last = min(len(lines), line + context_lines)
    return "\n".join(
        f"{'> ' if n == line else '  '}{n:4d} | {lines[n - 1].rstrip()}"
        for n in range(first, last + 1)
    )
