from dataclasses import dataclass
from typing import Any, List, Optional
import argparse
import logging
import sys
from rcomp.errors import CompileError, SourceLocation
from rcomp.parser import Parser
from rcomp.printer import print_ast, dump_flat
from rcomp.compiler.ir import FlatProgram
from rcomp.compiler.pipeline import STAGES, run_pipeline

logger = logging.getLogger(__name__)

@dataclass
class CompileOptions:
    """Compilation options for rcomp"""
    stop_after: str = "flatten"  # one of STAGES
    fold_let_bodies: bool = False  # partial_eval descends into let
    rename_let_initializers: bool = False  # uniquify visits let bound expressions
    dump_stages: bool = False
    debug: bool = False

class RCompiler:
    """Main compiler interface: source text in, flattened program out"""

    def __init__(self, options: CompileOptions = None):
        self.options = options or CompileOptions()
        self.parser = Parser()
        self.dumps: List[str] = []

    def _record(self, stage: str, result: Any) -> None:
        if not self.options.dump_stages:
            return
        text = dump_flat(result) if isinstance(result, FlatProgram) else print_ast(result)
        self.dumps.append(f"{stage}:\n{text}\n")

    def compile_str(self, source: str, source_path: str = "<string>") -> Any:
        """Compile a string of source code up to options.stop_after.

        Raises ParseError for malformed input and InternalCompilerError when a
        pass meets input it cannot handle.
        """
        self.dumps = []
        tree = self.parser.parse(source, file_path=source_path)
        return run_pipeline(
            tree,
            stop_after=self.options.stop_after,
            fold_let_bodies=self.options.fold_let_bodies,
            rename_let_initializers=self.options.rename_let_initializers,
            on_stage=self._record,
        )

    def render(self, result: Any) -> str:
        if isinstance(result, FlatProgram):
            return dump_flat(result)
        return print_ast(result)

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="rcomp compiler front end")
    parser.add_argument('program', help="Program text, or '-' to read it from standard input")
    parser.add_argument('--stop-after', choices=STAGES, default='flatten',
                        help='Last stage to run (default: flatten)')
    parser.add_argument('--dump-stages', action='store_true',
                        help='Print the program after every stage')
    parser.add_argument('--fold-let-bodies', action='store_true',
                        help='Also fold constants inside let expressions')
    parser.add_argument('--rename-let-initializers', action='store_true',
                        help='Also uniquify the bound expression of each let')
    parser.add_argument('--debug', '-g', action='store_true',
                        help='Enable debug logging')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point"""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format='%(name)s - %(levelname)s - %(message)s',
    )

    options = CompileOptions(
        stop_after=args.stop_after,
        fold_let_bodies=args.fold_let_bodies,
        rename_let_initializers=args.rename_let_initializers,
        dump_stages=args.dump_stages,
        debug=args.debug,
    )
    if options.debug:
        logging.getLogger('rcomp').setLevel(logging.DEBUG)

    if args.program == '-':
        source, source_path = sys.stdin.read(), "<stdin>"
    else:
        source, source_path = args.program, "<argv>"

    logger.debug(f"Compiling {source_path} with {options}")
    compiler = RCompiler(options)
    try:
        result = compiler.compile_str(source, source_path)
    except CompileError as e:
        print(str(e), file=sys.stderr)
        return 1
    except Exception as e:
        # Unexpected error - convert to CompileError with full traceback
        error = CompileError.from_exception(e, location=SourceLocation(source_path, 1, 1))
        print(str(error), file=sys.stderr)
        return 1

    if options.dump_stages:
        print("\n".join(compiler.dumps), end="")
    else:
        print(compiler.render(result))
    return 0

if __name__ == "__main__":
    sys.exit(main())
