import unittest
from rcomp.errors import (CompileError, InternalCompilerError, ParseError, SourceLocation,
                          describe_node, get_source_context)
from rcomp.rcomp import RCompiler
import rcomp.rcomp_ast as ast

class TestCompileErrorText(unittest.TestCase):
    def test_header_without_location(self):
        error = CompileError(message="boom")
        self.assertEqual(str(error), "CompilationError at unknown location: boom")

    def test_free_variable_names_the_expression(self):
        with self.assertRaises(InternalCompilerError) as cm:
            RCompiler().compile_str("(+ 1 x)")
        error = cm.exception
        self.assertEqual(error.node, ast.Var("x.0"))
        self.assertIn("In expression: x.0", str(error))

    def test_unprintable_node_is_named_by_kind(self):
        error = InternalCompilerError(message="odd node", node=ast.Expression())
        self.assertIn("In expression: <Expression>", str(error))

    def test_sections_are_ordered(self):
        error = ParseError(
            message="Syntax error at '3'",
            location=SourceLocation("<string>", 1, 8),
            context=get_source_context("(+ 1 2 3)", 1),
            node=ast.Fixnum(3),
            notes=["one", "two"],
        )
        text = str(error)
        self.assertLess(text.index("Context:"), text.index("In expression: 3"))
        self.assertLess(text.index("In expression: 3"), text.index("Notes:\n  - one\n  - two"))

    def test_from_exception_keeps_traceback(self):
        try:
            {}["missing"]
        except KeyError as e:
            error = CompileError.from_exception(e)
        self.assertEqual(error.error_type, "InternalError")
        self.assertEqual(error.message, "KeyError: 'missing'")
        self.assertIn("Python traceback:", str(error))
        self.assertIn("test_from_exception_keeps_traceback", error.traceback)

class TestDescribeNode(unittest.TestCase):
    def test_short_expression(self):
        self.assertEqual(describe_node(ast.Add(ast.Read(), ast.Fixnum(2))), "(+ (read) 2)")

    def test_long_expression_is_shortened(self):
        node = ast.Var("v" * 100)
        text = describe_node(node, limit=20)
        self.assertEqual(len(text), 20)
        self.assertTrue(text.endswith("..."))

class TestSourceContext(unittest.TestCase):
    def test_marks_the_requested_line(self):
        self.assertEqual(get_source_context("1\n(+ 1\n 2", 2, context_lines=1),
                         "     1 | 1\n>    2 | (+ 1\n     3 |  2")

    def test_out_of_range_line(self):
        self.assertIsNone(get_source_context("1", 5))

if __name__ == '__main__':
    unittest.main()
