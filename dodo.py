"""
doit tasks for testing rcomp.
Run with: doit
"""

# Python test files
PYTHON_TESTS = [
    'tests/test_parsing.py',
    'tests/test_symbol_table.py',
    'tests/test_partial_eval.py',
    'tests/test_uniquify.py',
    'tests/test_flatten.py',
    'tests/test_cli.py',
]

GOLDEN_TESTS = [
    'src/rcomp/compiler/tests/test_golden_pipeline.py',
    'src/rcomp/compiler/tests/test_golden_flat_binop.py',
]

SOURCES = [
    'src/rcomp/lexer.py',
    'src/rcomp/parser.py',
    'src/rcomp/rcomp_ast.py',
    'src/rcomp/symbol_table.py',
    'src/rcomp/printer.py',
    'src/rcomp/compiler/partial_eval.py',
    'src/rcomp/compiler/uniquify.py',
    'src/rcomp/compiler/flatten.py',
    'src/rcomp/compiler/pipeline.py',
]

def task_test_python():
    """Run Python unit tests"""
    def run_python_tests():
        import pytest
        return pytest.main(['-v'] + PYTHON_TESTS) == 0

    return {
        'actions': [run_python_tests],
        'file_dep': PYTHON_TESTS + SOURCES,
        'verbosity': 2,
    }

def task_test_golden():
    """Run pipeline golden tests"""
    def run_golden_tests():
        import pytest
        return pytest.main(['-v'] + GOLDEN_TESTS) == 0

    return {
        'actions': [run_golden_tests],
        'file_dep': GOLDEN_TESTS + SOURCES,
        'verbosity': 2,
    }

def task_test():
    """Run all tests"""
    return {
        'actions': None,
        'task_dep': ['test_python', 'test_golden'],
    }
