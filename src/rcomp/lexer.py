import ply.lex as lex
from rcomp.errors import ParseError, SourceLocation, get_source_context
import logging
import re

logger = logging.getLogger(__name__)

class Lexer:
    # A string containing ignored characters (spaces and tabs)
    t_ignore = ' \t\r'

    # Keywords
    reserved = {
        'read': 'READ',
        'let': 'LET',
    }

    # List of token names
    tokens = [
        'INT', 'SYMBOL',
        'PLUS', 'MINUS',
        'LPAREN', 'RPAREN', 'LBRACKET', 'RBRACKET',
    ] + list(reserved.values())

    # Regular expression rules for simple tokens
    t_LPAREN = r'\('
    t_RPAREN = r'\)'
    t_LBRACKET = r'\['
    t_RBRACKET = r'\]'

    int_pattern = re.compile(r'-?\d+')
    symbol_pattern = re.compile(r'[a-zA-Z_][a-zA-Z_0-9\-?!*]*')
    operators = {'+': 'PLUS', '-': 'MINUS'}

    # Only whitespace, brackets and comments delimit tokens, so a run such as
    # "5x" or "5-3" is a single unknown token rather than several valid ones.
    def t_ATOM(self, t):
        r'[^\s()\[\];]+'
        if t.value in self.operators:
            t.type = self.operators[t.value]
        elif self.int_pattern.fullmatch(t.value):
            t.type = 'INT'
            t.value = int(t.value)
        elif self.symbol_pattern.fullmatch(t.value):
            t.type = self.reserved.get(t.value, 'SYMBOL')
        else:
            self._fail(t, f"Unknown token '{t.value}'",
                       "Tokens are separated by whitespace or parentheses;"
                       " symbols start with a letter or '_'")
        logger.debug(f"Token recognized: {t.type}, value: {t.value}")
        return t

    # Comments
    def t_COMMENT(self, t):
        r';.*'
        pass

    # Define a rule so we can track line numbers
    def t_newline(self, t):
        r'\n+'
        for i in range(len(t.value)):
            self.line_starts.append(t.lexpos + i + 1)
        t.lexer.lineno += len(t.value)

    def t_error(self, t):
        self._fail(t, f"Illegal character '{t.value[0]}'", "Check the character encoding of the source")

    def _fail(self, t, message, note):
        line_start = self.line_starts[t.lineno - 1]
        column = t.lexpos - line_start + 1
        raise ParseError(
            message=message,
            location=SourceLocation(self.source_file, t.lineno, column),
            context=get_source_context(self.source, t.lineno),
            notes=[note],
        )

    # Build the lexer
    def __init__(self):
        self.lexer = lex.lex(module=self)
        self.line_starts = [0]  # Track start of each line
        self.source = ""
        self.source_file = "<string>"

    def input(self, data):
        self.lexer.input(data)
        self.lexer.lineno = 1
        self.source = data
        self.line_starts = [0]  # Reset line starts

    def token(self):
        tok = self.lexer.token()
        if tok:
            # Calculate column based on the last line start
            line_start = self.line_starts[min(tok.lineno - 1, len(self.line_starts) - 1)]
            tok.column = tok.lexpos - line_start + 1  # Make columns 1-based
        return tok

    def tokenize(self, data):
        """Return every token of data as a list"""
        self.input(data)
        result = []
        while True:
            tok = self.token()
            if not tok:
                break
            result.append(tok)
        return result
