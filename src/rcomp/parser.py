import ply.yacc as yacc
from rcomp.lexer import Lexer
import rcomp.rcomp_ast as ast
from rcomp.errors import ParseError, SourceLocation, get_source_context
import logging

logger = logging.getLogger(__name__)

class Parser:
    """LALR parser for the S-expression syntax.

    exp ::= int | symbol | (read) | (- exp) | (+ exp exp)
          | (let ([symbol exp]) exp)
    """
    start = 'program'

    def __init__(self):
        self.lexer = Lexer()
        self.tokens = self.lexer.tokens  # Get token list from lexer
        self.parser = yacc.yacc(module=self, debug=False, write_tables=False,
                                errorlog=yacc.NullLogger())
        self.source = ""
        self.file_path = "<string>"

    def parse(self, source: str, file_path: str = "<string>") -> 'ast.Expression':
        """Parse source code into an AST; raises ParseError on malformed input"""
        self.source = source
        self.file_path = file_path
        self.lexer.source_file = file_path
        logger.debug(f"Parsing {file_path}: {source!r}")
        result = self.parser.parse(source, lexer=self.lexer)
        logger.debug("Parsed %s: %s at the root", file_path, type(result).__name__)
        return result

    def _locate(self, p, index=1):
        """Attach the source location of the production's first token"""
        p[0].location = SourceLocation(
            file=self.file_path,
            line=p.lineno(index),
            column=getattr(p.slice[index], 'column', 0),
        )

    def p_program(self, p):
        '''program : exp'''
        p[0] = p[1]

    def p_exp_int(self, p):
        '''exp : INT'''
        p[0] = ast.Fixnum(p[1])
        self._locate(p)

    def p_exp_var(self, p):
        '''exp : SYMBOL'''
        p[0] = ast.Var(p[1])
        self._locate(p)

    def p_exp_read(self, p):
        '''exp : LPAREN READ RPAREN'''
        p[0] = ast.Read()
        self._locate(p)

    def p_exp_neg(self, p):
        '''exp : LPAREN MINUS exp RPAREN'''
        p[0] = ast.Neg(p[3])
        self._locate(p)

    def p_exp_add(self, p):
        '''exp : LPAREN PLUS exp exp RPAREN'''
        p[0] = ast.Add(p[3], p[4])
        self._locate(p)

    def p_exp_let(self, p):
        '''exp : LPAREN LET LPAREN LBRACKET SYMBOL exp RBRACKET RPAREN exp RPAREN'''
        p[0] = ast.Let(p[5], p[6], p[9])
        self._locate(p)

    def p_error(self, p):
        if p:
            location = SourceLocation(
                file=self.file_path,
                line=p.lineno,
                column=getattr(p, 'column', 0),
            )
            if p.type == 'RPAREN':
                note = "Wrong number of operands for this form, or an unmatched ')'"
            else:
                note = "Check syntax near this location"
            raise ParseError(
                message=f"Syntax error at '{p.value}'",
                location=location,
                context=get_source_context(self.source, p.lineno),
                notes=[note],
            )
        else:
            raise ParseError(
                message="Syntax error at EOF",
                location=None,
                context=None,
                notes=["Unexpected end of input: missing ')' or empty program"],
            )
