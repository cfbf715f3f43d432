"""
An interactive calculator for integer infix expressions.
"""
from .exceptions import *
from .evaluator import Evaluator, evaluate, eval_expr, process_expression
from .lexer import TokenReader, lexer, tokenize
from .logging import log
from .operators import Operator, precedence
from .tokens import Token, TokenType

__version__ = "1.0.0"
__author__ = "Fábio Macêdo Mendes"
__email__ = "fabiomacedomendes@gmail.com"
