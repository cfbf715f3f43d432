"""
Shunting-yard evaluation of infix expressions.

Values are pushed to an operand stack and operators to an operator stack.
Operators are reduced as soon as precedence allows it, so the result is
computed while the input is read and no intermediate postfix representation
is ever built.
"""
from typing import Callable, List, Optional

from .exceptions import (
    EvaluationError,
    TooManyOperators,
    TooFewOperators,
    MissingOpenParen,
    MissingCloseParen,
    EmptyExpression,
)
from .lexer import TokenReader
from .logging import log
from .operators import Operator, precedence
from .tokens import Token, TokenType

__all__ = ["Evaluator", "evaluate", "process_expression", "eval_expr"]


class Evaluator:
    """
    Operand and operator stacks for a single expression.

    Evaluators are single use: create a new instance for each expression.
    """

    operands: List[int]
    operators: List[Operator]

    def __init__(self):
        self.operands = []
        self.operators = []
        self._after_operand = False

    def push_value(self, value: int):
        self._start_operand()
        self.operands.append(value)
        self._after_operand = True

    def _start_operand(self):
        # Two adjacent operands, as in "1 2" or "(1)(2)"
        if self._after_operand:
            raise TooFewOperators()

    def push_operator(self, op: Operator):
        """
        Push operator to the stack, first reducing all operators on top of it
        that have the same or higher precedence.
        """
        if op is Operator.RPAREN:
            self.close_paren()
            self._after_operand = True
            return
        if op is Operator.LPAREN:
            self._start_operand()
        else:
            level = precedence(op)
            while self.operators and precedence(self.operators[-1]) >= level:
                self.reduce()
        self.operators.append(op)
        self._after_operand = False

    def close_paren(self):
        """
        Reduce everything up to the matching open parenthesis and discard it.
        """
        while self.operators and self.operators[-1] is not Operator.LPAREN:
            self.reduce()
        if not self.operators:
            raise MissingOpenParen()
        self.operators.pop()

    def reduce(self):
        """
        Apply the operator on top of the stack to the two topmost operands.
        """
        if len(self.operands) < 2:
            raise TooManyOperators()
        op = self.operators.pop()
        rhs = self.operands.pop()
        lhs = self.operands.pop()
        result = op.apply(lhs, rhs)
        log.debug(f"reduce: {lhs} {op} {rhs} = {result}")
        self.operands.append(result)

    def finish(self) -> int:
        """
        Reduce all pending operators and return the final result.
        """
        while self.operators:
            if self.operators[-1] is Operator.LPAREN:
                raise MissingCloseParen()
            self.reduce()

        if not self.operands:
            raise EmptyExpression()
        result = self.operands.pop()
        if self.operands:
            raise TooFewOperators()
        return result


def evaluate(
    token: Token, reader: TokenReader, trace: Callable[[str], None] = None
) -> Optional[int]:
    """
    Evaluate expression that starts with the given token, consuming the
    remaining tokens of the line from reader.

    Args:
        token:
            First token of the expression, already read from reader.
        reader:
            Source for the following tokens.
        trace:
            If given, it is called with a trace entry for each value and
            operator consumed.

    Returns:
        The integer result, or None if a token that cannot appear inside an
        expression (e.g., quit, help or an unrecognized symbol) interrupts it.

    Raises:
        EvaluationError: for structurally invalid expressions.
    """
    stacks = Evaluator()

    while token.type is not TokenType.EOLN:
        if token.type is TokenType.VALUE:
            if trace:
                trace(f"Val: {token.value}, ")
            stacks.push_value(token.value)
        elif token.type is TokenType.OPERATOR:
            if trace:
                trace(f"OP: {token.value}, ")
            stacks.push_operator(token.value)
        else:
            log.debug(f"expression interrupted by {token!r}")
            return None
        token = reader.next_token()

    return stacks.finish()


def process_expression(token: Token, reader: TokenReader, *, debug=False, out=print):
    """
    Evaluate expression and print its result or the error message.

    Errors never escape this function: the caller may simply continue reading
    the next expression.
    """
    trace = (lambda msg: out(msg, end="")) if debug else None
    try:
        result = evaluate(token, reader, trace=trace)
    except EvaluationError as ex:
        log.info(f"{type(ex).__name__}: {ex}")
        out(str(ex))
        return None

    if result is not None:
        out(f"Result: {result}")
    return result


def eval_expr(src: str) -> int:
    """
    Evaluate the expression in the first line of src and return its value.

    Raises:
        EvaluationError: for invalid expressions.
        ValueError: if src does not start an expression.
    """
    reader = TokenReader.from_string(src, out=lambda msg: None)
    token = reader.next_token()
    if token.type is TokenType.ERROR:
        raise ValueError(f'unrecognized symbol: "{token.value}"')
    if token.type not in (TokenType.VALUE, TokenType.OPERATOR):
        raise ValueError(f"not an expression: {src!r}")

    result = evaluate(token, reader)
    if result is None:
        raise ValueError(f"not an expression: {src!r}")
    return result
