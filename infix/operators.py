import enum
import operator as op
from typing import Union

from .exceptions import DivisionByZero, InternalError


class Operator(enum.Enum):
    """
    Enumeration of the operator symbols understood by the calculator.

    Binary operators can be inspected for precedence and applied to a pair of
    integers. Parenthesis are also listed here since the lexer emits them as
    operator tokens.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    LPAREN = "("
    RPAREN = ")"

    _str_to_op: dict

    @classmethod
    def from_name(cls, symb: Union[str, "Operator"]) -> "Operator":
        """
        Return an Operator constant from string.
        """
        if isinstance(symb, cls):
            return symb

        try:
            cache = cls.__dict__["_str_to_op"]
        except KeyError:
            cls._str_to_op = cache = {}

        try:
            return cache[symb]
        except KeyError:
            pass

        for op in cls:
            if op.value == symb:
                cache[symb] = op
                return op
        else:
            raise ValueError(f"invalid operator: {symb}")

    @property
    def precedence_level(self) -> int:
        """
        Precedence level of operator. Higher values indicate higher precedence.

        An open parenthesis has precedence 0, so it is never reduced by an
        incoming operator.
        """
        return PRECEDENCE[self]

    def apply(self, lhs: int, rhs: int) -> int:
        """
        Apply binary operator to lhs and rhs, in that order.

        Division truncates toward zero.
        """
        try:
            func = FUNCTIONS[self]
        except KeyError:
            raise InternalError(f"Error: cannot apply operator {self.value!r}")
        return func(lhs, rhs)

    def __str__(self):
        return self.value

    def __repr__(self):
        return "Operator." + self.name


def truncating_div(lhs: int, rhs: int) -> int:
    """
    Integer division that truncates toward zero, instead of Python's floor.
    """
    if rhs == 0:
        raise DivisionByZero()
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


PRECEDENCE = {
    Operator.LPAREN: 0,
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
}

FUNCTIONS = {
    Operator.ADD: op.add,
    Operator.SUB: op.sub,
    Operator.MUL: op.mul,
    Operator.DIV: truncating_div,
}


def precedence(symb: Union[str, Operator]) -> int:
    """
    Precedence of operator given as symbol or Operator constant.
    """
    return Operator.from_name(symb).precedence_level
