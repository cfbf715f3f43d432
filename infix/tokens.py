import enum
from typing import Any

from .operators import Operator


class TokenType(enum.Enum):
    """
    Tags for each case of the Token variant.
    """

    VALUE = "value"
    OPERATOR = "operator"
    EOLN = "eoln"
    QUIT = "quit"
    HELP = "help"
    ERROR = "error"
    EOF = "eof"

    def __repr__(self):
        return "TokenType." + self.name


class Token:
    """
    Tokens produced by the TokenReader.

    Only VALUE (an int), OPERATOR (an Operator) and ERROR (the offending
    lexeme) tokens carry a value. Consumers must dispatch on the .type
    attribute.
    """

    __slots__ = ("type", "value")
    type: TokenType
    value: Any

    def __init__(self, type: TokenType, value=None):
        if type is TokenType.VALUE:
            value = int(value)
            if value < 0:
                raise ValueError(f"values must be non-negative: {value}")
        elif type is TokenType.OPERATOR:
            value = Operator.from_name(value)
        elif type is TokenType.ERROR:
            value = str(value)
        elif value is not None:
            raise TypeError(f"{type.name} tokens do not carry a value")
        self.type = type
        self.value = value

    @classmethod
    def number(cls, value: int) -> "Token":
        return cls(TokenType.VALUE, value)

    @classmethod
    def operator(cls, symb) -> "Token":
        return cls(TokenType.OPERATOR, symb)

    @classmethod
    def error(cls, lexeme: str) -> "Token":
        return cls(TokenType.ERROR, lexeme)

    def __repr__(self):
        if self.type is TokenType.VALUE:
            return f"VALUE({self.value})"
        elif self.type is TokenType.OPERATOR:
            return f"OPERATOR({self.value.value!r})"
        elif self.type is TokenType.ERROR:
            return f"ERROR({self.value!r})"
        return self.type.name

    def __eq__(self, other):
        if isinstance(other, Token):
            return self.type is other.type and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash((self.type, self.value))


# Tokens without data are shared
EOLN = Token(TokenType.EOLN)
QUIT = Token(TokenType.QUIT)
HELP = Token(TokenType.HELP)
EOF = Token(TokenType.EOF)
