__all__ = [
    "InfixError",
    "UnrecognizedSymbol",
    "EvaluationError",
    "TooManyOperators",
    "TooFewOperators",
    "MissingOpenParen",
    "MissingCloseParen",
    "DivisionByZero",
    "EmptyExpression",
    "InternalError",
]


class InfixError(Exception):
    """
    Base class for all errors raised by the calculator.
    """


class UnrecognizedSymbol(InfixError):
    """
    Raised for a lexeme that does not start any valid token.
    """

    def __init__(self, lexeme):
        self.lexeme = lexeme
        super().__init__(f'Error: Unrecognized symbol "{lexeme}"')


class EvaluationError(InfixError):
    """
    Base class for structural errors found while evaluating an expression.

    The string representation of the exception is the message shown to the
    user.
    """

    message = "Error: invalid expression."

    def __init__(self, message=None):
        super().__init__(message or self.message)


class TooManyOperators(EvaluationError):
    message = "Error: Too many operators."


class TooFewOperators(EvaluationError):
    message = "Error: Not enough operators."


class MissingOpenParen(EvaluationError):
    message = "Error: missing an opening parenthesis"


class MissingCloseParen(EvaluationError):
    message = "Error: missing a closing parenthesis"


class DivisionByZero(EvaluationError, ZeroDivisionError):
    message = "Error: division by zero."


class EmptyExpression(EvaluationError):
    message = "Error: empty expression."


class InternalError(EvaluationError):
    message = "Error: internal error."
