import io
from typing import Callable, Iterator, Optional

import sidekick as sk
from lark import Lark, Token as LarkToken

from .exceptions import UnrecognizedSymbol
from .logging import log
from .tokens import Token, TokenType, EOLN, QUIT, HELP, EOF

#
# Valid terminals have a higher priority than BAD, so the catch-all pattern
# only matches where no other token can start.
#
GRAMMAR = r"""
start : tk*
tk    : NUMBER | QUIT | HELP | OP | BAD

NUMBER.2 : /[0-9]+/
QUIT.2   : /[qQ]/
HELP.2   : /\?/
OP.2     : /[-+*\/()]/
BAD      : /\S+/
WS       : /\s+/

%ignore WS
"""

TOKEN_FACTORIES = {
    "NUMBER": Token.number,
    "OP": Token.operator,
    "QUIT": lambda _: QUIT,
    "HELP": lambda _: HELP,
    "BAD": Token.error,
}


def lexer(grammar=GRAMMAR) -> Callable[[str], Iterator[LarkToken]]:
    """
    Create a lexer function from a Lark grammar of terminals.

    The resulting function receives a string and lazily yields Lark tokens.
    NUMBER tokens are converted to integers.
    """
    callbacks = {"NUMBER": token_callback(int)}
    lark = Lark(grammar, parser="lalr", lexer="basic", lexer_callbacks=callbacks)

    lex = sk.fn(lark.lex)
    lex.grammar = grammar
    lex.lexer_callbacks = callbacks
    return lex


def token_callback(fn):
    def callback(tk: LarkToken):
        tk.value = fn(tk.value)
        return tk

    return callback


def read_input() -> str:
    """
    Read a line from standard input, including the line terminator.

    Return an empty string at end of file.
    """
    try:
        return input() + "\n"
    except EOFError:
        return ""


class TokenReader:
    """
    Produce tokens from a line oriented input source.

    Lines are read on demand: the first call to next_token() reads a line and
    each EOLN token marks that the next request must read a new one.

    Args:
        readline:
            A function that returns the next line of input, or an empty string
            at the end of input. Defaults to reading from standard input.
        out:
            Function used to report unrecognized symbols. Receives a single
            string argument.
    """

    need_line: bool

    def __init__(self, readline: Callable[[], str] = None, out=print):
        self._readline = readline or read_input
        self._out = out
        self._tokens: Optional[Iterator[LarkToken]] = None
        self.need_line = True

    @classmethod
    def from_string(cls, src: str, **kwargs) -> "TokenReader":
        """
        Create a reader that consumes lines from the given string.
        """
        return cls(io.StringIO(src).readline, **kwargs)

    def discard_rest_of_line(self):
        """
        Force the next call to next_token() to read a new line of input.
        """
        self.need_line = True

    def next_token(self) -> Token:
        """
        Return the next token from the current line of input.
        """
        if self.need_line:
            try:
                line = self._readline()
            except OSError as ex:
                log.error(f"error reading input: {ex}")
                return EOF
            if not line:
                log.debug("end of input")
                return EOF
            self._tokens = iter(LEXER(line))
            self.need_line = False

        tk = next(self._tokens, None)
        if tk is None:
            self.need_line = True
            return EOLN

        token = TOKEN_FACTORIES[tk.type](tk.value)
        if token.type is TokenType.ERROR:
            error = UnrecognizedSymbol(token.value)
            log.debug(f"bad lexeme at column {tk.column}: {token.value!r}")
            self._out(str(error))
        return token

    def __iter__(self) -> Iterator[Token]:
        """
        Iterate over tokens of the current line, up to and including the EOLN
        or EOF token.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type in (TokenType.EOLN, TokenType.EOF):
                break


LEXER = lexer()


def tokenize(src: str) -> list:
    """
    Return the list of tokens for the first line of src, ending with EOLN.

    Unrecognized symbols are not reported.
    """
    reader = TokenReader.from_string(src, out=lambda msg: None)
    return list(reader)
