import io
from contextlib import redirect_stdout

import builtins
import pytest
from mock import patch

from infix import cli

PROMPT = "\nEnter Expression: "


class TestMainLoop:
    def test_session(self):
        out = self.run_loop(["1+2*3", "", "?", "10 - 3 - 2", "q"])
        assert out == (
            PROMPT + "Result: 7\n"
            + PROMPT + "Blank Line - Do Nothing\n"
            + PROMPT + cli.HELP + "\n"
            + PROMPT + "Result: 5\n"
            + PROMPT + "Quitting Program\n"
        )

    def test_quit_exits_with_status_one(self):
        with pytest.raises(SystemExit) as exc:
            self.run_loop(["Q"], catch=False)
        assert exc.value.code == 1

    def test_invalid_input(self):
        out = self.run_loop(["abc 1 + 2"])
        assert out == (
            PROMPT
            + 'Error: Unrecognized symbol "abc"\n'
            + "Invalid Input - For a list of valid commands, type ?\n"
            + PROMPT + "\n"
        )

    def test_errors_do_not_leak_into_next_expression(self):
        out = self.run_loop(["(1 + 2", "1 +", "4 * 5"])
        lines = out.split(PROMPT)
        assert lines[1:4] == [
            "Error: missing a closing parenthesis\n",
            "Error: Too many operators.\n",
            "Result: 20\n",
        ]

    def test_help_discards_rest_of_line(self):
        out = self.run_loop(["? 1 + 2", "3"])
        assert "Result: 3\n" in out
        assert out.count("Result") == 1

    def test_debug_trace(self):
        out = self.run_loop(["2*(3+4)"], debug=True)
        assert "Val: 2, OP: *, OP: (, Val: 3, OP: +, Val: 4, OP: ), Result: 14\n" in out

    def test_end_of_input_leaves_loop(self):
        assert self.run_loop([]) == PROMPT + "\n"

    def run_loop(self, inputs, catch=True, **kwargs):
        out = io.StringIO()
        with self.input_from(inputs), redirect_stdout(out):
            try:
                cli.eval_loop(**kwargs)
            except SystemExit:
                if not catch:
                    raise
        return out.getvalue()

    def input_from(self, inputs):
        inputs = list(inputs)
        inputs.reverse()

        def fake_input(*args):
            if not inputs:
                raise EOFError
            return inputs.pop()

        return patch.object(builtins, "input", fake_input)


class TestMain:
    def test_banner(self):
        out = io.StringIO()
        with patch.object(cli, "eval_loop") as loop, redirect_stdout(out):
            cli.main([])
        assert out.getvalue() == "Starting Expression Evaluation Program\n"
        loop.assert_called_once_with(debug=False)

    def test_debug_flag_anywhere_in_argv(self):
        out = io.StringIO()
        with patch.object(cli, "eval_loop") as loop, redirect_stdout(out):
            cli.main(["foo", "-d", "bar"])
        assert out.getvalue() == (
            "Debugging mode ON.\nStarting Expression Evaluation Program\n"
        )
        loop.assert_called_once_with(debug=True)

    def test_debug_from_environment(self, monkeypatch):
        monkeypatch.setenv("INFIX_DEBUG", "true")
        with patch.object(cli, "eval_loop") as loop, redirect_stdout(io.StringIO()):
            cli.main([])
        loop.assert_called_once_with(debug=True)


class TestLexerInteract:
    def test_prints_token_stream(self):
        inputs = iter(["1 + 2\n", "\n"])
        out = io.StringIO()
        with redirect_stdout(out):
            cli.lexer_interact(lambda: next(inputs))
        assert out.getvalue() == "expr: [VALUE(1), OPERATOR('+'), VALUE(2)]\nexpr: "
