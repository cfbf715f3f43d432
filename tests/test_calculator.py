import importlib.util
import io
from contextlib import redirect_stdout
from pathlib import Path

path = Path(__file__).parent.parent / "examples" / "calculator.py"
spec = importlib.util.spec_from_file_location("calculator", path)
mod = importlib.util.module_from_spec(spec)
spec.loader.exec_module(mod)


class TestCalculator:
    def test_eval_lines(self):
        lines = ["1 + 2\n", "\n", "? help\n", "(1 + 2) * 3\n", "1 2\n", "8 / 0\n"]
        assert list(mod.eval_lines(lines)) == [
            ("1 + 2", 3),
            ("(1 + 2) * 3", 9),
            ("1 2", None),
            ("8 / 0", None),
        ]

    def test_main(self, tmp_path):
        src = tmp_path / "exprs.txt"
        src.write_text("10 - 3 - 2\n2 * (3 + 4)\n1 +\n")
        out = io.StringIO()

        with redirect_stdout(out):
            mod.main([str(src)])
        assert out.getvalue() == "10 - 3 - 2 = 5\n2 * (3 + 4) = 14\n1 + = error\n"
