import unittest
from pathlib import Path
from contextlib import redirect_stdout
import io
import sys

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

from tonality.__main__ import main  # noqa: E402


def run(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = main(list(argv))
    return code, out.getvalue().strip()


class TestCli(unittest.TestCase):
    def test_render(self):
        self.assertEqual(run("render", "c d e f g a b"), (0, "c d e f g a b"))
        self.assertEqual(
            run("render", "c d e f g a b", "--transpose", "2", "--key", "d"),
            (0, "d e fis g a b cis'"),
        )
        self.assertEqual(run("render", "c e g", "--reverse"), (0, "g e c"))

    def test_interval(self):
        self.assertEqual(run("interval", "m7", "P4", "TT"), (0, "10\n5\n6"))

    def test_semitones(self):
        self.assertEqual(run("semitones", "fis", "c"), (0, "-6"))

    def test_keys(self):
        self.assertEqual(run("accidentals", "d"), (0, "f# c#"))
        self.assertEqual(run("accidentals", "c"), (0, ""))
        self.assertEqual(run("dual", "e"), (0, "cism"))
        self.assertEqual(run("scale", "d,"), (0, "d, e, fis, g, a, b, cis"))
        self.assertEqual(
            run("scale", "c,m", "--shift", "1"), (0, "d, es, f, g, as, bes, c")
        )
        self.assertEqual(run("chord", "cm", "--shift", "1"), (0, "es g c'"))

    def test_error(self):
        with self.assertLogs("tonality", "ERROR") as logs:
            self.assertEqual(run("dual", "x"), (1, ""))
        self.assertIn("Invalid key name: x", logs.output[0])
        with self.assertLogs("tonality", "ERROR"):
            self.assertEqual(run("interval", "Q3"), (1, ""))

    def test_usage(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()):
                main(["--help"])


if __name__ == "__main__":
    unittest.main()
