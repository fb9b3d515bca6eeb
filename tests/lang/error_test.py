import io
import re
import unittest
from contextlib import redirect_stdout

from lambdacalc.lang.error import (ArithmeticUnderflow, DuplicateDefinition, ErrorHandler, LambdaError, ParseError,
                                   StepLimitExceeded, TypingError)
from lambdacalc.pure.term import Variable

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


class LambdaErrorTestCase(unittest.TestCase):

    def test_caret(self):
        self.assertEqual("   ^", LambdaError("oops", 3).caret())
        self.assertEqual("^", LambdaError("oops").caret())

    def test_typing_error_position(self):
        error = TypingError(Variable("x", span=(4, 7)), "unbound variable 'x'")
        self.assertEqual((4, 7), (error.position, error.end))

        error = TypingError(Variable("x"), "unbound variable 'x'")
        self.assertEqual((0, 1), (error.position, error.end))

    def test_diagnosis_flags(self):
        self.assertTrue(ParseError("')' expected").diagnosis)
        self.assertFalse(DuplicateDefinition("a", "b").diagnosis)
        self.assertFalse(StepLimitExceeded(10).diagnosis)
        self.assertFalse(ArithmeticUnderflow(Variable("x")).diagnosis)


class ErrorHandlerTestCase(unittest.TestCase):

    def test_diagnose(self):
        diagnosis = plain(ErrorHandler.diagnose(ParseError("oops", 2, 5), "ab cde f"))
        self.assertEqual("  ab cde f\n    ^~~", diagnosis)

    def test_diagnose_past_end(self):
        diagnosis = plain(ErrorHandler.diagnose(ParseError("oops", 2), "λx"))
        self.assertEqual("  λx\n    ^", diagnosis)

    def test_non_fatal(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with ErrorHandler(fatal=False) as handler:
                handler.register_line("λx", 1)
                raise ParseError("'.' expected", 2)

        lines = plain(out.getvalue()).splitlines()
        self.assertEqual("error: '.' expected", lines[0])
        self.assertEqual("    ^", lines[2])
        self.assertIsNone(handler.line)

    def test_fatal(self):
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit):
            with ErrorHandler() as handler:
                handler.register_file("script.lc")
                handler.register_line("x", 3)
                raise StepLimitExceeded(5)
        self.assertEqual("script.lc:3: error: no normal form found within 5 steps", plain(out.getvalue()).strip())

    def test_recursion_error(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with ErrorHandler(fatal=False):
                raise RecursionError()
        self.assertIn("maximum recursion depth exceeded", out.getvalue())

    def test_internal_error(self):
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit):
            with ErrorHandler(fatal=False):
                raise KeyError("x")
        self.assertIn("[internal]", plain(out.getvalue()))


if __name__ == '__main__':
    unittest.main()
