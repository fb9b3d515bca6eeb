import unittest

from lambdacalc.pure.lexical import read
from lambdacalc.pure.term import Abstraction, Variable, bound, closed, equals, free, variables


class PrintingTestCase(unittest.TestCase):

    def test_minimal_parentheses(self):
        cases = {
            "(λx.x)": "λx.x",
            "λx.(x y)": "λx.x y",
            "(λx.x) (λy.y)": "(λx.x) (λy.y)",
            "(λx.x z) (((x) y) z)": "(λx.x z) (x y z)",
            "(a (b c)) e (d f)": "a (b c) e (d f)",
            "x (λy.y)": "x (λy.y)",
            "x λy.y": "x (λy.y)",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(read(case)), case)

    def test_round_trip(self):
        cases = ["λx.x", "(λx.x z) (x y z)", "λf.λx.f (f x)", "x (λy.y) z", "(λx.λx.x) y"]
        for case in cases:
            term = read(case)
            self.assertEqual(term, read(str(term)), case)

    def test_de_bruijn(self):
        cases = {
            "λx.x": "λ 1",
            "λx.λy.x y": "λ λ 2 1",
            "(λx.x) (λy.y)": "(λ 1) (λ 1)",
            "(λx.x z) x": "(λ 1 z) x",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, read(case).to_de_bruijn(), case)

    def test_repr(self):
        self.assertEqual("Abstraction('λx.x y')", repr(read("λx.x y")))


class EqualityTestCase(unittest.TestCase):

    def test_equals(self):
        should_fail = [("x", "y"), ("λx.x", "λx.y"), ("λx.λy.x", "λx.λy.y"), ("x y", "y x")]
        for first, second in should_fail:
            self.assertFalse(equals(read(first), read(second)), (first, second))

        should_pass = [("λx.x", "λy.y"), ("λx.λy.x y", "λy.λx.y x"), ("λx.x z", "λy.y z"), ("x", "x")]
        for first, second in should_pass:
            self.assertTrue(equals(read(first), read(second)), (first, second))
            self.assertEqual(read(first).to_de_bruijn(), read(second).to_de_bruijn())

    def test_spans_ignored(self):
        self.assertEqual(Variable("x"), read("   x"))
        self.assertEqual(hash(Abstraction("y", Variable("y", 1))), hash(read("λx.x")))


class VariablesTestCase(unittest.TestCase):

    def test_free(self):
        cases = {"λx.x": [], "λx.x y": ["y"], "x y": ["x", "y"], "(λx.x) x": ["x"], "y x y": ["y", "x"]}
        for case, expected in cases.items():
            self.assertEqual(expected, free(read(case)), case)

    def test_bound(self):
        cases = {"λx.x": ["x"], "λx.x y": ["x"], "x y": [], "(λx.x) x": ["x"]}
        for case, expected in cases.items():
            self.assertEqual(expected, bound(read(case)), case)

    def test_closed(self):
        should_fail = [Variable("x", 1), read("λx.x").body, read("λx.λy.y x").body]
        for case in should_fail:
            self.assertFalse(closed(case), case)

        should_pass = ["x", "λx.x", "λx.λy.y x z", "f (λx.x)"]
        for case in should_pass:
            self.assertTrue(closed(read(case)), case)

    def test_variables(self):
        cases = {"λx.x": ["x"], "λx.x y": ["x", "y"], "x y": ["x", "y"], "(λx.x) x": ["x"]}
        for case, expected in cases.items():
            self.assertEqual(expected, variables(read(case)), case)


if __name__ == '__main__':
    unittest.main()
