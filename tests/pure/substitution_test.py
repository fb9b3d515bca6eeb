import unittest

from lambdacalc.pure.lexical import read
from lambdacalc.pure.substitution import canonical, cap_subst, subst
from lambdacalc.pure.term import Abstraction, Application, Variable


class SubstitutionTestCase(unittest.TestCase):

    def test_cap_subst(self):
        cases = [
            ("x", "x", "t", "t"),
            ("y", "x", "t", "y"),
            ("(λx.x z) (y z)", "z", "t", "(λx.x t) (y t)"),
            ("λx.y", "x", "t", "λx.y"),
            ("λx.y", "y", "t", "λx.t"),
        ]
        for expr, target, value, expected in cases:
            self.assertEqual(read(expected), cap_subst(read(expr), target, read(value)), (expr, target, value))

    def test_cap_subst_captures(self):
        self.assertEqual(read("λx.x"), cap_subst(read("λx.y"), "y", read("x")))

    def test_subst(self):
        cases = [
            ("x", "x", "t", "t"),
            ("y", "x", "t", "y"),
            ("(λx.x z) (y z)", "z", "x", "(λf0.f0 x) (y x)"),
            ("λx.y", "x", "t", "λx.y"),
            ("λx.y", "y", "x", "λf0.x"),
        ]
        for expr, target, value, expected in cases:
            self.assertEqual(read(expected), subst(read(expr), target, read(value)), (expr, target, value))

    def test_subst_renames_binder(self):
        result = subst(read("λx.y"), "y", read("x"))
        self.assertEqual("λf0.x", str(result))
        self.assertTrue(result.body.is_free)

    def test_fresh_name_avoids_value(self):
        result = subst(read("λx.y"), "y", read("x f0"))
        self.assertEqual("λf1.x f0", str(result))


class CanonicalTestCase(unittest.TestCase):

    def test_indices_recomputed(self):
        term = Abstraction("x", Application(Variable("x"), Variable("y")))
        self.assertEqual("λ 1 y", canonical(term).to_de_bruijn())

    def test_shadowing_binder_renamed(self):
        term = Abstraction("x", Abstraction("x", Variable("x")))
        self.assertEqual("λx.λf0.f0", str(canonical(term)))


if __name__ == '__main__':
    unittest.main()
