import unittest

from lambdacalc.lang import numerical
from lambdacalc.pure.lexical import read
from lambdacalc.typed import lexical as typed


class NumericalTestCase(unittest.TestCase):

    def test_cnumber(self):
        should_fail = [-2, 0.3, 4.0, "3", True]
        for case in should_fail:
            self.assertRaises(ValueError, numerical.cnumber, case)

        cases = {0: "λf.λx.x", 3: "λf.λx.f (f (f x))"}
        for case, expected in cases.items():
            self.assertEqual(read(expected), numerical.cnumber(case), case)

    def test_number(self):
        should_fail = ["x", "λx.x", "λf.λx.x f", "λf.λx.f (x x)", "λf.λx.f (f y)"]
        for case in should_fail:
            self.assertIsNone(numerical.number(read(case)), case)

        cases = {"λf.λx.x": 0, "λg.λy.g y": 1, "λf.λx.f (f (f x))": 3}
        for case, expected in cases.items():
            self.assertEqual(expected, numerical.number(read(case)), case)

    def test_nat(self):
        self.assertEqual(typed.read("zero"), numerical.nat(0))
        self.assertEqual(typed.read("succ (succ zero)"), numerical.nat(2))
        self.assertRaises(ValueError, numerical.nat, -1)

    def test_nat_number(self):
        cases = {"zero": 0, "succ (succ zero)": 2, "succ x": None, "true": None}
        for case, expected in cases.items():
            self.assertEqual(expected, numerical.nat_number(typed.read(case)), case)

    def test_numeral(self):
        self.assertEqual(4, numerical.numeral(numerical.cnumber(4)))
        self.assertEqual(4, numerical.numeral(numerical.nat(4)))
        self.assertIsNone(numerical.numeral(read("λx.x")))


if __name__ == '__main__':
    unittest.main()
