import unittest

from lambdacalc.lang.error import AliasInUse, ArithmeticUnderflow, DuplicateDefinition, TypingError
from lambdacalc.typed.context import TypedExecutionContext
from lambdacalc.typed.lexical import read, read_type


class TypedExecutionContextTestCase(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.context = TypedExecutionContext.standard()

    def test_arithmetic(self):
        cases = {
            "plus two three": "five",
            "minus five three": "two",
            "minus three five": "zero",
            "sumTo three": "six",
            "sumTo zero": "zero",
        }
        for case, expected in cases.items():
            self.assertEqual(read(expected), self.context.evaluate(case), case)

    def test_booleans(self):
        cases = {
            "not true": "false",
            "xor true false": "true",
            "xor true true": "false",
            "leq two three": "true",
            "eq two three": "false",
            "eq three three": "true",
        }
        for case, expected in cases.items():
            self.assertEqual(read(expected), self.context.evaluate(case), case)

    def test_pred_zero(self):
        self.assertRaises(ArithmeticUnderflow, self.context.evaluate, "pred zero")

    def test_typing_error_span(self):
        with self.assertRaises(TypingError) as error:
            self.context.evaluate("plus two true")
        self.assertEqual((9, 13), (error.exception.position, error.exception.end))

        with self.assertRaises(TypingError) as error:
            self.context.evaluate("sumTo false")
        self.assertEqual("expected argument of type Nat, got Bool", error.exception.message)

    def test_types_recorded(self):
        self.assertEqual(read_type("Bool -> Bool -> Bool"), self.context.type_context["xor"])
        self.assertEqual(read_type("Nat -> Nat"), self.context.type_context["sumTo"])

    def test_aliases_as_strings(self):
        aliases = dict(self.context.aliases_as_strings)
        self.assertEqual("λx:Bool.if x then false else true : Bool -> Bool", aliases["not"])
        self.assertEqual("succ zero : Nat", aliases["one"])

    def test_recursive_alias_kept_by_name(self):
        self.assertEqual("sumTo", str(self.context.evaluate("sumTo")))
        self.assertIn("sumTo", str(self.context.aliases["sumTo"]))


class TypedAliasTestCase(unittest.TestCase):

    def test_declared_type_mismatch(self):
        context = TypedExecutionContext()
        with self.assertRaises(TypingError) as error:
            context.add_alias_with_type("f", "Nat -> Bool", "λx:Nat.succ x")
        self.assertEqual("declared type Nat -> Bool does not match inferred type Nat -> Nat", error.exception.message)
        self.assertNotIn("f", context)

    def test_self_reference_needs_declared_type(self):
        context = TypedExecutionContext()
        with self.assertRaises(TypingError) as error:
            context.add_alias("loop", "λx:Nat.loop x")
        self.assertEqual("unbound variable 'loop'", error.exception.message)

    def test_recursive_alias(self):
        context = TypedExecutionContext()
        context.add_alias_with_type("double", "Nat -> Nat",
                                    "λn:Nat.if iszero n then zero else succ (succ (double (pred n)))")
        self.assertEqual(read("succ (succ (succ (succ zero)))"), context.evaluate("double (succ (succ zero))"))

    def test_duplicate_definition(self):
        context = TypedExecutionContext()
        context.add_alias("idn", "λx:Nat.x")
        context.add_alias("idb", "λx:Bool.x")  # binder types differ
        self.assertRaises(DuplicateDefinition, context.add_alias, "other", "λy:Nat.y")

    def test_recursive_alias_in_use(self):
        context = TypedExecutionContext.standard()
        context.add_alias("pick", "λb:Bool.if b then sumTo else sumTo")

        with self.assertRaises(AliasInUse) as error:
            context.add_alias("sumTo", "λx:Nat.iszero x")
        self.assertEqual("pick", error.exception.user)
        self.assertRaises(AliasInUse, context.remove_alias, "sumTo")

        self.assertEqual(read_type("Nat -> Nat"), context.type_context["sumTo"])
        self.assertEqual(read("seven"), context.evaluate("succ (pick true three)"))

        self.assertTrue(context.remove_alias("pick"))
        self.assertTrue(context.remove_alias("sumTo"))

    def test_recursive_alias_under_binder(self):
        context = TypedExecutionContext.standard()
        cases = ["λn:Nat.sumTo n", "λn:Nat.sumTo (succ n)", "λn:Nat.plus n (sumTo n)"]
        for case in cases:
            self.assertEqual(read(case), context.evaluate(case), case)

    def test_recursive_alias_wrapper(self):
        context = TypedExecutionContext.standard()
        context.add_alias("total", "λx:Nat.sumTo x")
        self.assertEqual(read("λx:Nat.sumTo x"), context.aliases["total"])
        self.assertEqual(read("six"), context.evaluate("total three"))

    def test_remove_alias(self):
        context = TypedExecutionContext()
        context.add_alias("idn", "λx:Nat.x")
        self.assertTrue(context.remove_alias("idn"))
        self.assertNotIn("idn", context.type_context)
        self.assertRaises(TypingError, context.evaluate, "idn zero")


if __name__ == '__main__':
    unittest.main()
