import math
import unittest

from arith.lang.error import DivisionByZero, UndefinedVariable, UnknownOperator
from arith.pure.environment import Environment
from arith.pure.lexical import Parser
from arith.pure.tree import Assignment, BinaryOp, Number, Variable


def evaluate(expr, **bindings):
    return Parser(expr).parse().evaluate(Environment(bindings))


class EvaluateTestCase(unittest.TestCase):

    def test_arithmetic(self):
        cases = {
            "2 + 3 * 4": 14,
            "( 2 + 3 ) * 4": 20,
            "( 2 + ( 3 * 4 ) )": 14,
            "8 - 4 - 2": 2,
            "8 / 4 / 2": 1,
            "7 / 2": 3.5,
            "1 - 2 * 3 + 4": -1,
            "( ( 1 ) )": 1,
            "1e3 / 8": 125,
        }
        for case, expected in cases.items():
            self.assertEqual(expected, evaluate(case), case)

    def test_variables(self):
        self.assertEqual(10, evaluate("x * y + 4", x=2, y=3))
        self.assertEqual(2.5, evaluate("( a + b ) / 2", a=1, b=4))

    def test_division_by_zero(self):
        should_raise = ["1 / 0", "1 / ( 2 - 2 )", "0 / 0", "x / y", "5 / -0", "1 / ( 0 * 7 )"]
        for case in should_raise:
            self.assertRaises(DivisionByZero, evaluate, case, x=1, y=0)

    def test_undefined_variable(self):
        with self.assertRaises(UndefinedVariable) as context:
            evaluate("1 + x * 2")
        self.assertEqual("x", context.exception.name)

    def test_left_evaluated_first(self):
        # right operand would divide by zero, but left fails first
        with self.assertRaises(UndefinedVariable) as context:
            evaluate("a + 1 / 0")
        self.assertEqual("a", context.exception.name)

        self.assertRaises(DivisionByZero, evaluate, "1 / 0 + a")

    def test_floating_point(self):
        self.assertEqual(0.1 + 0.2, evaluate("0.1 + 0.2"))
        self.assertEqual(math.inf, evaluate("1e308 * 10"))
        self.assertTrue(math.isnan(evaluate("inf - inf")))

    def test_unknown_operator(self):
        tree = BinaryOp("%", Number(1.0), Number(2.0))
        with self.assertRaises(UnknownOperator) as context:
            tree.evaluate(Environment())
        self.assertEqual("%", context.exception.symbol)

    def test_evaluate_twice(self):
        tree = Parser("x * 2 - y").parse()
        first, second = Environment({"x": 4, "y": 1}), Environment({"x": 4, "y": 1})
        self.assertEqual(tree.evaluate(first), tree.evaluate(second))
        self.assertEqual(Parser("x * 2 - y").parse(), tree)


class AssignmentTestCase(unittest.TestCase):

    def test_evaluate(self):
        environment = Environment()
        tree = Assignment("x", BinaryOp("*", Number(2.0), Number(3.0)))

        self.assertEqual(6, tree.evaluate(environment))
        self.assertEqual(6, environment.get("x"))
        self.assertEqual(7, BinaryOp("+", Variable("x"), Number(1.0)).evaluate(environment))

    def test_overwrite(self):
        environment = Environment({"x": 1})
        Assignment("x", BinaryOp("+", Variable("x"), Number(1.0))).evaluate(environment)
        self.assertEqual(2, environment.get("x"))

    def test_failure_leaves_environment(self):
        environment = Environment({"x": 1})

        self.assertRaises(DivisionByZero, Assignment("x", Parser("x / 0").parse()).evaluate, environment)
        self.assertRaises(UndefinedVariable, Assignment("y", Variable("z")).evaluate, environment)

        self.assertEqual(1, environment.get("x"))
        self.assertNotIn("y", environment)
        self.assertEqual(1, len(environment))


class DisplayTestCase(unittest.TestCase):

    def test_str(self):
        cases = {
            "2 + 3 * 4": "(2 + (3 * 4))",
            "( 2 + 3 ) * 4": "((2 + 3) * 4)",
            "8 - 4 - 2": "((8 - 4) - 2)",
            "x / 0.5": "(x / 0.5)",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(Parser(case).parse()), case)

        self.assertEqual("x = (1 + y)", str(Assignment("x", Parser("1 + y").parse())))

    def test_display(self):
        expected = ("BinaryOp(operator='+', nodes=[\n"
                    "    Number(value=2),\n"
                    "    BinaryOp(operator='*', nodes=[\n"
                    "        Variable(name='x'),\n"
                    "        Number(value=4)\n"
                    "    ])\n"
                    "])")
        self.assertEqual(expected, Parser("2 + x * 4").parse().display())
        self.assertEqual("Variable(name='x')", Variable("x").display())


if __name__ == '__main__':
    unittest.main()
