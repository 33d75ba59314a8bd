"""Arithmetic syntax tree nodes and their evaluation.

The node set is closed:

```
<node> ::= Number(value)                      ; literal, never fails
         | Variable(name)                     ; looked up in the Environment
         | BinaryOp(operator, left, right)    ; operator is one of + - * /, left is evaluated before right
         | Assignment(name, value)            ; binds value in the Environment and evaluates to it
```

Nodes are immutable once built. Evaluation never changes a tree: only the Environment passed to evaluate is mutated.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from arith.lang.error import DivisionByZero, UnknownOperator
from arith.lang.numerical import number


OPERATORS = ("+", "-", "*", "/")


class Node(ABC):
    """Superclass for every arith syntax tree node."""

    @abstractmethod
    def evaluate(self, environment):
        """Returns float value of this node given environment. Errors propagate unchanged to the caller."""

    @property
    def nodes(self):
        """Child nodes, left to right."""
        return []

    @abstractmethod
    def _label(self):
        """Attributes shown by display, other than child nodes."""

    def display(self, indents=0):
        """Recursively displays tree with readable format.

        Format:
        <Node>(<label>, nodes=[
            <Node>(<label>, nodes=[
                ...
                <Node>(<label>)  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}({self._label()}"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"


@dataclass(frozen=True)
class Number(Node):
    value: float

    def evaluate(self, environment):
        return self.value

    def _label(self):
        return f"value={number(self.value)}"

    def __str__(self):
        return number(self.value)


@dataclass(frozen=True)
class Variable(Node):
    name: str

    def evaluate(self, environment):
        return environment.get(self.name)

    def _label(self):
        return f"name='{self.name}'"

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class BinaryOp(Node):
    operator: str
    left: Node
    right: Node

    @property
    def nodes(self):
        return [self.left, self.right]

    def evaluate(self, environment):
        left = self.left.evaluate(environment)
        right = self.right.evaluate(environment)

        if self.operator == "+":
            return left + right
        elif self.operator == "-":
            return left - right
        elif self.operator == "*":
            return left * right
        elif self.operator == "/":
            if right == 0:
                raise DivisionByZero()
            return left / right

        raise UnknownOperator(self.operator)

    def _label(self):
        return f"operator='{self.operator}'"

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"


@dataclass(frozen=True)
class Assignment(Node):
    name: str
    value: Node

    @property
    def nodes(self):
        return [self.value]

    def evaluate(self, environment):
        value = self.value.evaluate(environment)  # environment untouched if this raises
        environment.set(self.name, value)
        return value

    def _label(self):
        return f"name='{self.name}'"

    def __str__(self):
        return f"{self.name} = {self.value}"
