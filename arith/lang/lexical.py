"""Lexical analysis for arith language statements, a shallow wrapper around the core arithmetic grammar. Note that this
module does not provide input file parsing, but rather parsing of single statements.

All grammar can be loosely defined as follows:

```
<assign_stmt> ::= <name> "=" <expression>   ; binds the value of <expression> to <name>, and outputs it
<exec_stmt>   ::= <expression>              ; outputs the value of <expression>

<comment>     ::= ";;" <char>*
```

See pure/lexical.py for <expression>. Comments are handled in session.py: there is no dedicated Stmt class for comments.
"""

from abc import ABC, abstractmethod

from arith.lang.error import InvalidAssignment
from arith.lang.numerical import literal
from arith.pure.lexical import TOKEN, Parser
from arith.pure.tree import OPERATORS, Assignment


RESERVED = ("(", ")", "=") + OPERATORS


class Stmt(ABC):
    """Superclass representing any statement in arith language."""

    def __init__(self, expr):
        """Assumes check_grammar has been run."""
        self.expr = Stmt.preprocess(expr)
        self.tree = self.generate_tree()
        self._cls = type(self).__name__

    @staticmethod
    @abstractmethod
    def check_grammar(expr):
        """This method should check expr's top-level grammar and return whether or not it is valid. It should also
        raise a GenericException if expr's top-level grammar is similar to the accepted grammar but invalid.
        """

    @abstractmethod
    def generate_tree(self):
        """Returns syntax tree for self.expr."""

    @staticmethod
    def preprocess(expr):
        """Removes trailing whitespace."""
        return expr.rstrip()

    @classmethod
    def infer(cls, expr):
        """Infers the type of expr and returns an object of the correct Stmt subclass."""
        for subclass in cls.__subclasses__():
            if subclass.check_grammar(expr):
                return subclass(expr)

    def execute(self, environment):
        """Running a Stmt is equivalent to evaluating its tree against environment."""
        return self.tree.evaluate(environment)

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.expr

    def __eq__(self, other):
        return isinstance(other, type(self)) and other.tree == self.tree

    def __hash__(self):
        return hash(self.tree)


class AssignStmt(Stmt):
    """Binding statement in arith: <NAME> = <expression>."""

    @staticmethod
    def check_grammar(expr):
        matches = list(TOKEN.finditer(expr))
        if len(matches) < 2 or matches[1].group() != "=":
            return False

        name = matches[0].group()
        if name in RESERVED or "=" in name or literal(name) is not None:
            raise InvalidAssignment(name, expr)

        return True

    def generate_tree(self):
        name, equals = list(TOKEN.finditer(self.expr))[:2]
        self.name = name.group()
        return Assignment(self.name, Parser(self.expr, equals.end()).parse())


class ExecStmt(Stmt):
    """Thin wrapper around Parser, which provides functionality for directly evaluating expressions. Any expr that is
    not another Stmt is an ExecStmt, and Parser reports what is wrong with it (an empty expr raises
    UnexpectedEndOfInput).
    """

    @staticmethod
    def check_grammar(expr):
        return True

    def generate_tree(self):
        return Parser(self.expr).parse()
