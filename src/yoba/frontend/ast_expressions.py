from dataclasses import dataclass


class Expression:
    pass


# A reference to a variable, resolved when the expression is evaluated.
@dataclass(frozen=True, slots=True)
class Literal(Expression):
    name: str


@dataclass(frozen=True, slots=True)
class IntegerConst(Expression):
    value: int


@dataclass(frozen=True, slots=True)
class Add(Expression):
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class Sub(Expression):
    left: Expression
    right: Expression
