from dataclasses import dataclass

from .ast_expressions import Expression


@dataclass(frozen=True, slots=True)
class Program:
    statements: tuple["Statement", ...]


@dataclass(frozen=True, slots=True)
class Noop:
    pass


@dataclass(frozen=True, slots=True)
class Define:
    name: str


@dataclass(frozen=True, slots=True)
class Assign:
    name: str
    value: Expression


# Adds the value of `delta` to the variable. Decrements are built with a
# negated constant.
@dataclass(frozen=True, slots=True)
class ModAssign:
    name: str
    delta: Expression


@dataclass(frozen=True, slots=True)
class Print:
    name: str


@dataclass(frozen=True, slots=True)
class Stats:
    pass


# Runs `then_branch` when the variable is >= threshold, `else_branch` otherwise.
@dataclass(frozen=True, slots=True)
class Condition:
    name: str
    threshold: int
    then_branch: "Statement"
    else_branch: "Statement"


@dataclass(frozen=True, slots=True)
class Function:
    name: str
    body: tuple["Statement", ...]


@dataclass(frozen=True, slots=True)
class Call:
    name: str


Statement = (
    Noop
    | Define
    | Assign
    | ModAssign
    | Print
    | Stats
    | Condition
    | Function
    | Call
)
