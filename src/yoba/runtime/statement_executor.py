from typing import Sequence

from ..frontend.ast_expressions import Expression
from ..frontend.ast_statements import (
    Assign,
    Call,
    Condition,
    Define,
    Function,
    ModAssign,
    Noop,
    Print,
    Statement,
    Stats,
)
from ..writer import indented_output
from .core import ProgramState, Value
from .errors import CallDepthExceeded
from .expression_evaluator import eval_expr


def execute_sequence(statements: Sequence[Statement], state: ProgramState) -> None:
    for statement in statements:
        execute_statement(statement, state)


def execute_statement(statement: Statement, state: ProgramState) -> None:
    state.context.writer.debugln(_describe(statement))

    if isinstance(statement, Noop):
        return

    if isinstance(statement, Define):
        state.env.define(statement.name)
        return

    if isinstance(statement, Assign):
        assign_variable(statement.name, statement.value, state, incremental=False)
        return

    if isinstance(statement, ModAssign):
        assign_variable(statement.name, statement.delta, state, incremental=True)
        return

    if isinstance(statement, Print):
        print_variable(statement.name, state)
        return

    if isinstance(statement, Stats):
        print_stats(state)
        return

    if isinstance(statement, Condition):
        branch(statement, state)
        return

    if isinstance(statement, Function):
        state.functions.declare(statement)
        return

    if isinstance(statement, Call):
        call_function(statement.name, state)
        return

    raise TypeError(f"Unsupported statement type: {type(statement).__name__}")


def assign_variable(
    name: str, expr: Expression, state: ProgramState, incremental: bool
) -> None:
    result = eval_expr(expr, state.env, state.context)
    if incremental:
        result += state.env[name]
    state.env[name] = result


def print_variable(name: str, state: ProgramState) -> None:
    value = state.env[name]
    state.context.emit(f"{name}: {value}\n")


# Entries are written back to back, without a separator.
def print_stats(state: ProgramState) -> None:
    for name, value in state.env.items():
        state.context.emit(f"{name}: {value}")


def branch(condition: Condition, state: ProgramState) -> None:
    value: Value = state.env[condition.name]
    taken = value >= condition.threshold
    state.context.writer.debugln(
        f"[{condition.name} = {value} >= {condition.threshold} => {taken}]"
    )
    if taken:
        execute_statement(condition.then_branch, state)
    else:
        execute_statement(condition.else_branch, state)


def call_function(name: str, state: ProgramState) -> None:
    function = state.functions[name]
    context = state.context

    if context.max_call_depth is not None and context.call_depth >= context.max_call_depth:
        raise CallDepthExceeded(name)

    context.call_depth += 1
    context.writer.debugln(f"-> {name} (depth {context.call_depth})")
    try:
        with indented_output(context.writer):
            execute_sequence(function.body, state)
        context.writer.debugln(f"<- {name}")
    except RecursionError as error:
        raise CallDepthExceeded(name) from error
    finally:
        context.call_depth -= 1


def _describe(statement: Statement) -> str:
    name = getattr(statement, "name", None)
    kind = type(statement).__name__
    return kind if name is None else f"{kind} {name}"
