import operator
from typing import Callable

from ..frontend.ast_expressions import Add, Expression, IntegerConst, Literal, Sub
from .core import Env, RuntimeContext, Value

_binary_ops: dict[type[Expression], tuple[str, Callable[[Value, Value], Value]]] = {
    Add: ("+", operator.add),
    Sub: ("-", operator.sub),
}


def eval_expr(expr: Expression, env: Env, context: RuntimeContext) -> Value:
    if isinstance(expr, IntegerConst):
        return expr.value

    if isinstance(expr, Literal):
        return env[expr.name]

    if isinstance(expr, (Add, Sub)):
        left_value = eval_expr(expr.left, env, context)
        right_value = eval_expr(expr.right, env, context)
        symbol, op = _binary_ops[type(expr)]
        result = op(left_value, right_value)
        context.writer.debugln(f"[({expr.left}) {symbol} ({expr.right}) => {result}]")
        return result

    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")
