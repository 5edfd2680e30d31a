from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO, ItemsView

from ..frontend.ast_statements import Function
from ..writer import IndentingWriter
from .errors import (
    DuplicateFunctionDefinition,
    DuplicateVariableDefinition,
    SinkWriteFailure,
    UndefinedFunctionCall,
    UndefinedVariable,
)

Value = int

# Each nested call costs about five interpreter frames; evaluation runs under
# EVALUATION_RECURSION_LIMIT in interpreter.py, which leaves room for this many.
DEFAULT_MAX_CALL_DEPTH = 20_000


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)
    out: BinaryIO = field(default_factory=io.BytesIO)
    max_call_depth: int | None = DEFAULT_MAX_CALL_DEPTH
    call_depth: int = 0

    def emit(self, text: str) -> None:
        try:
            self.out.write(text.encode("utf-8"))
        except (OSError, ValueError) as error:
            raise SinkWriteFailure(str(error)) from error


@dataclass
class ProgramState:
    env: Env
    functions: FunctionTable
    context: RuntimeContext


class Env:
    def __init__(self) -> None:
        self._key_values: dict[str, Value] = {}

    def __getitem__(self, key: str) -> Value:
        if key in self._key_values:
            return self._key_values[key]

        raise UndefinedVariable(key)

    def define(self, key: str, value: Value = 0) -> None:
        if key in self._key_values:
            raise DuplicateVariableDefinition(key)
        self._key_values[key] = value

    def __setitem__(self, key: str, value: Value) -> None:
        if key not in self._key_values:
            raise UndefinedVariable(key)
        self._key_values[key] = value

    def items(self) -> ItemsView[str, Value]:
        return self._key_values.items()

    def __repr__(self) -> str:
        return f"Env({dict(self._key_values)})"


class FunctionTable:
    """Maps function names to the `Function` nodes of the running program.

    Bodies are kept by reference; the program must stay alive while the
    table is in use.
    """

    def __init__(self) -> None:
        self._functions: dict[str, Function] = {}

    def __getitem__(self, name: str) -> Function:
        if name in self._functions:
            return self._functions[name]

        raise UndefinedFunctionCall(name)

    def declare(self, function: Function) -> None:
        if function.name in self._functions:
            raise DuplicateFunctionDefinition(function.name)
        self._functions[function.name] = function

    def names(self) -> list[str]:
        return list(self._functions)
