from .frontend.parser import ParseError, parse_program, parse_tree
from .runtime.core import ProgramState, RuntimeContext
from .runtime.errors import (
    CallDepthExceeded,
    DuplicateFunctionDefinition,
    DuplicateVariableDefinition,
    EvalError,
    SinkWriteFailure,
    UndefinedFunctionCall,
    UndefinedVariable,
)
from .runtime.interpreter import Session, run, run_for_cli

__all__ = [
    "CallDepthExceeded",
    "DuplicateFunctionDefinition",
    "DuplicateVariableDefinition",
    "EvalError",
    "ParseError",
    "ProgramState",
    "RuntimeContext",
    "Session",
    "SinkWriteFailure",
    "UndefinedFunctionCall",
    "UndefinedVariable",
    "parse_program",
    "parse_tree",
    "run",
    "run_for_cli",
]
