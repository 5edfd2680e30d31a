class EvalError(Exception):
    """Raised when a program fails while it is being evaluated.

    `name` holds the offending identifier (or, for sink failures, the
    details reported by the sink).
    """

    description = "evaluation error"

    def __init__(self, name: str) -> None:
        super().__init__(f"{self.description}: {name}")
        self.name = name


class UndefinedVariable(EvalError):
    description = "undefined variable"


class DuplicateVariableDefinition(EvalError):
    description = "variable is already defined"


class DuplicateFunctionDefinition(EvalError):
    description = "function is already defined"


class UndefinedFunctionCall(EvalError):
    description = "call to undefined function"


class SinkWriteFailure(EvalError):
    description = "cannot write output"


class CallDepthExceeded(EvalError):
    description = "maximum call depth exceeded in"
