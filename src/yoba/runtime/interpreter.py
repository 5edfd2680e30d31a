import sys
import threading
from typing import BinaryIO, Callable, TextIO, overload

from ..frontend.ast_statements import Program
from ..frontend.parser import ParseError, parse_program
from .core import Env, FunctionTable, ProgramState, RuntimeContext
from .errors import EvalError
from .statement_executor import execute_sequence

# Loops are recursive calls, so evaluation runs on its own thread with a
# large stack and a raised recursion limit.
EVALUATION_STACK_SIZE = 512 * 1024 * 1024
EVALUATION_RECURSION_LIMIT = 200_000


class Session:
    """Evaluates programs against one variable store and function table.

    Output goes to `out`, any binary stream; an in-memory buffer is used
    when none is given. State survives between `evaluate` calls.
    """

    def __init__(
        self,
        out: BinaryIO | None = None,
        context: RuntimeContext | None = None,
    ) -> None:
        context = context or RuntimeContext()
        if out is not None:
            context.out = out
        self.state = ProgramState(
            env=Env(), functions=FunctionTable(), context=context
        )

    @property
    def out(self) -> BinaryIO:
        return self.state.context.out

    @property
    def variables(self) -> Env:
        return self.state.env

    @property
    def functions(self) -> FunctionTable:
        return self.state.functions

    def evaluate(self, program: Program) -> None:
        _run_with_deep_stack(lambda: execute_sequence(program.statements, self.state))


def _run_with_deep_stack(body: Callable[[], None]) -> None:
    errors: list[BaseException] = []

    def target() -> None:
        try:
            body()
        except BaseException as error:
            errors.append(error)

    worker = threading.Thread(target=target, name="yoba-evaluation")
    previous_limit = sys.getrecursionlimit()
    previous_stack_size = threading.stack_size(EVALUATION_STACK_SIZE)
    try:
        sys.setrecursionlimit(max(previous_limit, EVALUATION_RECURSION_LIMIT))
        worker.start()
    finally:
        threading.stack_size(previous_stack_size)

    try:
        worker.join()
    finally:
        sys.setrecursionlimit(previous_limit)

    if errors:
        raise errors[0]


def run_for_cli(
    source: str,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
) -> ProgramState | None:
    stream = stderr if stderr is not None else sys.stderr

    try:
        program = parse_program(source)
    except ParseError as error:
        print(f"Syntax error: {error}", file=stream)
        return None

    try:
        return run(program, context)
    except EvalError as error:
        print(f"Runtime error: {error}", file=stream)
        return None


@overload
def run(
    program_or_source: Program, context: RuntimeContext | None = None
) -> ProgramState: ...


@overload
def run(
    program_or_source: str, context: RuntimeContext | None = None
) -> ProgramState: ...


def run(
    program_or_source: Program | str, context: RuntimeContext | None = None
) -> ProgramState:
    if isinstance(program_or_source, str):
        program = parse_program(program_or_source)
    else:
        program = program_or_source

    session = Session(context=context)
    session.evaluate(program)

    return session.state
