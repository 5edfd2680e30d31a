import io

from .frontend.parser import parse_program
from .runtime.interpreter import Session
from .snippets import fibonacci_source
from .writer import IndentingWriter, surrounding_box_title


def run_demo() -> None:
    writer = IndentingWriter()

    with surrounding_box_title(writer):
        writer.println("FIBONACCI (50 iterations)")

    out = io.BytesIO()
    session = Session(out=out)
    session.evaluate(parse_program(fibonacci_source()))
    writer.print(out.getvalue().decode("utf-8"))

    with surrounding_box_title(writer):
        writer.println(f"variables: {dict(session.variables.items())}")
        writer.println(f"functions: {session.functions.names()}")


if __name__ == "__main__":
    run_demo()
