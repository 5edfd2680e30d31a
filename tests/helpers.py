import io
from typing import TextIO

from yoba.frontend.parser import parse_program
from yoba.runtime.interpreter import Session


def assert_keywords_in_output(keywords: tuple[str, ...], stream: TextIO) -> None:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    output = str(getvalue()).lower()
    for keyword in keywords:
        assert keyword.lower() in output


def evaluate_source(source: str) -> tuple[Session, io.BytesIO]:
    out = io.BytesIO()
    session = Session(out=out)
    session.evaluate(parse_program(source))
    return session, out
