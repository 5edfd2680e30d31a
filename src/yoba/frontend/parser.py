from functools import lru_cache
from importlib.resources import files
from typing import Any, Iterable, Iterator, cast

from lark import Lark, Token, Transformer, Tree
from lark.exceptions import UnexpectedInput, UnexpectedToken
from lark.lexer import PatternStr

from .ast_expressions import Add, Expression, IntegerConst, Literal, Sub
from .ast_statements import (
    Assign,
    Call,
    Condition,
    Define,
    Function,
    ModAssign,
    Noop,
    Print,
    Program,
    Statement,
    Stats,
)


class ParseError(ValueError):
    """Raised when source text does not match the grammar."""

    def __init__(
        self, position: int, line: int, column: int, expected: list[str]
    ) -> None:
        self.position = position
        self.line = line
        self.column = column
        self.expected = expected
        super().__init__(
            f"unexpected input at line {line}, column {column}; "
            f"expected one of: {', '.join(expected) or 'end of input'}"
        )


class AstTransformer(Transformer[Token, object]):
    def start(self, children: list[object]) -> Program:
        program = children[0]
        assert isinstance(program, Program)
        return program

    def program(self, children: list[object]) -> Program:
        statements = tuple(self._as_statement(child) for child in children)
        return Program(statements=statements)

    def statement(self, children: list[object]) -> object:
        [statement] = children
        return statement

    def noop(self, children: list[object]) -> Noop:
        return Noop()

    def stats(self, children: list[object]) -> Stats:
        return Stats()

    def define(self, children: list[object]) -> Define:
        return Define(name=self._as_name(children))

    def call(self, children: list[object]) -> Call:
        return Call(name=self._as_name(children))

    def print(self, children: list[object]) -> Print:
        return Print(name=self._as_name(children))

    def assign(self, children: list[object]) -> Assign:
        [name, value] = children
        assert isinstance(name, Token)
        return Assign(name=str(name), value=self._as_expression(value))

    def arithmetic_expr(self, children: list[object]) -> Expression:
        return _build_arithmetic(iter(cast(list[Token], children)))

    def int_var_pair(self, children: list[object]) -> tuple[str, int]:
        [first, second] = children
        assert isinstance(first, Token) and isinstance(second, Token)
        if first.type == "INTEGER":
            return str(second), int(first)
        return str(first), int(second)

    def modify_up(self, children: list[object]) -> ModAssign:
        name, value = self._as_pair(children[0])
        return ModAssign(name=name, delta=IntegerConst(value))

    def modify_down(self, children: list[object]) -> ModAssign:
        name, value = self._as_pair(children[0])
        return ModAssign(name=name, delta=IntegerConst(-value))

    def conditional(self, children: list[object]) -> Condition:
        [pair, then_branch, else_branch] = children
        name, threshold = self._as_pair(pair)
        return Condition(
            name=name,
            threshold=threshold,
            then_branch=self._as_statement(then_branch),
            else_branch=self._as_statement(else_branch),
        )

    def function_decl(self, children: list[object]) -> Function:
        name, *body = children
        assert isinstance(name, Token)
        return Function(
            name=str(name), body=tuple(self._as_statement(child) for child in body)
        )

    def _as_name(self, children: list[object]) -> str:
        [name] = children
        assert isinstance(name, Token)
        return str(name)

    def _as_pair(self, value: object) -> tuple[str, int]:
        assert isinstance(value, tuple)
        return cast(tuple[str, int], value)

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value

    def _as_statement(self, value: object) -> Statement:
        assert isinstance(
            value,
            (Noop, Define, Assign, ModAssign, Print, Stats, Condition, Function, Call),
        )
        return value


def _build_arithmetic(tokens: Iterator[Token]) -> Expression:
    operand = next(tokens)
    left: Expression
    if operand.type == "IDENT":
        left = Literal(str(operand))
    else:
        left = IntegerConst(int(operand))

    operator = next(tokens, None)
    if operator is None:
        return left

    right = _build_arithmetic(tokens)
    if operator.type == "PLUS":
        return Add(left, right)
    return Sub(left, right)


def _load_grammar_text() -> str:
    grammar_file = files("yoba.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    # The basic lexer keeps keywords reserved in every parser state.
    return Lark(grammar, start="start", parser="lalr", lexer="basic")


def parse_tree(source: str) -> Tree[Token]:
    parser: Any = get_parser()
    try:
        tree = parser.parse(source)
    except UnexpectedInput as error:
        raise _parse_error(error, source) from error
    return cast(Tree[Token], tree)


def parse_program(source: str) -> Program:
    parsed = parse_tree(source)
    program = AstTransformer().transform(parsed)
    assert isinstance(program, Program)
    return program


def _parse_error(error: UnexpectedInput, source: str) -> ParseError:
    expected = getattr(error, "expected", None) or getattr(error, "allowed", None)
    position = error.pos_in_stream
    at_end = isinstance(error, UnexpectedToken) and error.token.type == "$END"
    if at_end or position is None or position < 0:
        position = len(source)
        line = source.count("\n") + 1
        column = len(source) - source.rfind("\n")
    else:
        line, column = error.line, error.column
    return ParseError(
        position=position,
        line=line,
        column=column,
        expected=_describe_terminals(expected or ()),
    )


def _describe_terminals(names: Iterable[str]) -> list[str]:
    parser = get_parser()
    described: set[str] = set()
    for name in names:
        try:
            terminal = parser.get_terminal(name)
        except KeyError:
            described.add(name)
            continue
        if isinstance(terminal.pattern, PatternStr):
            described.add(f'"{terminal.pattern.value}"')
        else:
            described.add(name)
    return sorted(described)
