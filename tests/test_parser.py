import pytest

from yoba.frontend.ast_expressions import Add, IntegerConst, Literal, Sub
from yoba.frontend.ast_statements import (
    Assign,
    Call,
    Condition,
    Define,
    Function,
    ModAssign,
    Noop,
    Print,
    Program,
    Stats,
)
from yoba.frontend.parser import ParseError, parse_program, parse_tree
from yoba.snippets import fibonacci_source


# ===== Program Structure =====
def test_parse_empty_program() -> None:
    program = parse_program("")
    assert isinstance(program, Program)
    assert program.statements == ()


def test_parse_tree_is_rooted_at_program() -> None:
    tree = parse_tree("чо люблю х йоба чо расклад йоба")
    [program] = tree.children
    assert program.data == "program"
    assert len(program.children) == 2


def test_whitespace_and_newlines_are_insignificant() -> None:
    compact = parse_program("чо люблю х йоба чо покажь х йоба")
    spread = parse_program("\n  чо\tлюблю   х\n йоба\n\nчо покажь\nх йоба\n")
    assert compact == spread


# ===== Simple Statements =====
def test_parse_each_simple_statement() -> None:
    program = parse_program(
        """
        чо иди нахуй йоба
        чо расклад йоба
        чо люблю х йоба
        чо хуйни ф йоба
        чо покажь х йоба
        """
    )
    assert program.statements == (
        Noop(),
        Stats(),
        Define("х"),
        Call("ф"),
        Print("х"),
    )


def test_modify_forms_accept_either_operand_order() -> None:
    program = parse_program(
        """
        чо накинь х 5 йоба
        чо накинь 5 х йоба
        чо отожми х 3 йоба
        чо отожми 3 х йоба
        """
    )
    assert program.statements == (
        ModAssign("х", IntegerConst(5)),
        ModAssign("х", IntegerConst(5)),
        ModAssign("х", IntegerConst(-3)),
        ModAssign("х", IntegerConst(-3)),
    )


def test_integer_literals_are_arbitrary_precision() -> None:
    program = parse_program("чо х это 123456789012345678901234567890 йоба")
    assert program.statements == (
        Assign("х", IntegerConst(123456789012345678901234567890)),
    )


def test_negative_integer_literal() -> None:
    program = parse_program("чо накинь х -7 йоба")
    assert program.statements == (ModAssign("х", IntegerConst(-7)),)


# ===== Expression Parsing =====
def test_arithmetic_chain_nests_to_the_right() -> None:
    program = parse_program("чо х это а и б без 1 йоба")
    assert program.statements == (
        Assign("х", Add(Literal("а"), Sub(Literal("б"), IntegerConst(1)))),
    )


def test_subtraction_chain_is_not_left_folded() -> None:
    program = parse_program("чо х это 10 без 4 без 3 йоба")
    [statement] = program.statements
    assert isinstance(statement, Assign)
    assert statement.value == Sub(IntegerConst(10), Sub(IntegerConst(4), IntegerConst(3)))


# ===== Conditionals And Functions =====
def test_nested_conditional_with_function_branch() -> None:
    program = parse_program(
        "чо есть 12 кококо тада есть семки 8 тада иди нахуй или покажь семки "
        "или усеки сиськи это чо иди нахуй йоба йоба"
    )
    assert program.statements == (
        Condition(
            "кококо",
            12,
            Condition("семки", 8, Noop(), Print("семки")),
            Function("сиськи", (Noop(),)),
        ),
    )


def test_function_with_empty_body() -> None:
    program = parse_program("чо усеки пусто это йоба")
    assert program.statements == (Function("пусто", ()),)


def test_parse_fibonacci_program() -> None:
    program = parse_program(fibonacci_source())
    assert program.statements == (
        Define("сэмки"),
        Define("пиво"),
        Define("яга"),
        Define("итерации"),
        Assign("пиво", IntegerConst(1)),
        Assign("яга", IntegerConst(2)),
        Function("результат", (Print("итерации"), Print("сэмки"))),
        Function(
            "фибоначчи",
            (
                Assign("сэмки", Add(Literal("пиво"), Literal("яга"))),
                Assign("пиво", Literal("яга")),
                Assign("яга", Literal("сэмки")),
                Assign("итерации", Add(Literal("итерации"), IntegerConst(1))),
                Condition(
                    "итерации", 50, Call("результат"), Call("фибоначчи")
                ),
            ),
        ),
        Call("фибоначчи"),
    )


def test_parsing_is_repeatable() -> None:
    source = fibonacci_source()
    assert parse_program(source) == parse_program(source)


# ===== Syntax Errors =====
def test_missing_statement_terminator_is_rejected() -> None:
    with pytest.raises(ParseError):
        parse_program("чо люблю х")


def test_keyword_cannot_be_used_as_identifier() -> None:
    with pytest.raises(ParseError):
        parse_program("чо люблю это йоба")


def test_conditional_requires_both_branches() -> None:
    with pytest.raises(ParseError):
        parse_program("чо есть х 1 тада иди нахуй йоба")


def test_pair_of_two_identifiers_is_rejected() -> None:
    with pytest.raises(ParseError):
        parse_program("чо накинь х у йоба")


def test_unknown_character_is_rejected() -> None:
    with pytest.raises(ParseError):
        parse_program("чо люблю х; йоба")


def test_parse_error_reports_position_and_expected_terminal() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_program("чо люблю 5 йоба")

    error = excinfo.value
    assert error.position == 9
    assert error.line == 1
    assert error.column == 10
    assert "IDENT" in error.expected


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match=r"(?i)(?=.*line)(?=.*expected)"):
        parse_program("йоба")


def test_parse_error_at_end_of_input_points_past_the_last_token() -> None:
    source = "чо есть х 1 тада"
    with pytest.raises(ParseError) as excinfo:
        parse_program(source)

    error = excinfo.value
    assert error.position == len(source) == 16
    assert error.line == 1
    assert error.column == 17


def test_parse_error_at_end_of_input_on_a_later_line() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_program("чо люблю х йоба\nчо люблю")

    error = excinfo.value
    assert error.position == 24
    assert (error.line, error.column) == (2, 9)
