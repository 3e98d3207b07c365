"""
Tests for the continue and break statement productions.
"""
import pytest

from brisklang.exceptions import ExpectedLiteral
from brisklang.nodes import Assign, Break, Continue, ExprStmt, Name, Number
from brisklang.parser.combinators import Failure, Success

from brisklang.tests.utils import parse_failure, parse_source, run


@pytest.mark.parametrize("source", ["continue;", "continue   ;", "continue\n\t;"])
def test_continue_consumes_through_semicolon(source):
    """
    Whitespace between the keyword and ';' is skipped and the cursor ends
    exactly past the ';'.
    """
    result = run("parse_continue", source + " rest")
    assert isinstance(result, Success)
    assert result.value == Continue()
    assert result.cursor.offset == len(source)


def test_continue_consumed_lengths():
    assert run("parse_continue", "continue;").cursor.offset == 9
    assert run("parse_continue", "continue   ;").cursor.offset == 12


@pytest.mark.parametrize("source", ["continue", "continue   ", "continue\n"])
def test_continue_without_semicolon_fails(source):
    result = run("parse_continue", source)
    assert isinstance(result, Failure)
    assert result.committed
    assert result.error.innermost.label == "continue_statement"
    assert result.error.cause == ExpectedLiteral(";")
    assert result.offset == len(source)


def test_missing_semicolon_fails_whole_parse():
    """
    A committed keyword statement never yields a partial AST.
    """
    error = parse_failure("break; continue ")
    assert error.innermost.label == "continue_statement"
    assert error.cause == ExpectedLiteral(";")
    assert error.render() == "statement: continue_statement: expected ';' at offset 16"


def test_continue_requires_word_boundary():
    """
    ``continued`` is an identifier, not ``continue`` followed by ``d``.
    """
    assert isinstance(run("parse_continue", "continued = 1;"), Failure)
    ast = parse_source("continued = 1;")
    assert ast == [ExprStmt(Assign(Name("continued"), Number(1)))]


def test_break_follows_the_same_shape():
    assert parse_source("break;") == [Break()]
    assert parse_source("break ;") == [Break()]
    error = parse_failure("break")
    assert error.innermost.label == "break_statement"
    assert error.cause == ExpectedLiteral(";")


def test_breakfast_is_an_expression():
    assert parse_source("breakfast;") == [ExprStmt(Name("breakfast"))]


def test_statement_offsets_are_recorded():
    ast = parse_source("  continue;\nbreak;")
    assert [stmt.offset for stmt in ast] == [2, 12]
