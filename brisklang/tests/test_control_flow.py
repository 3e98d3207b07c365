"""
Tests for conditionals, loops and return statements.
"""
from brisklang.exceptions import AllAlternativesFailed, ExpectedLiteral, ExpectedPattern
from brisklang.nodes import (
    Binary, Block, Break, Call, Continue, ExprStmt, For, If, Loop, Name, Number,
    Return, While,
)
from brisklang.operations import Op

from brisklang.tests.utils import parse_failure, parse_source


def test_if_without_else():
    ast = parse_source("if x { continue; }")
    assert ast == [If(Name("x"), Block((Continue(),)), None)]


def test_if_else():
    ast = parse_source("if x < 3 { break; } else { continue; }")
    assert ast == [
        If(
            Binary(Op.LT, Name("x"), Number(3)),
            Block((Break(),)),
            Block((Continue(),)),
        )
    ]


def test_else_if_chain_nests_in_blocks():
    source = (
        "if a { f(1); }\n"
        "else if b { f(2); }\n"
        "else { f(3); }\n"
    )
    ast = parse_source(source)
    call = lambda n: Block((ExprStmt(Call(Name("f"), (Number(n),))),))
    assert ast == [
        If(Name("a"), call(1), Block((If(Name("b"), call(2), call(3)),)))
    ]


def test_identifier_starting_with_else_is_not_an_else_branch():
    ast = parse_source("if a { } elsewhere;")
    assert ast == [If(Name("a"), Block(())), ExprStmt(Name("elsewhere"))]


def test_dangling_else_is_fatal():
    error = parse_failure("if a { } else ")
    assert error.labels[:2] == ["statement", "if_statement"]
    assert isinstance(error.cause, AllAlternativesFailed)
    assert error.cause.root == ExpectedLiteral("{")


def test_if_requires_block():
    error = parse_failure("if x continue;")
    assert "if_statement" in error.labels
    assert error.cause == ExpectedLiteral("{")
    assert error.offset == 5


def test_while_loop():
    source = "while i < 10 { i = i + 1; if i == 5 { break; } }"
    ast = parse_source(source)
    assert isinstance(ast[0], While)
    assert ast[0].condition == Binary(Op.LT, Name("i"), Number(10))
    assert len(ast[0].body.body) == 2
    assert isinstance(ast[0].body.body[1], If)


def test_loop_statement():
    assert parse_source("loop { continue; }") == [Loop(Block((Continue(),)))]


def test_loop_prefix_is_not_a_keyword():
    assert parse_source("looped;") == [ExprStmt(Name("looped"))]


def test_for_loop():
    ast = parse_source("for item in items { f(item); }")
    assert ast == [
        For("item", Name("items"), Block((ExprStmt(Call(Name("f"), (Name("item"),))),)))
    ]


def test_for_loop_requires_in():
    error = parse_failure("for item of items { }")
    assert error.innermost.label == "for_statement"
    assert error.cause == ExpectedLiteral("in")


def test_return_with_and_without_value():
    assert parse_source("return;") == [Return(None)]
    assert parse_source("return  x * 2 ;") == [Return(Binary(Op.MUL, Name("x"), Number(2)))]
    assert parse_source("return(x);") == [Return(Name("x"))]


def test_return_requires_semicolon():
    error = parse_failure("return x")
    assert error.innermost.label == "return_statement"
    assert error.cause == ExpectedLiteral(";")


def test_return_reports_a_broken_value_where_it_breaks():
    error = parse_failure("return -;")
    assert error.offset == 8
    assert error.cause == ExpectedPattern("expression")
    assert error.labels[-2:] == ["return_statement", "expression"]
    assert error.render().endswith("return_statement: expression: expected expression at offset 8")


def test_returned_is_an_identifier():
    assert parse_source("returned;") == [ExprStmt(Name("returned"))]


def test_keyword_cannot_be_used_as_a_loop_variable():
    error = parse_failure("for while in x { }")
    assert error.cause == ExpectedPattern("identifier")
