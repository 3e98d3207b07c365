"""
Tests for block assembly and the top-level statement driver.
"""
import sys

from brisklang.exceptions import ExpectedLiteral, NestingTooDeep, UnterminatedBlock
from brisklang.nodes import Block, Break, Continue, ExprStmt, Name
from brisklang.parser import Parser
from brisklang.parser.combinators import Failure, Success

from brisklang.tests.utils import parse_failure, parse_source, run


def test_block_collects_statements_in_order():
    source = "{ continue; break; }"
    result = run("block", source)
    assert isinstance(result, Success)
    assert result.value == Block((Continue(), Break()))
    assert result.cursor.offset == len(source)


def test_empty_block():
    assert run("block", "{}").value == Block(())
    assert run("block", "{ \n }").value == Block(())


def test_nested_blocks():
    ast = parse_source("{ { continue; } { } break; }")
    assert ast == [Block((Block((Continue(),)), Block(()), Break()))]


def test_block_stops_at_closing_brace():
    result = run("block", "{ x; } y;")
    assert result.value == Block((ExprStmt(Name("x")),))
    assert result.cursor.peek(3) == " y;"


def test_unterminated_block():
    error = parse_failure("{ continue; ")
    assert error.cause == UnterminatedBlock()
    assert error.innermost.label == "block"
    assert error.offset == 12
    assert error.render() == "statement: block: unterminated block, expected '}' at offset 12"


def test_failure_inside_block_is_fatal():
    result = run("block", "{ continue }")
    assert isinstance(result, Failure)
    assert result.committed
    assert result.error.cause == ExpectedLiteral(";")
    assert result.error.labels == ["block", "statement", "continue_statement"]


def test_top_level_parse_is_a_block():
    result = Parser("<test>").parse_result("continue; break;")
    assert isinstance(result, Success)
    assert result.value == Block((Continue(), Break()))
    assert result.cursor.at_end


def test_top_level_parse_skips_surrounding_whitespace_and_comments():
    source = "\n  // loop control\n  continue;  // again\n  break;\n\n"
    assert parse_source(source) == [Continue(), Break()]


def test_empty_source():
    assert parse_source("") == []
    assert parse_source("   \n// nothing\n") == []


def test_stray_closing_brace_is_an_error():
    error = parse_failure("continue; }")
    assert error.offset == 10


def test_moderately_nested_blocks_parse():
    depth = 20
    expected = Block((Break(),))
    for _ in range(depth - 1):
        expected = Block((expected,))
    assert parse_source("{" * depth + "break;" + "}" * depth) == [expected]


def test_deeply_nested_blocks_fail_cleanly():
    depth = sys.getrecursionlimit()
    result = Parser("<test>").parse_result("{" * depth + "}" * depth)
    assert isinstance(result, Failure)
    assert result.committed
    assert result.error.cause == NestingTooDeep()
    assert result.error.offset == 0


def test_deeply_nested_parentheses_fail_cleanly():
    depth = sys.getrecursionlimit()
    source = "x = " + "(" * depth + "1" + ")" * depth + ";"
    error = parse_failure(source)
    assert error.cause == NestingTooDeep()
    assert error.render() == "nesting too deep at offset 0"


def test_nesting_failure_starts_at_the_given_offset():
    depth = sys.getrecursionlimit()
    source = "break;\n" + "{" * depth + "}" * depth
    result = Parser("<test>").parse_result(source, offset=7)
    assert isinstance(result, Failure)
    assert result.error.cause == NestingTooDeep()
    assert result.error.offset == 7
