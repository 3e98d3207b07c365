"""
Utility functions shared across brisk tests.
"""
from brisklang.cursor import Cursor
from brisklang.parser import Parser
from brisklang.parser.combinators import Failure


def parse_source(source: str) -> list:
    """
    Parse source code and return the top-level statements.
    """
    parser = Parser("<test>")
    return list(parser.parse(source).body)


def parse_failure(source: str):
    """
    Parse source code that is expected to fail and return the failure value.
    """
    result = Parser("<test>").parse_result(source)
    assert isinstance(result, Failure), f"expected a failure, got {result!r}"
    return result.error


def run(production, source: str, offset: int = 0):
    """
    Apply a single production (a Parser method name) to ``source``.
    """
    parser = Parser("<test>")
    return getattr(parser, production)(Cursor(source, offset))
