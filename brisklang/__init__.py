"""brisk statement parser.

Workflow:
1. Source text is wrapped in an immutable cursor.
2. The Parser applies the statement grammar, built from pure combinators,
   until the input is exhausted.
3. The result is a top-level ``Block`` node, or a ``ParseError`` carrying the
   labeled trail of productions that were active when parsing failed.

Set ``BRISKDEBUG`` in the environment to log the AST of every file parsed
with :func:`parse_file`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import os

from brisklang.exceptions import ParseError
from brisklang.nodes import Block
from brisklang.parser import Parser
from brisklang.printer import dump_ast

logger = logging.getLogger(__name__)

__version__ = "0.1.0"


def parse_source(source: str, file: str = "<input>", offset: int = 0) -> Block:
    """
    Parse source text into a top-level block.

    Raises:
        ParseError: If the source is not valid brisk.
    """
    return Parser(file).parse(source, offset)


def parse_file(path: str) -> Block:
    """
    Read and parse a UTF-8 source file.
    """
    with open(path, "r", encoding="utf-8") as f:
        code = f.read()

    ast = parse_source(code, str(path))

    if os.environ.get('BRISKDEBUG'):
        logger.info("AST for %s:\n%s", path, dump_ast(ast))

    return ast


__all__ = ["Parser", "ParseError", "parse_source", "parse_file"]
