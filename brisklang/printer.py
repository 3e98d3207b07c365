"""Indented AST dump used for debug output.


File: printer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import fields, is_dataclass
from typing import Any


def _pp(node: Any, indent: int) -> str:
    ind = "  " * indent
    if isinstance(node, (list, tuple)):
        return "\n".join(_pp(n, indent) for n in node)
    if not is_dataclass(node):
        return ind + repr(node)
    lines = [f"{ind}{node.__class__.__name__}"]
    for f in fields(node):
        if f.name == "offset":
            continue
        val = getattr(node, f.name)
        if is_dataclass(val) or (isinstance(val, (list, tuple)) and val):
            lines.append(f"{ind}  {f.name}:")
            lines.append(_pp(val, indent + 2))
        else:
            lines.append(f"{ind}  {f.name}: {val!r}")
    return "\n".join(lines)


def dump_ast(node: Any) -> str:
    """
    Render a node and its children, one field per line.
    """
    return _pp(node, 0)
