# topmark:header:start
#
#   project      : Embedres
#   file         : document.py
#   file_relpath : src/embedres/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout document tree and renderer.

Subformats describe *how* a value may be laid out by building an immutable document
out of a handful of combinators:

- `text` / `concat` (also spelled ``a + b``) / `separate` / `separate_map`,
- `group`: a unit that is rendered flat when its own content fits in the remaining
  width, broken otherwise,
- `ifflat`: pick one of two documents depending on the mode of the enclosing group,
- `hardline`: a line break that never fits flat,
- `break_`: ``n`` spaces when flat, a line break when broken,
- `nest`: extra indentation for line breaks inside a document,
- `column`: build the rest of a document from the column where it starts.

`pretty` resolves a document against a width budget. The top level is rendered in
broken mode, so an `ifflat` that is not enclosed in any group takes its broken branch.

Fit semantics:
    A group is flat iff the flat rendering of *its own content*, measured from the
    current column, stays within the width. Text following the group is not
    considered. `column` nodes are evaluated at the column they would be reached at.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar, Union

from embedres.config.logging import get_logger

if TYPE_CHECKING:
    from embedres.config.logging import EmbedresLogger

logger: EmbedresLogger = get_logger(__name__)

T = TypeVar("T")


class _DocOps:
    """Operator support shared by all document nodes."""

    __slots__ = ()

    def __add__(self, other: Doc) -> Doc:
        return concat(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Text(_DocOps):
    """Literal text; must not contain line breaks."""

    s: str


@dataclass(frozen=True, slots=True)
class Concat(_DocOps):
    parts: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class HardLine(_DocOps):
    """Always breaks when rendered."""


@dataclass(frozen=True, slots=True)
class Break(_DocOps):
    """``width`` spaces in flat mode; a line break in broken mode."""

    width: int = 1


@dataclass(frozen=True, slots=True)
class IfFlat(_DocOps):
    """Render ``flat`` if the enclosing group is flat, ``broken`` otherwise."""

    flat: Doc
    broken: Doc


@dataclass(frozen=True, slots=True)
class Group(_DocOps):
    """Try to render child in flat mode if it fits; else broken mode."""

    child: Doc


@dataclass(frozen=True, slots=True)
class Nest(_DocOps):
    """Increase indentation for any line breaks within child."""

    by: int
    child: Doc


@dataclass(frozen=True, slots=True)
class Column(_DocOps):
    """Defer building a document until the rendering column is known."""

    fn: Callable[[int], Doc]


Doc = Union[Text, Concat, HardLine, Break, IfFlat, Group, Nest, Column]

EMPTY: Doc = Text("")


def text(s: str) -> Doc:
    return Text(s)


def concat(*parts: Doc) -> Doc:
    flat: list[Doc] = []
    for p in parts:
        if isinstance(p, Concat):
            flat.extend(p.parts)
        elif isinstance(p, Text) and not p.s:
            continue
        else:
            flat.append(p)
    if not flat:
        return EMPTY
    if len(flat) == 1:
        return flat[0]
    return Concat(tuple(flat))


def group(d: Doc) -> Doc:
    return Group(d)


def ifflat(flat: Doc, broken: Doc) -> Doc:
    return IfFlat(flat, broken)


def hardline() -> Doc:
    return HardLine()


def break_(width: int = 1) -> Doc:
    return Break(width)


def nest(by: int, d: Doc) -> Doc:
    return Nest(by, d)


def column(fn: Callable[[int], Doc]) -> Doc:
    return Column(fn)


def separate(sep: Doc, docs: Iterable[Doc]) -> Doc:
    """Concatenate ``docs`` with ``sep`` between each pair."""
    out: list[Doc] = []
    for i, d in enumerate(docs):
        if i:
            out.append(sep)
        out.append(d)
    return concat(*out)


def separate_map(sep: Doc, fn: Callable[[T], Doc], items: Iterable[T]) -> Doc:
    return separate(sep, (fn(item) for item in items))


@dataclass(frozen=True, slots=True)
class _Frame:
    indent: int
    flat: bool
    doc: Doc


def _fits(doc: Doc, col: int, width: int) -> bool:
    """Return True if ``doc`` rendered flat from ``col`` stays within ``width``."""
    remaining: int = width - col
    stack: list[Doc] = [doc]
    while stack:
        if remaining < 0:
            return False
        d = stack.pop()
        if isinstance(d, Text):
            remaining -= len(d.s)
        elif isinstance(d, Concat):
            stack.extend(reversed(d.parts))
        elif isinstance(d, HardLine):
            return False
        elif isinstance(d, Break):
            remaining -= d.width
        elif isinstance(d, IfFlat):
            stack.append(d.flat)
        elif isinstance(d, (Group, Nest)):
            stack.append(d.child)
        else:
            stack.append(d.fn(width - remaining))
    return remaining >= 0


def pretty(doc: Doc, width: int) -> str:
    """Render ``doc`` into a string, breaking groups that do not fit in ``width``.

    Args:
        doc (Doc): The document to render.
        width (int): Target line width.

    Returns:
        str: The rendered text (no trailing newline is added).
    """
    out: list[str] = []
    col: int = 0
    groups: int = 0
    broken: int = 0

    stack: list[_Frame] = [_Frame(indent=0, flat=False, doc=doc)]

    while stack:
        frame = stack.pop()
        ind, flat, d = frame.indent, frame.flat, frame.doc

        if isinstance(d, Text):
            out.append(d.s)
            col += len(d.s)
        elif isinstance(d, Concat):
            # push in reverse so first part is processed first
            for p in reversed(d.parts):
                stack.append(_Frame(ind, flat, p))
        elif isinstance(d, HardLine):
            out.append("\n")
            out.append(" " * ind)
            col = ind
        elif isinstance(d, Break):
            if flat:
                out.append(" " * d.width)
                col += d.width
            else:
                out.append("\n")
                out.append(" " * ind)
                col = ind
        elif isinstance(d, IfFlat):
            stack.append(_Frame(ind, flat, d.flat if flat else d.broken))
        elif isinstance(d, Nest):
            stack.append(_Frame(ind + d.by, flat, d.child))
        elif isinstance(d, Group):
            if flat:
                stack.append(_Frame(ind, True, d.child))
            else:
                groups += 1
                fits: bool = _fits(d.child, col, width)
                if not fits:
                    broken += 1
                stack.append(_Frame(ind, fits, d.child))
        else:
            stack.append(_Frame(ind, flat, d.fn(col)))

    logger.trace("pretty: width=%d, %d group(s) decided, %d broken", width, groups, broken)
    return "".join(out)
