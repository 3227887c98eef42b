"""Line-level vCard tokenizing, backed by vobject.

The codec owns folding, unfolding and ``NAME;PARAM=...:VALUE`` splitting.
Values stay in their escaped wire form in both directions; mapping them to
record fields is the job of the decoder and encoder.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Collection, Iterable
from typing import Protocol

import vobject

from .errors import InvalidFieldTypeError, MalformedInputError
from .models import PropertyNode

logger = logging.getLogger("vcardkit")

_NAME_RE = re.compile(r"^(?:[\w-]+\.)?([\w-]+)")
_LINE_END_RE = re.compile(r"\r\n|\r|\n")


class LineCodec(Protocol):
    def parse(
        self, text: str, names: Collection[str] | None = None
    ) -> list[PropertyNode]: ...

    def serialize(self, nodes: Iterable[PropertyNode]) -> str: ...


class VObjectLineCodec:
    """Default :class:`LineCodec` built on ``vobject.base``."""

    def __init__(self, line_length: int = 75) -> None:
        self.line_length = line_length

    def parse(
        self, text: str, names: Collection[str] | None = None
    ) -> list[PropertyNode]:
        """Tokenize the properties of the first card in ``text``.

        The ``BEGIN:VCARD``/``END:VCARD`` envelope is optional. When
        ``names`` is given, properties with other names are skipped before
        tokenizing, so a broken line for an unknown property is not an error.
        """
        nodes: list[PropertyNode] = []
        # vobject's own counter is not a physical line number
        starts = iter(_logical_line_starts(text))
        lines = vobject.base.getLogicalLines(io.StringIO(text), allowQP=False)
        for line, _ in lines:
            number = next(starts, None)
            match = _NAME_RE.match(line)
            name = match.group(1).upper() if match else None
            if name == "BEGIN":
                continue
            if name == "END":
                if line.strip().upper() == "END:VCARD":
                    break
                continue
            if name is not None and names is not None and name not in names:
                logger.debug(f"Skipping property {name} on line {number}")
                continue
            try:
                content = vobject.base.textLineToContentLine(line, number)
            except vobject.base.ParseError as e:
                raise MalformedInputError(
                    f"Cannot tokenize line {number}: {line!r}",
                    property_name=name,
                    line_number=number,
                ) from e
            nodes.append(_to_node(content))
        return nodes

    def serialize(self, nodes: Iterable[PropertyNode]) -> str:
        """Write one folded, CRLF-terminated line per node.

        Parameters are written in node order, one ``KEY=value`` token each.
        """
        out = io.StringIO()
        for node in nodes:
            tokens = [node.name.upper()]
            for key, value in node.params:
                try:
                    tokens.append(f"{key.upper()}={vobject.base.dquoteEscape(value)}")
                except vobject.base.VObjectError as e:
                    raise InvalidFieldTypeError(
                        key.lower(), f"{node.name} parameter {key}={value!r}: {e}"
                    ) from e
            vobject.base.foldOneLine(
                out, ";".join(tokens) + ":" + node.value, self.line_length
            )
        return out.getvalue()


def _logical_line_starts(text: str) -> list[int]:
    """1-based physical line numbers on which each logical line begins.

    Blank lines and folded continuations (leading space or tab) start
    nothing, matching what ``getLogicalLines`` yields.
    """
    return [
        number
        for number, raw in enumerate(_LINE_END_RE.split(text), 1)
        if raw and raw[0] not in " \t"
    ]


def _to_node(content: vobject.base.ContentLine) -> PropertyNode:
    params: list[tuple[str, str]] = []
    for key, values in content.params.items():
        for value in values:
            params.append((key.upper(), value))
    # vCard 2.1 shorthand: TEL;WORK;CELL means TYPE=WORK,CELL
    for value in content.singletonparams:
        params.append(("TYPE", value))
    return PropertyNode(name=content.name.upper(), value=content.value, params=params)


__all__ = ["LineCodec", "VObjectLineCodec"]
