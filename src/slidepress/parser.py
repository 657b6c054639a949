"""Deck parser: an explicit state machine over classified lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from slidepress.config import (
    SLIDEPRESS_INDENT_WIDTH,
    SLIDEPRESS_STRICT_HEADERS,
    SLIDEPRESS_TAB_SIZE,
)
from slidepress.directives import build_directive
from slidepress.exceptions import StructuralParseError
from slidepress.lexer import ClassifiedLine, LineKind, classify_lines
from slidepress.schemas import CodeElement, Document, ListElement, Section, TextElement

logger = logging.getLogger(__name__)

_KNOWN_FENCE_FLAGS = frozenset({"-edit", "-numbers"})


class ParserState(str, Enum):
    """Named states of the document parser."""

    TOP_LEVEL = "top_level"
    IN_SECTION = "in_section"
    IN_LIST = "in_list"
    IN_CODE_FENCE = "in_code_fence"
    IN_TEXT = "in_text"


@dataclass
class ParseOptions:
    """Options for deck parsing.

    Attributes:
        strict_headers: If True, a header that skips a nesting level raises
            ``StructuralParseError``. Otherwise its depth is clamped to one
            below the deepest open section.
        indent_width: Columns of indentation per header or bullet nesting level.
        tab_size: Column width used when expanding tabs.
    """

    strict_headers: bool = SLIDEPRESS_STRICT_HEADERS
    indent_width: int = SLIDEPRESS_INDENT_WIDTH
    tab_size: int = SLIDEPRESS_TAB_SIZE


Action = Callable[["DocumentParser", ClassifiedLine, "ClassifiedLine | None"], ParserState]


class DocumentParser:
    """Build a ``Document`` from a stream of classified lines.

    Drive it with ``feed`` for each line (plus one line of lookahead) and
    call ``finish`` once the input is exhausted. Dispatch goes through
    ``TRANSITIONS``, keyed by ``(state, line kind)``.
    """

    TRANSITIONS: dict[tuple[ParserState, LineKind], Action] = {}

    def __init__(self, *, strict_headers: bool = SLIDEPRESS_STRICT_HEADERS) -> None:
        self.strict_headers = strict_headers
        self.state = ParserState.TOP_LEVEL
        self.document = Document()
        self._open: list[Section] = []
        self._block: ListElement | TextElement | None = None
        self._fence_line: ClassifiedLine | None = None
        self._fence_lines: list[str] = []
        self._finished = False

    def feed(self, line: ClassifiedLine, lookahead: ClassifiedLine | None = None) -> ParserState:
        """Consume one line and return the resulting state."""
        if self._finished:
            raise RuntimeError("parser already finished")
        self.state = self._dispatch(line, lookahead)
        return self.state

    def finish(self) -> Document:
        """Close any open blocks and return the document.

        Raises:
            StructuralParseError: If a code fence is still open.
        """
        if self.state is ParserState.IN_CODE_FENCE and self._fence_line is not None:
            raise StructuralParseError(
                self._fence_line.line_number,
                "code fence opened here is never closed",
            )
        self._close_block()
        self._finished = True
        logger.debug("Parsed deck with %d top-level sections", len(self.document.sections))
        return self.document

    def _dispatch(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        action = self.TRANSITIONS[(self.state, line.kind)]
        return action(self, line, lookahead)

    # Actions

    def _skip(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        return self.state

    def _orphan(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        raise StructuralParseError(
            line.line_number, f"{line.kind.value} line before the first section header"
        )

    def _close_and_redispatch(
        self, line: ClassifiedLine, lookahead: ClassifiedLine | None
    ) -> ParserState:
        self._close_block()
        self.state = ParserState.IN_SECTION
        return self._dispatch(line, lookahead)

    def _open_section(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        self._close_block()
        depth = line.depth
        limit = len(self._open) + 1
        if depth > limit:
            if self.strict_headers:
                raise StructuralParseError(
                    line.line_number,
                    f"header depth {depth} skips a level (deepest allowed is {limit})",
                )
            logger.warning(
                "line %d: header depth %d skips a level, treating as depth %d",
                line.line_number,
                depth,
                limit,
            )
            depth = limit

        while self._open and self._open[-1].depth >= depth:
            self._open.pop()

        parent = self._open[-1] if self._open else None
        siblings = parent.sections if parent else self.document.sections
        prefix = parent.number if parent else []
        section = Section(number=[*prefix, len(siblings) + 1], title=line.content)
        siblings.append(section)
        self._open.append(section)
        logger.debug("Opened section %s: %s", section.formatted_number, section.title)
        return ParserState.IN_SECTION

    def _start_list(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        self._block = ListElement(bullets=[line.content], level=line.depth)
        self._current.elements.append(self._block)
        return ParserState.IN_LIST

    def _bullet(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        block = self._block
        if isinstance(block, ListElement) and block.level == line.depth:
            block.bullets.append(line.content)
            return ParserState.IN_LIST
        self._close_block()
        return self._start_list(line, lookahead)

    def _directive(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        self._current.elements.append(build_directive(line))
        return ParserState.IN_SECTION

    def _open_fence(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        self._fence_line = line
        self._fence_lines = []
        return ParserState.IN_CODE_FENCE

    def _fence_body(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        opener = self._fence_line
        assert opener is not None
        if (
            line.kind is LineKind.FENCE
            and not line.info
            and line.fence[0] == opener.fence[0]
            and len(line.fence) >= len(opener.fence)
        ):
            self._current.elements.append(_code_element(opener, self._fence_lines))
            self._fence_line = None
            self._fence_lines = []
            return ParserState.IN_SECTION
        self._fence_lines.append(line.text)
        return ParserState.IN_CODE_FENCE

    def _start_text(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        pre = line.kind is LineKind.PRE
        self._block = TextElement(pre=pre, lines=[line.text if pre else line.content])
        self._current.elements.append(self._block)
        return ParserState.IN_TEXT

    def _text_line(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        block = self._block
        assert isinstance(block, TextElement)
        if block.pre != (line.kind is LineKind.PRE):
            return self._close_and_redispatch(line, lookahead)
        block.lines.append(line.text if block.pre else line.content)
        return ParserState.IN_TEXT

    def _text_blank(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        block = self._block
        if (
            isinstance(block, TextElement)
            and block.pre
            and lookahead is not None
            and lookahead.kind is LineKind.PRE
        ):
            block.lines.append(line.text)
            return ParserState.IN_TEXT
        self._close_block()
        return ParserState.IN_SECTION

    def _end_block(self, line: ClassifiedLine, lookahead: ClassifiedLine | None) -> ParserState:
        self._close_block()
        return ParserState.IN_SECTION

    # Helpers

    @property
    def _current(self) -> Section:
        return self._open[-1]

    def _close_block(self) -> None:
        self._block = None


def _code_element(opener: ClassifiedLine, lines: list[str]) -> CodeElement:
    language: str | None = None
    edit = numbers = False
    for token in opener.info.split():
        if token.startswith("-"):
            if token not in _KNOWN_FENCE_FLAGS:
                logger.warning(
                    "line %d: ignoring unknown code fence flag %s", opener.line_number, token
                )
            edit = edit or token == "-edit"
            numbers = numbers or token == "-numbers"
        elif language is None:
            language = token
    return CodeElement(text="\n".join(lines), edit=edit, language=language, numbers=numbers)


def _build_transitions() -> dict[tuple[ParserState, LineKind], Action]:
    P = DocumentParser
    table: dict[tuple[ParserState, LineKind], Action] = {}

    for kind in LineKind:
        table[(ParserState.TOP_LEVEL, kind)] = P._orphan
        table[(ParserState.IN_CODE_FENCE, kind)] = P._fence_body
        table[(ParserState.IN_LIST, kind)] = P._close_and_redispatch
        table[(ParserState.IN_TEXT, kind)] = P._close_and_redispatch
    for state in ParserState:
        if state is not ParserState.IN_CODE_FENCE:
            table[(state, LineKind.HEADER)] = P._open_section
            table[(state, LineKind.COMMENT)] = P._skip
    table[(ParserState.TOP_LEVEL, LineKind.BLANK)] = P._skip

    table.update(
        {
            (ParserState.IN_SECTION, LineKind.BLANK): P._skip,
            (ParserState.IN_SECTION, LineKind.BULLET): P._start_list,
            (ParserState.IN_SECTION, LineKind.DIRECTIVE): P._directive,
            (ParserState.IN_SECTION, LineKind.FENCE): P._open_fence,
            (ParserState.IN_SECTION, LineKind.PROSE): P._start_text,
            (ParserState.IN_SECTION, LineKind.PRE): P._start_text,
            (ParserState.IN_LIST, LineKind.BULLET): P._bullet,
            (ParserState.IN_LIST, LineKind.BLANK): P._end_block,
            (ParserState.IN_TEXT, LineKind.PROSE): P._text_line,
            (ParserState.IN_TEXT, LineKind.PRE): P._text_line,
            (ParserState.IN_TEXT, LineKind.BLANK): P._text_blank,
        }
    )
    return table


DocumentParser.TRANSITIONS = _build_transitions()


def parse_lines(
    lines: Iterable[tuple[ClassifiedLine, ClassifiedLine | None]],
    *,
    strict_headers: bool = SLIDEPRESS_STRICT_HEADERS,
) -> Document:
    """Parse already-classified ``(line, lookahead)`` pairs."""
    parser = DocumentParser(strict_headers=strict_headers)
    for line, lookahead in lines:
        parser.feed(line, lookahead)
    return parser.finish()


def parse_deck(text: str, options: ParseOptions | None = None) -> Document:
    """Parse deck text into a ``Document``.

    Raises:
        StructuralParseError: If the deck is malformed. Nothing is returned
            for a partially valid deck.
    """
    opts = options or ParseOptions()
    return parse_lines(
        classify_lines(text, indent_width=opts.indent_width, tab_size=opts.tab_size),
        strict_headers=opts.strict_headers,
    )
