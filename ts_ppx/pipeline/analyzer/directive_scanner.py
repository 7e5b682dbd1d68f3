"""
Directive scanner.

Finds the statements of a module annotated with a ts-ppx JSDoc tag, e.g.

    /** @ts-ppx(zod, fast-check) */
    export type Fruit = Readonly<{ name: string }>;

and parses the list of generator names requested for each of them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..errors import MalformedDirective
from ..type_ast.nodes import Directive
from ..type_ast.parser import ParsedModule, Statement, node_line, node_text

DEFAULT_TAG = "ts-ppx"

# Any JSDoc tag starting a line or following whitespace
_TAG_PATTERN = re.compile(r"(?:^|(?<=\s))@([A-Za-z][\w-]*)")


@dataclass
class AnnotatedStatement:
    """A statement together with the directives found above it."""

    statement: Statement
    directives: list[Directive] = field(default_factory=list)


def jsdoc_body(comment: str) -> str | None:
    """
    Strip the delimiters of a JSDoc comment.

    Args:
        comment: Raw comment text

    Returns:
        The comment body with leading ``*`` of each line removed, or None if
        the comment is not a JSDoc block comment
    """
    if not comment.startswith("/**") or not comment.endswith("*/") or len(comment) < 5:
        return None

    lines = comment[3:-2].split("\n")
    stripped = []
    for line in lines:
        line = line.strip()
        if line.startswith("*"):
            line = line[1:]
        stripped.append(line.strip())
    return "\n".join(stripped)


def parse_directive_payload(payload: str, source_path: str = "", line: int | None = None) -> Directive:
    """
    Parse the text following a directive tag.

    Args:
        payload: Tag payload, e.g. "(zod, fast-check)"
        source_path: Module path (for error messages)
        line: Line of the comment (for error messages)

    Returns:
        Directive with the trimmed generator names, in order

    Raises:
        MalformedDirective: If the payload is empty, not parenthesized, or
            contains an empty name
    """
    text = " ".join(payload.split())
    if not text or not text.startswith("(") or not text.endswith(")"):
        raise MalformedDirective(payload, source_path, line)

    names = [name.strip() for name in text[1:-1].split(",")]
    if any(not name for name in names):
        raise MalformedDirective(payload, source_path, line)

    return Directive(generators=names, line=line)


class DirectiveScanner:
    """Scans a parsed module for annotated statements."""

    def __init__(self, tag: str = DEFAULT_TAG):
        """
        Initialize the scanner.

        Args:
            tag: JSDoc tag name marking a directive (without the leading @)
        """
        self.tag = tag

    def scan(self, parsed: ParsedModule) -> list[AnnotatedStatement]:
        """
        Find every statement carrying at least one well-formed directive.

        Args:
            parsed: The parsed module

        Returns:
            Annotated statements in source order

        Raises:
            MalformedDirective: On the first malformed directive
        """
        annotated: list[AnnotatedStatement] = []
        for statement in parsed.statements:
            directives: list[Directive] = []
            for comment in parsed.leading_comments(statement):
                directives.extend(self.directives_in_comment(node_text(comment), parsed.path, node_line(comment)))
            if directives:
                annotated.append(AnnotatedStatement(statement=statement, directives=directives))
        return annotated

    def directives_in_comment(self, comment: str, source_path: str = "", line: int | None = None) -> list[Directive]:
        """
        Extract the directives of a single comment.

        Args:
            comment: Raw comment text
            source_path: Module path (for error messages)
            line: Line of the comment (for error messages)

        Returns:
            Directives in the order they appear
        """
        body = jsdoc_body(comment)
        if body is None:
            return []

        tags = list(_TAG_PATTERN.finditer(body))
        directives = []
        for index, match in enumerate(tags):
            if match.group(1) != self.tag:
                continue
            end = tags[index + 1].start() if index + 1 < len(tags) else len(body)
            tag_line = line + body.count("\n", 0, match.start()) if line is not None else None
            directives.append(parse_directive_payload(body[match.end() : end], source_path, tag_line))
        return directives
