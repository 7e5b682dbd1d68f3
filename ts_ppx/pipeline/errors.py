"""
Errors raised by the generation pipeline.

Every error is fatal to the run: the driver never retries and never
skips a declaration that failed.
"""

from __future__ import annotations


def _location(source_path: str, line: int | None) -> str:
    if not source_path:
        return ""
    if line is None:
        return f" ({source_path})"
    return f" ({source_path}:{line})"


class PpxError(Exception):
    """Base class for all ts_ppx errors."""

    pass


class MalformedDirective(PpxError):
    """Raised when a directive payload is empty or not a parenthesized name list."""

    def __init__(self, payload: str, source_path: str = "", line: int | None = None):
        self.payload = payload
        self.source_path = source_path
        self.line = line
        super().__init__(f"Malformed ts-ppx directive {payload!r}{_location(source_path, line)}")


class UnknownGenerator(PpxError):
    """Raised when a directive names a generator that is not registered."""

    def __init__(self, name: str, source_path: str = "", line: int | None = None):
        self.name = name
        self.source_path = source_path
        self.line = line
        super().__init__(f'Code generator not registered: "{name}"{_location(source_path, line)}')


class DuplicateGenerator(PpxError):
    """Raised when two generator plugins are registered under the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Code generator registered twice: "{name}"')


class UnsupportedDeclarationKind(PpxError):
    """Raised when a generator is asked to handle anything but a type alias."""

    def __init__(self, generator: str, kind: str, source_path: str = "", line: int | None = None):
        self.generator = generator
        self.kind = kind
        self.source_path = source_path
        self.line = line
        super().__init__(f"Only type aliases can leverage the {generator} ts-ppx plugin, got {kind}{_location(source_path, line)}")


class UnsupportedTypeConstruct(PpxError):
    """Raised when a type uses syntax outside of the supported closed set."""

    def __init__(self, construct: str, source_path: str = "", line: int | None = None):
        self.construct = construct
        self.source_path = source_path
        self.line = line
        super().__init__(f"Unhandled type construct: {construct}{_location(source_path, line)}")


class MissingPropertyType(PpxError):
    """Raised when an object type property has no type annotation."""

    def __init__(self, property_name: str, source_path: str = "", line: int | None = None):
        self.property_name = property_name
        self.source_path = source_path
        self.line = line
        super().__init__(f"Types are required for properties: {property_name!r}{_location(source_path, line)}")


class IllegalState(PpxError):
    """Raised when the source contains syntax the pipeline cannot make sense of.

    This signals malformed input rather than a misuse of the directives.
    """

    pass


class FileNotFound(PpxError, FileNotFoundError):
    """Raised by a filesystem when a path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'File not found: "{path}"')

    def __str__(self) -> str:
        return f'File not found: "{self.path}"'
