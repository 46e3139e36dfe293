"""Error definitions for uextract."""

from typing import Any, Dict


class UExtractError(Exception):
    """Base exception for all uextract errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class InvalidPatternError(UExtractError):
    """The `--object` pattern is not a valid regular expression."""
    pass


class ArchiveInitError(UExtractError):
    """The pak directory could not be opened or indexed."""
    pass


class ExportError(UExtractError):
    """Base class for failures scoped to a single object identifier."""
    pass


class LoadError(ExportError):
    """The archive provider could not produce objects for an identifier."""
    pass


class UnsupportedExportKindError(ExportError):
    """Image export was requested for an object that has no pixels."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(
            f"Cannot export {kind} object at {identifier} as an image",
            kind=kind,
            identifier=identifier,
        )
        self.kind = kind
        self.identifier = identifier


class EmptyObjectGroupError(ExportError):
    """No objects were loaded, so there is nothing to export as an image."""
    pass


class DecodeError(ExportError):
    """An object could not be decoded to pixel data."""
    pass


class EncodeError(ExportError):
    """Pixel data could not be encoded to the requested image format."""
    pass


class SerializationError(ExportError):
    """An object group contains a value that cannot be written as JSON."""
    pass


class InvalidOutputPathError(ExportError):
    """No usable output path can be derived for an identifier."""
    pass
