#!/usr/bin/env python3
"""
Per-identifier export dispatch.

Image export is opt-in (a texture format was requested) and only accepts
image-bearing objects; document export accepts any group.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..errors import EmptyObjectGroupError, UExtractError, UnsupportedExportKindError
from .document_exporter import DOCUMENT_EXTENSION
from .image_exporter import get_extension_for_format
from .output_paths import OutputPathBuilder


@dataclass
class ExportOutcome:
    """Result of exporting one identifier."""

    identifier: str
    path: Optional[Path] = None
    error: Optional[UExtractError] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.path is not None


class ExportDispatcher:
    """Chooses between image and document export for each object group."""

    def __init__(self, image_exporter, document_exporter, logger, path_builder=None, announce=print):
        """
        Args:
            image_exporter: ImageExporter used when a texture format is requested
            document_exporter: DocumentExporter used otherwise
            logger: Logger receiving dispatch warnings
            path_builder: Output path builder (defaults to OutputPathBuilder)
            announce: Callable receiving each absolute output path before it is written
        """
        self.image_exporter = image_exporter
        self.document_exporter = document_exporter
        self.logger = logger
        self.path_builder = path_builder or OutputPathBuilder()
        self.announce = announce

    def dispatch(self, identifier, group, request):
        """
        Export one object group.

        Raises:
            UnsupportedExportKindError: Image export requested for a non-image object
            EmptyObjectGroupError: Image export requested for an empty group
            InvalidOutputPathError, DecodeError, EncodeError, SerializationError:
                Propagated from path building and the exporters
        """
        outcome = ExportOutcome(identifier=identifier)

        if request.exports_images:
            if len(group) > 1:
                message = f"More than one object at {identifier}, ambiguous export target; exporting the first"
                self.logger.warning(message)
                outcome.warnings.append(message)
            if not group:
                raise EmptyObjectGroupError(f"No objects at {identifier} to export as an image", identifier=identifier)

            obj = group[0]
            if not self.image_exporter.supports(obj):
                raise UnsupportedExportKindError(obj.kind, identifier)

            suffix = get_extension_for_format(request.texture_format)
            outcome.path = self._prepare(request.output_directory, identifier, suffix)
            self.image_exporter.export(obj, outcome.path, request.texture_format)
        else:
            outcome.path = self._prepare(request.output_directory, identifier, DOCUMENT_EXTENSION)
            self.document_exporter.export(group, outcome.path)

        return outcome

    def _prepare(self, output_directory, identifier, suffix):
        path = self.path_builder.build(output_directory, identifier, suffix)
        if self.announce is not None:
            self.announce(str(path))
        return path
