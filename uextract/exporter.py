#!/usr/bin/env python3
"""
Batch export: resolve the requested identifiers and export each one in turn.
"""

from .core.archive_provider import PakDirectoryProvider
from .core.dispatcher import ExportDispatcher, ExportOutcome
from .core.document_exporter import DocumentExporter, JsonDocumentSerializer
from .core.image_exporter import ImageExporter, PillowImageDecoder
from .core.object_loader import ObjectLoader
from .core.path_resolver import PathResolver
from .errors import EmptyObjectGroupError, ExportError, LoadError, UnsupportedExportKindError

# Failures that are logged as warnings rather than errors
WARNING_ERRORS = (UnsupportedExportKindError, EmptyObjectGroupError)


def open_provider(request, logger):
    """
    Create and index the archive provider for a request.

    Raises:
        ArchiveInitError: If the pak directory cannot be indexed
    """
    provider = PakDirectoryProvider(request.pak_directory, request.unreal_version, logger)
    count = provider.initialize()
    logger.info(f"Indexed {count} objects")
    return provider


def create_dispatcher(logger, announce=print):
    """Build a dispatcher wired to the Pillow decoder and JSON serializer."""
    return ExportDispatcher(
        image_exporter=ImageExporter(PillowImageDecoder()),
        document_exporter=DocumentExporter(JsonDocumentSerializer()),
        logger=logger,
        announce=announce,
    )


def _log_failure(logger, identifier, error):
    if isinstance(error, WARNING_ERRORS):
        logger.warning(f"{identifier}: {error}")
    else:
        logger.error(f"{identifier}: {error}")


def export_identifier(identifier, loader, dispatcher, request, logger):
    """
    Load and export a single identifier.

    LoadError propagates so the caller can decide whether it is fatal; every
    other per-identifier failure is recorded on the returned outcome.
    """
    group = loader.load(identifier)
    if not group:
        logger.warning(f"No objects found at {identifier}")

    try:
        return dispatcher.dispatch(identifier, group, request)
    except ExportError as e:
        error = e
    except OSError as e:
        error = ExportError(f"Could not write output: {e}", identifier=identifier)
        error.__cause__ = e

    _log_failure(logger, identifier, error)
    return ExportOutcome(identifier=identifier, error=error)


def run_export(request, provider, logger, dispatcher=None):
    """
    Export everything a request selects.

    Identifiers are processed one at a time. In regex mode a failure on one
    identifier is logged and the run continues; in literal mode a LoadError
    is raised to the caller.

    Args:
        request: ExportRequest describing the run
        provider: Initialized ArchiveProvider
        logger: Logger instance
        dispatcher: Optional ExportDispatcher (defaults to create_dispatcher())

    Returns:
        list: One ExportOutcome per matched identifier

    Raises:
        InvalidPatternError: If the regex pattern does not compile
        LoadError: If the identifier cannot be loaded in literal mode
    """
    dispatcher = dispatcher or create_dispatcher(logger)
    loader = ObjectLoader(provider, logger)

    identifiers = PathResolver.resolve(request.pattern, request.mode, provider.files)
    if request.is_bulk:
        if not identifiers:
            logger.warning(f"No identifiers matched pattern {request.pattern!r}")
            return []
        logger.info(f"Found {len(identifiers)} identifiers matching {request.pattern!r}")

    outcomes = []
    for identifier in identifiers:
        try:
            outcome = export_identifier(identifier, loader, dispatcher, request, logger)
        except LoadError as e:
            if not request.is_bulk:
                raise
            _log_failure(logger, identifier, e)
            outcome = ExportOutcome(identifier=identifier, error=e)
        outcomes.append(outcome)

    return outcomes
