"""Core components of the uextract export pipeline."""
from .archive_provider import ArchiveProvider, PakDirectoryProvider
from .dispatcher import ExportDispatcher, ExportOutcome
from .document_exporter import DocumentExporter, DocumentSerializer, JsonDocumentSerializer
from .filesystem_utils import FileSystemUtils
from .image_exporter import ImageDecoder, ImageExporter, PillowImageDecoder
from .object_loader import ObjectLoader
from .objects import LoadedObject, deserialize_entry
from .output_paths import OutputPathBuilder
from .path_resolver import PathResolver
from .request import ExportRequest

__all__ = [
    "ArchiveProvider",
    "PakDirectoryProvider",
    "ExportDispatcher",
    "ExportOutcome",
    "DocumentExporter",
    "DocumentSerializer",
    "JsonDocumentSerializer",
    "FileSystemUtils",
    "ImageDecoder",
    "ImageExporter",
    "PillowImageDecoder",
    "ObjectLoader",
    "LoadedObject",
    "deserialize_entry",
    "OutputPathBuilder",
    "PathResolver",
    "ExportRequest",
]
