"""
Archive providers: index the archives of a pak directory and load objects
from them by identifier.
"""

import os
import tempfile
import zipfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import ClassVar

from ..errors import ArchiveInitError, LoadError
from .objects import deserialize_entry


@dataclass(frozen=True)
class ArchiveEntry:
    """Location of one file inside one archive."""

    archive: Path
    name: str


class ArchiveProvider(ABC):
    """Interface the export pipeline uses to reach archive contents."""

    @property
    @abstractmethod
    def files(self):
        """Ordered mapping of every known identifier to its storage entries."""

    @abstractmethod
    def initialize(self):
        """Open and index the archives. Called once before any lookup."""

    @abstractmethod
    def load_all_objects(self, identifier):
        """Return the list of objects stored at identifier."""


def identifier_for_entry(entry_name):
    """Virtual path for an archive entry: forward slashes, no extension."""
    normalized = entry_name.replace('\\', '/').lstrip('/')
    path = PurePosixPath(normalized)
    return str(path.with_suffix('')) if path.suffix else str(path)


class PakDirectoryProvider(ArchiveProvider):
    """Provider over the archives found at the top level of a directory."""

    SUPPORTED_EXTENSIONS: ClassVar[set[str]] = {'.zip', '.rar', '.7z'}

    def __init__(self, pak_directory, unreal_version=None, logger=None):
        self.pak_directory = Path(pak_directory)
        self.unreal_version = unreal_version
        self.logger = logger
        self._files = {}
        self._lower_index = {}

    @property
    def files(self):
        return self._files

    @classmethod
    def is_supported_archive(cls, file_path):
        """Check if file is a supported archive format."""
        return Path(file_path).suffix.lower() in cls.SUPPORTED_EXTENSIONS

    @classmethod
    def find_archives(cls, directory):
        """Find all supported archives directly inside directory."""
        archives = []
        for file in os.listdir(directory):
            file_path = Path(directory) / file
            if file_path.is_file() and cls.is_supported_archive(file_path):
                archives.append(file_path)
        return sorted(archives)

    def initialize(self):
        """
        Index every archive in the pak directory.

        Archives are read in name order; entries of one archive that share an
        identifier are kept together, and a later archive replaces the
        entries of an earlier one.

        Raises:
            ArchiveInitError: If the pak directory cannot be listed
        """
        if not self.pak_directory.is_dir():
            raise ArchiveInitError(f"Pak directory not found: {self.pak_directory}")

        try:
            archives = self.find_archives(self.pak_directory)
        except OSError as e:
            raise ArchiveInitError(f"Could not list pak directory {self.pak_directory}: {e}") from e

        if self.logger:
            self.logger.info(f"Mounting {len(archives)} archives from {self.pak_directory}")

        for archive_path in archives:
            try:
                names = self._list_entries(archive_path)
            except Exception as e:
                if self.logger:
                    self.logger.error(f"Skipping unreadable archive {archive_path.name}: {e}")
                continue

            mounted = {}
            for name in names:
                identifier = identifier_for_entry(name)
                mounted.setdefault(identifier, []).append(ArchiveEntry(archive_path, name))

            for identifier, entries in mounted.items():
                if identifier in self._files and self.logger:
                    self.logger.debug(f"{archive_path.name} overrides {identifier}")
                self._files[identifier] = entries
                self._lower_index[identifier.lower()] = identifier

            if self.logger:
                self.logger.debug(
                    f"Mounted {archive_path.name} ({len(names)} entries, version={self.unreal_version})"
                )

        return len(self._files)

    def find_entries(self, identifier):
        """
        Look up the entries stored at an identifier.

        Tries the identifier exactly, then case-insensitively. An identifier
        carrying an extension (`Weapons/Sword.json`) selects only the entry
        with that file name.
        """
        key = identifier if identifier in self._files else self._lower_index.get(identifier.lower())
        if key is not None:
            return self._files[key]

        stripped = identifier_for_entry(identifier)
        key = stripped if stripped in self._files else self._lower_index.get(stripped.lower())
        if key is None:
            return []
        wanted = identifier.replace('\\', '/').lstrip('/').lower()
        return [e for e in self._files[key] if e.name.replace('\\', '/').lstrip('/').lower() == wanted]

    def load_all_objects(self, identifier):
        """
        Load every object stored at identifier.

        Entries sharing an identifier within one archive (e.g. `Sword.json`
        and `Sword.png`) are loaded in archive order and concatenated.

        Raises:
            LoadError: If the identifier is unknown or an entry cannot be read
        """
        if not identifier:
            raise LoadError("Object identifier is empty", identifier=identifier)

        entries = self.find_entries(identifier)
        if not entries:
            raise LoadError(f"Object not found in archives: {identifier}", identifier=identifier)

        objects = []
        for entry in entries:
            if self.logger:
                self.logger.debug(f"Loading {identifier} from {entry.archive.name}:{entry.name}")

            try:
                payload = self._read_entry(entry)
            except Exception as e:
                raise LoadError(
                    f"Could not read {entry.name} from {entry.archive.name}: {e}",
                    identifier=identifier,
                ) from e

            objects.extend(deserialize_entry(entry.name, payload))
        return objects

    @classmethod
    def _list_entries(cls, archive_path):
        file_ext = archive_path.suffix.lower()
        if file_ext == '.zip':
            return cls._list_zip(archive_path)
        elif file_ext == '.rar':
            return cls._list_rar(archive_path)
        elif file_ext == '.7z':
            return cls._list_7z(archive_path)
        raise ValueError(f"Unsupported archive format: {file_ext}")

    @classmethod
    def _read_entry(cls, entry):
        file_ext = entry.archive.suffix.lower()
        if file_ext == '.zip':
            return cls._read_zip(entry)
        elif file_ext == '.rar':
            return cls._read_rar(entry)
        elif file_ext == '.7z':
            return cls._read_7z(entry)
        raise ValueError(f"Unsupported archive format: {file_ext}")

    @staticmethod
    def _list_zip(archive_path):
        with zipfile.ZipFile(archive_path, 'r') as z:
            return [m.filename for m in z.infolist() if not m.is_dir()]

    @staticmethod
    def _read_zip(entry):
        with zipfile.ZipFile(entry.archive, 'r') as z:
            return z.read(entry.name)

    @staticmethod
    def _list_rar(archive_path):
        import rarfile

        with rarfile.RarFile(archive_path) as rf:
            return [m.filename for m in rf.infolist() if not m.isdir()]

    @staticmethod
    def _read_rar(entry):
        import rarfile

        with rarfile.RarFile(entry.archive) as rf:
            return rf.read(entry.name)

    @staticmethod
    def _list_7z(archive_path):
        import py7zr

        with py7zr.SevenZipFile(archive_path, mode='r') as z:
            return [info.filename for info in z.list() if not info.is_directory]

    @staticmethod
    def _read_7z(entry):
        """Extract a single 7z member to a temporary directory and read it back."""
        import py7zr

        with tempfile.TemporaryDirectory() as temp_dir:
            dest = Path(temp_dir).resolve()
            target = (dest / entry.name).resolve()
            # Disallow traversal outside dest
            if os.path.commonpath([str(dest), str(target)]) != str(dest):
                raise ValueError(f"Path traversal detected in 7z entry: {entry.name}")
            with py7zr.SevenZipFile(entry.archive, mode='r') as z:
                z.extract(path=str(dest), targets=[entry.name])
            return target.read_bytes()
