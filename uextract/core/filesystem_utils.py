#!/usr/bin/env python3
"""
File system helpers shared by the command line and reporting.
"""

from pathlib import Path


class FileSystemUtils:
    """Centralized file system operations."""

    @staticmethod
    def get_file_size_formatted(file_path_or_size):
        """Format a byte count, or the size of the file at a path, for log output."""
        if isinstance(file_path_or_size, (int, float)):
            size_bytes = file_path_or_size
        else:
            size_bytes = Path(file_path_or_size).stat().st_size

        units = ['B', 'KB', 'MB', 'GB', 'TB']
        size = float(size_bytes)
        idx = 0

        while size >= 1024 and idx < len(units) - 1:
            size /= 1024
            idx += 1

        return f"{size:.2f} {units[idx]}", size_bytes

    @staticmethod
    def validate_pak_directory(dir_path_str):
        """
        Resolve the pak directory, which must already exist.

        Raises:
            ValueError: If the path is empty, missing or not a directory
        """
        if not dir_path_str:
            raise ValueError("Pak directory cannot be empty")

        dir_path = Path(dir_path_str).resolve()
        if not dir_path.exists():
            raise ValueError(f"Pak directory not found: {dir_path}")
        if not dir_path.is_dir():
            raise ValueError(f"Path is not a directory: {dir_path}")
        return dir_path

    @staticmethod
    def ensure_directory_exists(directory_path):
        """Ensure directory exists, creating it if necessary."""
        directory_path = Path(directory_path).resolve()
        directory_path.mkdir(parents=True, exist_ok=True)
        return directory_path
