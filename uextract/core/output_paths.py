#!/usr/bin/env python3
"""
Output path derivation for exported objects.
"""

import os
from pathlib import Path

from ..errors import InvalidOutputPathError


class OutputPathBuilder:
    """Maps an object identifier to a file below the output root."""

    @staticmethod
    def build(output_root, identifier, suffix):
        """
        Derive the output file for an identifier and create its directory.

        Args:
            output_root: Root directory for exported files
            identifier: Object identifier (virtual archive path)
            suffix: Extension to append, including the dot (e.g. '.json')

        Returns:
            Path: Absolute output file path

        Raises:
            InvalidOutputPathError: If no file path with a parent directory
                below output_root can be derived
        """
        if not identifier or not identifier.strip():
            raise InvalidOutputPathError("Object identifier is empty", identifier=identifier)

        root = Path(output_root).resolve()
        relative = identifier.replace("\\", "/").lstrip("/")
        if not relative.strip("/. "):
            raise InvalidOutputPathError(
                f"Object identifier {identifier!r} resolves to the output root",
                identifier=identifier,
            )

        output_path = Path(os.path.normpath(root / f"{relative}{suffix}"))
        parent = output_path.parent

        if output_path == root or parent == output_path:
            raise InvalidOutputPathError(f"Invalid output path for {output_path}", identifier=identifier)
        # Disallow traversal outside the output root
        if os.path.commonpath([str(root), str(output_path)]) != str(root):
            raise InvalidOutputPathError(
                f"Output path {output_path} escapes the output directory {root}",
                identifier=identifier,
            )

        parent.mkdir(parents=True, exist_ok=True)
        return output_path
