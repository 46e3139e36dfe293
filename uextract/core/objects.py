#!/usr/bin/env python3
"""
In-memory object model for entries loaded from an archive.
"""

import json
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Dict, List, Optional

from ..errors import LoadError

TEXTURE_KIND = "Texture2D"
RAW_DATA_KIND = "RawData"
DEFAULT_KIND = "Object"

IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.bmp', '.gif', '.tga', '.tiff', '.tif', '.webp', '.dds', '.ico'}
DOCUMENT_EXTENSIONS = {'.json'}


@dataclass
class LoadedObject:
    """One object deserialized from an archive entry."""

    kind: str
    name: str
    properties: Dict[str, Any] = field(default_factory=dict)
    data: Optional[bytes] = None
    source: str = ""

    def to_document(self) -> Dict[str, Any]:
        """Return the object as a dict with a fixed key order."""
        document = {
            "Type": self.kind,
            "Name": self.name,
            "Properties": self.properties,
        }
        if self.data is not None:
            document["DataSize"] = len(self.data)
        return document


def _object_from_json(value, default_name, source):
    if not isinstance(value, dict):
        return LoadedObject(kind=DEFAULT_KIND, name=default_name, properties={"Value": value}, source=source)

    properties = dict(value)
    kind = properties.pop("Type", DEFAULT_KIND)
    name = properties.pop("Name", default_name)
    nested = properties.pop("Properties", None)
    if isinstance(nested, dict):
        # Already in exported shape; nested values win over stray top-level keys
        properties = {**properties, **nested}
    elif nested is not None:
        properties["Properties"] = nested
    return LoadedObject(kind=str(kind), name=str(name), properties=properties, source=source)


def deserialize_entry(entry_name, payload) -> List[LoadedObject]:
    """
    Turn the raw bytes of an archive entry into loaded objects.

    JSON entries yield one object per top-level element when the document is
    a list, otherwise a single object. Image entries yield one Texture2D.
    Anything else yields one RawData object.

    Args:
        entry_name: Entry path inside the archive
        payload: Entry contents

    Returns:
        list: Loaded objects in document order

    Raises:
        LoadError: If a JSON entry cannot be parsed
    """
    entry = PurePosixPath(entry_name)
    suffix = entry.suffix.lower()
    stem = entry.stem

    if suffix in DOCUMENT_EXTENSIONS:
        try:
            document = json.loads(payload.decode('utf-8-sig'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LoadError(f"Could not deserialize {entry_name}: {e}", entry=entry_name) from e
        if isinstance(document, list):
            return [
                _object_from_json(item, f"{stem}_{index}" if len(document) > 1 else stem, entry_name)
                for index, item in enumerate(document)
            ]
        return [_object_from_json(document, stem, entry_name)]

    if suffix in IMAGE_EXTENSIONS:
        return [LoadedObject(
            kind=TEXTURE_KIND,
            name=stem,
            properties={"SourceFormat": suffix.lstrip('.').upper()},
            data=payload,
            source=entry_name,
        )]

    return [LoadedObject(kind=RAW_DATA_KIND, name=entry.name, data=payload, source=entry_name)]
