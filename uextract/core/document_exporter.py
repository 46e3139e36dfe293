"""
JSON document export of loaded object groups.
"""

import json
from abc import ABC, abstractmethod

from ..errors import SerializationError

DOCUMENT_EXTENSION = '.json'


class DocumentSerializer(ABC):
    """Renders an object group as structured text."""

    @abstractmethod
    def serialize(self, group):
        """Return the text document for group."""


class JsonDocumentSerializer(DocumentSerializer):
    """Indented JSON; the group is always written as an array."""

    def __init__(self, indent=2):
        self.indent = indent

    def serialize(self, group):
        documents = [obj.to_document() for obj in group]
        try:
            return json.dumps(documents, indent=self.indent, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Object group is not representable as JSON: {e}") from e


class DocumentExporter:
    """Writes a whole object group to one document file."""

    def __init__(self, serializer):
        self.serializer = serializer

    def export(self, group, path):
        """
        Serialize group and write it to path.

        Raises:
            SerializationError: If a value in group cannot be serialized
        """
        text = self.serializer.serialize(group)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
            f.write('\n')
        return len(text)
