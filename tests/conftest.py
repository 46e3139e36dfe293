import io
import json
import logging
import zipfile

import pytest
from PIL import Image

from uextract.core.archive_provider import ArchiveProvider
from uextract.core.objects import LoadedObject, TEXTURE_KIND
from uextract.errors import LoadError


def png_bytes(size=(4, 4), color=(255, 0, 0, 255)):
    buffer = io.BytesIO()
    Image.new('RGBA', size, color).save(buffer, format='PNG')
    return buffer.getvalue()


def texture(name="Icon", size=(4, 4)):
    return LoadedObject(kind=TEXTURE_KIND, name=name, data=png_bytes(size), source=f"{name}.png")


def data_object(name="Sword", **properties):
    return LoadedObject(kind="WeaponData", name=name, properties=properties, source=f"{name}.json")


def write_zip(path, entries):
    """Write a zip archive from a mapping of entry name -> bytes, str or JSON value."""
    with zipfile.ZipFile(path, 'w') as z:
        for name, content in entries.items():
            if isinstance(content, (dict, list)):
                content = json.dumps(content)
            z.writestr(name, content)
    return path


class FakeProvider(ArchiveProvider):
    """In-memory provider: identifier -> list of objects, or an exception to raise."""

    def __init__(self, objects):
        self._objects = dict(objects)
        self.loaded = []

    @property
    def files(self):
        return self._objects

    def initialize(self):
        return len(self._objects)

    def load_all_objects(self, identifier):
        self.loaded.append(identifier)
        if identifier not in self._objects:
            raise LoadError(f"Object not found in archives: {identifier}", identifier=identifier)
        value = self._objects[identifier]
        if isinstance(value, Exception):
            raise value
        return list(value)


@pytest.fixture
def logger():
    return logging.getLogger("uextract.tests")


@pytest.fixture(autouse=True)
def isolated_logging_and_settings(monkeypatch, tmp_path_factory):
    """Keep root logging and the settings file from leaking between tests."""
    monkeypatch.setenv("UEXTRACT_CONFIG_DIR", str(tmp_path_factory.mktemp("config")))
    root = logging.getLogger()
    level = root.level
    yield
    # Drop handlers installed by setup_logging()
    for handler in [h for h in root.handlers if type(h) is logging.StreamHandler]:
        root.removeHandler(handler)
    root.setLevel(level)
