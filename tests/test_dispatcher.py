import json
import logging

import pytest

from uextract.core.dispatcher import ExportDispatcher, ExportOutcome
from uextract.core.document_exporter import DocumentExporter, JsonDocumentSerializer
from uextract.core.image_exporter import ImageExporter, PillowImageDecoder
from uextract.core.request import ExportRequest
from uextract.errors import EmptyObjectGroupError, UnsupportedExportKindError
from conftest import data_object, texture


class RecordingExporter:
    """Stands in for an exporter and records every call."""

    def __init__(self, supported_kinds=("Texture2D",)):
        self.supported_kinds = supported_kinds
        self.calls = []

    def supports(self, obj):
        return obj.kind in self.supported_kinds

    def export(self, *args):
        self.calls.append(args)


@pytest.fixture
def announced():
    return []


@pytest.fixture
def recording_dispatcher(logger, announced):
    return ExportDispatcher(RecordingExporter(), RecordingExporter(), logger, announce=announced.append)


def make_request(tmp_path, texture_format=None):
    return ExportRequest(
        pak_directory=tmp_path,
        output_directory=tmp_path / "out",
        pattern="Game/Weapons/Sword",
        texture_format=texture_format,
    )


def warnings_in(caplog):
    return [r for r in caplog.records if r.levelno == logging.WARNING]


def test_document_export_without_texture_format(tmp_path, recording_dispatcher, announced):
    group = [data_object("Sword"), texture("SwordIcon")]
    outcome = recording_dispatcher.dispatch("Game/Weapons/Sword", group, make_request(tmp_path))

    assert outcome.succeeded
    assert outcome.path == (tmp_path / "out" / "Game" / "Weapons" / "Sword.json").resolve()
    assert recording_dispatcher.document_exporter.calls == [(group, outcome.path)]
    assert recording_dispatcher.image_exporter.calls == []
    assert announced == [str(outcome.path)]


def test_document_export_accepts_empty_group(tmp_path, recording_dispatcher):
    outcome = recording_dispatcher.dispatch("Game/Empty", [], make_request(tmp_path))
    assert recording_dispatcher.document_exporter.calls == [([], outcome.path)]


def test_image_export_for_texture(tmp_path, recording_dispatcher, caplog):
    obj = texture("Sword")
    outcome = recording_dispatcher.dispatch("Game/UI/Sword", [obj], make_request(tmp_path, "png"))

    assert outcome.path.name == "Sword.png"
    assert recording_dispatcher.image_exporter.calls == [(obj, outcome.path, "png")]
    assert recording_dispatcher.document_exporter.calls == []
    assert warnings_in(caplog) == []


def test_image_export_uses_lowercased_extension(tmp_path, recording_dispatcher):
    outcome = recording_dispatcher.dispatch("Game/UI/Sword", [texture()], make_request(tmp_path, "JPEG"))
    assert outcome.path.name == "Sword.jpeg"


def test_multiple_objects_pick_first_and_warn_once(tmp_path, recording_dispatcher, caplog):
    first, second = texture("First"), texture("Second")
    with caplog.at_level(logging.WARNING):
        outcome = recording_dispatcher.dispatch("Game/UI/Sword", [first, second], make_request(tmp_path, "png"))

    assert recording_dispatcher.image_exporter.calls == [(first, outcome.path, "png")]
    assert len(warnings_in(caplog)) == 1
    assert "ambiguous export target" in warnings_in(caplog)[0].getMessage()
    assert outcome.warnings and outcome.succeeded


def test_multiple_objects_first_not_image_fails(tmp_path, recording_dispatcher, caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(UnsupportedExportKindError):
            recording_dispatcher.dispatch("Game/Mixed", [data_object(), texture()], make_request(tmp_path, "png"))
    assert len(warnings_in(caplog)) == 1


def test_non_image_kind_raises(tmp_path, recording_dispatcher, announced):
    with pytest.raises(UnsupportedExportKindError) as excinfo:
        recording_dispatcher.dispatch("Game/Weapons/Sword", [data_object()], make_request(tmp_path, "png"))

    assert excinfo.value.kind == "WeaponData"
    assert excinfo.value.identifier == "Game/Weapons/Sword"
    assert "WeaponData" in str(excinfo.value) and "Game/Weapons/Sword" in str(excinfo.value)
    assert recording_dispatcher.image_exporter.calls == []
    assert announced == []


def test_empty_group_with_texture_format_raises(tmp_path, recording_dispatcher):
    with pytest.raises(EmptyObjectGroupError):
        recording_dispatcher.dispatch("Game/Empty", [], make_request(tmp_path, "png"))


@pytest.mark.parametrize("texture_format, kind, expected", [
    (None, "Texture2D", "document"),
    (None, "WeaponData", "document"),
    ("png", "Texture2D", "image"),
])
def test_dispatch_is_deterministic_on_kind(tmp_path, logger, texture_format, kind, expected):
    for _ in range(3):
        dispatcher = ExportDispatcher(RecordingExporter(), RecordingExporter(), logger, announce=None)
        obj = texture() if kind == "Texture2D" else data_object()
        dispatcher.dispatch("Game/Thing", [obj], make_request(tmp_path, texture_format))
        used = "image" if dispatcher.image_exporter.calls else "document"
        assert used == expected


def test_real_exporters_write_files(tmp_path, logger):
    dispatcher = ExportDispatcher(
        ImageExporter(PillowImageDecoder()),
        DocumentExporter(JsonDocumentSerializer()),
        logger,
        announce=None,
    )
    image = dispatcher.dispatch("Game/UI/Sword", [texture()], make_request(tmp_path, "png"))
    document = dispatcher.dispatch("Game/Weapons/Sword", [data_object(Damage=42)], make_request(tmp_path))

    assert image.path.read_bytes().startswith(b"\x89PNG")
    assert json.loads(document.path.read_text(encoding="utf-8"))[0]["Properties"] == {"Damage": 42}


def test_outcome_without_path_is_not_success():
    assert not ExportOutcome(identifier="Game/X").succeeded
