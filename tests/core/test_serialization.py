"""
Unit Tests for Serialization Utilities.
"""

import json

import pytest

from tn_toolkit.core.schemas.validator import ValidationError
from tn_toolkit.core.utils.serialization import (
    deserialize_layout,
    deserialize_version,
    load_layout_json,
    load_version_json,
    save_layout_json,
    serialize_layout,
    serialize_version,
)
from tn_toolkit.layout import build_layout


class TestLayoutSerialization:
    """Tests for layout serialization/deserialization."""

    def test_serialize_when_none_then_none(self):
        assert serialize_layout(None) is None
        assert deserialize_layout(None) is None

    def test_deserialize_when_serialized_then_equal(self, version):
        layout = build_layout(version, 1781)

        assert deserialize_layout(serialize_layout(layout), strict=True) == layout

    def test_deserialize_when_invalid_then_raises(self):
        with pytest.raises(ValidationError):
            deserialize_layout({"seed": "x"})

    def test_deserialize_when_validation_disabled_then_skips_checks(self):
        data = {"seed": 1, "shuffledChoices": {"q": [0, 0]}}

        assert deserialize_layout(data, validate=False).choice_permutation("q") == (0, 0)


class TestLayoutFiles:
    """Tests for layout file helpers."""

    def test_save_when_called_then_load_returns_equal(self, version, tmp_path):
        layout = build_layout(version, 12345)
        path = tmp_path / "attempts" / "a1" / "layout.json"

        save_layout_json(layout, path)

        assert load_layout_json(path) == layout
        assert json.loads(path.read_text(encoding="utf-8"))["seed"] == 12345

    def test_save_when_none_then_null_file(self, tmp_path):
        path = tmp_path / "layout.json"

        save_layout_json(None, path)

        assert path.read_text(encoding="utf-8") == "null"
        assert load_layout_json(path) is None

    def test_load_when_missing_then_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_layout_json(tmp_path / "missing.json")

    def test_load_when_not_json_then_validation_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_layout_json(path)


class TestVersionSerialization:
    """Tests for version serialization."""

    def test_deserialize_when_serialized_then_equal(self, version):
        assert deserialize_version(serialize_version(version)) == version

    def test_load_when_file_written_then_version(self, version, tmp_path):
        path = tmp_path / "version.json"
        path.write_text(json.dumps(serialize_version(version)), encoding="utf-8")

        assert load_version_json(path) == version
