"""Tests for tag metadata loading."""

import json
import tempfile
import unittest
from pathlib import Path

from minihtml.metadata import HTML_METADATA, TagMetadata, load_tag_metadata


class TestTagMetadata(unittest.TestCase):
    def test_names_are_lowercased(self):
        metadata = TagMetadata(["DIV"], ["IMG"])
        assert metadata.tags == frozenset({"div"})
        assert metadata.is_void("img")
        assert metadata.is_void("IMG")
        assert metadata.is_known("Div")

    def test_is_immutable(self):
        metadata = TagMetadata(["div"], ["img"])
        with self.assertRaises(AttributeError):
            metadata.tags = frozenset()
        with self.assertRaises(AttributeError):
            del metadata.void_tags

    def test_equality(self):
        assert TagMetadata(["a"], ["br"]) == TagMetadata(["A"], ["BR"])
        assert TagMetadata(["a"]) != TagMetadata(["b"])

    def test_bundled_metadata(self):
        assert "img" in HTML_METADATA.void_tags
        assert "br" in HTML_METADATA.void_tags
        assert "div" not in HTML_METADATA.void_tags
        assert "div" in HTML_METADATA.tags


class TestLoadTagMetadata(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp = Path(self._tmp.name)

    def _write(self, name, content):
        path = self.tmp / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_loads_both_files(self):
        tags = self._write("tags.json", json.dumps(["div", "P"]))
        voids = self._write("voids.json", json.dumps(["img"]))
        metadata = load_tag_metadata(tags, voids)
        assert metadata.tags == frozenset({"div", "p"})
        assert metadata.void_tags == frozenset({"img"})

    def test_missing_file_gives_empty_set_and_warning(self):
        voids = self._write("voids.json", json.dumps(["img"]))
        with self.assertLogs("minihtml.metadata", level="WARNING") as logs:
            metadata = load_tag_metadata(self.tmp / "missing.json", voids)
        assert metadata.tags == frozenset()
        assert metadata.void_tags == frozenset({"img"})
        assert "missing.json" in logs.output[0]

    def test_invalid_json_gives_empty_set(self):
        tags = self._write("tags.json", "[not json")
        with self.assertLogs("minihtml.metadata", level="WARNING"):
            metadata = load_tag_metadata(tags, self.tmp / "also-missing.json")
        assert metadata == TagMetadata()

    def test_wrong_shape_gives_empty_set(self):
        tags = self._write("tags.json", json.dumps({"tags": ["div"]}))
        voids = self._write("voids.json", json.dumps(["img", 3]))
        with self.assertLogs("minihtml.metadata", level="WARNING") as logs:
            metadata = load_tag_metadata(tags, voids)
        assert metadata == TagMetadata()
        assert len(logs.output) == 2

    def test_defaults_to_bundled_files(self):
        assert load_tag_metadata() == HTML_METADATA
