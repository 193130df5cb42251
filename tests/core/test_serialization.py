"""
Unit Tests for Layout File Utilities

Tests for load/save of stored layout files.
"""

import json
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from layout_toolkit.core.errors import MalformedNodeError
from layout_toolkit.core.utils.serialization import (
    load_layout_json,
    save_layout_json,
    unwrap_layout,
    wrap_layout,
)


class TestUnwrapLayout:
    """Tests for unwrap_layout()."""

    def test_unwrap_when_wrapped_then_returns_layout_and_hidden(self):
        data = {"data": {"layout": [{"id": "a", "type": "Input"}], "hidden": ["equals", 1, 1]}}

        layout, hidden = unwrap_layout(data)

        assert layout == [{"id": "a", "type": "Input"}]
        assert hidden == ["equals", 1, 1]

    def test_unwrap_when_bare_list_then_hidden_is_none(self):
        assert unwrap_layout([{"id": "a"}]) == ([{"id": "a"}], None)

    def test_unwrap_when_layout_missing_then_returns_empty(self):
        assert unwrap_layout({"data": {}}) == ([], None)

    def test_unwrap_when_not_layout_then_raises(self):
        with pytest.raises(MalformedNodeError):
            unwrap_layout({"layout": "nope"}, path="page1.json")


class TestLayoutFileOperations:
    """Tests for layout JSON file operations."""

    def test_save_load_roundtrip_when_layout_then_preserves_data(self, form_layout):
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "layouts" / "page1.json"

            save_layout_json(path, form_layout, hidden=True, schema_url="https://example.org/layout.schema.v1.json")
            layout, hidden = load_layout_json(path)

            assert layout == form_layout
            assert hidden is True
            assert json.loads(path.read_text(encoding="utf-8"))["$schema"].endswith("layout.schema.v1.json")

    def test_wrap_when_no_hidden_then_omits_key(self):
        assert wrap_layout([]) == {"data": {"layout": []}}

    def test_load_when_file_not_found_then_raises_error(self):
        with pytest.raises(FileNotFoundError):
            load_layout_json(Path("/nonexistent/layout.json"))

    def test_load_when_invalid_json_then_raises_malformed(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(MalformedNodeError, match="Invalid JSON"):
            load_layout_json(path)
