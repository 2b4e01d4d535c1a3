"""Unit tests for the JSON exporter."""

from __future__ import annotations

import json
from pathlib import Path

from fingerbox.domain import BoxLayout
from fingerbox.infrastructure.exporters import JsonExporter, layout_to_dict


class TestLayoutToDict:
    """Tests for layout_to_dict()."""

    def test_top_level_keys(self, default_layout: BoxLayout) -> None:
        data = layout_to_dict(default_layout)

        assert set(data) == {"parameters", "bounds", "panels"}
        assert data["bounds"] == {"width": 392.0, "height": 154.0}
        assert data["parameters"]["top_edge"] == "open"
        assert data["parameters"]["bottom_edge"] == "hole"
        assert data["parameters"]["kerf"] == 0.15

    def test_panel_entries(self, default_layout: BoxLayout) -> None:
        front = layout_to_dict(default_layout)["panels"][0]

        assert front["id"] == "front"
        assert front["label"] == "Front"
        assert front["color"] == "#e74c3c"
        assert (front["x"], front["y"]) == (86.0, 0.0)
        assert front["edges"] == {
            "top": "open",
            "right": "tab",
            "bottom": "hole",
            "left": "tab",
        }
        assert front["outline"][0] == [86.0, 0.0]
        assert front["outline"][-1] == [86.0, 0.0]
        assert front["holes"][0] == {
            "x": 95.091,
            "y": 52.5,
            "width": 9.091,
            "height": 3.0,
        }


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_export_string_is_valid_json(self, default_layout: BoxLayout) -> None:
        data = json.loads(JsonExporter().export_string(default_layout))
        assert [p["id"] for p in data["panels"]] == [
            "front",
            "back",
            "left",
            "right",
            "bottom",
        ]

    def test_compact_output(self, default_layout: BoxLayout) -> None:
        text = JsonExporter(indent=None).export_string(default_layout)
        assert "\n" not in text

    def test_export_writes_file(self, tmp_path: Path, closed_layout: BoxLayout) -> None:
        path = tmp_path / "box.json"
        JsonExporter().export(closed_layout, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data["panels"]) == 6
        assert data["parameters"]["thickness"] == 4.0
