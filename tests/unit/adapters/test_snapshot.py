from __future__ import annotations

"""
Unit tests for the JSON Snapshot Adapter.
"""

import json

import pytest

from projectlister.adapters.snapshot import (
    active_document_from_data,
    forest_from_data,
    load_snapshot,
    snapshot_from_data,
)
from projectlister.core.walker import enumerate_projects
from projectlister.domain.errors import SnapshotError
from projectlister.domain.models import ActiveDocumentInfo, ProjectKind

SAMPLE = {
    "active_document": "/repo/App/Program.cs",
    "projects": [
        {"name": "Sln Items", "kind": "container", "children": []},
        {
            "name": "App",
            "path": "/repo/App.proj",
            "kind": "project",
            "children": [{"name": "Core", "full_path": "/repo/Core.proj"}],
        },
    ],
}


def test_forest_from_object_matches_walker_expectations():
    roots = forest_from_data(SAMPLE)
    assert roots[0].kind is ProjectKind.CONTAINER
    assert enumerate_projects(roots) == [("App", "/repo/App.proj"), ("Core", "/repo/Core.proj")]


def test_forest_from_bare_list():
    roots = forest_from_data([{"name": "Tools", "full_path": "/t.proj"}])
    assert [n.name for n in roots] == ["Tools"]


def test_solution_folder_alias_is_container():
    roots = forest_from_data([{"name": "Docs", "kind": "Solution_Folder"}])
    assert roots[0].is_container


def test_unknown_kind_defaults_to_project():
    roots = forest_from_data([{"name": "Odd", "kind": "database"}])
    assert roots[0].kind is ProjectKind.PROJECT


def test_malformed_fields_become_empty_strings():
    roots = forest_from_data([{"kind": "project", "children": None}])
    assert roots[0].name == ""
    assert roots[0].full_path == ""
    assert roots[0].children == ()


def test_non_object_entries_are_dropped(caplog):
    with caplog.at_level("WARNING"):
        roots = forest_from_data([{"name": "A"}, "garbage", 3])
    assert [n.name for n in roots] == ["A"]
    assert "Dropped snapshot entry" in caplog.text


def test_non_list_projects_give_empty_forest():
    assert forest_from_data({"projects": "nope"}) == []


def test_active_document_variants():
    assert active_document_from_data(SAMPLE) == ActiveDocumentInfo("/repo/App/Program.cs")
    assert active_document_from_data({"active_document": {"path": "/a.cs"}}) == ActiveDocumentInfo("/a.cs")
    assert active_document_from_data({"active_document": None}) is None
    assert active_document_from_data({"active_document": "   "}) is None
    assert active_document_from_data([]) is None


def test_load_snapshot_reads_file(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")

    snapshot = load_snapshot(str(path))
    assert len(snapshot.roots) == 2
    assert snapshot.active_document == ActiveDocumentInfo("/repo/App/Program.cs")


def test_load_snapshot_missing_file(tmp_path):
    with pytest.raises(SnapshotError, match="not found"):
        load_snapshot(str(tmp_path / "nope.json"))


def test_load_snapshot_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(SnapshotError, match="Invalid JSON"):
        load_snapshot(str(path))


def test_snapshot_from_list_has_no_active_document():
    snapshot = snapshot_from_data([{"name": "A"}])
    assert snapshot.active_document is None
    assert len(snapshot.roots) == 1
