from __future__ import annotations

"""
Unit tests for the Visual Studio Solution File Adapter.

Verifies project declarations, solution folders, nesting, path resolution
and tolerance of broken nesting data.
"""

import os

import pytest

from projectlister.adapters.solution_file import parse_solution, parse_solution_text
from projectlister.core.walker import enumerate_projects
from projectlister.domain.errors import SolutionParseError
from projectlister.domain.models import ProjectKind

CSPROJ = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"
FOLDER = "2150E333-8FDC-42A3-9474-1A3956D46DE8"

APP = "11111111-1111-1111-1111-111111111111"
CORE = "22222222-2222-2222-2222-222222222222"
ITEMS = "33333333-3333-3333-3333-333333333333"
LIBS = "44444444-4444-4444-4444-444444444444"
TESTS = "55555555-5555-5555-5555-555555555555"

SOLUTION = f"""
Microsoft Visual Studio Solution File, Format Version 12.00
# Visual Studio Version 17
VisualStudioVersion = 17.0.31903.59
Project("{{{FOLDER}}}") = "Solution Items", "Solution Items", "{{{ITEMS}}}"
	ProjectSection(SolutionItems) = preProject
		README.md = README.md
	EndProjectSection
EndProject
Project("{{{CSPROJ}}}") = "App", "src\\App\\App.csproj", "{{{APP}}}"
EndProject
Project("{{{FOLDER}}}") = "libs", "libs", "{{{LIBS}}}"
EndProject
Project("{{{CSPROJ}}}") = "Core", "src\\Core\\Core.csproj", "{{{CORE}}}"
EndProject
Project("{{{CSPROJ}}}") = "Core.Tests", "tests\\Core.Tests\\Core.Tests.csproj", "{{{TESTS}}}"
EndProject
Global
	GlobalSection(SolutionConfigurationPlatforms) = preSolution
		Debug|Any CPU = Debug|Any CPU
	EndGlobalSection
	GlobalSection(NestedProjects) = preSolution
		{{{CORE}}} = {{{LIBS}}}
		{{{TESTS}}} = {{{LIBS}}}
	EndGlobalSection
EndGlobal
"""


def _native(base, *parts):
    return os.path.normpath(os.path.join(base, *parts))


def test_roots_keep_file_order():
    roots = parse_solution_text(SOLUTION, "/repo")
    assert [r.name for r in roots] == ["Solution Items", "App", "libs"]


def test_solution_folders_are_containers_without_path():
    roots = parse_solution_text(SOLUTION, "/repo")
    items, _, libs = roots
    assert items.kind is ProjectKind.CONTAINER
    assert libs.kind is ProjectKind.CONTAINER
    assert items.full_path == ""


def test_nested_projects_become_children():
    libs = parse_solution_text(SOLUTION, "/repo")[2]
    assert [c.name for c in libs.children] == ["Core", "Core.Tests"]


def test_project_paths_resolved_against_solution_dir():
    app = parse_solution_text(SOLUTION, "/repo")[1]
    assert app.full_path == _native("/repo", "src", "App", "App.csproj")


def test_walker_lists_projects_in_solution_order():
    entries = enumerate_projects(parse_solution_text(SOLUTION, "/repo"))
    assert [e.name for e in entries] == ["App", "Core", "Core.Tests"]


def test_unknown_nesting_reference_is_ignored(caplog):
    text = SOLUTION.replace(
        f"{{{TESTS}}} = {{{LIBS}}}",
        f"{{{TESTS}}} = {{99999999-9999-9999-9999-999999999999}}",
    )
    with caplog.at_level("WARNING"):
        roots = parse_solution_text(text, "/repo")
    assert [r.name for r in roots] == ["Solution Items", "App", "libs", "Core.Tests"]
    assert "unknown project GUID" in caplog.text


def test_nesting_cycle_is_broken():
    text = f"""
Project("{{{FOLDER}}}") = "A", "A", "{{{ITEMS}}}"
EndProject
Project("{{{FOLDER}}}") = "B", "B", "{{{LIBS}}}"
EndProject
Project("{{{CSPROJ}}}") = "P", "P\\P.csproj", "{{{APP}}}"
EndProject
Global
	GlobalSection(NestedProjects) = preSolution
		{{{ITEMS}}} = {{{LIBS}}}
		{{{LIBS}}} = {{{ITEMS}}}
		{{{APP}}} = {{{LIBS}}}
	EndGlobalSection
EndGlobal
"""
    roots = parse_solution_text(text, "/repo")
    assert [r.name for r in roots] == ["A"]
    assert [e.name for e in enumerate_projects(roots)] == ["P"]


def test_guid_case_is_normalized():
    text = SOLUTION.replace(f"{{{CORE}}} = {{{LIBS}}}", f"{{{CORE.lower()}}} = {{{LIBS.lower()}}}")
    libs = parse_solution_text(text, "/repo")[2]
    assert "Core" in [c.name for c in libs.children]


def test_web_site_url_path_is_kept():
    text = f'Project("{{E24C65DC-7377-472B-9ABA-BC803B73C61A}}") = "Site", "http://localhost/site", "{{{APP}}}"\n'
    assert parse_solution_text(text)[0].full_path == "http://localhost/site"


def test_empty_text_gives_empty_forest():
    assert parse_solution_text("") == []


def test_parse_solution_file_with_bom(tmp_path):
    sln = tmp_path / "Demo.sln"
    sln.write_text(SOLUTION, encoding="utf-8-sig")

    roots = parse_solution(str(sln))
    assert roots[1].full_path == _native(str(tmp_path), "src", "App", "App.csproj")


def test_parse_solution_missing_file(tmp_path):
    with pytest.raises(SolutionParseError):
        parse_solution(str(tmp_path / "none.sln"))
