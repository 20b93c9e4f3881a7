from __future__ import annotations

import logging
from pathlib import Path

import pytest

from helpers.pom import write_pom

from reactorview.core.exceptions import ReactorError, ReactorNotFoundError
from reactorview.core.reactor import discover_pom_reactor, load_reactor, parse_pom


def test_components_are_listed_parent_first_in_declaration_order(reactor_tree: Path) -> None:
    reactor = discover_pom_reactor(reactor_tree)

    assert [c.name for c in reactor] == ["platform", "core", "web", "services", "billing", "shipping"]
    assert len(reactor) == 6


def test_component_fields(reactor_tree: Path) -> None:
    root = reactor_tree.resolve()
    by_name = {c.name: c for c in discover_pom_reactor(reactor_tree)}

    assert by_name["platform"].packaging == "pom"
    assert by_name["platform"].submodule_count == 3
    assert by_name["platform"].base_directory == root
    assert by_name["services"].submodule_count == 2
    assert by_name["web"].packaging == "war"
    assert by_name["core"].packaging == "jar"
    assert by_name["billing"].base_directory == root / "services" / "billing"
    assert by_name["billing"].is_leaf
    assert not by_name["services"].is_leaf


def test_group_id_is_inherited_from_parent(reactor_tree: Path) -> None:
    by_name = {c.name: c for c in discover_pom_reactor(reactor_tree)}
    assert by_name["core"].group_id == "com.example"
    assert by_name["billing"].coordinates == "com.example:billing"


def test_context_comes_from_root_project(reactor_tree: Path) -> None:
    reactor = discover_pom_reactor(reactor_tree / "pom.xml", execution_root=reactor_tree)
    assert reactor.context.group_id == "com.example"
    assert reactor.context.model_version == "4.0.0"
    assert reactor.context.execution_root_directory == reactor_tree


def test_execution_root_defaults_to_root_pom_directory(reactor_tree: Path) -> None:
    reactor = discover_pom_reactor(reactor_tree)
    assert reactor.context.execution_root_directory == reactor_tree.resolve()


def test_project_name_is_preferred_over_artifact_id(execution_root: Path) -> None:
    write_pom(execution_root, "lib-artifact", name="Library")
    (component,) = discover_pom_reactor(execution_root)
    assert component.name == "Library"
    assert component.artifact_id == "lib-artifact"


def test_pom_without_namespace(execution_root: Path) -> None:
    write_pom(execution_root, "plain", namespaced=False, packaging="pom")
    project = parse_pom(execution_root / "pom.xml")
    assert project.artifact_id == "plain"
    assert project.packaging == "pom"


def test_missing_root_pom(execution_root: Path) -> None:
    with pytest.raises(ReactorNotFoundError):
        discover_pom_reactor(execution_root)


def test_missing_child_module(execution_root: Path) -> None:
    write_pom(execution_root, "root", packaging="pom", modules=["gone"])
    with pytest.raises(ReactorError, match="does not exist"):
        discover_pom_reactor(execution_root)


def test_malformed_pom(execution_root: Path) -> None:
    (execution_root / "pom.xml").write_text("<project><artifactId>x</project>", encoding="utf-8")
    with pytest.raises(ReactorError, match="Cannot parse"):
        discover_pom_reactor(execution_root)


def test_pom_without_artifact_id(execution_root: Path) -> None:
    (execution_root / "pom.xml").write_text("<project><groupId>g</groupId></project>", encoding="utf-8")
    with pytest.raises(ReactorError, match="artifactId"):
        parse_pom(execution_root / "pom.xml")


def test_root_without_group_id(execution_root: Path) -> None:
    write_pom(execution_root, "orphan", group_id=None)
    with pytest.raises(ReactorError, match="groupId"):
        discover_pom_reactor(execution_root)


def test_module_listed_twice_is_visited_once(execution_root: Path, caplog) -> None:
    write_pom(execution_root / "m", "m")
    write_pom(execution_root, "root", packaging="pom", modules=["m", "./m"])

    with caplog.at_level(logging.WARNING, logger="reactorview.core.reactor.pom"):
        reactor = discover_pom_reactor(execution_root)

    assert [c.name for c in reactor] == ["root", "m"]
    assert any("already part of the reactor" in r.getMessage() for r in caplog.records)


def test_module_may_point_at_a_pom_file(execution_root: Path) -> None:
    write_pom(execution_root / "alt", "alt", filename="alt-pom.xml")
    write_pom(execution_root, "root", packaging="pom", modules=["alt/alt-pom.xml"])
    names = [c.name for c in discover_pom_reactor(execution_root)]
    assert names == ["root", "alt"]


def test_load_reactor_uses_pom_by_default(reactor_tree: Path) -> None:
    reactor = load_reactor(reactor_tree)
    assert len(reactor) == 6
    assert reactor.context.execution_root_directory == reactor_tree


def test_root_group_id_is_checked_before_walking_modules(execution_root: Path) -> None:
    write_pom(execution_root, "orphan", group_id=None, packaging="pom", modules=["gone"])
    with pytest.raises(ReactorError, match="declares no groupId"):
        discover_pom_reactor(execution_root)


def test_module_pointing_back_at_the_root_is_skipped(execution_root: Path, caplog) -> None:
    write_pom(execution_root / "child", "child", packaging="pom", modules=[".."])
    write_pom(execution_root, "root", packaging="pom", modules=["child"])

    with caplog.at_level(logging.WARNING, logger="reactorview.core.reactor.pom"):
        reactor = discover_pom_reactor(execution_root)

    assert [c.name for c in reactor] == ["root", "child"]
    assert reactor.context.group_id == "com.example"
    assert any("already part of the reactor" in r.getMessage() for r in caplog.records)
