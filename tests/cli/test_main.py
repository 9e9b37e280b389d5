# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the cmsgraph CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from cmsgraph.cli.main import main
from cmsgraph.schema import read_artifact

# ###############
# Helpers
# ###############

MODEL = {
    "items": [
        {
            "sys": {"id": "post"},
            "name": "Blog Post",
            "fields": [
                {"id": "title", "type": "Symbol", "required": True},
                {
                    "id": "related",
                    "type": "Array",
                    "items": {
                        "id": "related",
                        "type": "Link",
                        "linkType": "Entry",
                        "validations": [{"linkContentType": ["post", "page"]}],
                    },
                },
            ],
        },
        {"sys": {"id": "page"}, "name": "Page", "fields": [{"id": "slug", "type": "Symbol"}]},
    ]
}


def _workspace(tmp_path: Path, model: object = MODEL, extra: str = "") -> Path:
    (tmp_path / "model.json").write_text(json.dumps(model), encoding="utf-8")
    (tmp_path / ".cmsgraph.yaml").write_text(f"content-model: model.json\n{extra}", encoding="utf-8")
    return tmp_path


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["cmsgraph", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


# ###############
# General
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- init tests --------


def test_init_creates_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "init", str(tmp_path)) == 0
    content = (tmp_path / ".cmsgraph.yaml").read_text()
    assert "content-model: content-types.json" in content


def test_init_fails_if_config_exists(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".cmsgraph.yaml").write_text("content-model: x.json\n")
    assert _run(monkeypatch, "init", str(tmp_path)) == 1


def test_init_fails_for_missing_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "init", str(tmp_path / "absent")) == 1


# -------- check tests --------


def test_check_succeeds(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, "check", str(_workspace(tmp_path))) == 0
    out = capsys.readouterr().out
    assert "Translating 2 content type(s)" in out
    assert "1 union(s)" in out
    assert "No issues found." in out


def test_check_without_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "check", str(tmp_path)) == 1


def test_check_reports_translation_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    model = {"items": [{"sys": {"id": "post"}, "name": "Post", "fields": [{"id": "x", "type": "Hologram"}]}]}
    assert _run(monkeypatch, "check", str(_workspace(tmp_path, model))) == 1
    err = capsys.readouterr().err
    assert "Error: Unable to create schema for content type Post" in err
    assert "Hologram" in err


def test_check_reports_missing_content_model(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".cmsgraph.yaml").write_text("content-model: absent.json\n")
    assert _run(monkeypatch, "check", str(tmp_path)) == 1
    assert "not found" in capsys.readouterr().err


# -------- build tests --------


def test_build_writes_sdl(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "build", str(_workspace(tmp_path))) == 0
    sdl = (tmp_path / "schema.graphql").read_text()
    assert "union UnionContentfulPostPage = ContentfulContentTypePost | ContentfulContentTypePage" in sdl
    assert '  related: [UnionContentfulPostPage] @link(by: "id", from: "related___NODE")' in sdl
    assert "  title: String!" in sdl


def test_build_uses_names_when_configured(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    workspace = _workspace(tmp_path, extra="use-name-for-id: true\n")
    assert _run(monkeypatch, "build", str(workspace)) == 0
    assert "type ContentfulContentTypeBlogPost implements" in (tmp_path / "schema.graphql").read_text()


def test_build_json_to_explicit_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    output = tmp_path / "dist" / "schema.json"
    assert _run(monkeypatch, "build", str(_workspace(tmp_path)), "--format", "json", "--output", str(output)) == 0
    names = [d.name for d in read_artifact(output)]
    assert "ContentfulContentTypePost" in names
    assert "UnionContentfulPostPage" in names


def test_build_json_default_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "build", str(_workspace(tmp_path)), "--format", "json") == 0
    assert not (tmp_path / "schema.graphql").exists()
    names = [d.name for d in read_artifact(tmp_path / "schema.json")]
    assert "UnionContentfulPostPage" in names


def test_build_verbose(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "--verbose", "build", str(_workspace(tmp_path))) == 0
