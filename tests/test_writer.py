from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_rainbow_app.content import APP_ROUTER_FILES, PAGES_ROUTER_FILES
from create_rainbow_app.errors import TemplateWriteError
from create_rainbow_app.schema import ProjectRequest, RouterStyle
from create_rainbow_app.template import TemplateFileSet
from create_rainbow_app.writer import TemplateWriter


@pytest.fixture()
def writer() -> TemplateWriter:
    return TemplateWriter()


def _request(tmp_path: Path, style: RouterStyle) -> ProjectRequest:
    return ProjectRequest(name="myapp", target_path=tmp_path / "myapp", router_style=style)


def test_write_project_app_router(tmp_path: Path, writer: TemplateWriter):
    request = _request(tmp_path, RouterStyle.APP)
    writer.write_project(request)
    root = request.target_path

    assert (root / "src" / "wagmi.ts").read_text(encoding="utf-8").count("appName: 'myapp'") == 1
    assert (root / "src" / "lib" / "fonts.ts").is_file()
    abi = json.loads((root / "src" / "ABI" / "demo.json").read_text(encoding="utf-8"))
    assert {entry["name"] for entry in abi} == {"setGreeting", "greeting"}
    for relative in APP_ROUTER_FILES.paths():
        assert (root / relative).is_file()
    for relative in PAGES_ROUTER_FILES.paths():
        assert not (root / relative).exists()
    assert "Myapp" in (root / "src" / "app" / "page.tsx").read_text(encoding="utf-8")


def test_write_project_pages_router(tmp_path: Path, writer: TemplateWriter):
    request = _request(tmp_path, RouterStyle.PAGES)
    written = writer.write_project(request)

    assert len(written) == 6
    for relative in PAGES_ROUTER_FILES.paths():
        assert (request.target_path / relative).is_file()
    for relative in APP_ROUTER_FILES.paths():
        assert not (request.target_path / relative).exists()


def test_write_overwrites_existing_files(tmp_path: Path, writer: TemplateWriter):
    existing = tmp_path / "src" / "pages" / "index.tsx"
    existing.parent.mkdir(parents=True)
    existing.write_text("scaffolded default", encoding="utf-8")

    writer.write(TemplateFileSet("one", {"src/pages/index.tsx": "new {{ name }}"}), tmp_path, {"name": "x"})
    assert existing.read_text(encoding="utf-8") == "new x"


def test_write_failure_names_path_and_keeps_earlier_files(tmp_path: Path, writer: TemplateWriter):
    (tmp_path / "blocked").write_text("a file, not a directory", encoding="utf-8")
    file_set = TemplateFileSet(
        "partial",
        {"first.txt": "ok", "blocked/second.txt": "never written"},
    )

    with pytest.raises(TemplateWriteError) as excinfo:
        writer.write(file_set, tmp_path, {})

    assert excinfo.value.path == tmp_path / "blocked" / "second.txt"
    assert "blocked" in str(excinfo.value)
    assert (tmp_path / "first.txt").read_text(encoding="utf-8") == "ok"
