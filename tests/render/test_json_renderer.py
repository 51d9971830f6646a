"""Unit tests for the JSON renderer."""

import json
import os
import stat

from treewalk.config import TreeConfig
from treewalk.render import JSONRenderer, create_renderer
from treewalk.treewalk import TreeWalk
from treewalk.types import SortKey


def render_json(root, **options):
    config = TreeConfig(root=str(root), output_format="json", sort_key=SortKey.NAME, **options)
    text = TreeWalk(config).get_tree_representation()
    return json.loads(text)


def test_document_structure(sample_tree):
    root, report = render_json(sample_tree)

    assert root["type"] == "directory"
    assert root["name"] == str(sample_tree)
    assert [child["name"] for child in root["contents"]] == ["a.txt", "b.log", "docs", "src"]
    assert report == {"type": "report", "directories": 3, "files": 5}


def test_nested_contents(sample_tree):
    root, _ = render_json(sample_tree)
    src = root["contents"][3]
    util = src["contents"][1]

    assert src["type"] == "directory"
    assert util == {"type": "directory", "name": "util", "contents": [{"type": "file", "name": "helper.py"}]}


def test_files_have_no_contents(sample_tree):
    root, _ = render_json(sample_tree)

    assert "contents" not in root["contents"][0]


def test_undescended_directory_has_empty_contents(sample_tree):
    root, _ = render_json(sample_tree, max_depth=1)

    assert root["contents"][2] == {"type": "directory", "name": "docs", "contents": []}


def test_symlink_target(sample_tree):
    os.symlink("a.txt", sample_tree / "z-link")
    root, _ = render_json(sample_tree, max_depth=1)

    assert root["contents"][-1] == {"type": "link", "name": "z-link", "target": "a.txt"}


def test_error_note(sample_tree):
    root, _ = render_json(sample_tree, file_limit=1)
    src = root["contents"][3]

    assert src["error"] == "2 entries exceeds filelimit, not opening dir"
    assert src["contents"] == []


def test_metadata_attributes(sample_tree):
    root, _ = render_json(sample_tree, size=True, protections=True, max_depth=1)
    a_txt = root["contents"][0]

    assert a_txt["size"] == 6
    assert a_txt["prot"] == stat.filemode(os.lstat(sample_tree / "a.txt").st_mode)[1:]


def test_human_size_attribute(sample_tree):
    root, _ = render_json(sample_tree, human_size=True, max_depth=1)

    assert root["contents"][0]["size"] == "6.00B"


def test_dirs_only_report_has_no_files(sample_tree):
    _, report = render_json(sample_tree, dirs_only=True)

    assert report == {"type": "report", "directories": 3}


def test_full_path_names(sample_tree):
    root, _ = render_json(sample_tree, full_path=True, max_depth=1)

    assert root["contents"][0]["name"] == os.path.join(str(sample_tree), "a.txt")


def test_non_ascii_names_are_kept(tmp_path):
    (tmp_path / "café.txt").write_text("x")
    text = TreeWalk(TreeConfig(root=str(tmp_path), output_format="json")).get_tree_representation()

    assert '"café.txt"' in text


def test_create_renderer_selects_json():
    assert isinstance(create_renderer(TreeConfig(output_format="json"), colorize=True), JSONRenderer)
