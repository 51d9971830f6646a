"""Unit tests for the XML renderer."""

import os
import xml.etree.ElementTree as ET

from treewalk.config import TreeConfig
from treewalk.render import XMLRenderer, create_renderer
from treewalk.treewalk import TreeWalk
from treewalk.types import SortKey


def render_xml(root, **options):
    config = TreeConfig(root=str(root), output_format="xml", sort_key=SortKey.NAME, **options)
    return TreeWalk(config).get_tree_representation()


def parse(text):
    return ET.fromstring(text.encode("utf-8"))


def test_document_structure(sample_tree):
    text = render_xml(sample_tree)
    tree = parse(text)

    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<tree>\n')
    assert tree.tag == "tree"
    root, report = list(tree)
    assert root.tag == "directory"
    assert root.get("name") == str(sample_tree)
    assert [child.get("name") for child in root] == ["a.txt", "b.log", "docs", "src"]
    assert [child.tag for child in root] == ["file", "file", "directory", "directory"]
    assert report.find("directories").text == "3"
    assert report.find("files").text == "5"


def test_indentation(sample_tree):
    lines = render_xml(sample_tree, max_depth=1).splitlines()

    assert lines[2] == f'  <directory name="{sample_tree}">'
    assert lines[3] == '    <file name="a.txt"></file>'
    assert lines[-1] == "</tree>"


def test_nested_elements(sample_tree):
    root = list(parse(render_xml(sample_tree)))[0]
    helper = root.find("./directory[@name='src']/directory[@name='util']/file")

    assert helper is not None
    assert helper.get("name") == "helper.py"


def test_escaping(tmp_path):
    (tmp_path / 'a & "b".txt').write_text("x")
    root = list(parse(render_xml(tmp_path)))[0]

    assert root[0].get("name") == 'a & "b".txt'


def test_symlink_element(sample_tree):
    os.symlink("a.txt", sample_tree / "z-link")
    root = list(parse(render_xml(sample_tree, max_depth=1)))[0]

    link = root[-1]
    assert link.tag == "link"
    assert link.get("target") == "a.txt"


def test_error_element(sample_tree):
    root = list(parse(render_xml(sample_tree, file_limit=1)))[0]
    src = root.find("./directory[@name='src']")

    assert src.find("error").text == "2 entries exceeds filelimit, not opening dir"
    assert src.find("file") is None


def test_dirs_only_report(sample_tree):
    report = list(parse(render_xml(sample_tree, dirs_only=True)))[1]

    assert report.find("directories").text == "3"
    assert report.find("files") is None


def test_size_attribute(sample_tree):
    root = list(parse(render_xml(sample_tree, size=True, max_depth=1)))[0]

    assert root[0].get("size") == "6"


def test_create_renderer_selects_xml():
    assert isinstance(create_renderer(TreeConfig(output_format="xml")), XMLRenderer)
