"""Unit tests for the CLI main module."""

import json
import logging
from unittest.mock import patch

import pytest
from rich.logging import RichHandler

from treewalk.cli.main import main, setup_logging


@pytest.fixture(autouse=True)
def quiet_setup():
    """Keep main() from installing signal handlers or replacing logging handlers."""
    with patch("treewalk.cli.main.setup_signal_handling"), patch("treewalk.cli.main.setup_logging"):
        yield


def test_main_lists_tree(sample_tree, capfd):
    main(["-n", "--sort", "name", str(sample_tree)])

    out, err = capfd.readouterr()
    lines = out.splitlines()
    assert lines[0] == str(sample_tree)
    assert lines[1] == "├── a.txt"
    assert lines[-1] == "3 directories, 5 files"
    assert err == ""


def test_main_forced_color(sample_tree, capfd):
    main(["-C", "-L", "1", str(sample_tree)])

    out, _ = capfd.readouterr()
    assert "\x1b[1;34mdocs\x1b[0m" in out


def test_main_no_color_when_not_a_terminal(sample_tree, capfd):
    main(["-L", "1", str(sample_tree)])

    out, _ = capfd.readouterr()
    assert "\x1b[" not in out


def test_main_json(sample_tree, capfd):
    main(["-J", str(sample_tree)])

    out, _ = capfd.readouterr()
    root, report = json.loads(out)
    assert root["name"] == str(sample_tree)
    assert report["directories"] == 3


def test_main_output_file(sample_tree, tmp_path_factory, capfd):
    output = tmp_path_factory.mktemp("out") / "tree.txt"

    main(["-o", str(output), "-C", str(sample_tree)])

    out, _ = capfd.readouterr()
    assert out == ""
    content = output.read_text(encoding="utf-8")
    assert content.splitlines()[-1] == "3 directories, 5 files"
    assert "\x1b[" in content


def test_main_output_file_plain_by_default(sample_tree, tmp_path_factory):
    output = tmp_path_factory.mktemp("out") / "tree.txt"

    main(["-o", str(output), str(sample_tree)])

    assert "\x1b[" not in output.read_text(encoding="utf-8")


def test_main_missing_root(tmp_path, capfd):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing")])

    assert excinfo.value.code == 1
    out, err = capfd.readouterr()
    assert out == ""
    assert err.startswith("Error: Root path does not exist")


def test_main_root_is_a_file(tmp_path, capfd):
    path = tmp_path / "file.txt"
    path.write_text("content")

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 1
    assert "Error: Root path is not a directory" in capfd.readouterr().err


def test_main_invalid_level(sample_tree, capfd):
    with pytest.raises(SystemExit) as excinfo:
        main(["-L", "0", str(sample_tree)])

    assert excinfo.value.code == 1
    assert "Error: Invalid level, must be greater than 0" in capfd.readouterr().err


def test_main_syntax_error(capfd):
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])

    assert excinfo.value.code == 2


def test_main_missing_exclude_file(sample_tree, capfd):
    with pytest.raises(SystemExit) as excinfo:
        main(["--exclude-from", str(sample_tree / "missing.ignore"), str(sample_tree)])

    assert excinfo.value.code == 1
    assert "Rules file not found" in capfd.readouterr().err


def test_main_broken_pipe_is_silent(sample_tree, capfd):
    with patch("treewalk.cli.main.SafeWriter") as mock_writer_class:
        mock_writer_class.return_value.__enter__.return_value.write_lines.side_effect = BrokenPipeError()
        main([str(sample_tree)])

    assert capfd.readouterr().err == ""


def test_main_exits_with_signal_code(sample_tree, capfd):
    with patch("treewalk.cli.main.signal_handler") as mock_handler:
        mock_handler.exit_code.return_value = 130
        with pytest.raises(SystemExit) as excinfo:
            main([str(sample_tree)])

    assert excinfo.value.code == 130


def test_setup_logging_levels():
    with patch("treewalk.cli.main.logging.basicConfig") as mock_basic_config:
        setup_logging(verbose=True)
        setup_logging(verbose=False)

    verbose_call, quiet_call = mock_basic_config.call_args_list
    assert verbose_call.kwargs["level"] == logging.DEBUG
    assert quiet_call.kwargs["level"] == logging.WARNING
    assert verbose_call.kwargs["force"] is True
    assert isinstance(verbose_call.kwargs["handlers"][0], RichHandler)
