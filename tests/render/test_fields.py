"""Unit tests for metadata field formatting."""

import stat
import time
from unittest.mock import patch

import pytest

from treewalk.config import TreeConfig
from treewalk.render.fields import (
    entry_fields,
    format_date,
    format_human_size,
    format_protections,
    format_size,
    group_name,
    user_name,
)
from treewalk.types import FileType, SortKey
from treewalk.walker.entry import DirectoryEntry


def make_entry(size=1536, mode=stat.S_IFREG | 0o644, mtime=0.0, ctime=0.0):
    return DirectoryEntry("f", "f", "f", FileType.FILE, size, mtime, ctime, mode, 77, 5, 0, 0)


@pytest.mark.parametrize(
    "size,si,expected",
    [
        (0, False, "0.00B"),
        (1023, False, "1023.00B"),
        (1024, False, "1.00K"),
        (1536, False, "1.50K"),
        (1048576, False, "1.00M"),
        (5 * 1024**3, False, "5.00G"),
        (1024**6, False, "1.00E"),
        (999, True, "999.00B"),
        (1000, True, "1.00K"),
        (1500, True, "1.50K"),
        (2_500_000, True, "2.50M"),
    ],
)
def test_format_human_size(size, si, expected):
    assert format_human_size(size, si=si) == expected


def test_format_human_size_stops_at_largest_unit():
    assert format_human_size(1024**7) == "1024.00E"


def test_format_size_raw_and_human():
    entry = make_entry(size=1536)

    assert format_size(entry, TreeConfig(size=True)) == "1536"
    assert format_size(entry, TreeConfig(human_size=True)) == "   1.50K"
    assert format_size(entry, TreeConfig(si=True)) == "   1.54K"


def test_format_protections():
    assert format_protections(make_entry(mode=stat.S_IFREG | 0o754)) == "-rwxr-xr--"
    assert format_protections(make_entry(mode=stat.S_IFDIR | 0o755)) == "drwxr-xr-x"


def test_format_date_uses_ctime_when_sorting_by_ctime():
    entry = make_entry(mtime=0.0, ctime=86400.0 * 400)
    config = TreeConfig(date=True, time_format="%Y")

    assert format_date(entry, config) == time.strftime("%Y", time.localtime(0.0))
    ctime_config = TreeConfig(date=True, time_format="%Y", sort_key=SortKey.CTIME)
    assert format_date(entry, ctime_config) == time.strftime("%Y", time.localtime(86400.0 * 400))


def test_user_and_group_fall_back_to_numbers():
    with patch("pwd.getpwuid", side_effect=KeyError(987654)):
        assert user_name(987654) == "987654"
    with patch("grp.getgrgid", side_effect=KeyError(987654)):
        assert group_name(987654) == "987654"


def test_user_name_lookup():
    with patch("pwd.getpwuid") as mock_getpwuid:
        mock_getpwuid.return_value.pw_name = "alice"
        assert user_name(987655) == "alice"
        assert user_name(987655) == "alice"

    mock_getpwuid.assert_called_once_with(987655)


def test_entry_fields_order():
    config = TreeConfig(inodes=True, device=True, protections=True, size=True)

    assert entry_fields(make_entry(), config) == ["77", "5", "-rw-r--r--", "1536"]


def test_entry_fields_none_enabled():
    assert entry_fields(make_entry(), TreeConfig()) == []
