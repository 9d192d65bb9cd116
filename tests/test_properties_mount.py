# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from cwrap_lib.core.error import CWrapError
from cwrap_lib.properties.mount import MountPoint


@pytest.mark.parametrize(
    "string, expected",
    [
        ("/data:/data", MountPoint("/data", "/data")),
        ("/host/in:/in:ro", MountPoint("/host/in", "/in", "ro")),
        ("  /a:/b:rw  ", MountPoint("/a", "/b", "rw")),
    ],
)
def test_mount_point_from_str(string, expected):
    assert MountPoint.fromStr(string) == expected


@pytest.mark.parametrize(
    "string",
    ["/data", "", "/a:/b:ro:extra", ":/b", "/a:", "/a::ro"],
)
def test_mount_point_from_str_invalid_raises(string):
    with pytest.raises(CWrapError, match="Could not parse mount point"):
        MountPoint.fromStr(string)


@pytest.mark.parametrize(
    "mount, expected",
    [
        (MountPoint("/data", "/data"), "/data:/data"),
        (MountPoint("/host/in", "/in", "ro"), "/host/in:/in:ro"),
    ],
)
def test_mount_point_str(mount, expected):
    assert str(mount) == expected


def test_mount_point_from_dict():
    mount = MountPoint.fromDict(
        {"source": "/scratch/user", "destination": "/work", "options": "rw"}
    )
    assert mount == MountPoint("/scratch/user", "/work", "rw")


def test_mount_point_from_dict_without_options():
    mount = MountPoint.fromDict({"source": "/a", "destination": "/b"})
    assert mount.options is None
    assert str(mount) == "/a:/b"


def test_mount_point_from_dict_missing_key_raises():
    with pytest.raises(CWrapError, match="missing key"):
        MountPoint.fromDict({"source": "/a"})


def test_mount_point_from_dict_empty_value_raises():
    with pytest.raises(CWrapError, match="empty source or destination"):
        MountPoint.fromDict({"source": "", "destination": "/b"})


def test_mount_point_from_any():
    assert MountPoint.fromAny("/a:/b") == MountPoint("/a", "/b")
    assert MountPoint.fromAny({"source": "/a", "destination": "/b"}) == MountPoint(
        "/a", "/b"
    )


def test_mount_point_from_any_invalid_raises():
    with pytest.raises(CWrapError, match="Invalid mount point"):
        MountPoint.fromAny(42)
