# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from cwrap_lib.core.error import CWrapError
from cwrap_lib.properties.container import Container
from cwrap_lib.properties.job import Job
from cwrap_lib.properties.mount import MountPoint
from cwrap_lib.properties.profiles import Namespace

JOB_YAML = """
job_id: preprocess_ID0001
profiles:
  pegasus:
    gpus: 1
    container.arguments: --shm-size 1g
  condor:
    request_gpus: "1"
container:
  name: centos-base
  lfn: busybox.tar
  type: docker
  mounts:
    - /data:/data:ro
    - source: /scratch/user
      destination: /work
  profiles:
    env:
      FOO: bar
"""


def test_container_from_dict_minimal():
    container = Container.fromDict({"lfn": "busybox.tar"})

    assert container.name == "busybox.tar"
    assert container.lfn == "busybox.tar"
    assert container.type is None
    assert container.mounts == []
    assert container.profiles.namespace(Namespace.ENV) == {}


def test_container_from_dict_missing_lfn_raises():
    with pytest.raises(CWrapError, match="does not specify an 'lfn'"):
        Container.fromDict({"name": "centos"})


def test_container_from_dict_not_a_mapping_raises():
    with pytest.raises(CWrapError, match="must be a mapping"):
        Container.fromDict("busybox.tar")  # ty: ignore[invalid-argument-type]


def test_container_from_dict_mounts_not_a_list_raises():
    with pytest.raises(CWrapError, match="mounts must be a list"):
        Container.fromDict({"lfn": "a.tar", "mounts": "/a:/b"})


def test_container_from_dict_preserves_mount_order():
    mounts = [f"/host{i}:/cont{i}" for i in range(5)]
    container = Container.fromDict({"lfn": "a.tar", "mounts": mounts})

    assert [str(x) for x in container.mounts] == mounts


def test_job_from_dict_without_container():
    job = Job.fromDict({"job_id": "ID0001"})

    assert job.job_id == "ID0001"
    assert job.container is None
    assert job.profiles.toDict() == {}


def test_job_from_dict_missing_job_id_raises():
    with pytest.raises(CWrapError, match="does not specify a 'job_id'"):
        Job.fromDict({"container": {"lfn": "a.tar"}})


def test_job_container_script_name():
    assert Job("merge_ID0002").getContainerScriptName() == "merge_ID0002-cont.sh"


def test_job_from_file(tmp_path):
    file = tmp_path / "job.yaml"
    file.write_text(JOB_YAML)

    job = Job.fromFile(file)

    assert job.job_id == "preprocess_ID0001"
    assert job.profiles.get(Namespace.PEGASUS, "gpus") == "1"
    assert job.profiles.get(Namespace.PEGASUS, "container.arguments") == (
        "--shm-size 1g"
    )
    assert job.profiles.get(Namespace.CONDOR, "request_gpus") == "1"

    assert job.container is not None
    assert job.container.name == "centos-base"
    assert job.container.lfn == "busybox.tar"
    assert job.container.type == "docker"
    assert job.container.mounts == [
        MountPoint("/data", "/data", "ro"),
        MountPoint("/scratch/user", "/work"),
    ]
    assert job.container.profiles.get(Namespace.ENV, "FOO") == "bar"


def test_job_from_file_missing_raises(tmp_path):
    with pytest.raises(CWrapError, match="does not exist"):
        Job.fromFile(tmp_path / "missing.yaml")


def test_job_from_file_invalid_yaml_raises(tmp_path):
    file = tmp_path / "job.yaml"
    file.write_text("job_id: [unclosed\n")

    with pytest.raises(CWrapError, match="Could not parse"):
        Job.fromFile(file)


def test_job_from_file_not_a_mapping_raises(tmp_path):
    file = tmp_path / "job.yaml"
    file.write_text("- just\n- a list\n")

    with pytest.raises(CWrapError, match="Invalid job description file"):
        Job.fromFile(file)


def test_job_from_file_invalid_mount_raises(tmp_path):
    file = tmp_path / "job.yaml"
    file.write_text("job_id: a\ncontainer:\n  lfn: a.tar\n  mounts: ['/only-one']\n")

    with pytest.raises(CWrapError, match="Could not parse mount point"):
        Job.fromFile(file)


@pytest.mark.parametrize(
    "content",
    [
        "job_id: a\nprofiles: [a]\n",
        "job_id: a\ncontainer:\n  lfn: a.tar\n  profiles: [env]\n",
    ],
)
def test_job_from_file_profiles_not_a_mapping_raises(tmp_path, content):
    file = tmp_path / "job.yaml"
    file.write_text(content)

    with pytest.raises(CWrapError, match="must be a mapping"):
        Job.fromFile(file)
