# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from cwrap_lib.core.error import CWrapError
from cwrap_lib.properties.context import CFG, PlanningContext


def test_from_defaults_uses_configuration():
    context = PlanningContext.fromDefaults()

    assert context.workflow_id == "workflow"
    assert context.worker_package_version == tuple(
        int(x) for x in CFG.defaults.worker_package_version.split(".")
    )
    assert (
        context.strict_worker_package_check
        == CFG.defaults.strict_worker_package_check
    )
    assert (
        context.allow_worker_package_download
        == CFG.defaults.allow_worker_package_download
    )


def test_from_defaults_overrides():
    context = PlanningContext.fromDefaults(
        workflow_id="diamond",
        worker_package_version="5.1.2",
        strict_worker_package_check=False,
        allow_worker_package_download=False,
    )

    assert context == PlanningContext(
        workflow_id="diamond",
        worker_package_version=(5, 1, 2),
        strict_worker_package_check=False,
        allow_worker_package_download=False,
    )


@pytest.mark.parametrize("version", ["5", "5.1", "5.1.2.3", "a.b.c"])
def test_from_defaults_invalid_version_raises(version):
    with pytest.raises(CWrapError, match="Could not parse worker package version"):
        PlanningContext.fromDefaults(worker_package_version=version)
