from typing import Dict, List

import pytest

from aws_mon.core.config import MonitorConfig
from aws_mon.sampling import DiskSample, MemorySample

HOST_IDENTITY = {
    "region": "eu-west-1",
    "instanceId": "i-0123456789abcdef0",
    "imageId": "ami-0a1b2c3d",
    "instanceType": "t3.micro",
}

MEMORY_SAMPLE = MemorySample(
    util_percent=42.5,
    used_bytes=4096.0,
    avail_bytes=8192.0,
    swap_util_percent=10.0,
    swap_used_bytes=1024.0,
)


class FakeDiskSampler:
    """Returns a distinct sample per path and remembers the order of calls."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def __call__(self, path: str) -> DiskSample:
        self.calls.append(path)
        offset = float(len(self.calls))
        return DiskSample(
            space_util_percent=50.0 + offset,
            space_used_bytes=1000.0 * offset,
            space_avail_bytes=2000.0 * offset,
            inode_util_percent=5.0 + offset,
        )


class FakeMemorySampler:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> MemorySample:
        self.calls += 1
        return MEMORY_SAMPLE


def dims_of(record) -> Dict[str, str]:
    return {dim.name: dim.value for dim in record.dimensions}


@pytest.fixture
def identity() -> Dict[str, str]:
    return dict(HOST_IDENTITY)


@pytest.fixture
def memory_sampler() -> FakeMemorySampler:
    return FakeMemorySampler()


@pytest.fixture
def disk_sampler() -> FakeDiskSampler:
    return FakeDiskSampler()


@pytest.fixture
def all_metrics_config() -> MonitorConfig:
    return MonitorConfig(
        mem_util=True,
        mem_used=True,
        mem_avail=True,
        swap_util=True,
        swap_used=True,
        disk_space_util=True,
        disk_space_used=True,
        disk_space_avail=True,
        disk_inode_util=True,
    )
