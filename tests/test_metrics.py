from datetime import datetime, timezone

import pytest

from aws_mon.cloudwatch.dimensions import Dimension
from aws_mon.cloudwatch.metrics import (
    MetricBatch,
    MetricRecord,
    add_metric,
    assemble_disk_metrics,
    assemble_memory_metrics,
)
from aws_mon.core.config import MonitorConfig
from aws_mon.core.exceptions import MetricError
from aws_mon.sampling import DiskSample

from .conftest import MEMORY_SAMPLE

DIMS = (Dimension("InstanceId", "i-1"),)
DISK_SAMPLE = DiskSample(
    space_util_percent=61.0,
    space_used_bytes=600.0,
    space_avail_bytes=400.0,
    inode_util_percent=3.5,
)


def test_add_metric_appends_record():
    batch = MetricBatch()

    result = add_metric("MemoryUtilization", "Percent", 42, DIMS, batch)

    assert result is batch
    assert batch.records == (MetricRecord("MemoryUtilization", "Percent", 42.0, DIMS),)
    assert isinstance(batch.records[0].value, float)


@pytest.mark.parametrize(
    "value",
    [float("nan"), float("inf"), -1.0, True, "12", None],
)
def test_add_metric_rejects_invalid_values(value):
    batch = MetricBatch()

    with pytest.raises(MetricError):
        add_metric("MemoryUsed", "Bytes", value, DIMS, batch)
    assert len(batch) == 0


def test_add_metric_rejects_unknown_unit():
    with pytest.raises(MetricError, match="unsupported unit"):
        add_metric("MemoryUsed", "Kilobytes", 1.0, DIMS, MetricBatch())


def test_zero_is_a_valid_value():
    batch = add_metric("SwapUsed", "Bytes", 0, (), MetricBatch())

    assert batch.records[0].value == 0.0


def test_memory_metrics_follow_toggle_order(all_metrics_config):
    batch = assemble_memory_metrics(all_metrics_config, MEMORY_SAMPLE, DIMS, MetricBatch())

    assert [(r.name, r.unit, r.value) for r in batch] == [
        ("MemoryUtilization", "Percent", 42.5),
        ("MemoryUsed", "Bytes", 4096.0),
        ("MemoryAvail", "Bytes", 8192.0),
        ("SwapUtil", "Percent", 10.0),
        ("SwapUsed", "Bytes", 1024.0),
    ]
    assert all(r.dimensions == DIMS for r in batch)


def test_disk_metrics_follow_toggle_order(all_metrics_config):
    batch = assemble_disk_metrics(all_metrics_config, DISK_SAMPLE, DIMS, MetricBatch())

    assert [(r.name, r.unit, r.value) for r in batch] == [
        ("DiskUtilization", "Percent", 61.0),
        ("DiskUsed", "Bytes", 600.0),
        ("DiskAvail", "Bytes", 400.0),
        ("DiskInodesUtilization", "Percent", 3.5),
    ]


def test_disabled_toggles_produce_no_records():
    config = MonitorConfig(swap_used=True, disk_inode_util=True)
    batch = MetricBatch()

    assemble_memory_metrics(config, MEMORY_SAMPLE, DIMS, batch)
    assemble_disk_metrics(config, DISK_SAMPLE, DIMS, batch)

    assert [r.name for r in batch] == ["SwapUsed", "DiskInodesUtilization"]


def test_metric_datum_shape():
    record = MetricRecord("DiskUsed", "Bytes", 600.0, DIMS)
    timestamp = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert record.to_metric_datum() == {
        "MetricName": "DiskUsed",
        "Unit": "Bytes",
        "Value": 600.0,
        "Dimensions": [{"Name": "InstanceId", "Value": "i-1"}],
    }
    assert record.to_metric_datum(timestamp)["Timestamp"] == timestamp


def test_record_rendering():
    record = MetricRecord("MemoryUtilization", "Percent", 42.5, DIMS)

    assert str(record) == "MemoryUtilization 42.5 Percent [InstanceId=i-1]"
    assert str(MetricRecord("DiskUsed", "Bytes", 1.0)) == "DiskUsed 1.0 Bytes []"
