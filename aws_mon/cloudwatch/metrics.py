import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core.config import MonitorConfig
from ..core.constants import UNIT_BYTES, UNIT_PERCENT
from ..core.exceptions import MetricError
from ..sampling import DiskSample, MemorySample
from .dimensions import DimensionSet

logger = logging.getLogger(__name__)

VALID_UNITS = (UNIT_PERCENT, UNIT_BYTES)


@dataclass(frozen=True)
class MetricDefinition:
    """Maps a config toggle to the metric it enables and the sample field it reads."""

    toggle: str
    name: str
    unit: str
    sample_field: str


# Emission order follows toggle order
MEMORY_METRICS: Tuple[MetricDefinition, ...] = (
    MetricDefinition("mem_util", "MemoryUtilization", UNIT_PERCENT, "util_percent"),
    MetricDefinition("mem_used", "MemoryUsed", UNIT_BYTES, "used_bytes"),
    MetricDefinition("mem_avail", "MemoryAvail", UNIT_BYTES, "avail_bytes"),
    MetricDefinition("swap_util", "SwapUtil", UNIT_PERCENT, "swap_util_percent"),
    MetricDefinition("swap_used", "SwapUsed", UNIT_BYTES, "swap_used_bytes"),
)

DISK_METRICS: Tuple[MetricDefinition, ...] = (
    MetricDefinition("disk_space_util", "DiskUtilization", UNIT_PERCENT, "space_util_percent"),
    MetricDefinition("disk_space_used", "DiskUsed", UNIT_BYTES, "space_used_bytes"),
    MetricDefinition("disk_space_avail", "DiskAvail", UNIT_BYTES, "space_avail_bytes"),
    MetricDefinition("disk_inode_util", "DiskInodesUtilization", UNIT_PERCENT, "inode_util_percent"),
)


@dataclass(frozen=True)
class MetricRecord:
    name: str
    unit: str
    value: float
    dimensions: DimensionSet = ()

    def to_metric_datum(self, timestamp: Optional[datetime] = None) -> Dict[str, Any]:
        """Convert to a PutMetricData ``MetricData`` entry."""
        datum: Dict[str, Any] = {
            "MetricName": self.name,
            "Unit": self.unit,
            "Value": self.value,
            "Dimensions": [dim.to_dict() for dim in self.dimensions],
        }
        if timestamp is not None:
            datum["Timestamp"] = timestamp
        return datum

    def __str__(self) -> str:
        dims = ", ".join(str(dim) for dim in self.dimensions)
        return f"{self.name} {self.value} {self.unit} [{dims}]"


class MetricBatch:
    """Ordered, append-only collection of the records assembled in one run."""

    def __init__(self) -> None:
        self._records: List[MetricRecord] = []

    def append(self, record: MetricRecord) -> None:
        self._records.append(record)

    @property
    def records(self) -> Tuple[MetricRecord, ...]:
        return tuple(self._records)

    def __iter__(self) -> Iterator[MetricRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"MetricBatch(records={self._records})"


def add_metric(
    name: str, unit: str, value: Any, dims: DimensionSet, batch: MetricBatch
) -> MetricBatch:
    """Validate one value and append it to ``batch`` as a MetricRecord."""
    if unit not in VALID_UNITS:
        raise MetricError(f"Can't add {name} metric: unsupported unit {unit!r}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MetricError(f"Can't add {name} metric: value {value!r} is not a number")
    if not math.isfinite(value) or value < 0:
        raise MetricError(
            f"Can't add {name} metric: value {value!r} must be finite and non-negative"
        )

    batch.append(MetricRecord(name=name, unit=unit, value=float(value), dimensions=dims))
    return batch


def _assemble(
    definitions: Tuple[MetricDefinition, ...],
    config: MonitorConfig,
    sample: Any,
    dims: DimensionSet,
    batch: MetricBatch,
) -> MetricBatch:
    for definition in definitions:
        if getattr(config, definition.toggle):
            batch = add_metric(
                definition.name,
                definition.unit,
                getattr(sample, definition.sample_field),
                dims,
                batch,
            )
    return batch


def assemble_memory_metrics(
    config: MonitorConfig, sample: MemorySample, dims: DimensionSet, batch: MetricBatch
) -> MetricBatch:
    return _assemble(MEMORY_METRICS, config, sample, dims, batch)


def assemble_disk_metrics(
    config: MonitorConfig, sample: DiskSample, dims: DimensionSet, batch: MetricBatch
) -> MetricBatch:
    return _assemble(DISK_METRICS, config, sample, dims, batch)
