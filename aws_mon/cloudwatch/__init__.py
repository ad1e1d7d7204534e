from .dimensions import (
    Dimension,
    DimensionSet,
    append_auto_scaling_dimension,
    build_dimensions,
    with_file_system,
)
from .metrics import (
    MetricBatch,
    MetricDefinition,
    MetricRecord,
    add_metric,
    assemble_disk_metrics,
    assemble_memory_metrics,
)
from .publisher import CloudWatchPublisher, chunk_records, render_dry_run, submit

__all__ = [
    # Dimensions
    "Dimension",
    "DimensionSet",
    "append_auto_scaling_dimension",
    "build_dimensions",
    "with_file_system",
    # Metrics
    "MetricBatch",
    "MetricDefinition",
    "MetricRecord",
    "add_metric",
    "assemble_disk_metrics",
    "assemble_memory_metrics",
    # Publishing
    "CloudWatchPublisher",
    "chunk_records",
    "render_dry_run",
    "submit",
]
