"""
aws_mon

Samples memory, swap and disk usage of the local host and publishes them as
CloudWatch custom metrics:
- Host identity from the EC2 instance metadata service
- Per-instance, per-filesystem or aggregated dimensions
- Optional Auto Scaling group dimension
- Dry run mode printing the payload instead of publishing it
"""

__version__ = "0.1.0"

from .core import (
    AWSMonError,
    ConfigurationError,
    MonitorConfig,
)
from .cloudwatch import (
    Dimension,
    MetricBatch,
    MetricRecord,
    add_metric,
    build_dimensions,
    submit,
)
from .pipeline import MetricCollector

__all__ = [
    # Configuration
    "MonitorConfig",
    # Errors
    "AWSMonError",
    "ConfigurationError",
    # Metrics
    "Dimension",
    "MetricBatch",
    "MetricRecord",
    "add_metric",
    "build_dimensions",
    "submit",
    # Pipeline
    "MetricCollector",
]
