from .config import MonitorConfig, METRIC_TOGGLES, MEMORY_TOGGLES, DISK_TOGGLES
from .exceptions import (
    AWSMonError,
    AutoScalingError,
    ConfigurationError,
    IdentityError,
    MetricError,
    PublishError,
    SamplerError,
)
from .session import SessionManager

__all__ = [
    # Configuration
    "MonitorConfig",
    "METRIC_TOGGLES",
    "MEMORY_TOGGLES",
    "DISK_TOGGLES",

    # Errors
    "AWSMonError",
    "AutoScalingError",
    "ConfigurationError",
    "IdentityError",
    "MetricError",
    "PublishError",
    "SamplerError",

    # AWS
    "SessionManager",
]
