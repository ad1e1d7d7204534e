class AWSMonError(Exception):
    """Base exception for aws_mon package."""

    stage = "run"


class ConfigurationError(AWSMonError):
    """Raised when there's a configuration error."""

    stage = "configuration"


class IdentityError(AWSMonError):
    """Raised when instance metadata can't be resolved."""

    stage = "identity resolution"


class SamplerError(AWSMonError):
    """Raised when memory or disk statistics can't be read."""

    stage = "resource sampling"


class AutoScalingError(AWSMonError):
    """Raised when the Auto Scaling group lookup fails."""

    stage = "auto scaling lookup"


class MetricError(AWSMonError):
    """Raised when a metric record is rejected."""

    stage = "metric assembly"


class PublishError(AWSMonError):
    """Raised when CloudWatch rejects a PutMetricData call."""

    stage = "publish"
