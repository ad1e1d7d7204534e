"""Constants shared across the aws_mon package."""

from typing import Dict, Final

# CloudWatch
DEFAULT_NAMESPACE: Final[str] = "Linux/System"
DEFAULT_DISK_PATH: Final[str] = "/"
# PutMetricData accepts at most 1000 MetricDatum entries per request
MAX_METRICS_PER_CALL: Final[int] = 1000

# Units
UNIT_PERCENT: Final[str] = "Percent"
UNIT_BYTES: Final[str] = "Bytes"

# Dimension names
DIM_INSTANCE_ID: Final[str] = "InstanceId"
DIM_IMAGE_ID: Final[str] = "ImageId"
DIM_INSTANCE_TYPE: Final[str] = "InstanceType"
DIM_FILESYSTEM: Final[str] = "Filesystem"
DIM_AUTO_SCALING_GROUP: Final[str] = "AutoScalingGroupName"

# Identity attribute keys
ATTR_REGION: Final[str] = "region"
ATTR_INSTANCE_ID: Final[str] = "instanceId"
ATTR_IMAGE_ID: Final[str] = "imageId"
ATTR_INSTANCE_TYPE: Final[str] = "instanceType"
ATTR_FILE_SYSTEM: Final[str] = "fileSystem"

# Used instead of the metadata service when nothing may leave the host
DRY_RUN_IDENTITY: Final[Dict[str, str]] = {
    ATTR_REGION: "us-east-1",
    ATTR_INSTANCE_ID: "i-fakefakefake",
    ATTR_IMAGE_ID: "i-fakefakefake",
    ATTR_INSTANCE_TYPE: "r3.fake",
}

# EC2 instance metadata service (IMDSv2)
IMDS_BASE_URL: Final[str] = "http://169.254.169.254/latest"
IMDS_TOKEN_TTL_SECONDS: Final[int] = 21600
IMDS_TIMEOUT: Final[tuple] = (2, 5)

# Logging
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# YAML config file section
CONFIG_SECTION: Final[str] = "aws_mon"
