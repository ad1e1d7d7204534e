import logging
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..core.exceptions import AutoScalingError
from ..core.session import SessionManager

logger = logging.getLogger(__name__)


def resolve_group(
    instance_id: str, region: str, client: Optional[Any] = None
) -> Optional[str]:
    """
    Return the Auto Scaling group the instance belongs to.

    None means the instance is not in any group. API failures, including a
    client that can't be built for ``region``, raise AutoScalingError.
    """
    try:
        client = client or SessionManager.get_client("autoscaling", region)
        response = client.describe_auto_scaling_instances(InstanceIds=[instance_id])
    except (BotoCoreError, ClientError) as e:
        raise AutoScalingError(
            f"Can't look up Auto Scaling group for {instance_id} in {region}: {e}"
        ) from e

    instances = response.get("AutoScalingInstances", [])
    if not instances:
        logger.debug(f"Instance {instance_id} is not in an Auto Scaling group")
        return None
    return instances[0]["AutoScalingGroupName"]
