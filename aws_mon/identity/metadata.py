import logging
from typing import Dict, Optional

import requests

from ..core.constants import (
    ATTR_IMAGE_ID,
    ATTR_INSTANCE_ID,
    ATTR_INSTANCE_TYPE,
    ATTR_REGION,
    IMDS_BASE_URL,
    IMDS_TIMEOUT,
    IMDS_TOKEN_TTL_SECONDS,
)
from ..core.exceptions import IdentityError

logger = logging.getLogger(__name__)

IDENTITY_KEYS = (ATTR_REGION, ATTR_INSTANCE_ID, ATTR_IMAGE_ID, ATTR_INSTANCE_TYPE)


def _fetch_token(http: requests.Session, base_url: str) -> str:
    response = http.put(
        f"{base_url}/api/token",
        headers={"X-aws-ec2-metadata-token-ttl-seconds": str(IMDS_TOKEN_TTL_SECONDS)},
        timeout=IMDS_TIMEOUT,
    )
    response.raise_for_status()
    return response.text


def resolve_identity(
    http: Optional[requests.Session] = None, base_url: str = IMDS_BASE_URL
) -> Dict[str, str]:
    """
    Read region, instance id, image id and instance type from the EC2
    instance identity document (IMDSv2).
    """
    http = http or requests.Session()
    try:
        token = _fetch_token(http, base_url)
        response = http.get(
            f"{base_url}/dynamic/instance-identity/document",
            headers={"X-aws-ec2-metadata-token": token},
            timeout=IMDS_TIMEOUT,
        )
        response.raise_for_status()
        document = response.json()
    except (requests.RequestException, ValueError) as e:
        raise IdentityError(
            f"Can't get instance metadata, please confirm we are running on an AWS EC2 instance: {e}"
        ) from e

    if not isinstance(document, dict):
        raise IdentityError(
            f"Instance identity document is not a JSON object: {document!r}"
        )

    missing =[key for key in IDENTITY_KEYS if not document.get(key)]
    if missing:
        raise IdentityError(
            f"Instance identity document is missing: {', '.join(missing)}"
        )

    identity = {key: str(document[key]) for key in IDENTITY_KEYS}
    logger.info(
        f"Resolved identity {identity[ATTR_INSTANCE_ID]} ({identity[ATTR_INSTANCE_TYPE]}) in {identity[ATTR_REGION]}"
    )
    return identity
