import boto3
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class SessionManager:
    """Caches one boto3 Session per region for the lifetime of the process."""

    _sessions: Dict[str, boto3.Session] = {}

    @classmethod
    def get_session(cls, region: str) -> boto3.Session:
        """Get or create a boto3 Session for the given region."""
        if region not in cls._sessions:
            logger.debug(f"Creating boto3 session for region {region}")
            cls._sessions[region] = boto3.Session(region_name=region)
        return cls._sessions[region]

    @classmethod
    def get_client(cls, service_name: str, region: str) -> Any:
        return cls.get_session(region).client(service_name)
