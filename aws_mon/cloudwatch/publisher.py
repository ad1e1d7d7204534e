import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional, Sequence, TextIO

from botocore.exceptions import BotoCoreError, ClientError

from ..core.constants import MAX_METRICS_PER_CALL
from ..core.exceptions import PublishError
from ..core.session import SessionManager
from .metrics import MetricBatch, MetricRecord

logger = logging.getLogger(__name__)


class CloudWatchPublisher:
    """Sends metric records to CloudWatch with PutMetricData."""

    def __init__(self, client: Optional[Any] = None) -> None:
        self._client = client
        self._clients: Dict[str, Any] = {}

    def _get_client(self, region: str) -> Any:
        if self._client is not None:
            return self._client
        if region not in self._clients:
            self._clients[region] = SessionManager.get_client("cloudwatch", region)
        return self._clients[region]

    def publish(
        self, records: Sequence[MetricRecord], namespace: str, region: str
    ) -> None:
        timestamp = datetime.now(timezone.utc)
        try:
            self._get_client(region).put_metric_data(
                Namespace=namespace,
                MetricData=[record.to_metric_datum(timestamp) for record in records],
            )
        except (BotoCoreError, ClientError) as e:
            raise PublishError(f"Can't put CloudWatch metrics to {namespace}: {e}") from e


def chunk_records(
    records: Sequence[MetricRecord], size: int
) -> Iterator[Sequence[MetricRecord]]:
    """Yield consecutive slices of at most ``size`` records."""
    if size < 1:
        raise ValueError(f"chunk size must be positive, got {size}")
    for start in range(0, len(records), size):
        yield records[start : start + size]


def render_dry_run(batch: MetricBatch, namespace: str, out: TextIO) -> None:
    out.write(f"Dry run. metric data that would be sent to {namespace}:\n")
    for record in batch:
        out.write(f"{record}\n")


def submit(
    batch: MetricBatch,
    namespace: str,
    region: str,
    dry_run: bool,
    publisher: Optional[CloudWatchPublisher] = None,
    out: Optional[TextIO] = None,
    max_per_call: int = MAX_METRICS_PER_CALL,
) -> None:
    """
    Print the batch (dry run) or publish it to CloudWatch.

    Live batches larger than ``max_per_call`` are sent in order, one call per
    chunk. The first failing call raises PublishError and the remaining chunks
    are dropped; chunks already accepted stay published.
    """
    if dry_run:
        render_dry_run(batch, namespace, out or sys.stdout)
        return

    if not batch:
        logger.info("No metrics enabled, nothing to publish")
        return

    publisher = publisher or CloudWatchPublisher()
    records = batch.records
    chunks = list(chunk_records(records, max_per_call))
    for index, chunk in enumerate(chunks, start=1):
        logger.debug(f"Publishing chunk {index}/{len(chunks)} ({len(chunk)} metrics)")
        try:
            publisher.publish(chunk, namespace, region)
        except PublishError:
            logger.error(
                f"Chunk {index}/{len(chunks)} failed, {len(chunks) - index} remaining chunk(s) not sent"
            )
            raise

    logger.info(f"Published {len(records)} metrics to {namespace} in {region}")
