import logging
from typing import Callable, Dict, Mapping, Optional, TextIO

from .cloudwatch import (
    CloudWatchPublisher,
    DimensionSet,
    MetricBatch,
    append_auto_scaling_dimension,
    assemble_disk_metrics,
    assemble_memory_metrics,
    build_dimensions,
    submit,
    with_file_system,
)
from .core.config import MonitorConfig
from .core.constants import ATTR_INSTANCE_ID, ATTR_REGION, DRY_RUN_IDENTITY
from .core.exceptions import IdentityError
from .identity import resolve_group, resolve_identity
from .sampling import DiskSample, MemorySample, sample_disk, sample_memory

logger = logging.getLogger(__name__)


class MetricCollector:
    """
    Runs one sample-and-submit cycle.

    Resolves the host identity, samples memory once and each configured disk
    path once, assembles the enabled metrics into a single batch and hands it
    to the submission driver. Every failure propagates as an AWSMonError.
    """

    def __init__(
        self,
        config: MonitorConfig,
        identity_resolver: Callable[[], Dict[str, str]] = resolve_identity,
        group_resolver: Callable[[str, str], Optional[str]] = resolve_group,
        memory_sampler: Callable[[], MemorySample] = sample_memory,
        disk_sampler: Callable[[str], DiskSample] = sample_disk,
        publisher: Optional[CloudWatchPublisher] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.identity_resolver = identity_resolver
        self.group_resolver = group_resolver
        self.memory_sampler = memory_sampler
        self.disk_sampler = disk_sampler
        self.publisher = publisher
        self.out = out

    #### Public Methods ####
    def run(self) -> MetricBatch:
        identity = self.resolve_identity()
        batch = self.collect(identity)
        logger.info(f"Assembled {len(batch)} metrics")

        submit(
            batch,
            namespace=self.config.namespace,
            region=self.region_for(identity),
            dry_run=self.config.dry_run,
            publisher=self.publisher,
            out=self.out,
            max_per_call=self.config.max_metrics_per_call,
        )
        return batch

    def resolve_identity(self) -> Dict[str, str]:
        if self.config.dry_run:
            logger.info("Dry run mode enabled. Using placeholder instance identity.")
            return dict(DRY_RUN_IDENTITY)
        return self.identity_resolver()

    def region_for(self, identity: Mapping[str, str]) -> str:
        region = self.config.region or identity.get(ATTR_REGION)
        if not region:
            raise IdentityError("No region configured or found in instance metadata")
        return region

    def collect(self, identity: Mapping[str, str]) -> MetricBatch:
        """Assemble every enabled metric, memory first, then disk path by path."""
        batch = MetricBatch()

        if self.config.wants_memory:
            sample = self.memory_sampler()
            dims = self._scope_dimensions(identity)
            batch = assemble_memory_metrics(self.config, sample, dims, batch)

        if self.config.wants_disk:
            for path in self.config.disk_paths:
                sample = self.disk_sampler(path)
                dims = self._scope_dimensions(with_file_system(identity, path))
                batch = assemble_disk_metrics(self.config, sample, dims, batch)

        return batch

    #### Private Methods ####
    def _scope_dimensions(self, identity: Mapping[str, str]) -> DimensionSet:
        dims = build_dimensions(identity, self.config.aggregated)
        if not self.config.auto_scaling:
            return dims

        if self.config.dry_run:
            logger.info("Dry run mode enabled. Skipping Auto Scaling group lookup.")
            return dims

        instance_id = identity.get(ATTR_INSTANCE_ID)
        if not instance_id:
            raise IdentityError("Auto Scaling lookup requires an instance id")

        group_name = self.group_resolver(instance_id, self.region_for(identity))
        return append_auto_scaling_dimension(dims, group_name)
