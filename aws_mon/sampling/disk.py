import logging
import os
from dataclasses import dataclass

import psutil

from ..core.exceptions import SamplerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiskSample:
    space_util_percent: float
    space_used_bytes: float
    space_avail_bytes: float
    inode_util_percent: float


def sample_disk(path: str) -> DiskSample:
    """Sample space and inode usage of the filesystem holding ``path``."""
    try:
        usage = psutil.disk_usage(path)
        stat = os.statvfs(path)
    except OSError as e:
        raise SamplerError(f"Can't get disk usage for {path}: {e}") from e

    # psutil reports free as blocks available to unprivileged users
    reachable = usage.used + usage.free
    space_util = 100.0 * usage.used / reachable if reachable > 0 else 0.0

    if stat.f_files > 0:
        inode_util = 100.0 * (stat.f_files - stat.f_ffree) / stat.f_files
    else:
        # some filesystems (btrfs, vfat) don't report inode counts
        inode_util = 0.0

    sample = DiskSample(
        space_util_percent=space_util,
        space_used_bytes=float(usage.used),
        space_avail_bytes=float(usage.free),
        inode_util_percent=inode_util,
    )
    logger.debug(f"Disk sample for {path}: {sample}")
    return sample
