import logging
from dataclasses import dataclass

import psutil

from ..core.exceptions import SamplerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemorySample:
    util_percent: float
    used_bytes: float
    avail_bytes: float
    swap_util_percent: float
    swap_used_bytes: float


def _percent(part: float, total: float) -> float:
    return 100.0 * part / total if total > 0 else 0.0


def sample_memory() -> MemorySample:
    """
    Sample memory and swap usage.

    Buffers and page cache count as available memory; they are not
    reported on every platform, in which case they are treated as zero.
    """
    try:
        mem = psutil.virtual_memory()
        swap = psutil.swap_memory()
    except (OSError, RuntimeError) as e:
        raise SamplerError(f"Can't read memory statistics: {e}") from e

    reclaimable = getattr(mem, "buffers", 0) + getattr(mem, "cached", 0)
    avail = min(mem.total, mem.free + reclaimable)
    used = mem.total - avail
    swap_used = swap.total - swap.free

    sample = MemorySample(
        util_percent=_percent(used, mem.total),
        used_bytes=float(used),
        avail_bytes=float(avail),
        swap_util_percent=_percent(swap_used, swap.total),
        swap_used_bytes=float(swap_used),
    )
    logger.debug(f"Memory sample: {sample}")
    return sample
