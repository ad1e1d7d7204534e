from .memory import MemorySample, sample_memory
from .disk import DiskSample, sample_disk

__all__ = [
    "MemorySample",
    "sample_memory",
    "DiskSample",
    "sample_disk",
]
