import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from ..core.constants import (
    ATTR_FILE_SYSTEM,
    ATTR_IMAGE_ID,
    ATTR_INSTANCE_ID,
    ATTR_INSTANCE_TYPE,
    DIM_AUTO_SCALING_GROUP,
    DIM_FILESYSTEM,
    DIM_IMAGE_ID,
    DIM_INSTANCE_ID,
    DIM_INSTANCE_TYPE,
)

logger = logging.getLogger(__name__)

# Identity attribute -> dimension name, in emission order
DIMENSION_KEYS: Tuple[Tuple[str, str], ...] = (
    (ATTR_INSTANCE_ID, DIM_INSTANCE_ID),
    (ATTR_IMAGE_ID, DIM_IMAGE_ID),
    (ATTR_INSTANCE_TYPE, DIM_INSTANCE_TYPE),
    (ATTR_FILE_SYSTEM, DIM_FILESYSTEM),
)


@dataclass(frozen=True)
class Dimension:
    name: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"Name": self.name, "Value": self.value}

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


DimensionSet = Tuple[Dimension, ...]


def with_file_system(identity: Mapping[str, str], path: str) -> Dict[str, str]:
    """Return a copy of ``identity`` scoped to the filesystem at ``path``."""
    scoped = dict(identity)
    scoped[ATTR_FILE_SYSTEM] = path
    return scoped


def build_dimensions(identity: Mapping[str, str], aggregated: bool) -> DimensionSet:
    """
    Build the dimensions for one scope.

    Aggregated metrics carry no dimensions so CloudWatch combines the
    samples of every reporting host. Missing attributes are skipped.
    """
    if aggregated:
        return ()

    return tuple(
        Dimension(name=dim_name, value=identity[attr])
        for attr, dim_name in DIMENSION_KEYS
        if identity.get(attr)
    )


def append_auto_scaling_dimension(
    dims: DimensionSet, group_name: Optional[str]
) -> DimensionSet:
    if not group_name:
        return dims
    if any(dim.name == DIM_AUTO_SCALING_GROUP for dim in dims):
        logger.debug(f"{DIM_AUTO_SCALING_GROUP} already set, keeping existing value")
        return dims
    return dims + (Dimension(name=DIM_AUTO_SCALING_GROUP, value=group_name),)
