import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple, Union

from .constants import DEFAULT_DISK_PATH, DEFAULT_NAMESPACE, MAX_METRICS_PER_CALL
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Toggle order is also the order metrics are emitted in
MEMORY_TOGGLES: Tuple[str, ...] = (
    "mem_util",
    "mem_used",
    "mem_avail",
    "swap_util",
    "swap_used",
)
DISK_TOGGLES: Tuple[str, ...] = (
    "disk_space_util",
    "disk_space_used",
    "disk_space_avail",
    "disk_inode_util",
)
METRIC_TOGGLES: Tuple[str, ...] = MEMORY_TOGGLES + DISK_TOGGLES


def parse_disk_paths(value: Union[str, list, tuple]) -> Tuple[str, ...]:
    """Split a comma-separated path list, dropping blanks."""
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [str(item) for item in value]
    else:
        raise ConfigurationError(f"disk_path must be a string or list, got {value!r}")

    paths = tuple(item.strip() for item in items if item.strip())
    if not paths:
        raise ConfigurationError(f"disk_path {value!r} contains no paths")
    return paths


@dataclass(frozen=True)
class MonitorConfig:
    """Options for a single sample-and-submit run."""

    mem_util: bool = False
    mem_used: bool = False
    mem_avail: bool = False
    swap_util: bool = False
    swap_used: bool = False
    disk_space_util: bool = False
    disk_space_used: bool = False
    disk_space_avail: bool = False
    disk_inode_util: bool = False
    aggregated: bool = False
    auto_scaling: bool = False
    dry_run: bool = False
    namespace: str = DEFAULT_NAMESPACE
    disk_paths: Tuple[str, ...] = (DEFAULT_DISK_PATH,)
    region: Optional[str] = None
    max_metrics_per_call: int = MAX_METRICS_PER_CALL
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.namespace:
            raise ConfigurationError("namespace must not be empty")
        if not self.disk_paths:
            raise ConfigurationError("at least one disk path is required")
        if (
            isinstance(self.max_metrics_per_call, bool)
            or not isinstance(self.max_metrics_per_call, int)
            or self.max_metrics_per_call < 1
        ):
            raise ConfigurationError(
                f"max_metrics_per_call must be a positive integer, got {self.max_metrics_per_call!r}"
            )

    @property
    def wants_memory(self) -> bool:
        return any(getattr(self, toggle) for toggle in MEMORY_TOGGLES)

    @property
    def wants_disk(self) -> bool:
        return any(getattr(self, toggle) for toggle in DISK_TOGGLES)

    @property
    def enabled_toggles(self) -> Tuple[str, ...]:
        return tuple(toggle for toggle in METRIC_TOGGLES if getattr(self, toggle))

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "MonitorConfig":
        """
        Build a config from a flat settings mapping (YAML file merged with CLI flags).

        ``disk_path`` is accepted as a comma-separated string or a list.
        """
        settings = dict(settings)
        if "disk_path" in settings:
            settings["disk_paths"] = parse_disk_paths(settings.pop("disk_path"))
        elif "disk_paths" in settings:
            settings["disk_paths"] = parse_disk_paths(settings["disk_paths"])

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(settings) - set(known))
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        for name, value in settings.items():
            default = known[name].default
            if isinstance(default, bool) and not isinstance(value, bool):
                raise ConfigurationError(f"{name} must be true or false, got {value!r}")
            if name in ("namespace", "region") and value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string, got {value!r}")

        config = cls(**settings)
        logger.debug(f"Loaded configuration: {config}")
        return config
