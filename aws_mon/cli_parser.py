import argparse
from typing import Any, Dict, NamedTuple, Optional, Sequence

from .core.constants import DEFAULT_DISK_PATH, DEFAULT_NAMESPACE

# (flag, help) in emission order
METRIC_FLAGS = (
    ("--mem-util", "Memory Utilization(percent)"),
    ("--mem-used", "Memory Used(bytes)"),
    ("--mem-avail", "Memory Available(bytes)"),
    ("--swap-util", "Swap Utilization(percent)"),
    ("--swap-used", "Swap Used(bytes)"),
    ("--disk-space-util", "Disk Space Utilization(percent)"),
    ("--disk-space-used", "Disk Space Used(bytes)"),
    ("--disk-space-avail", "Disk Space Available(bytes)"),
    ("--disk-inode-util", "Disk Inode Utilization(percent)"),
)


class CliArgs(NamedTuple):
    mem_util: Optional[bool]
    mem_used: Optional[bool]
    mem_avail: Optional[bool]
    swap_util: Optional[bool]
    swap_used: Optional[bool]
    disk_space_util: Optional[bool]
    disk_space_used: Optional[bool]
    disk_space_avail: Optional[bool]
    disk_inode_util: Optional[bool]
    aggregated: Optional[bool]
    auto_scaling: Optional[bool]
    dry_run: Optional[bool]
    namespace: Optional[str]
    disk_path: Optional[str]
    region: Optional[str]
    config: Optional[str]
    verbose: Optional[bool]

    def explicit_settings(self) -> Dict[str, Any]:
        """Settings given on the command line; unset flags are left out so file defaults apply."""
        return {
            key: value
            for key, value in self._asdict().items()
            if value is not None and key != "config"
        }


class CliParser:
    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="aws-mon",
            description="Publish memory, swap and disk metrics of this host to CloudWatch",
        )
        # Flags default to None so values from --config are only overridden when given
        for flag, help_text in METRIC_FLAGS:
            parser.add_argument(flag, action="store_true", default=None, help=help_text)
        parser.add_argument(
            "--aggregated",
            action="store_true",
            default=None,
            help="Adds aggregated metrics for instance type, AMI ID, and overall for the region",
        )
        parser.add_argument(
            "--auto-scaling",
            action="store_true",
            default=None,
            help="Adds aggregated metrics for the Auto Scaling group",
        )
        parser.add_argument(
            "--namespace",
            type=str,
            help=f"CloudWatch metric namespace (default: {DEFAULT_NAMESPACE})",
        )
        parser.add_argument(
            "--disk-path",
            type=str,
            help=f"Comma-separated list of disk paths (default: {DEFAULT_DISK_PATH})",
        )
        parser.add_argument(
            "--dry-run",
            "-d",
            action="store_true",
            default=None,
            help="Marks this a dry run. Does not attempt to contact aws, prints payload to stdout.",
        )
        parser.add_argument(
            "--region",
            type=str,
            help="AWS region to publish to. Defaults to the region of the instance.",
        )
        parser.add_argument(
            "--config",
            "-c",
            type=str,
            help="YAML file with default settings; command line flags take precedence.",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            default=None,
            help="Enable debug logging.",
        )
        return parser

    @staticmethod
    def parse_arguments(argv: Optional[Sequence[str]] = None) -> CliArgs:
        args = CliParser.build_parser().parse_args(argv)
        return CliArgs(**{field: getattr(args, field) for field in CliArgs._fields})
