import sys
from typing import Optional, Sequence

from .cli_parser import CliArgs, CliParser
from .core.config import MonitorConfig
from .core.constants import LOG_FORMAT
from .core.exceptions import AWSMonError
from .logger import LoggerSetup
from .pipeline import MetricCollector
from .utils import load_settings_file


def build_config(args: CliArgs) -> MonitorConfig:
    """Merge the optional settings file with the flags given on the command line."""
    settings = load_settings_file(args.config) if args.config else {}
    settings.update(args.explicit_settings())
    return MonitorConfig.from_settings(settings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Parse CLI arguments using CliParser
    args: CliArgs = CliParser.parse_arguments(argv)

    # Initialize logger (configured once)
    logger_setup = LoggerSetup(LOG_FORMAT, verbose=bool(args.verbose))
    logger = logger_setup.get_logger("aws_mon")

    try:
        config = build_config(args)
        logger_setup.set_verbose(config.verbose)
        logger.info(
            f"Collecting {len(config.enabled_toggles)} metric kind(s) for {len(config.disk_paths)} disk path(s)"
        )
        MetricCollector(config).run()
    except AWSMonError as e:
        logger.error(f"Run failed during {e.stage}: {e}")
        return 1

    logger.info("Completed metric collection")
    return 0


if __name__ == "__main__":
    sys.exit(main())
