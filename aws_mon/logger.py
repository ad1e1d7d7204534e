import logging
import sys


class LoggerSetup:
    """Configures the root logger once; log records go to stderr."""

    def __init__(self, log_format: str, verbose: bool = False):
        self.log_format = log_format
        self.setup_logging()
        self.set_verbose(verbose)

    def setup_logging(self) -> None:
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            # stdout carries the dry run payload
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(self.log_format))
            root_logger.addHandler(handler)

    @staticmethod
    def set_verbose(verbose: bool) -> None:
        """DEBUG when --verbose (or ``verbose: true`` in the settings file), INFO otherwise."""
        logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name) if name else logging.getLogger()
