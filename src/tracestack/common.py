"""
Shared components - configuration, logging and the default environment
"""

import os
import logging
from typing import Optional, Any, Mapping, Set
from dataclasses import dataclass, field

# Debug category for per-push/pop trace lines
COMMAND_STACK = "commandStack"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class TraceConfig:
    """Trace stack configuration"""
    debug_categories: Set[str] = field(default_factory=set)  # enabled debug categories
    traceback: bool = False                                 # detailed imbalance messages
    logger_name: str = "tracestack"
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration values"""
        self.debug_categories = {str(c).strip() for c in self.debug_categories if str(c).strip()}
        if not self.logger_name:
            raise ValueError("logger_name must not be empty")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TraceConfig":
        """Read TRACESTACK_DEBUG, TRACESTACK_TRACEBACK and TRACESTACK_LOG_LEVEL."""
        environ = os.environ if environ is None else environ
        categories = environ.get("TRACESTACK_DEBUG", "")
        return cls(
            debug_categories=set(categories.split(",")),
            traceback=environ.get("TRACESTACK_TRACEBACK", "").strip().lower() in _TRUTHY,
            log_level=environ.get("TRACESTACK_LOG_LEVEL", "INFO"),
        )


def convert_config(config: Any) -> TraceConfig:
    """
    Coerce a config-like value into TraceConfig.

    Accepts a TraceConfig, a dict, None or any object with matching attributes.
    """
    if isinstance(config, TraceConfig):
        return config
    if config is None:
        return TraceConfig()

    if isinstance(config, dict):
        return TraceConfig(
            debug_categories=set(config.get("debug_categories", ())),
            traceback=bool(config.get("traceback", False)),
            logger_name=config.get("logger_name", "tracestack"),
            log_level=config.get("log_level", "INFO"),
        )

    return TraceConfig(
        debug_categories=set(getattr(config, "debug_categories", ())),
        traceback=bool(getattr(config, "traceback", False)),
        logger_name=getattr(config, "logger_name", "tracestack"),
        log_level=getattr(config, "log_level", "INFO"),
    )


class TraceEnvironment:
    """
    Default environment for a TraceStack.

    Holds the engine's currently processing file and turns warnings and
    category debug lines into log records.
    """

    def __init__(self, config: Any = None, logger: Optional[logging.Logger] = None):
        self.config = convert_config(config)
        self.logger = logger or self._create_default_logger()
        self.currently_processing_file: Optional[str] = None

    def _create_default_logger(self) -> logging.Logger:
        """Create the default logger"""
        logger = logging.getLogger(self.config.logger_name)
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        if self.config.debug_categories:
            logger.setLevel(logging.DEBUG)
        else:
            logger.setLevel(LOG_LEVELS[self.config.log_level])
        return logger

    def debugging(self, category: str) -> bool:
        return category in self.config.debug_categories

    def debug(self, category: str, message: str):
        """Category debug line, dropped unless the category is enabled"""
        if self.debugging(category):
            self.logger.debug(f"[{category}] {message}")

    def warn(self, message: str, recoverable: bool = True):
        """Warning; non-recoverable ones are logged as errors but never raised"""
        if recoverable:
            self.logger.warning(message)
        else:
            self.logger.error(message)
