"""Application configuration.

AppConfig is a frozen dataclass, immutable after creation and validated in
``__post_init__``.
"""

import logging
from dataclasses import dataclass

from burrow.errors import ConfigurationError

_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=8080, extensions=("py",), match_timeout=0.5)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False

    # Discovery: file extensions (without the dot) that hold route modules
    extensions: tuple[str, ...] = ("py",)

    # Resolution: seconds a single route predicate may take; None = no limit
    match_timeout: float | None = None

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        if not self.extensions:
            msg = "AppConfig.extensions must name at least one file extension."
            raise ConfigurationError(msg)
        if self.match_timeout is not None and self.match_timeout <= 0:
            msg = f"AppConfig.match_timeout must be positive, got {self.match_timeout!r}."
            raise ConfigurationError(msg)
        if not 0 <= self.port <= 65535:
            msg = f"AppConfig.port must be between 0 and 65535, got {self.port!r}."
            raise ConfigurationError(msg)
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = (
                f"AppConfig.log_level must be one of {', '.join(sorted(_LOG_LEVELS))}, "
                f"got {self.log_level!r}."
            )
            raise ConfigurationError(msg)


def configure_logging(level: str) -> None:
    """Send log records to stderr at *level* (``"info"``, ``"debug"``, ...).

    Only entry points call this; importing burrow installs no handlers.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
