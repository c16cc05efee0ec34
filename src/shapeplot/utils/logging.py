"""Logging utilities for Shapeplot."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class PlotStats:
    """Statistics collected while plotting."""

    shapes_plotted: int = 0
    shapes_skipped: int = 0
    commands_emitted: int = 0
    font_resets: int = 0
    skipped: list[tuple[str, str]] = field(default_factory=list)

    @property
    def shapes_requested(self) -> int:
        """Total number of shape requests, including skipped ones."""
        return self.shapes_plotted + self.shapes_skipped


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so stdout stays free for path data.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("shapeplot")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class PlotLogger:
    """Logger for tracking plotted shapes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("shapeplot")
        self._stats = PlotStats()

    def log_shape(self, shape: str, commands: int) -> None:
        """Log a shape that produced commands."""
        self._logger.debug("Shape plotted", shape=shape, commands=commands)
        self._stats.shapes_plotted += 1
        self._stats.commands_emitted += commands

    def log_shape_skipped(self, shape: str, reason: str) -> None:
        """Log a degenerate shape request that produced nothing."""
        self._logger.debug("Shape skipped", shape=shape, reason=reason)
        self._stats.shapes_skipped += 1
        self._stats.skipped.append((shape, reason))

    def log_commands(self, count: int) -> None:
        """Count commands forwarded outside of shape plotting."""
        self._stats.commands_emitted += count

    def log_font_reset(self, font: str, default: str) -> None:
        """Log a malformed font string being replaced by the default font."""
        self._logger.debug("Font reset to default", font=font, default=default)
        self._stats.font_resets += 1

    @property
    def stats(self) -> PlotStats:
        """Get current plotting statistics."""
        return self._stats
