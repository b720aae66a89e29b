"""
Logging configuration for the ``plaud`` logger hierarchy.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from plaud.constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES

DEFAULT_LOG_FILE = Path("logs") / "plaud.log"

FORMAT_TYPES = ("console", "json", "rich")
OUTPUTS = ("console", "file")


@dataclass
class LoggingConfig:
    """Handler setup consumed by LoggingManager.configure.

    ``level`` accepts a name ("DEBUG") or a numeric level and is stored as
    the number; ``output`` accepts a single output or a list of them.
    """

    level: Union[str, int] = logging.INFO
    format_type: str = "console"
    output: Union[str, List[str]] = field(default_factory=lambda: ["console"])
    file_path: Optional[Path] = None
    max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT
    service_name: str = "plaud"
    version: str = "unknown"

    def __post_init__(self):
        if isinstance(self.level, str):
            level = logging.getLevelName(self.level.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown log level: {self.level}")
            self.level = level
        if isinstance(self.output, str):
            self.output = [self.output]
        if self.file_path is not None:
            self.file_path = Path(self.file_path)

    @property
    def log_file(self) -> Path:
        """Where file output goes when ``file`` is among the outputs."""
        return self.file_path or DEFAULT_LOG_FILE

    @classmethod
    def from_settings(cls, settings, version: str = "unknown") -> "LoggingConfig":
        """Build from the ``[logging]`` section of a PlaudConfig."""
        return cls(
            level=settings.level.value,
            format_type=settings.format,
            output=list(settings.output),
            file_path=settings.file_path,
            max_file_size=settings.max_file_size,
            backup_count=settings.backup_count,
            version=version,
        )
