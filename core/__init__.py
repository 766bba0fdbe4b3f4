"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .config import (
    DEFAULT_EXCLUDED_DIRECTORIES,
    DEFAULT_INCLUDED_EXTENSIONS,
    OUTPUT_FORMATS,
    EchoConfig,
    ScanConfiguration,
)
from .errors import PipelineError
from .logging import configure_logging
from .timestamps import render_mtime, scan_timestamp, utc_now

__all__ = [
    "DEFAULT_EXCLUDED_DIRECTORIES",
    "DEFAULT_INCLUDED_EXTENSIONS",
    "OUTPUT_FORMATS",
    "EchoConfig",
    "ScanConfiguration",
    "PipelineError",
    "configure_logging",
    "render_mtime",
    "scan_timestamp",
    "utc_now",
]
