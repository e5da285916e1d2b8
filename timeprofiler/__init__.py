"""Timeprofiler package."""

from importlib import metadata

from timeprofiler.config import ProfilerConfig
from timeprofiler.errors import UnmeasuredReadError
from timeprofiler.profiler import TimeProfiler, profiled


def get_version() -> str:
    """Return package version if available, else placeholder."""
    try:
        return metadata.version("timeprofiler")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "ProfilerConfig",
    "TimeProfiler",
    "UnmeasuredReadError",
    "get_version",
    "profiled",
]
