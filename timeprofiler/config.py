"""Configuration dataclass for profilers."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class ProfilerConfig:
    """Construction options for a TimeProfiler."""

    label: str = ""
    # Default for the ``logged`` flag of start/stop/execute/measure.
    logged: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the config to a plain dict."""
        return asdict(self)
