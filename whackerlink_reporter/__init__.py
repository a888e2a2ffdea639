# -*- coding: utf-8 -*-
"""Fire-and-forget reporting of radio-network events to an HTTP collector."""

__version__ = "1.0.0"

from .config import ReporterConfig, get_reporter_config, load_reporter_config
from .models import PacketType, ResponseType
from .reporter import Reporter

__all__ = [
    "Reporter",
    "ReporterConfig",
    "PacketType",
    "ResponseType",
    "get_reporter_config",
    "load_reporter_config",
]
