from .reporter import ReporterConfig, get_reporter_config, load_reporter_config

__all__ = [
    "ReporterConfig",
    "get_reporter_config",
    "load_reporter_config",
]
