from .errors import ConfigError
from .loader import load_config
from .models import AppConfig, FirebaseConfig, ScheduleConfig

__all__ = [
    "AppConfig",
    "ConfigError",
    "FirebaseConfig",
    "ScheduleConfig",
    "load_config",
]
