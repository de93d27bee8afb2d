from __future__ import annotations
import os
from dataclasses import dataclass

EXAMPLE_INPUT = "1234567890"

@dataclass
class ShareConfig:
    endpoint: str = ""
    api_key: str = ""
    timeout_seconds: float = 10.0

@dataclass
class AppConfig:
    log_level: str = "WARNING"

def load_share_config() -> ShareConfig:
    return ShareConfig(
        endpoint=os.getenv("BINASTORE_SHARE_ENDPOINT", "").rstrip("/"),
        api_key=os.getenv("BINASTORE_SHARE_API_KEY", ""),
        timeout_seconds=float(os.getenv("BINASTORE_SHARE_TIMEOUT_SECONDS", "10")),
    )

def load_app_config() -> AppConfig:
    return AppConfig(
        log_level=os.getenv("BINASTORE_LOG_LEVEL", "WARNING").upper(),
    )
