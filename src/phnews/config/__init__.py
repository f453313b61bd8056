"""Configuration module for phnews."""

from phnews.config.factory import (
    create_browser,
    create_favorites_store,
    create_proxy,
    create_upstream_client,
)
from phnews.config.loader import get_default_config_path, load_config
from phnews.config.models import (
    LoggingConfig,
    PhnewsConfig,
    ProxyConfig,
    ReaderConfig,
    UpstreamConfig,
)

__all__ = [
    "LoggingConfig",
    "PhnewsConfig",
    "ProxyConfig",
    "ReaderConfig",
    "UpstreamConfig",
    "create_browser",
    "create_favorites_store",
    "create_proxy",
    "create_upstream_client",
    "get_default_config_path",
    "load_config",
]
