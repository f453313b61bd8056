"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from phnews.config.models import PhnewsConfig


def load_config(path: Path | str) -> PhnewsConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated PhnewsConfig. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return PhnewsConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent / "configs" / "default.yaml"
