"""Global config loading from ~/.vptestbed/."""

from pathlib import Path

import yaml
from pydantic import BaseModel

TESTBED_DIR = Path.home() / ".vptestbed"


class TestbedConfig(BaseModel):
    log_level: str = "WARNING"
    json_indent: int | None = 2


def load_config() -> TestbedConfig:
    """Load config from ~/.vptestbed/config.yaml, or return defaults."""
    config_path = TESTBED_DIR / "config.yaml"
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return TestbedConfig(**data)
    return TestbedConfig()
