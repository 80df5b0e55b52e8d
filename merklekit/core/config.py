"""
Engine configuration for MerkleKit.

Settings come from, in increasing priority:
1. Field defaults below
2. MERKLEKIT_* environment variables (a .env file is loaded first)
3. An optional JSON config file
"""

import json
import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from merklekit.crypto import DigestFunction, get_digest_function


ENV_PREFIX = "MERKLEKIT_"


class EngineConfig(BaseModel):
    """Engine and logging parameters"""

    # Hashing
    hash_algorithm: Literal["sha256", "double_sha256", "keccak256"] = "sha256"

    # Input limits
    max_leaves: int = Field(default=1_000_000, gt=0)  # Upper bound on leaf list length

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_to_file: bool = False
    log_dir: Path = Path("logs")

    @property
    def digest_fn(self) -> DigestFunction:
        """Digest function selected by hash_algorithm"""
        return get_digest_function(self.hash_algorithm)


def _env_overrides() -> dict:
    overrides = {}
    for name in EngineConfig.model_fields:
        value = os.getenv(ENV_PREFIX + name.upper())
        if value is not None:
            overrides[name] = value
    return overrides


def load_config(config_path: Optional[str] = None) -> EngineConfig:
    """
    Load configuration from environment and optional JSON file.

    Args:
        config_path: Optional path to a JSON config file

    Returns:
        EngineConfig instance

    Raises:
        pydantic.ValidationError: If a value is out of range or of the wrong type
        OSError: If config_path cannot be read
        json.JSONDecodeError: If config_path is not valid JSON
        ValueError: If config_path does not hold a JSON object
    """
    load_dotenv(find_dotenv(usecwd=True))

    values = _env_overrides()
    if config_path:
        with open(config_path, "r", encoding="utf-8") as f:
            file_values = json.load(f)
        if not isinstance(file_values, dict):
            raise ValueError(
                f"Config file {config_path} must contain a JSON object, got {type(file_values).__name__}"
            )
        values.update(file_values)

    return EngineConfig.model_validate(values)


__all__ = ["EngineConfig", "load_config", "ENV_PREFIX"]
