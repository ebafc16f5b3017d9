"""
Configuration utilities.
"""

import yaml
from dataclasses import dataclass
from typing import Dict, Any, List, Tuple, Union
from pathlib import Path

from ..constants import DEFAULT_ROOT, RECORDS_PER_SHARD, TEST_FILE, TRAINING_FILES
from .errors import Cifar10ConfigError


IMAGE_LAYOUTS = ("flat", "3d")


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Missing sections and keys are filled in from the default configuration.

    Args:
        config_path: Path to config file

    Returns:
        Configuration dictionary
    """
    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise Cifar10ConfigError(f"Config file {config_path} must contain a mapping")
    return merge_config(get_default_config(), loaded)


def save_config(config: Dict[str, Any], config_path: str):
    """
    Save configuration to YAML file.

    Args:
        config: Configuration dictionary
        config_path: Path to save config
    """
    Path(config_path).parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False)


def get_default_config() -> Dict[str, Any]:
    """
    Get default reader configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "data": {
            "root": DEFAULT_ROOT,
            "training_files": list(TRAINING_FILES),
            "test_file": TEST_FILE,
            "records_per_shard": RECORDS_PER_SHARD,
        },
        "loading": {
            "training_limit": 0,
            "test_limit": 0,
            "layout": "flat",
            "show_progress": False,
        },
    }


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_loading_options(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate and return the ``loading`` section of a configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Dictionary with training_limit, test_limit, layout and show_progress
    """
    loading = merge_config(get_default_config()["loading"], config.get("loading") or {})
    for key in ("training_limit", "test_limit"):
        value = loading[key]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise Cifar10ConfigError(f"loading.{key} must be a non-negative integer, got {value!r}")
    if loading["layout"] not in IMAGE_LAYOUTS:
        raise Cifar10ConfigError(
            f"loading.layout must be one of {IMAGE_LAYOUTS}, got {loading['layout']!r}"
        )
    loading["show_progress"] = bool(loading["show_progress"])
    return loading


@dataclass(frozen=True)
class ShardLayout:
    """
    Location of the CIFAR-10 shard files on disk.

    Attributes:
        root: Directory holding the shard files
        training_files: Training shard file names, in decode order
        test_file: Test shard file name
        records_per_shard: Natural number of records in one shard
    """

    root: Path = Path(DEFAULT_ROOT)
    training_files: Tuple[str, ...] = TRAINING_FILES
    test_file: str = TEST_FILE
    records_per_shard: int = RECORDS_PER_SHARD

    def __post_init__(self):
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "training_files", tuple(self.training_files))
        if not self.training_files:
            raise Cifar10ConfigError("At least one training shard is required")
        if self.records_per_shard <= 0:
            raise Cifar10ConfigError(
                f"records_per_shard must be positive, got {self.records_per_shard}"
            )

    @classmethod
    def from_root(cls, root: Union[str, Path]) -> "ShardLayout":
        """Standard shard file names under ``root``."""
        return cls(root=Path(root))

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ShardLayout":
        """
        Build a layout from the ``data`` section of a configuration.

        Args:
            config: Configuration dictionary

        Returns:
            ShardLayout
        """
        data = merge_config(get_default_config()["data"], config.get("data") or {})
        training_files = data["training_files"]
        if isinstance(training_files, str) or not isinstance(training_files, list):
            raise Cifar10ConfigError("data.training_files must be a list of file names")
        records = data["records_per_shard"]
        if isinstance(records, bool) or not isinstance(records, int):
            raise Cifar10ConfigError(
                f"data.records_per_shard must be an integer, got {records!r}"
            )
        return cls(
            root=Path(data["root"]),
            training_files=tuple(str(name) for name in training_files),
            test_file=str(data["test_file"]),
            records_per_shard=records,
        )

    @property
    def training_paths(self) -> List[Path]:
        return [self.root / name for name in self.training_files]

    @property
    def test_path(self) -> Path:
        return self.root / self.test_file
