"""Configuration file management for macos-exec."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_SCAN_ROOT = "/Applications"


@dataclass
class Config:
    """Configuration for executable resolution."""
    
    # Roots for the manual scan, in scan order
    scan_roots: list[str] = field(default_factory=lambda: [DEFAULT_SCAN_ROOT])
    
    # Spotlight tools
    mdfind_path: str = "mdfind"
    mdutil_path: str = "mdutil"
    index_volume: str = "/"
    use_spotlight: bool = True
    
    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.scan_roots:
            raise ValueError("scan_roots must name at least one directory")
        self.scan_roots = [str(Path(root).expanduser()) for root in self.scan_roots]
        
        for name in ("mdfind_path", "mdutil_path", "index_volume"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")


def load_config(config_path: Path | str | None = None) -> Config:
    """
    Load configuration from file.
    
    Args:
        config_path: Path to config file. If None, checks default locations:
            1. ~/.macos-exec.yaml
            2. ~/.macos-exec.yml
            3. ~/.config/macos-exec/config.yaml
            4. ~/.config/macos-exec/config.yml
    
    Returns:
        Config object with loaded settings (or defaults if no config found)
    
    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ValueError: If the config file cannot be parsed or holds invalid values
    """
    if config_path:
        path = Path(config_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        config_file = path
    else:
        default_paths = [
            Path.home() / ".macos-exec.yaml",
            Path.home() / ".macos-exec.yml",
            Path.home() / ".config" / "macos-exec" / "config.yaml",
            Path.home() / ".config" / "macos-exec" / "config.yml",
        ]
        
        config_file = None
        for path in default_paths:
            if path.exists():
                config_file = path
                break
        
        if not config_file:
            return Config()
    
    try:
        with open(config_file, 'r') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("top-level value must be a mapping")
        return Config(**data)
    except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
        raise ValueError(f"Failed to load config from {config_file}: {e}") from e


def save_example_config(output_path: Path | str) -> None:
    """
    Save an example configuration file with all options documented.
    
    Args:
        output_path: Where to save the example config
    """
    example = """# macos-exec configuration file
# Place at ~/.macos-exec.yaml or ~/.config/macos-exec/config.yaml

# Directories scanned for .app bundles when Spotlight cannot answer.
# Later roots win if two bundles share a bundle identifier.
scan_roots:
  - /Applications
  # - ~/Applications

# Spotlight search and index status commands (looked up on PATH)
mdfind_path: mdfind
mdutil_path: mdutil

# Volume whose indexing status decides whether Spotlight is usable
index_volume: /

# Set to false to always use the manual scan
use_spotlight: true
"""
    
    path = Path(output_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(example)
