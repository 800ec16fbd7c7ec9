"""Configuration and song file management for PlaylistIter."""

import os
from pathlib import Path
from typing import Any, Dict, List, Tuple
import yaml

from .models import Song


class ConfigValidationError(Exception):
    """Raised when configuration or song file validation fails."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate configuration values.

    Args:
        config: Raw configuration dictionary

    Returns:
        The same configuration if valid

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if not isinstance(config, dict):
        raise ConfigValidationError(
            f"configuration must be a mapping, got {type(config).__name__}"
        )

    if "songs_file" in config and not isinstance(config["songs_file"], str):
        raise ConfigValidationError(
            f"songs_file must be a string, got {type(config['songs_file']).__name__}"
        )

    player_config = config.get("player")
    if player_config is None:
        return config

    if not isinstance(player_config, dict):
        raise ConfigValidationError(
            f"player must be a dictionary, got {type(player_config).__name__}"
        )

    seed = player_config.get("shuffle_seed")
    if seed is not None and not _is_int(seed):
        raise ConfigValidationError(
            f"player.shuffle_seed must be an integer or null, got {type(seed).__name__}"
        )

    if "oldies_cutoff" in player_config and not _is_int(player_config["oldies_cutoff"]):
        raise ConfigValidationError(
            f"player.oldies_cutoff must be an integer, "
            f"got {type(player_config['oldies_cutoff']).__name__}"
        )

    return config


def get_config_path() -> Path:
    """
    Get the path to the configuration file.

    PLAYLISTITER_CONFIG_PATH wins, then $XDG_CONFIG_HOME on Unix-like
    systems, then the platform default. Nothing is created on disk.
    """
    override = os.environ.get("PLAYLISTITER_CONFIG_PATH")
    if override:
        return Path(override)

    if os.name == "nt":  # Windows
        base_dir = Path.home() / "AppData" / "Local"
    else:
        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        base_dir = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"

    return base_dir / "playlistiter" / "config.yaml"


def load_config() -> Dict[str, Any]:
    """
    Load and validate the player configuration.

    A missing, unreadable or unparsable file counts as no configuration.
    """
    config_path = get_config_path()

    if not config_path.is_file():
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return {}

    if raw_config is None:
        return {}

    try:
        return validate_config(raw_config)
    except ConfigValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {config_path}: {e}") from e


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to YAML, creating the config directory on first save."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)


def create_default_config() -> None:
    """Create a default configuration file next to which songs.yaml is expected."""
    default_config = {
        "songs_file": str(get_config_path().parent / "songs.yaml"),
        "player": {
            "shuffle_seed": None,
            "oldies_cutoff": 2000,
        },
    }
    save_config(default_config)


def load_songs(path: Path) -> Tuple[str, List[Song]]:
    """
    Load songs from a YAML file.

    The file holds either a plain list of songs or a mapping with a playlist
    "name" and a "songs" list. Each song is a mapping with title, artist,
    genre, duration and year.

    Args:
        path: Path to the YAML file

    Returns:
        Tuple of playlist name (the file stem when not given) and songs

    Raises:
        OSError: If the file cannot be opened, e.g. FileNotFoundError
        ConfigValidationError: If the file is not UTF-8 YAML or a song is malformed
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Could not parse {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigValidationError(f"{path} is not UTF-8 text: {e}") from e

    name = Path(path).stem
    if isinstance(data, dict):
        if "songs" not in data:
            raise ConfigValidationError(
                f"{path} holds a mapping without a 'songs' list; "
                f"write a list of songs or a mapping with 'name' and 'songs'"
            )
        if data.get("name") is not None:
            name = str(data["name"])
        data = data["songs"]
    if data is None:
        data = []

    if not isinstance(data, list):
        raise ConfigValidationError(f"songs in {path} must be a list, got {type(data).__name__}")

    songs = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ConfigValidationError(
                f"songs[{i}] in {path} must be a dictionary, got {type(entry).__name__}"
            )
        try:
            songs.append(Song.from_dict(entry))
        except ValueError as e:
            raise ConfigValidationError(f"songs[{i}] in {path}: {e}") from e

    return name, songs
