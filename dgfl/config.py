"""League configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from .models import Division
from .schemas import LeagueConfig
from .utils import load_json

DEFAULT_CONFIG_PATH = Path('data') / 'league_config.json'


def get_config(path: Optional[str | Path] = None) -> LeagueConfig:
    """
    Load league configuration.

    With no path, data/league_config.json (relative to the current
    directory) is read if present and the built-in defaults are used
    otherwise. An explicit path must exist.

    Configuration is cached per resolved path, so changing directory
    picks up a different default file.

    Raises:
        ConfigError: If the file is missing (explicit path only) or invalid

    Example:
        from dgfl.config import get_config
        config = get_config()
        print(f"MPO rankings: {config.mpo_url}")
    """
    if path is None:
        default = DEFAULT_CONFIG_PATH.resolve()
        if not default.is_file():
            return LeagueConfig()
        return _load_config(default)
    return _load_config(Path(path).resolve())


@lru_cache(maxsize=8)
def _load_config(path: Path) -> LeagueConfig:
    return load_json(path, schema=LeagueConfig)


def get_rankings_urls(config: Optional[LeagueConfig] = None) -> dict[Division, str]:
    """Get the ranking page URL for each division."""
    config = config or get_config()
    return {
        Division.MPO: config.mpo_url,
        Division.FPO: config.fpo_url,
    }


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    _load_config.cache_clear()
