# reconui/config.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "reconui.yaml"

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Config:
    """
    YAML config loader.

    Usage:
        cfg = Config()                      # loads ./reconui.yaml if there is one
        level = cfg.get_nested("logging.level", "WARNING")
        raw = cfg.as_dict()
        cfg.reload()                        # re-read the file (useful in dev)

    A missing or unreadable file leaves the config empty; every lookup then
    returns its default.

    Parameters:
      config_file: path to the YAML file, absolute or relative to the working directory.
    """

    def __init__(self, config_file: Union[str, Path] = DEFAULT_CONFIG_FILE):
        self.config_file_arg = config_file
        self._config: Dict[str, Any] = {}
        self._source: Optional[str] = None  # 'file' or None
        self._resolved_config_path: Optional[Path] = self._resolve_config_path(config_file)
        self.reload()

    # ----- public API -----
    def reload(self) -> None:
        """Re-read the configuration file."""
        if not self._try_load_file():
            self._source = None
            self._config = {}

    def as_dict(self) -> Dict[str, Any]:
        """Return the loaded configuration as a dict (may be empty)."""
        return dict(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """Shallow lookup in the top-level config dict."""
        return self._config.get(key, default)

    def get_nested(self, path: str, default: Any = None, sep: str = ".") -> Any:
        """
        Lookup nested keys using dot-path (e.g. "logging.level").
        Returns default if any step is missing.
        """
        cur = self._config
        if not path:
            return default
        for part in path.split(sep):
            if not isinstance(cur, dict):
                return default
            if part in cur:
                cur = cur[part]
            else:
                return default
        return cur

    @property
    def source(self) -> Optional[str]:
        """Return 'file' or None depending on where config came from."""
        return self._source

    @property
    def resolved_config_path(self) -> Optional[Path]:
        """If a filesystem config was resolved, return its Path, otherwise None."""
        return self._resolved_config_path

    # ----- internal helpers -----
    @staticmethod
    def _resolve_config_path(config_file: Union[str, Path]) -> Optional[Path]:
        """
        Try to resolve the YAML config path:
          1. config_file as given (absolute, or relative to cwd) -> if it exists
          2. config_file relative to the project root (parent of this package) -> if it exists
          3. else None
        """
        candidate = Path(config_file)
        if candidate.exists():
            return candidate.resolve()
        if not candidate.is_absolute():
            project_root = Path(__file__).resolve().parent.parent
            p = project_root / candidate
            if p.exists():
                return p.resolve()
        return None

    def _try_load_file(self) -> bool:
        """Try to load the YAML file from the resolved path. Returns True on success."""
        if not self._resolved_config_path:
            return False
        try:
            with self._resolved_config_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not load config file %s: %s", self._resolved_config_path, e)
            return False

        if data is None:
            data = {}
        if not isinstance(data, dict):
            # YAML parsed but not a mapping -> store raw under a key
            data = {"__root__": data}
        self._config = data
        self._source = "file"
        logger.debug("Loaded config from %s", self._resolved_config_path)
        return True


_default_config: Optional[Config] = None


def get_config() -> Config:
    """Returns the default Config instance, loading it on first use."""
    global _default_config
    if _default_config is None:
        _default_config = Config()
    return _default_config


def configure_logging(config: Optional[Config] = None) -> None:
    """
    Sets up standard logging from the `logging` section of the config:
    `logging.level` (default WARNING) and `logging.format`.
    """
    config = config or get_config()
    level_name = str(config.get_nested("logging.level", "WARNING")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, using WARNING", level_name)
        level = logging.WARNING
    logging.basicConfig(level=level, format=config.get_nested("logging.format", DEFAULT_LOG_FORMAT))
    logging.getLogger("reconui").setLevel(level)
