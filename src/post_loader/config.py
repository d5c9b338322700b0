"""Loader configuration, optionally read from a Jekyll ``_config.yml``."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from post_loader.exceptions import ConfigError
from post_loader.posts.source import DEFAULT_EXTENSIONS

SITE_CONFIG_NAME = "_config.yml"


@dataclass
class LoaderConfig:
    site_dir: Path = Path(".")
    posts_dir: str = "_posts"
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    timezone: str = "UTC"

    @property
    def posts_path(self) -> Path:
        return Path(self.site_dir) / self.posts_dir

    def tzinfo(self) -> tzinfo:
        """Resolve the configured zone name.

        Raises:
            ConfigError: If the zone name is unknown.
        """
        if self.timezone.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown timezone '{self.timezone}'") from e

    @classmethod
    def from_site(cls, site_dir: Path | str, **overrides) -> "LoaderConfig":
        """Build a config for a site directory, honoring its ``_config.yml``.

        Only ``timezone`` is taken from the site config; keyword overrides
        win over both the site config and the defaults.
        """
        site_dir = Path(site_dir)
        values: dict = {"site_dir": site_dir}

        config_path = site_dir / SITE_CONFIG_NAME
        if config_path.exists():
            try:
                data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid {config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"{config_path} must contain a mapping")
            if data.get("timezone"):
                values["timezone"] = str(data["timezone"])

        values.update({key: value for key, value in overrides.items() if value is not None})
        config = cls(**values)
        config.tzinfo()
        return config
