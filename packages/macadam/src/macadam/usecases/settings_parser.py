"""Settings parser use case for macadam."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from macadam.domain.exceptions import MacadamConfigError
from macadam.domain.settings import MacadamSettings


class SettingsParser:
    """Parses macadam YAML configuration to settings.

    Every key is optional; missing keys keep the MacadamSettings defaults
    and unknown keys are ignored.

    Example:
        version: v0.1.1
        install_dir: /opt/macadam/bin
        binaries_dir: /srv/macadam/binaries
        use_installer: true
        release_url: https://example.com/{version}/{artifact}
        checksums:
          macadam-installer-macos-universal.pkg: 9f86d081884c7d65...
        helpers:
          names: [vfkit, gvproxy]
          platforms: [darwin]
    """

    def parse(self, yaml_str: str) -> MacadamSettings:
        """Parse macadam YAML config to settings.

        Args:
            yaml_str: YAML string representing macadam configuration.

        Returns:
            MacadamSettings domain object.

        Raises:
            MacadamConfigError: If YAML is invalid or a field has the wrong type.
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise MacadamConfigError(f"Invalid YAML: {e}") from e

        if config is None:
            return MacadamSettings()
        if not isinstance(config, dict):
            raise MacadamConfigError("Config must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "version" in config:
            kwargs["version"] = _as_str(config, "version")
        if "install_dir" in config:
            kwargs["install_dir"] = Path(_as_str(config, "install_dir"))
        if "binaries_dir" in config:
            kwargs["binaries_dir"] = Path(_as_str(config, "binaries_dir"))
        if "use_installer" in config:
            if not isinstance(config["use_installer"], bool):
                raise MacadamConfigError("use_installer must be a boolean")
            kwargs["use_installer"] = config["use_installer"]
        if "release_url" in config:
            # An explicit null disables downloads.
            url = config["release_url"]
            kwargs["release_url"] = None if url is None else _as_str(config, "release_url")
        if "checksums" in config:
            checksums = config["checksums"]
            if not isinstance(checksums, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in checksums.items()
            ):
                raise MacadamConfigError(
                    f"checksums must map artifact names to strings, got: {checksums!r}"
                )
            kwargs["checksums"] = dict(checksums)

        helpers = config.get("helpers")
        if helpers is not None:
            if not isinstance(helpers, dict):
                raise MacadamConfigError("helpers must be a dictionary")
            if "names" in helpers:
                kwargs["helper_names"] = tuple(_as_str_list(helpers, "names"))
            if "platforms" in helpers:
                kwargs["helper_platforms"] = frozenset(
                    _as_str_list(helpers, "platforms")
                )

        return MacadamSettings(**kwargs)


def load_settings(path: Path) -> MacadamSettings:
    """Load settings from a YAML file.

    Raises:
        MacadamConfigError: If the file cannot be read or parsed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MacadamConfigError(f"Cannot read config file {path}: {e}") from e
    return SettingsParser().parse(content)


def _as_str(config: dict[str, Any], key: str) -> str:
    value = config[key]
    if not isinstance(value, str):
        raise MacadamConfigError(f"{key} must be a string, got: {value!r}")
    return value


def _as_str_list(config: dict[str, Any], key: str) -> list[str]:
    value = config[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MacadamConfigError(f"{key} must be a list of strings, got: {value!r}")
    return value
