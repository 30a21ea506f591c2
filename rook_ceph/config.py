# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration for the rook-ceph kubectl plugin.

Values are resolved from, lowest to highest precedence:
model defaults, an optional YAML or TOML config file, environment variables,
and finally the main-level command-line flags (applied by the CLI).

Example config file (`~/.config/rook-ceph/config.yaml`):
    cluster_namespace: my-cluster
    operator_namespace: rook-operator
    context: production
"""
from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any, Mapping

import toml
import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from rook_ceph.exceptions import ConfigError
from rook_ceph.logger import logger

OPERATOR_DEPLOYMENT = "deploy/rook-ceph-operator"
OPERATOR_CONFIGMAP = "rook-ceph-operator-config"
MON_ENDPOINTS_CONFIGMAP = "rook-ceph-mon-endpoints"

ENV_CONFIG_FILE = "ROOK_CEPH_CONFIG"
ENV_OVERRIDES = {
    "ROOK_CLUSTER_NAMESPACE": "cluster_namespace",
    "ROOK_OPERATOR_NAMESPACE": "operator_namespace",
    "TOP_LEVEL_COMMAND": "top_level_command",
}


class PluginConfig(BaseModel):
    """Runtime configuration shared by every command."""

    cluster_namespace: str = "rook-ceph"
    operator_namespace: str | None = None
    top_level_command: str = "kubectl"
    context: str | None = None

    @field_validator("cluster_namespace", "operator_namespace", "top_level_command")
    @classmethod
    def validate_not_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="after")
    def default_operator_namespace(self) -> PluginConfig:
        if self.operator_namespace is None:
            self.operator_namespace = self.cluster_namespace
        return self

    @property
    def kubectl_command(self) -> list[str]:
        """The command prefix used for every kubectl invocation."""
        command = shlex.split(self.top_level_command)
        if self.context:
            command.append(f"--context={self.context}")
        return command

    @property
    def ceph_conf_path(self) -> str:
        """Path of the ceph config file inside the operator pod."""
        namespace = self.cluster_namespace
        return f"/var/lib/rook/{namespace}/{namespace}.config"


def find_config_file(environ: Mapping[str, str] | None = None) -> Path | None:
    """Return the first config file that exists, if any."""
    environ = os.environ if environ is None else environ
    candidates = []
    if environ.get(ENV_CONFIG_FILE):
        candidates.append(Path(environ[ENV_CONFIG_FILE]))
    config_dir = Path.home() / ".config" / "rook-ceph"
    candidates.extend(
        [
            config_dir / "config.yaml",
            config_dir / "config.yml",
            config_dir / "config.toml",
            Path.home() / ".rook-ceph.yaml",
            Path.home() / ".rook-ceph.toml",
        ]
    )
    return next((path for path in candidates if path.is_file()), None)


def read_config_file(file_path: Path | str) -> dict[str, Any]:
    """
    Read raw configuration values from a YAML or TOML file.

    Raises:
        ConfigError: If the file is missing, has an unsupported format, or
            does not contain a mapping.
    """
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse config file '{path}': {error}") from error

    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping")
    return raw_config


def load_config(
    file_path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> PluginConfig:
    """
    Build the plugin configuration from a config file and the environment.

    Args:
        file_path (Path | str | None): Config file to read. When omitted,
            `find_config_file()` is used.
        environ (Mapping[str, str] | None): Environment to read overrides
            from. Defaults to `os.environ`. Empty values are ignored.

    Returns:
        PluginConfig: The validated configuration.

    Raises:
        ConfigError: If the file cannot be read or the values are invalid.
    """
    environ = os.environ if environ is None else environ
    path = Path(file_path) if file_path else find_config_file(environ)

    raw_config: dict[str, Any] = {}
    if path:
        logger.debug("Loading config from '%s'", path)
        raw_config.update(read_config_file(path))

    for variable, field in ENV_OVERRIDES.items():
        if environ.get(variable):
            raw_config[field] = environ[variable]

    try:
        return PluginConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration: {error}") from error
