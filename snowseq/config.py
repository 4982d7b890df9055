"""Connection configuration loading."""

import configparser
import os
from pathlib import Path

from psycopg.conninfo import make_conninfo

ENV_VAR = "SNOWSEQ_DSN"
SECTION = "database"
KEYS = ("host", "port", "dbname", "user", "password")


class ConfigError(Exception):
    """Connection settings are missing or incomplete."""


def load_config(config_path: str | Path) -> dict[str, str]:
    """Load connection parameters from the ``[database]`` section of an INI file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary with host, port, dbname, user and password.
    """
    parser = configparser.ConfigParser()
    if not parser.read(config_path):
        raise ConfigError(f"cannot read config file {config_path}")
    if not parser.has_section(SECTION):
        raise ConfigError(f"{config_path}: missing [{SECTION}] section")

    section = parser[SECTION]
    missing = [key for key in KEYS if key not in section]
    if missing:
        raise ConfigError(f"{config_path}: missing {', '.join(missing)}")
    return {key: section[key] for key in KEYS}


def resolve_connection_string(
    dsn: str | None = None, config_path: str | Path | None = None
) -> str:
    """Pick a connection string: explicit DSN, then config file, then environment."""
    if dsn:
        return dsn
    if config_path:
        return make_conninfo(**load_config(config_path))
    env_dsn = os.environ.get(ENV_VAR)
    if env_dsn:
        return env_dsn
    raise ConfigError(f"no connection given; use --dsn, --config or set {ENV_VAR}")
