"""Central configuration helper for the archive AI bridge."""

import logging
import os

from shared.models.config import EnvConfig


class HelperConfig:
    """Reads typed settings from environment variables and hands out the shared logger."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _read_raw(self, key: str) -> str | None:
        """Return the stripped raw value of an env var, or None if unset or blank."""
        raw = os.getenv(key.upper()) or None  # empty string → None
        if raw is None or not raw.strip():
            return None
        return raw.strip()

    def get_string_val(self, key: str, default: str | None = None) -> str:
        """Read a string environment variable.

        Args:
            key (str): Environment variable name (case-insensitive).
            default (str | None): Fallback value if the variable is not set.

        Returns:
            str: The resolved value.

        Raises:
            ValueError: If the variable is not set and no default is provided.
        """
        val = self._read_raw(key)
        if val is None and default is None:
            raise ValueError(f"Environment variable '{key.upper()}' is not set.")
        return val if val is not None else default

    def get_number_val(self, key: str, default: float | int | None = None) -> float | int:
        """Read a numeric environment variable.

        Args:
            key (str): Environment variable name (case-insensitive).
            default (float | int | None): Fallback value if the variable is not set.

        Returns:
            float | int: The resolved numeric value.

        Raises:
            ValueError: If the variable is not set and no default is provided.
            ValueError: If the value cannot be parsed as a number.
        """
        raw = self._read_raw(key)
        if raw is None:
            if default is None:
                raise ValueError(f"Environment variable '{key.upper()}' is not set.")
            return default
        try:
            return int(raw) if "." not in raw else float(raw)
        except ValueError:
            raise ValueError(f"Environment variable '{key.upper()}' is not a valid number: '{raw}'.")

    def get_bool_val(self, key: str, default: bool | None = None) -> bool:
        """Read a boolean environment variable ("true", "1" and "yes" count as True).

        Raises:
            ValueError: If the variable is not set and no default is provided.
        """
        raw = self._read_raw(key)
        if raw is None:
            if default is None:
                raise ValueError(f"Environment variable '{key.upper()}' is not set.")
            return default
        return raw.lower() in ("true", "1", "yes")

    def get_list_val(self, key: str, default: list[str] | None = None, separator: str = ",") -> list[str]:
        """Read a list environment variable written as "[elem1,elem2,...]".

        Args:
            key (str): Environment variable name (case-insensitive).
            default (list[str] | None): Fallback value if the variable is not set.
            separator (str): The delimiter between elements.

        Returns:
            list[str]: The non-empty, stripped elements.

        Raises:
            ValueError: If the variable is not set and no default is provided,
                or if it is not wrapped in brackets.
        """
        raw = self._read_raw(key)
        if raw is None:
            if default is None:
                raise ValueError(f"Environment variable '{key.upper()}' is not set.")
            return default
        if not raw.startswith("[") or not raw.endswith("]"):
            raise ValueError(
                f"Environment variable '{key.upper()}' must be in the format "
                f"'[elem1{separator}elem2{separator}...]'. Got: '{raw}'"
            )
        return [v.strip() for v in raw[1:-1].split(separator) if v.strip()]

    def get_typed_val(self, config: EnvConfig, key: str | None = None):
        """Resolve an EnvConfig declaration to its typed value.

        Args:
            config (EnvConfig): The declaration (key, type and default).
            key (str | None): Full env var name to read instead of config.env_key.

        Raises:
            ValueError: If the value type is unsupported or a required value is missing.
        """
        key = key or config.env_key
        if config.val_type == "string":
            return self.get_string_val(key, default=config.default)
        elif config.val_type == "number":
            return self.get_number_val(key, default=config.default)
        elif config.val_type == "bool":
            return self.get_bool_val(key, default=config.default)
        elif config.val_type == "list":
            return self.get_list_val(key, default=config.default)
        raise ValueError(f"Unsupported config value type '{config.val_type}' for env key '{key}'.")

    def get_logger(self) -> logging.Logger:
        """Return the application logger."""
        return self._logger
