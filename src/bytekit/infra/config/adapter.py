from __future__ import annotations

from pathlib import Path
from typing import Any

from bytekit.schemas import CipherConfig, CodecConfig

_HEX_GROUPS = (1, 2, 4, 8)
_CIPHER_MODES = ("ecb", "cbc")


def _flag(table: dict[str, Any], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


class ConfigAdapter:
    """Typed accessor over a loaded settings mapping.

    The mapping may contain ``general``, ``codec`` and ``cipher`` tables.
    Missing tables or keys fall back to the dataclass defaults.

    Args:
        config (dict[str, Any]): Loaded configuration mapping.

    Attributes:
        _config (dict[str, Any]): Internal stored configuration mapping.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self._config: dict[str, Any] = dict(config or {})

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping."""
        return self._config

    def get_codec_config(self) -> CodecConfig:
        """Build a CodecConfig from the ``codec`` table.

        Returns:
            CodecConfig: Resolved codec defaults.

        Raises:
            ValueError: If ``hex_group`` is not 1, 2, 4 or 8, or a flag is
                not a boolean.
        """
        cfg = self._table("codec")
        defaults = CodecConfig()

        hex_group = int(cfg.get("hex_group", defaults.hex_group))
        if hex_group not in _HEX_GROUPS:
            raise ValueError(f"codec.hex_group must be one of {_HEX_GROUPS}")

        return CodecConfig(
            binary_delimited=_flag(cfg, "binary_delimited", defaults.binary_delimited),
            hex_delimited=_flag(cfg, "hex_delimited", defaults.hex_delimited),
            hex_group=hex_group,
            base64_padded=_flag(cfg, "base64_padded", defaults.base64_padded),
        )

    def get_cipher_config(self) -> CipherConfig:
        """Build a CipherConfig from the ``cipher`` table.

        Returns:
            CipherConfig: Resolved cipher defaults.

        Raises:
            ValueError: If ``mode`` is not ``"ecb"`` or ``"cbc"``, or a flag
                is not a boolean.
        """
        cfg = self._table("cipher")
        defaults = CipherConfig()

        mode = str(cfg.get("mode", defaults.mode)).lower()
        if mode not in _CIPHER_MODES:
            raise ValueError(
                f"cipher.mode must be one of {_CIPHER_MODES}, got {mode!r}"
            )

        return CipherConfig(
            mode=mode,  # type: ignore[arg-type]
            always_pad=_flag(cfg, "always_pad", defaults.always_pad),
            remove_padding=_flag(cfg, "remove_padding", defaults.remove_padding),
            allow_zero_iv=_flag(cfg, "allow_zero_iv", defaults.allow_zero_iv),
        )

    def get_log_level(self) -> str:
        """Return the configured logging level, ``"INFO"`` if missing."""
        level = self._table("general").get("log_level") or "INFO"
        return str(level).upper()

    def get_log_dir(self) -> Path | None:
        """Return the directory for log files.

        Returns:
            Path | None: Absolute log directory, or None to log to the
            console only.
        """
        log_dir = self._table("general").get("log_dir")
        if not log_dir:
            return None
        return Path(log_dir).expanduser().resolve()

    def _table(self, name: str) -> dict[str, Any]:
        table = self._config.get(name) or {}
        if not isinstance(table, dict):
            raise ValueError(f"[{name}] must be a table, got {type(table).__name__}")
        return table
