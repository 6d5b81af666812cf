# python/micropng/config.py
# Encoder configuration: zlib level, channel value checks, atomic writes
# Accepts a dataclass, a mapping, a JSON file path, or None, plus keyword overrides
# RELEVANT FILES: python/micropng/encoder.py, tests/test_config.py
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from . import _validate
from .errors import ConfigError, ValidationError

ConfigSource = Union["EncoderConfig", Mapping[str, Any], str, Path, None]


def _to_bool(value: Any, label: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    raise ConfigError(f"{label} must be a boolean, got {value!r}")


@dataclass
class EncoderConfig:
    compression_level: int = -1
    check_values: bool = True
    atomic_write: bool = True

    def to_dict(self) -> dict:
        return {
            "compression_level": self.compression_level,
            "check_values": self.check_values,
            "atomic_write": self.atomic_write,
        }

    def copy(self) -> "EncoderConfig":
        return copy.deepcopy(self)

    def validate(self) -> None:
        try:
            _validate.compression_level(self.compression_level)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc
        if not isinstance(self.check_values, bool):
            raise ConfigError("check_values must be a boolean")
        if not isinstance(self.atomic_write, bool):
            raise ConfigError("atomic_write must be a boolean")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["EncoderConfig"] = None) -> "EncoderConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown encoder config keys: {', '.join(map(str, unknown))}")
        if "compression_level" in data:
            value = data["compression_level"]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"compression_level must be an integer, got {value!r}")
            base.compression_level = value
        if "check_values" in data:
            base.check_values = _to_bool(data["check_values"], "check_values")
        if "atomic_write" in data:
            base.atomic_write = _to_bool(data["atomic_write"], "atomic_write")
        return base


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON in encoder config {path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ConfigError(f"encoder config {path} must contain a JSON object")
        return data
    raise ConfigError(f"Unsupported encoder config file format: {path}")


def load_encoder_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> EncoderConfig:
    if isinstance(config, EncoderConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = EncoderConfig.from_mapping(config)
    elif isinstance(config, (str, Path)):
        cfg = EncoderConfig.from_mapping(_load_from_path(Path(config)))
    elif config is None:
        cfg = EncoderConfig()
    else:
        raise TypeError("config must be EncoderConfig, mapping, path, or None")

    if overrides:
        cfg = EncoderConfig.from_mapping(overrides, cfg)
    cfg.validate()
    return cfg


__all__ = ["EncoderConfig", "ConfigSource", "load_encoder_config"]
