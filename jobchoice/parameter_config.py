"""Data model for a configured job choice parameter."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParameterConfig:
    """Host-supplied settings for one job choice parameter."""

    name: str
    path: str
    description: str | None = None
    default_value: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ParameterConfig":
        """Build a config entry from a parsed YAML mapping."""
        missing = [key for key in ("name", "path") if raw.get(key) is None]
        if missing:
            msg = f"Parameter entry is missing {', '.join(missing)}: {raw!r}"
            raise ValueError(msg)
        return cls(
            name=str(raw["name"]),
            path=str(raw["path"]),
            description=raw.get("description"),
            default_value=raw.get("default_value"),
        )
