"""
Reader configuration: how G-code files are decoded into text lines.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ReaderConfig:
    """Decoding settings used when opening G-code files."""
    encoding: str = "utf-8"

    # Codec error handler: "replace", "strict", "ignore", ...
    errors: str = "replace"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReaderConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_json(cls, path: str | Path) -> "ReaderConfig":
        """Load configuration from JSON file."""
        path = Path(path)
        if not path.exists():
            return cls()  # Return default

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Export config to dictionary."""
        return {"encoding": self.encoding, "errors": self.errors}
