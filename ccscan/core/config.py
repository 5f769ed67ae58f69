from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ccscan.core.errors import ConfigError


REPORT_FORMATS = ("text", "json")

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "source": {
        "filename": "unsaved.c",
        "clang_args": [],
        "libclang": None,
    },
    "analysis": {
        "definitions_only": False,
        "main_file_only": False,
        "fail_on_errors": False,
    },
    "report": {
        "path": "output.cy",
        "format": "text",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class Config:
    data: Dict[str, Any]

    @classmethod
    def load(cls, path: str | None) -> "Config":
        if not path:
            return cls(DEFAULT_CONFIG)
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        raw = config_path.read_text(encoding="utf-8")
        try:
            if config_path.suffix.lower() in {".json"}:
                overrides = json.loads(raw)
            else:
                overrides = yaml.safe_load(raw) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError("Malformed config file", {"path": str(path)}) from exc
        if not isinstance(overrides, dict):
            raise ConfigError("Config file must contain a mapping", {"path": str(path)})
        return cls(_deep_merge(DEFAULT_CONFIG, overrides)).validated()

    def with_overrides(self, overrides: Dict[str, Any]) -> "Config":
        return Config(_deep_merge(self.data, overrides)).validated()

    def validated(self) -> "Config":
        fmt = self.report_format()
        if fmt not in REPORT_FORMATS:
            raise ConfigError("Unknown report format", {"format": str(fmt)})
        return self

    def source_filename(self) -> str:
        return self.data.get("source", {}).get("filename", "unsaved.c")

    def clang_args(self) -> List[str]:
        return list(self.data.get("source", {}).get("clang_args", []))

    def libclang_path(self) -> Optional[str]:
        return self.data.get("source", {}).get("libclang")

    def definitions_only(self) -> bool:
        return bool(self.data.get("analysis", {}).get("definitions_only", False))

    def main_file_only(self) -> bool:
        return bool(self.data.get("analysis", {}).get("main_file_only", False))

    def fail_on_errors(self) -> bool:
        return bool(self.data.get("analysis", {}).get("fail_on_errors", False))

    def report_path(self) -> str:
        return self.data.get("report", {}).get("path", "output.cy")

    def report_format(self) -> str:
        return self.data.get("report", {}).get("format", "text")
