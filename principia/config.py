"""
Configuration models and loader.

Pydantic models describe every tunable; ``load_config`` merges defaults, an
optional YAML/JSON file, ``PRINCIPIA_*`` environment variables and explicit
overrides, in that order of precedence (later wins).

Environment variables map to ``<section>_<field>``, for example
``PRINCIPIA_CACHE_MAX_ENTRIES=500`` or ``PRINCIPIA_SERVER_PORT=8080``. List fields
accept ``gear,lever`` or a JSON array; other values are never split on commas.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, get_origin

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

DEFAULT_WARM_UP_TERMS = [
    "bridge", "engine", "motor", "gear", "lever", "pulley", "circuit", "transistor",
    "beam", "column", "foundation", "steel", "concrete", "aluminum",
]


class CacheConfig(BaseModel):
    """Result cache configuration"""
    page_ttl_seconds: float = Field(3600, gt=0, description="Page text TTL")
    principle_ttl_seconds: float = Field(7200, gt=0, description="Principle set TTL")
    subtree_ttl_seconds: float = Field(7200, gt=0, description="Analysis subtree TTL")
    max_entries: int = Field(1000, ge=1, description="Max entries per store")
    sweep_interval_seconds: float = Field(300, gt=0, description="Expired-entry sweep interval")


class EngineConfig(BaseModel):
    """Recursive analysis configuration"""
    default_max_depth: int = Field(3, ge=0, description="Depth used when a request omits it")
    default_max_results: int = Field(10, ge=0, description="Children per node when omitted")
    merged_principle_limit: int = Field(8, ge=1, description="Principles kept per node")
    decomposition_depth: int = Field(2, ge=1, description="Levels requested from the decomposer")
    batch_max_results: int = Field(5, ge=0, description="Children per node in batch runs")
    warm_up_terms: list[str] = Field(
        default_factory=lambda: list(DEFAULT_WARM_UP_TERMS),
        description="Pages prefetched at startup",
    )


class ProviderConfig(BaseModel):
    """Wikipedia provider configuration"""
    api_url: str = Field("https://en.wikipedia.org/w/api.php", description="MediaWiki action API")
    page_url: str = Field("https://en.wikipedia.org/wiki/", description="Article URL prefix")
    user_agent: str = Field("PrincipiaBackend/1.0 (Educational Purpose)", description="HTTP User-Agent")
    timeout_seconds: float = Field(30, gt=0, description="Request timeout")


class ServerConfig(BaseModel):
    """HTTP server configuration"""
    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(3001, ge=1, le=65535, description="Bind port")
    log_level: str = Field("INFO", description="Root log level")
    json_logs: bool = Field(False, description="Render logs as JSON")
    suggest_limit: int = Field(8, ge=1, description="Default suggestion count")
    warm_up: bool = Field(True, description="Prefetch warm-up terms on startup")


class PrincipiaConfig(BaseModel):
    """Complete configuration"""
    cache: CacheConfig = Field(default_factory=CacheConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


_SECTIONS = tuple(PrincipiaConfig.model_fields)


def _is_list_field(section: str, field: str) -> bool:
    model = PrincipiaConfig.model_fields[section].annotation
    info = model.model_fields.get(field)
    return info is not None and get_origin(info.annotation) is list


def _parse_env_value(value: str, as_list: bool = False) -> Any:
    """Coerce an env string. List fields take a JSON array or comma-separated items."""
    if as_list:
        if value.strip().startswith("["):
            try:
                return json.loads(value)
            except ValueError:
                pass
        return [v.strip() for v in value.split(",") if v.strip()]
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        parsed = json.loads(value)
    except ValueError:
        return value
    # only scalars; a quoted or structured value stays the raw string
    return parsed if isinstance(parsed, (int, float)) else value


def load_from_env(prefix: str = "PRINCIPIA", environ: dict[str, str] | None = None) -> dict[str, Any]:
    env = os.environ if environ is None else environ
    config: dict[str, Any] = {}
    for key, value in env.items():
        if not key.startswith(prefix + "_"):
            continue
        section, _, field = key[len(prefix) + 1:].lower().partition("_")
        if section not in _SECTIONS or not field:
            continue
        config.setdefault(section, {})[field] = _parse_env_value(
            value, as_list=_is_list_field(section, field)
        )
    return config


def load_from_file(path: str | Path) -> dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        elif path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            raise ConfigError(f"Unsupported config format: {path.suffix}")
    except (yaml.YAMLError, json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}", e) from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: str | Path | None = None,
    env_prefix: str = "PRINCIPIA",
    overrides: dict[str, Any] | None = None,
    environ: dict[str, str] | None = None,
) -> PrincipiaConfig:
    data: dict[str, Any] = {}
    if path is not None:
        data = load_from_file(path)
    data = _deep_merge(data, load_from_env(env_prefix, environ))
    if overrides:
        data = _deep_merge(data, overrides)
    try:
        return PrincipiaConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", e) from e
