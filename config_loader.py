"""Helpers for resolving configuration files and runtime settings."""

import json
import os
from typing import Any, Dict, Optional

DEFAULT_CONFIG_NAME = "config.json"
CONFIG_ENV_VAR = "ARTICLE_PREP_CONFIG"
CONTENT_ROOT_ENV_VAR = "ARTICLE_PREP_CONTENT_ROOT"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "content_root": os.path.join("content", "articles"),
    "target_lang": "zh",
    "user_agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"
        " (KHTML, like Gecko) Chrome/120 Safari/537.36"
    ),
}


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when no default exists.

    An explicitly requested file (argument or environment) must exist.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    candidate = explicit or DEFAULT_CONFIG_NAME
    expanded = os.path.expanduser(candidate)
    if os.path.isabs(expanded) and os.path.isfile(expanded):
        return expanded

    search_roots = [os.getcwd(), os.path.dirname(os.path.abspath(__file__))]
    for root in search_roots:
        resolved = os.path.abspath(os.path.join(root, expanded))
        if os.path.isfile(resolved):
            return resolved

    if explicit:
        raise ConfigError(f"Configuration file not found: {candidate}")
    return None


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load a JSON config file and normalize any filesystem paths."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a JSON object: {config_path}")

    base_dir = os.path.dirname(config_path)
    resolved: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and key.endswith(("_root", "_dir", "_path")):
            resolved[key] = _resolve_path(value, base_dir)
        else:
            resolved[key] = value

    return resolved


def resolve_runtime_settings(
    *,
    config_path: Optional[str] = None,
    content_root: Optional[str] = None,
    target_lang: Optional[str] = None,
) -> Dict[str, Any]:
    """Combine CLI overrides, environment, config file and defaults."""
    config = load_config(config_path)

    resolved_root = (
        content_root
        or os.environ.get(CONTENT_ROOT_ENV_VAR)
        or config.get("content_root")
        or DEFAULT_SETTINGS["content_root"]
    )
    resolved_lang = (
        target_lang or config.get("target_lang") or DEFAULT_SETTINGS["target_lang"]
    )
    resolved_agent = config.get("user_agent") or DEFAULT_SETTINGS["user_agent"]

    if not str(resolved_lang).strip():
        raise ConfigError("Missing target_lang configuration.")

    return {
        "content_root": (
            resolved_root
            if os.path.isabs(resolved_root)
            else _resolve_path(resolved_root, os.getcwd())
        ),
        "target_lang": str(resolved_lang).strip(),
        "user_agent": str(resolved_agent),
    }
