"""Loading locale descriptors from YAML and JSON files.

A locale file mirrors ``LocaleDescriptor.to_dict()``. A ``base`` key names a
registered locale to inherit from; only the keys present in the file
override it:

    id: de-ch
    base: de-de
    name: Deutsch (Schweiz)
    number:
      symbols: {decimal: ".", group: "'"}
      currency_symbol: CHF

Numeric patterns accept the camelCase keys (``minInt``, ``gSize``, ...)
used by externally generated locale data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from localefmt.errors import LocaleFormatError, LocaleLoadError
from localefmt.locales import LocaleDescriptor, get_locale, register_locale

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


def _merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def locale_from_dict(data: Mapping[str, Any], source: str = "<dict>") -> LocaleDescriptor:
    """Build a locale descriptor from a mapping.

    Args:
        data: Locale data, optionally with a ``base`` locale tag
        source: Name used in error messages

    Raises:
        LocaleLoadError: If the data is incomplete or inconsistent
    """
    if not isinstance(data, Mapping):
        raise LocaleLoadError(source, "expected a mapping at the top level")
    if "id" not in data:
        raise LocaleLoadError(source, "missing 'id'")
    for section in ("number", "datetime"):
        if section in data and not isinstance(data[section], Mapping):
            raise LocaleLoadError(source, f"'{section}' must be a mapping")

    data = dict(data)
    base_tag = data.pop("base", None)
    try:
        if base_tag is not None:
            base = get_locale(base_tag, strict=True)
            data = _merge(base.to_dict(), data)
        return LocaleDescriptor.from_dict(data)
    except (LocaleFormatError, AttributeError, TypeError, ValueError) as e:
        raise LocaleLoadError(source, str(e)) from e


def load_locale_file(path: str | Path) -> LocaleDescriptor:
    """Load a locale descriptor from a YAML or JSON file."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise LocaleLoadError(str(path), f"unsupported file format: {suffix or '(none)'}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LocaleLoadError(str(path), str(e)) from e

    try:
        if suffix == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise LocaleLoadError(str(path), str(e)) from e

    descriptor = locale_from_dict(data, source=str(path))
    logger.debug("Loaded locale %s from %s", descriptor.id, path)
    return descriptor


def register_locale_file(path: str | Path) -> LocaleDescriptor:
    """Load a locale file and register it."""
    descriptor = load_locale_file(path)
    register_locale(descriptor)
    return descriptor


def save_locale_file(descriptor: LocaleDescriptor, path: str | Path) -> Path:
    """Write a locale descriptor as YAML or JSON, chosen by suffix."""
    path = Path(path)
    data = descriptor.to_dict()
    if path.suffix.lower() == ".json":
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    else:
        path.write_text(
            yaml.safe_dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False),
            encoding="utf-8",
        )
    return path
