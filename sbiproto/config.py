"""Reading and writing the project configuration file."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .app import App, Config, ConfigError

CONFIG_FILE_NAME = "Xtask.toml"
_SBI_KEY = "standard-sbi-enabled"


def config_path(project: str | os.PathLike) -> Path:
    return Path(project) / CONFIG_FILE_NAME


def config_file_exists(project: str | os.PathLike) -> bool:
    return config_path(project).exists()


def read_config_file(project: str | os.PathLike) -> str:
    return config_path(project).read_text(encoding="utf-8")


def write_config_file(project: str | os.PathLike, text: str) -> None:
    config_path(project).write_text(text, encoding="utf-8")


def _parse(text: str) -> tomlkit.TOMLDocument:
    try:
        return tomlkit.parse(text)
    except TOMLKitError as err:
        raise ConfigError(f"invalid configuration document: {err}") from err


def load_config(text: str) -> Config:
    """Parse the configuration file's text."""
    return Config.from_mapping(_parse(text).unwrap())


def save_app_to_string(app: App, text: str) -> str:
    """Store the app's settings into ``text``, keeping the rest of the document."""
    doc = _parse(text)
    doc["locale"] = app.locale
    doc["bootstrap"] = app.bootstrap.value
    doc["machine-fdt-ident-enabled"] = app.machine_mode_fdt_ident_enabled
    doc["platform"] = app.platform.value

    flags = app.standard_sbi_enabled
    existing = doc.get(_SBI_KEY)
    table = existing if isinstance(existing, Mapping) else tomlkit.table()
    for f in dataclasses.fields(flags):
        table[f.name] = getattr(flags, f.name)
    if table is not existing:
        doc[_SBI_KEY] = table
    return tomlkit.dumps(doc)