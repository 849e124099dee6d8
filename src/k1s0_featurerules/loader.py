"""設定ファイル読み込み"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .exceptions import (
    ConfigurationFileNotFoundError,
    ConfigurationFormatError,
    ConfigurationPathError,
    ConfigurationReadError,
)
from .models import FeatureConfiguration
from .validator import validate_configuration

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> Any:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationReadError(str(path), cause=e) from e
    except UnicodeDecodeError as e:
        raise ConfigurationFormatError(str(e), cause=e) from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationFormatError(str(e), cause=e) from e


def load_configuration_from_file(path: str | os.PathLike[str]) -> FeatureConfiguration:
    """YAML 設定ファイルを読み込んで FeatureConfiguration を返す。

    Raises:
        ConfigurationPathError: path が空の場合
        ConfigurationFileNotFoundError: path にファイルが存在しない場合
        ConfigurationFormatError: YAML として解析できない場合
        ConfigurationShapeError / ConfigurationFieldError: 内容が不正な場合
    """
    if path is None or not os.fspath(path).strip():
        raise ConfigurationPathError()
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationFileNotFoundError(os.fspath(path))

    configuration = validate_configuration(_read_yaml(config_path), "file")
    logger.debug("Configuration loaded", extra={"path": str(config_path)})
    return configuration
