"""設定元の解決"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .exceptions import EvaluationOptionsError
from .loader import load_configuration_from_file
from .models import EvaluationOptions, FeatureConfiguration
from .validator import validate_configuration

logger = logging.getLogger(__name__)


def coerce_options(
    options: EvaluationOptions | Mapping[str, Any] | None,
) -> EvaluationOptions | None:
    """マッピングで渡された評価オプションを EvaluationOptions に変換する。"""
    if options is None or isinstance(options, EvaluationOptions):
        return options
    if not isinstance(options, Mapping):
        raise EvaluationOptionsError("Evaluation options must be a mapping")
    try:
        return EvaluationOptions.model_validate(options)
    except ValidationError as e:
        raise EvaluationOptionsError(
            f"Evaluation options validation failed: {e}",
            cause=e,
        ) from e


def resolve_configuration(
    options: EvaluationOptions | Mapping[str, Any] | None = None,
) -> FeatureConfiguration | None:
    """評価オプションから使用する設定を決定する。

    config_source が "programmatic" なら configuration のみを使い、
    ファイルにはフォールバックしない。それ以外ではファイルパスがあれば
    ファイルを優先し、configuration は無視する。
    """
    resolved = coerce_options(options)
    if resolved is None:
        return None

    if resolved.config_source == "programmatic":
        if resolved.configuration is None:
            return None
        return _from_programmatic(resolved.configuration)

    if resolved.config_file_path:
        if resolved.configuration is not None:
            logger.debug("Programmatic configuration ignored in favour of file")
        return load_configuration_from_file(resolved.config_file_path)

    if resolved.configuration is not None:
        return _from_programmatic(resolved.configuration)
    return None


def _from_programmatic(raw: Any) -> FeatureConfiguration:
    configuration = validate_configuration(raw, "programmatic")
    logger.debug("Configuration resolved", extra={"source": "programmatic"})
    return configuration
