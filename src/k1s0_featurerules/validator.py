"""ユーザーコンテキストと設定の検証"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .exceptions import (
    ConfigurationFieldError,
    ConfigurationShapeError,
    ContextFieldError,
    ContextShapeError,
)
from .models import ConfigSource, FeatureConfiguration, UserContext

logger = logging.getLogger(__name__)

CONFIGURATION_FIELDS: tuple[str, ...] = ("userids", "regions", "plans")

# (エラーメッセージ上の名前, 受け付けるキー)
_CONTEXT_FIELDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("userId", ("userId", "user_id")),
    ("region", ("region",)),
    ("plan", ("plan",)),
)


def _is_non_blank_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _lookup(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def validate_user_context(context: Any) -> UserContext:
    """ユーザーコンテキストを検証して UserContext を返す。

    最初に見つかった違反を例外として送出する。値はトリムせずそのまま保持する。

    Raises:
        ContextShapeError: context がオブジェクトでない場合
        ContextFieldError: userId / region / plan が欠落・非文字列・空の場合
    """
    if isinstance(context, UserContext):
        context = context.model_dump(by_alias=True)
    if not isinstance(context, Mapping):
        raise ContextShapeError()

    values: dict[str, str] = {}
    for name, keys in _CONTEXT_FIELDS:
        value = _lookup(context, keys)
        if not _is_non_blank_string(value):
            raise ContextFieldError(name)
        values[name] = value
    return UserContext.model_validate(values)


def _validate_string_list(value: Any, field: str, source: ConfigSource) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise ConfigurationFieldError(field, source, "must be an array of strings")
    entries: list[str] = []
    for entry in value:
        if not isinstance(entry, str):
            raise ConfigurationFieldError(field, source, "must contain only strings")
        trimmed = entry.strip()
        if not trimmed:
            raise ConfigurationFieldError(field, source, "must not contain empty strings")
        entries.append(trimmed)
    return tuple(entries)


def validate_configuration(raw: Any, source: ConfigSource) -> FeatureConfiguration:
    """ファイルまたはプログラムから渡された設定を検証する。

    userids / regions / plans の順に検査し、最初の違反で失敗する。
    検証済みのエントリはトリムして保持する。

    Args:
        raw: YAML の解析結果、または呼び出し側が渡したマッピング
        source: エラーメッセージに含める設定元 ("file" or "programmatic")
    """
    if isinstance(raw, FeatureConfiguration):
        raw = raw.model_dump(exclude_none=True)
    if not isinstance(raw, Mapping):
        raise ConfigurationShapeError(source)

    unknown = sorted(str(key) for key in raw if key not in CONFIGURATION_FIELDS)
    if unknown:
        logger.debug(
            "Ignoring unknown configuration keys",
            extra={"source": source, "keys": unknown},
        )

    values: dict[str, tuple[str, ...]] = {}
    for field in CONFIGURATION_FIELDS:
        value = raw.get(field)
        if value is None:
            continue
        values[field] = _validate_string_list(value, field, source)
    return FeatureConfiguration(**values)
