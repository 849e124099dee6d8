"""フィーチャー評価のエントリポイント"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .models import EvaluationOptions, FeatureEvaluationResult
from .resolver import resolve_configuration
from .rules import build_rules
from .validator import validate_user_context

logger = logging.getLogger(__name__)


def evaluate_features(
    context: Any,
    options: EvaluationOptions | Mapping[str, Any] | None = None,
) -> FeatureEvaluationResult:
    """ユーザーコンテキストに対して有効なフィーチャーを評価する。

    コンテキスト検証 → 設定解決 → ルール構築 → ルール評価の順に実行する。
    各段階の例外はそのまま呼び出し元へ伝播する。

    Args:
        context: userId / region / plan を持つマッピング
        options: 設定ファイルパス・プログラム設定・設定元の指定

    Returns:
        ルール定義順の有効フィーチャー ID を持つ FeatureEvaluationResult

    Example:
        >>> result = evaluate_features({"userId": "u1", "region": "us", "plan": "basic"})
        >>> result.enabled_features
        ['basic-dashboard', 'email-support', 'region-specific-feature']
    """
    user_context = validate_user_context(context)
    configuration = resolve_configuration(options)
    rules = build_rules(configuration)

    enabled_features = [rule.feature_id for rule in rules if rule.matches(user_context)]
    logger.debug(
        "Features evaluated",
        extra={
            "user_id": user_context.user_id,
            "rule_count": len(rules),
            "enabled_features": enabled_features,
        },
    )
    return FeatureEvaluationResult(enabled_features=enabled_features)


def is_feature_enabled(
    feature_id: str,
    context: Any,
    options: EvaluationOptions | Mapping[str, Any] | None = None,
) -> bool:
    """指定フィーチャーが有効かどうかを返す。"""
    return evaluate_features(context, options).is_enabled(feature_id)
