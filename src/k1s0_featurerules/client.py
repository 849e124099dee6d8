"""FeatureRulesClient 実装"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from .evaluator import evaluate_features
from .models import EvaluationOptions, FeatureEvaluationResult
from .resolver import coerce_options


class FeatureRulesClient:
    """asyncio 用のフィーチャー評価クライアント。

    既定の評価オプションのみを保持し、ルールと設定は呼び出しごとに構築する。
    """

    def __init__(self, options: EvaluationOptions | Mapping[str, Any] | None = None) -> None:
        self._options = coerce_options(options)

    @property
    def options(self) -> EvaluationOptions | None:
        return self._options

    async def evaluate(self, context: Any) -> FeatureEvaluationResult:
        """ファイル読み込みをワーカースレッドで行い、評価結果を返す。"""
        return await asyncio.to_thread(evaluate_features, context, self._options)

    async def is_enabled(self, feature_id: str, context: Any) -> bool:
        result = await self.evaluate(context)
        return result.is_enabled(feature_id)
