"""featurerules データモデル"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ConfigSource = Literal["file", "programmatic"]


class UserContext(BaseModel):
    """フィーチャー評価対象のユーザーコンテキスト。"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: str = Field(alias="userId")
    region: str
    plan: str


class FeatureConfiguration(BaseModel):
    """許可リスト設定。未指定のリストは None。"""

    model_config = ConfigDict(frozen=True)

    userids: tuple[str, ...] | None = None
    regions: tuple[str, ...] | None = None
    plans: tuple[str, ...] | None = None


class EvaluationOptions(BaseModel):
    """評価オプション。

    config_source が "programmatic" でない限り、config_file_path が
    configuration より優先される。
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    config_file_path: str | Path | None = Field(default=None, alias="configFilePath")
    configuration: Any = None
    config_source: ConfigSource | None = Field(default=None, alias="configSource")

    @field_validator("config_file_path", mode="before")
    @classmethod
    def normalize_empty_path(cls, value: Any) -> Any:
        # Path("") は Path(".") になるため、空文字列と同じく未指定として扱う
        if isinstance(value, PurePath) and str(value) == ".":
            return None
        return value


@dataclass(frozen=True)
class FeatureRule:
    """フィーチャー ID と判定関数の組。"""

    feature_id: str
    predicate: Callable[[UserContext], bool]

    def matches(self, context: UserContext) -> bool:
        return bool(self.predicate(context))


@dataclass
class FeatureEvaluationResult:
    """フィーチャー評価結果。"""

    enabled_features: list[str] = field(default_factory=list)

    def is_enabled(self, feature_id: str) -> bool:
        return feature_id in self.enabled_features
