"""featurerules ライブラリの例外型定義"""

from __future__ import annotations


class FeatureRulesError(Exception):
    """featurerules ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class FeatureRulesErrorCodes:
    """FeatureRulesError のエラーコード定数。"""

    CONTEXT_SHAPE: str = "CONTEXT_SHAPE_ERROR"
    CONTEXT_FIELD: str = "CONTEXT_FIELD_ERROR"
    CONFIG_PATH: str = "CONFIG_PATH_ERROR"
    CONFIG_FILE_NOT_FOUND: str = "CONFIG_FILE_NOT_FOUND"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    CONFIG_SHAPE: str = "CONFIG_SHAPE_ERROR"
    CONFIG_FIELD: str = "CONFIG_FIELD_ERROR"
    INVALID_OPTIONS: str = "INVALID_OPTIONS_ERROR"


class ContextValidationError(FeatureRulesError):
    """ユーザーコンテキストの検証エラー。"""


class ContextShapeError(ContextValidationError):
    """ユーザーコンテキストがオブジェクトでない。"""

    def __init__(self) -> None:
        super().__init__(
            FeatureRulesErrorCodes.CONTEXT_SHAPE,
            "User context must be an object",
        )


class ContextFieldError(ContextValidationError):
    """必須フィールドの欠落・型不一致・空文字。"""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            FeatureRulesErrorCodes.CONTEXT_FIELD,
            f"User context must have a non-empty {field} (string)",
        )


class ConfigurationError(FeatureRulesError):
    """設定の読み込み・検証エラー。"""


class ConfigurationPathError(ConfigurationError):
    """設定ファイルパスが空。"""

    def __init__(self) -> None:
        super().__init__(
            FeatureRulesErrorCodes.CONFIG_PATH,
            "Configuration file path must be a non-empty string",
        )


class ConfigurationFileNotFoundError(ConfigurationError):
    """設定ファイルが存在しない。"""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            FeatureRulesErrorCodes.CONFIG_FILE_NOT_FOUND,
            f"Configuration file not found at path: {path}",
        )


class ConfigurationReadError(ConfigurationError):
    """設定ファイルの読み込み失敗。"""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        super().__init__(
            FeatureRulesErrorCodes.READ_FILE,
            f"Failed to read configuration file: {path}",
            cause=cause,
        )


class ConfigurationFormatError(ConfigurationError):
    """設定ファイルが YAML として解析できない。"""

    def __init__(self, detail: str, cause: Exception | None = None) -> None:
        super().__init__(
            FeatureRulesErrorCodes.PARSE_YAML,
            f"Invalid configuration file format: {detail}",
            cause=cause,
        )


class ConfigurationShapeError(ConfigurationError):
    """設定がオブジェクトでない。"""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(
            FeatureRulesErrorCodes.CONFIG_SHAPE,
            f"Configuration from {source} must be an object",
        )


class ConfigurationFieldError(ConfigurationError):
    """設定フィールドが文字列配列として不正。"""

    def __init__(self, field: str, source: str, reason: str) -> None:
        self.field = field
        self.source = source
        super().__init__(
            FeatureRulesErrorCodes.CONFIG_FIELD,
            f'Configuration field "{field}" from {source} {reason}',
        )


class EvaluationOptionsError(FeatureRulesError):
    """評価オプションが不正。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(
            FeatureRulesErrorCodes.INVALID_OPTIONS,
            message,
            cause=cause,
        )
