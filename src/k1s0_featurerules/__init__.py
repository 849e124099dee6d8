"""k1s0 featurerules library."""

from .client import FeatureRulesClient
from .evaluator import evaluate_features, is_feature_enabled
from .exceptions import (
    ConfigurationError,
    ConfigurationFieldError,
    ConfigurationFileNotFoundError,
    ConfigurationFormatError,
    ConfigurationPathError,
    ConfigurationReadError,
    ConfigurationShapeError,
    ContextFieldError,
    ContextShapeError,
    ContextValidationError,
    EvaluationOptionsError,
    FeatureRulesError,
    FeatureRulesErrorCodes,
)
from .loader import load_configuration_from_file
from .logger import new_logger
from .models import (
    ConfigSource,
    EvaluationOptions,
    FeatureConfiguration,
    FeatureEvaluationResult,
    FeatureRule,
    UserContext,
)
from .resolver import resolve_configuration
from .rules import FeatureIds, build_rules
from .validator import validate_configuration, validate_user_context

__all__ = [
    "UserContext",
    "FeatureConfiguration",
    "FeatureRule",
    "FeatureEvaluationResult",
    "EvaluationOptions",
    "ConfigSource",
    "FeatureIds",
    "evaluate_features",
    "is_feature_enabled",
    "load_configuration_from_file",
    "resolve_configuration",
    "build_rules",
    "validate_user_context",
    "validate_configuration",
    "FeatureRulesClient",
    "new_logger",
    "FeatureRulesError",
    "FeatureRulesErrorCodes",
    "ContextValidationError",
    "ContextShapeError",
    "ContextFieldError",
    "ConfigurationError",
    "ConfigurationPathError",
    "ConfigurationFileNotFoundError",
    "ConfigurationReadError",
    "ConfigurationFormatError",
    "ConfigurationShapeError",
    "ConfigurationFieldError",
    "EvaluationOptionsError",
]
