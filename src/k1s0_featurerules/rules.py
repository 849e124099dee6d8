"""静的ルールの構築"""

from __future__ import annotations

from collections.abc import Iterable

from .models import FeatureConfiguration, FeatureRule, UserContext

PRO_PLAN = "pro"
BASIC_PLAN = "basic"
DASHBOARD_PLANS: frozenset[str] = frozenset({BASIC_PLAN, PRO_PLAN})
DEFAULT_REGIONS: frozenset[str] = frozenset({"us", "eu"})


class FeatureIds:
    """フィーチャー ID 定数。"""

    ADVANCED_ANALYTICS: str = "advanced-analytics"
    PRIORITY_SUPPORT: str = "priority-support"
    API_ACCESS: str = "api-access"
    BASIC_DASHBOARD: str = "basic-dashboard"
    EMAIL_SUPPORT: str = "email-support"
    REGION_SPECIFIC: str = "region-specific-feature"
    USER_TARGETED: str = "user-targeted-feature"
    REGION_TARGETED: str = "region-targeted-feature"
    PLAN_TARGETED: str = "plan-targeted-feature"


def _as_set(values: Iterable[str] | None) -> frozenset[str]:
    return frozenset(values) if values else frozenset()


def build_rules(configuration: FeatureConfiguration | None = None) -> list[FeatureRule]:
    """設定からルール一覧を定義順で構築する。

    設定がない場合は全リストが空の設定と同じ扱いになり、
    ターゲティングルール (user / region / plan) は追加されない。
    """
    user_ids = _as_set(configuration.userids if configuration else None)
    regions = _as_set(configuration.regions if configuration else None)
    plans = _as_set(configuration.plans if configuration else None)

    def plan_allowed(context: UserContext) -> bool:
        return not plans or context.plan in plans

    def pro_plan(context: UserContext) -> bool:
        return context.plan == PRO_PLAN and plan_allowed(context)

    def dashboard_plan(context: UserContext) -> bool:
        return context.plan in DASHBOARD_PLANS and plan_allowed(context)

    def region_specific(context: UserContext) -> bool:
        return context.region in (regions or DEFAULT_REGIONS)

    rules = [
        FeatureRule(FeatureIds.ADVANCED_ANALYTICS, pro_plan),
        FeatureRule(FeatureIds.PRIORITY_SUPPORT, pro_plan),
        FeatureRule(FeatureIds.API_ACCESS, pro_plan),
        FeatureRule(FeatureIds.BASIC_DASHBOARD, dashboard_plan),
        FeatureRule(FeatureIds.EMAIL_SUPPORT, dashboard_plan),
        FeatureRule(FeatureIds.REGION_SPECIFIC, region_specific),
    ]
    if user_ids:
        rules.append(FeatureRule(FeatureIds.USER_TARGETED, lambda c: c.user_id in user_ids))
    if regions:
        rules.append(FeatureRule(FeatureIds.REGION_TARGETED, lambda c: c.region in regions))
    if plans:
        rules.append(FeatureRule(FeatureIds.PLAN_TARGETED, lambda c: c.plan in plans))
    return rules
