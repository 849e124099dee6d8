"""FeatureRulesClient のユニットテスト"""

import asyncio
from pathlib import Path

import pytest
from k1s0_featurerules import (
    ConfigurationFileNotFoundError,
    ContextShapeError,
    EvaluationOptions,
    EvaluationOptionsError,
    FeatureIds,
    FeatureRulesClient,
    evaluate_features,
)

CONTEXT = {"userId": "u1", "region": "eu", "plan": "pro"}


async def test_evaluate_matches_sync_evaluation() -> None:
    """同期評価と同じ結果を返すこと。"""
    client = FeatureRulesClient()
    result = await client.evaluate(CONTEXT)
    assert result == evaluate_features(CONTEXT)


async def test_evaluate_with_file_options(tmp_path: Path) -> None:
    """既定オプションのファイル設定を使うこと。"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("userids:\n  - u1\n", encoding="utf-8")
    client = FeatureRulesClient(EvaluationOptions(config_file_path=config_file))
    assert await client.is_enabled(FeatureIds.USER_TARGETED, CONTEXT) is True


async def test_evaluate_reads_file_on_each_call(tmp_path: Path) -> None:
    """設定ファイルを呼び出しごとに読み直すこと。"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("regions:\n  - eu\n", encoding="utf-8")
    client = FeatureRulesClient({"configFilePath": str(config_file)})
    assert await client.is_enabled(FeatureIds.REGION_TARGETED, CONTEXT) is True
    config_file.write_text("regions:\n  - us\n", encoding="utf-8")
    assert await client.is_enabled(FeatureIds.REGION_TARGETED, CONTEXT) is False


async def test_is_enabled_false() -> None:
    """無効なフィーチャーは False。"""
    client = FeatureRulesClient()
    assert await client.is_enabled(FeatureIds.PLAN_TARGETED, CONTEXT) is False


async def test_evaluate_propagates_errors(tmp_path: Path) -> None:
    """評価エラーはそのまま伝播すること。"""
    client = FeatureRulesClient({"configFilePath": str(tmp_path / "missing.yaml")})
    with pytest.raises(ContextShapeError):
        await client.evaluate(None)
    with pytest.raises(ConfigurationFileNotFoundError):
        await client.evaluate(CONTEXT)


def test_client_coerces_options() -> None:
    """マッピングのオプションは EvaluationOptions に変換される。"""
    client = FeatureRulesClient({"configSource": "programmatic"})
    assert client.options == EvaluationOptions(config_source="programmatic")
    assert FeatureRulesClient().options is None


def test_client_rejects_invalid_options() -> None:
    """不正なオプションは生成時に失敗する。"""
    with pytest.raises(EvaluationOptionsError):
        FeatureRulesClient({"configSource": "remote"})


async def test_concurrent_evaluations_do_not_share_state(tmp_path: Path) -> None:
    """並行評価の結果がそれぞれ同期評価と一致すること。"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("userids:\n  - file-user\nregions:\n  - apac\n", encoding="utf-8")
    cases: list[tuple[dict[str, str], EvaluationOptions | None]] = [
        ({"userId": "u1", "region": "us", "plan": "pro"}, None),
        ({"userId": "u2", "region": "apac", "plan": "basic"}, None),
        (
            {"userId": "file-user", "region": "apac", "plan": "pro"},
            EvaluationOptions(config_file_path=config_file),
        ),
        (
            {"userId": "u3", "region": "eu", "plan": "enterprise"},
            EvaluationOptions(configuration={"plans": ["enterprise"]}),
        ),
        (
            {"userId": "file-user", "region": "apac", "plan": "basic"},
            EvaluationOptions(
                config_file_path=config_file,
                configuration={"regions": ["eu"]},
                config_source="programmatic",
            ),
        ),
    ]
    clients = [FeatureRulesClient(options) for _, options in cases]

    results = await asyncio.gather(
        *(
            client.evaluate(context)
            for _ in range(10)
            for client, (context, _options) in zip(clients, cases, strict=True)
        )
    )

    expected = [evaluate_features(context, options) for context, options in cases]
    assert results == expected * 10
    assert FeatureIds.USER_TARGETED in expected[2].enabled_features
    assert FeatureIds.PLAN_TARGETED in expected[3].enabled_features
    assert FeatureIds.REGION_TARGETED not in expected[4].enabled_features
