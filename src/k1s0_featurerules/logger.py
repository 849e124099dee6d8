"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

HANDLER_NAME = "k1s0_featurerules"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def _build_handler(format: str, stream: TextIO) -> logging.Handler:
    """stdlib のレコードも structlog のレンダラーで出力するハンドラーを作る。"""
    renderer: structlog.types.Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            # logger.debug(..., extra={...}) のフィールドをイベントに含める
            foreign_pre_chain=[*_SHARED_PROCESSORS, structlog.stdlib.ExtraAdder()],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def new_logger(
    level: str = "INFO",
    format: str = "json",
    stream: TextIO | None = None,
) -> structlog.stdlib.BoundLogger:
    """ルートロガーに structlog 形式のハンドラーを設定し、ロガーを返す。

    featurerules の各モジュールは logging.getLogger(__name__) に extra 付きで
    デバッグイベントを記録するだけで、自身ではロギングを設定しない。
    この関数を呼ぶと、それらのレコードも extra のフィールドを含めて
    JSON またはテキスト形式で出力される。再度呼び出した場合は
    以前に追加したハンドラーを置き換える。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")
        stream: 出力先。省略時は標準出力
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(_build_handler(format, stream or sys.stdout))
    root.setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.get_logger(HANDLER_NAME)
