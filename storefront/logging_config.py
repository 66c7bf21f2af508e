# storefront/logging_config.py
"""structlog kurulumu (stdlib köprüsü ile).

- configure_logging(): tek seferlik structlog + stdlib ayarı
- get_logger(): component alanı bağlanmış logger döner
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

_CONFIGURED = False


def configure_logging(level: int = logging.INFO) -> None:
    """Birden fazla çağrılabilir; yalnızca ilk çağrı etkilidir."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # uvicorn / fastapi logları da aynı formatta aksın
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(component: str) -> Any:
    """Lazy proxy: modül seviyesinde alınsa bile configure_logging() ayarlarını kullanır."""
    return structlog.get_logger(component=component)


def _select_renderer() -> Any:
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)

    env = os.environ.get("APP_ENV", "local").lower()
    if env in ("staging", "prod", "production"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
