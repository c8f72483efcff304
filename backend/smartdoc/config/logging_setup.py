"""
日志初始化 - 按 LoggingConfig 配置根日志器

各模块统一使用 logging.getLogger(__name__)，此处只负责级别与输出目标。
"""

from __future__ import annotations

import logging

from .runtime_config import RuntimeConfig, get_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(config: RuntimeConfig | None = None) -> None:
    """配置日志（控制台 + 可选文件）"""
    config = config or get_config()
    log_cfg = config.logging

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_cfg.log_to_file:
        log_cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_cfg.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=log_cfg.log_level.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
