"""
运行期配置 - 读取 config/runtime.yaml

职责：
- 加载Gemini/页面几何/导出/日志等运行参数
- 提供环境变量覆盖机制（前缀 SMARTDOC_，嵌套分隔符 __）
- 类型安全的配置访问
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from ..models import Language

# 兼容的凭据环境变量（按顺序查找）
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")


class GeminiConfig(BaseModel):
    """Gemini配置"""

    api_key: str | None = None
    model: str = "gemini-2.5-flash"

    def resolve_api_key(self) -> str | None:
        """配置值优先，其次环境变量"""
        if self.api_key:
            return self.api_key
        for name in API_KEY_ENV_VARS:
            value = os.getenv(name)
            if value:
                return value
        return None


class PageConfig(BaseModel):
    """PDF页面几何（写入器长度单位：mm）"""

    width: float = 210.0
    height: float = 295.0
    trailing_blank_page: bool = False


class ExportConfig(BaseModel):
    """导出配置"""

    output_dir: Path = Path(".")
    filename: str = "AI_Smart_Document.pdf"

    @property
    def default_path(self) -> Path:
        return self.output_dir / self.filename


class AppConfig(BaseModel):
    """应用配置"""

    default_language: Language = Language.ARABIC


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: Path = Path("logs/smartdoc.log")


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    page: PageConfig = Field(default_factory=PageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "SMARTDOC_",
        "env_nested_delimiter": "__",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # 环境变量优先于YAML（YAML值以初始化参数传入）
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 以字典传入，按字段与环境变量逐项合并
        config = cls(
            gemini=cls._extract(runtime_opts, "gemini"),
            page=cls._extract(runtime_opts, "page"),
            export=cls._extract(runtime_opts, "export"),
            app=cls._extract(runtime_opts, "app"),
            logging=cls._extract(runtime_opts, "logging"),
        )

        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """解析相对路径配置为绝对路径（基于配置文件所在目录）"""
        if not self.export.output_dir.is_absolute():
            self.export.output_dir = (base_dir / self.export.output_dir).resolve()
        if not self.logging.log_file.is_absolute():
            self.logging.log_file = (base_dir / self.logging.log_file).resolve()


# 全局配置实例
_config: RuntimeConfig | None = None

DEFAULT_CONFIG_PATH = Path("config/runtime.yaml")


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        load_dotenv()
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    load_dotenv(override=True)
    _config = RuntimeConfig.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
    return _config
