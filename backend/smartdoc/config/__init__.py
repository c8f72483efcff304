"""
配置层 - 运行期配置、提示词模板与日志

职责：
- 加载 config/runtime.yaml（运行期参数，支持环境变量覆盖）
- 加载 resources/templates.yaml（提示词模板与双语错误提示）
- 提供类型安全的配置访问接口
"""

from .logging_setup import setup_logging
from .runtime_config import RuntimeConfig, get_config, reload_config
from .template_loader import TemplateCatalog, TemplateLoader, load_templates

__all__ = [
    "TemplateLoader",
    "TemplateCatalog",
    "load_templates",
    "RuntimeConfig",
    "get_config",
    "reload_config",
    "setup_logging",
]
