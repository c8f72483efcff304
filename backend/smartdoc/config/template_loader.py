"""
模板加载器 - 读取 resources/templates.yaml

职责：
- 解析YAML并提供类型安全访问
- 提供提示词模板（4种文档 × 2种语言）与双语错误提示
- 缓存加载结果（避免重复解析）

使用方式：
    catalog = load_templates()
    template = catalog.get_prompt(DocumentType.RESUME, Language.ENGLISH)
    message = catalog.get_message(ErrorKind.PROVIDER_ERROR, Language.ARABIC)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from ..interfaces import ErrorKind
from ..models import DocumentType, Language

DEFAULT_TEMPLATES_PATH = Path(__file__).resolve().parent.parent / "resources" / "templates.yaml"

# 模板中描述文本的插入位置
DESCRIPTION_MARKER = "{description}"


class TemplateCatalog(BaseModel):
    """模板目录（templates.yaml 的结构化表示）"""
    schema_version: str

    # prompts[语言][文档类型] -> 模板
    prompts: dict[Language, dict[DocumentType, str]] = Field(default_factory=dict)

    # messages[错误类型][语言] -> 提示文案
    messages: dict[ErrorKind, dict[Language, str]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_complete(self) -> TemplateCatalog:
        for lang in Language:
            for doc_type in DocumentType:
                template = self.prompts.get(lang, {}).get(doc_type)
                if not template:
                    raise ValueError(f"缺少提示词模板: {lang.value}/{doc_type.value}")
                if DESCRIPTION_MARKER not in template:
                    raise ValueError(f"模板缺少描述占位符: {lang.value}/{doc_type.value}")
        for kind in ErrorKind:
            for lang in Language:
                if not self.messages.get(kind, {}).get(lang):
                    raise ValueError(f"缺少错误提示: {kind.value}/{lang.value}")
        return self

    # === 便捷访问方法 ===

    def get_prompt(self, doc_type: DocumentType, language: Language) -> str:
        """获取提示词模板"""
        return self.prompts[language][doc_type]

    def get_message(self, kind: ErrorKind, language: Language) -> str:
        """获取错误提示"""
        return self.messages[kind][language]


class TemplateLoader:
    """模板加载器（缓存）"""

    @classmethod
    @lru_cache(maxsize=4)
    def load(cls, templates_path: str | Path = DEFAULT_TEMPLATES_PATH) -> TemplateCatalog:
        """加载并缓存模板"""
        path = Path(templates_path)
        if not path.exists():
            raise FileNotFoundError(f"模板文件不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        return TemplateCatalog(**data)

    @classmethod
    def reload(cls, templates_path: str | Path = DEFAULT_TEMPLATES_PATH) -> TemplateCatalog:
        """强制重新加载（清除缓存）"""
        cls.load.cache_clear()
        return cls.load(templates_path)


# 便捷函数
def load_templates(templates_path: str | Path = DEFAULT_TEMPLATES_PATH) -> TemplateCatalog:
    """加载模板目录"""
    return TemplateLoader.load(templates_path)
