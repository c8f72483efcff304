"""
提示词构建 - 按（文档类型, 语言）选择模板并插入描述

描述原样插入模板占位符，不做转义；空描述由上游拒绝。
"""

from __future__ import annotations

from ..config.template_loader import DESCRIPTION_MARKER, TemplateCatalog, load_templates
from ..models import DocumentType, Language


def build_prompt(
    doc_type: DocumentType,
    description: str,
    language: Language,
    catalog: TemplateCatalog | None = None,
) -> str:
    """构建提示词"""
    catalog = catalog or load_templates()
    template = catalog.get_prompt(doc_type, language)
    head, _, tail = template.partition(DESCRIPTION_MARKER)
    return f"{head}{description}{tail}"
