"""
文档生成模块 - 结构约束/提示词/生成/分页/PDF导出

子模块：
- schema_registry: 每种文档类型的结构约束
- prompt_builder: 提示词构建
- gemini_provider: Gemini内容提供方
- generation_client: 生成客户端（解析+校验+错误归类）
- pagination: 分页引擎
- pdf_engine: PDF导出引擎
- rasterizer: 预览光栅化
- preview: 文本预览
"""

from .gemini_provider import GeminiProvider, UnconfiguredProvider, build_provider
from .generation_client import GenerationClient
from .pagination import paginate, plan_pages
from .pdf_engine import PDFExporter, ReportLabPDFWriter
from .preview import render_outline
from .prompt_builder import build_prompt
from .rasterizer import ImageFileRasterizer
from .schema_registry import RECORD_TYPES, record_type_for, schema_for

__all__ = [
    "schema_for",
    "record_type_for",
    "RECORD_TYPES",
    "build_prompt",
    "GeminiProvider",
    "UnconfiguredProvider",
    "build_provider",
    "GenerationClient",
    "paginate",
    "plan_pages",
    "PDFExporter",
    "ReportLabPDFWriter",
    "ImageFileRasterizer",
    "render_outline",
]
