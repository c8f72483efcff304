"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- DocumentType/Language/GenerationRequest: 生成请求
- Resume/Invoice/Newsletter/Report: 带标签的文档记录
- FieldSchema: 交给生成方的结构约束
- RenderSurface/PagePlacement/PagePlan: PDF分页
- GenerationResult/ExportResult: 面向调用方的结果
"""

from .document import (
    Client,
    DocumentRecord,
    DocumentType,
    Education,
    Experience,
    GenerationRequest,
    Invoice,
    InvoiceItem,
    Language,
    NewsStory,
    Newsletter,
    Report,
    Resume,
    Seller,
)
from .field_schema import FieldSchema, SchemaKind
from .page import DrawCall, PagePlacement, PagePlan, RenderSurface
from .result import ErrorInfo, ExportResult, GenerationResult, OutcomeStatus

__all__ = [
    "DocumentType",
    "Language",
    "GenerationRequest",
    "DocumentRecord",
    "Resume",
    "Experience",
    "Education",
    "Invoice",
    "InvoiceItem",
    "Seller",
    "Client",
    "Newsletter",
    "NewsStory",
    "Report",
    "FieldSchema",
    "SchemaKind",
    "RenderSurface",
    "PagePlacement",
    "PagePlan",
    "DrawCall",
    "GenerationResult",
    "ExportResult",
    "ErrorInfo",
    "OutcomeStatus",
]
