"""
结果模型 - 面向调用方的生成/导出结果

内核以异常表达失败，服务入口将异常收敛为结果值：
- 成功：携带文档记录 / 输出路径
- 失败：携带内部错误类型（用于日志）与按语言选择的提示文案
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from ..interfaces import ErrorKind, SmartDocError
from .document import DocumentRecord, DocumentType, Language


class OutcomeStatus(str, Enum):
    """结果状态"""
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ErrorInfo(BaseModel):
    """错误信息"""
    kind: ErrorKind
    message: str                 # 面向用户（已按语言选择）
    detail: str | None = None    # 内部细节

    @classmethod
    def from_exception(cls, exc: SmartDocError) -> ErrorInfo:
        return cls(kind=exc.kind, message=exc.user_message, detail=exc.detail)


class GenerationResult(BaseModel):
    """生成结果"""
    document_type: DocumentType
    language: Language
    status: OutcomeStatus
    document: DocumentRecord | None = None
    error: ErrorInfo | None = None
    finished_at: datetime = Field(default_factory=datetime.now)

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCEEDED

    @classmethod
    def success(
        cls,
        document: DocumentRecord,
        language: Language,
    ) -> GenerationResult:
        return cls(
            document_type=document.doc_type,
            language=language,
            status=OutcomeStatus.SUCCEEDED,
            document=document,
        )

    @classmethod
    def failure(
        cls,
        document_type: DocumentType,
        language: Language,
        exc: SmartDocError,
    ) -> GenerationResult:
        return cls(
            document_type=document_type,
            language=language,
            status=OutcomeStatus.FAILED,
            error=ErrorInfo.from_exception(exc),
        )


class ExportResult(BaseModel):
    """导出结果"""
    status: OutcomeStatus
    output_path: Path | None = None
    page_count: int = 0
    error: ErrorInfo | None = None

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCEEDED

    @classmethod
    def success(cls, output_path: Path, page_count: int) -> ExportResult:
        return cls(status=OutcomeStatus.SUCCEEDED, output_path=output_path, page_count=page_count)

    @classmethod
    def failure(cls, exc: SmartDocError) -> ExportResult:
        return cls(status=OutcomeStatus.FAILED, error=ErrorInfo.from_exception(exc))
