"""
模块接口契约 - 定义各模块的抽象接口与异常体系

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换（内容生成方/光栅化器/PDF写入器）

使用方式：
    from smartdoc.interfaces import IContentProvider

    class MyProvider(IContentProvider):
        async def generate_content(self, prompt: str, schema: FieldSchema) -> str:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from .models import (
        DocumentRecord,
        FieldSchema,
        GenerationRequest,
        Language,
        PagePlan,
        RenderSurface,
    )


# ============================================================================
# 文档生成模块接口
# ============================================================================

class IContentProvider(ABC):
    """生成式内容提供方接口 - 按结构约束返回可解析文本"""

    @property
    def is_configured(self) -> bool:
        """是否已配置凭据（未配置时不得发起网络调用）"""
        return True

    @abstractmethod
    async def generate_content(self, prompt: str, schema: FieldSchema) -> str:
        """
        发送提示词与结构约束，返回结构化文本

        Args:
            prompt: 完整提示词
            schema: 输出结构约束

        Returns:
            提供方返回的原始文本（期望为JSON）
        """
        ...


class IDocumentGenerator(ABC):
    """文档生成器接口"""

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> DocumentRecord:
        """
        生成单个文档记录

        Args:
            request: 生成请求（文档类型+描述+语言）

        Returns:
            与请求文档类型一致的文档记录

        Raises:
            ProviderUnavailable: 未配置凭据
            ProviderError: 提供方调用失败
            MalformedResponse: 返回内容无法解析
            SchemaMismatch: 返回内容结构与文档类型不符
        """
        ...


# ============================================================================
# PDF导出模块接口
# ============================================================================

class ISurfaceRasterizer(ABC):
    """光栅化器接口 - 将预览区域渲染为像素图"""

    @abstractmethod
    async def rasterize(self, region: Any) -> RenderSurface:
        """
        渲染预览区域

        Args:
            region: 可渲染区域（由具体实现定义）

        Returns:
            渲染后的像素图
        """
        ...


class IPDFWriter(ABC):
    """PDF写入器接口"""

    @abstractmethod
    def write(self, surface: RenderSurface, plan: PagePlan, output_path: Path) -> Path:
        """
        按分页方案将像素图写入多页PDF

        Args:
            surface: 像素图
            plan: 分页方案
            output_path: 输出PDF路径

        Returns:
            生成的PDF路径
        """
        ...


class IPDFExporter(ABC):
    """PDF导出器接口"""

    @abstractmethod
    def export_surface(
        self,
        surface: RenderSurface,
        output_path: Path,
        language: Language,
    ) -> PagePlan:
        """导出像素图为PDF，返回使用的分页方案"""
        ...

    @abstractmethod
    def count_pdf_pages(self, pdf_path: Path) -> int:
        """计算PDF页数"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class ErrorKind(str, Enum):
    """内部错误类型（用于日志，区别于面向用户的提示）"""
    VALIDATION = "validation"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_ERROR = "provider_error"
    MALFORMED_RESPONSE = "malformed_response"
    SCHEMA_MISMATCH = "schema_mismatch"
    EXPORT_FAILURE = "export_failure"


class SmartDocError(Exception):
    """基础异常"""

    kind: ClassVar[ErrorKind]

    def __init__(self, user_message: str, detail: str | None = None):
        super().__init__(user_message)
        self.user_message = user_message
        self.detail = detail


class ValidationError(SmartDocError):
    """输入校验错误（描述为空）"""
    kind = ErrorKind.VALIDATION


class GenerationError(SmartDocError):
    """生成错误"""
    pass


class ProviderUnavailable(GenerationError):
    """提供方未配置（无凭据）"""
    kind = ErrorKind.PROVIDER_UNAVAILABLE


class ProviderError(GenerationError):
    """提供方调用失败（网络/服务端）"""
    kind = ErrorKind.PROVIDER_ERROR


class MalformedResponse(GenerationError):
    """返回内容无法解析为结构化数据"""
    kind = ErrorKind.MALFORMED_RESPONSE


class SchemaMismatch(GenerationError):
    """返回内容可解析但结构不符"""
    kind = ErrorKind.SCHEMA_MISMATCH


class ExportError(SmartDocError):
    """导出错误"""
    pass


class ExportFailure(ExportError):
    """光栅化或PDF写入失败"""
    kind = ErrorKind.EXPORT_FAILURE
