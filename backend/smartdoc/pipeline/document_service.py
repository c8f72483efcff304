"""
文档服务 - 面向调用方的唯一入口

职责：
1. generate_document: 校验描述 -> 生成请求 -> 生成客户端
2. export_to_pdf: 像素图 -> 分页 -> PDF
3. 将内核异常收敛为结果值（用户提示 + 内部错误类型写日志）

服务不保存已生成的文档：结果是否仍需要由调用方判断，
导出失败也不会影响调用方手里的文档。

测试要点：
- test_generate_success: 成功返回文档记录
- test_blank_description: 空描述直接失败，不调用生成方
- test_export_failure_isolated: 导出失败只影响导出
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..config import RuntimeConfig, TemplateCatalog, get_config, load_templates
from ..doc_gen import GenerationClient, ImageFileRasterizer, PDFExporter, build_provider
from ..interfaces import (
    ErrorKind,
    ExportError,
    GenerationError,
    IDocumentGenerator,
    ValidationError,
)
from ..models import (
    DocumentType,
    ExportResult,
    GenerationRequest,
    GenerationResult,
    Language,
    RenderSurface,
)

logger = logging.getLogger(__name__)


class DocumentService:
    """文档服务"""

    def __init__(
        self,
        generator: IDocumentGenerator | None = None,
        exporter: PDFExporter | None = None,
        config: RuntimeConfig | None = None,
        catalog: TemplateCatalog | None = None,
    ):
        self.config = config or get_config()
        self.catalog = catalog or load_templates()
        self.generator = generator or GenerationClient(
            build_provider(self.config), catalog=self.catalog
        )
        self.exporter = exporter or PDFExporter(
            rasterizer=ImageFileRasterizer(), config=self.config, catalog=self.catalog
        )

    async def generate_document(
        self,
        document_type: DocumentType | str,
        description: str,
        language: Language | str | None = None,
    ) -> GenerationResult:
        """生成文档"""
        doc_type = DocumentType(document_type)
        lang = self._language(language)

        try:
            if not description or not description.strip():
                raise ValidationError(
                    self.catalog.get_message(ErrorKind.VALIDATION, lang),
                    detail="blank description",
                )
            request = GenerationRequest(document_type=doc_type, description=description, language=lang)
            document = await self.generator.generate(request)

        except (ValidationError, GenerationError) as e:
            logger.error(f"生成失败 [{e.kind.value}] type={doc_type.value}: {e.detail}")
            return GenerationResult.failure(doc_type, lang, e)

        return GenerationResult.success(document, lang)

    def export_to_pdf(
        self,
        surface: RenderSurface,
        output_path: str | Path | None = None,
        language: Language | str | None = None,
    ) -> ExportResult:
        """像素图导出PDF"""
        path = Path(output_path) if output_path else self.config.export.default_path
        lang = self._language(language)

        try:
            plan = self.exporter.export_surface(surface, path, lang)
        except ExportError as e:
            logger.error(f"导出失败 [{e.kind.value}]: {e.detail}")
            return ExportResult.failure(e)

        return ExportResult.success(path, plan.page_count)

    async def export_region(
        self,
        region: Any,
        output_path: str | Path | None = None,
        language: Language | str | None = None,
    ) -> ExportResult:
        """光栅化预览区域后导出PDF"""
        path = Path(output_path) if output_path else self.config.export.default_path
        lang = self._language(language)

        try:
            plan = await self.exporter.export_region(region, path, lang)
        except ExportError as e:
            logger.error(f"导出失败 [{e.kind.value}]: {e.detail}")
            return ExportResult.failure(e)

        return ExportResult.success(path, plan.page_count)

    def _language(self, language: Language | str | None) -> Language:
        if language is None:
            return self.config.app.default_language
        return Language(language)
