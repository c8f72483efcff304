"""
PDF导出引擎 - 像素图按分页方案导出多页PDF

职责：
1. 计算分页方案（页面几何来自运行期配置，默认210×295mm）
2. 逐页绘制整图（不同偏移），写出PDF
3. 光栅化/写入失败统一报 ExportFailure（不影响已生成的文档）
4. PDF页数计算

依赖：
- reportlab: PDF写入（canvas绘图）
- Pillow: 像素图（RenderSurface）

测试要点：
- test_export_two_pages: 两页图导出2页PDF
- test_writer_failure: 写入失败报ExportFailure
- test_rasterizer_failure: 光栅化失败报ExportFailure
- test_count_pdf_pages: PDF页数计算
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..config import RuntimeConfig, TemplateCatalog, get_config, load_templates
from ..interfaces import (
    ErrorKind,
    ExportFailure,
    IPDFExporter,
    IPDFWriter,
    ISurfaceRasterizer,
)
from ..models import Language, PagePlan, RenderSurface
from .pagination import plan_pages

logger = logging.getLogger(__name__)


class ReportLabPDFWriter(IPDFWriter):
    """reportlab写入器（长度单位mm，原点换算为左下角）"""

    def write(self, surface: RenderSurface, plan: PagePlan, output_path: Path) -> Path:
        pdf = canvas.Canvas(
            str(output_path),
            pagesize=(plan.page_width * mm, plan.page_height * mm),
        )
        image = None if plan.is_degenerate else ImageReader(surface.image)

        for call in plan.draw_calls():
            if image is not None:
                # 左上角偏移 -> reportlab左下角坐标
                y_bottom = plan.page_height - (call.y + call.height)
                pdf.drawImage(
                    image,
                    call.x * mm,
                    y_bottom * mm,
                    width=call.width * mm,
                    height=call.height * mm,
                    mask="auto",
                )
            pdf.showPage()

        pdf.save()
        return output_path


class PDFExporter(IPDFExporter):
    """PDF导出器实现"""

    def __init__(
        self,
        writer: IPDFWriter | None = None,
        rasterizer: ISurfaceRasterizer | None = None,
        config: RuntimeConfig | None = None,
        catalog: TemplateCatalog | None = None,
    ):
        self.config = config or get_config()
        self.writer = writer or ReportLabPDFWriter()
        self.rasterizer = rasterizer
        self.catalog = catalog or load_templates()

    def plan(self, surface: RenderSurface) -> PagePlan:
        """按配置的页面几何计算分页方案"""
        page = self.config.page
        return plan_pages(
            surface.height,
            surface.width,
            page.width,
            page.height,
            trailing_blank_page=page.trailing_blank_page,
        )

    def export_surface(
        self,
        surface: RenderSurface,
        output_path: Path,
        language: Language,
    ) -> PagePlan:
        """像素图导出PDF"""
        plan = self.plan(surface)
        logger.info(
            f"导出PDF: {surface.width}x{surface.height}px -> {plan.page_count}页 ({output_path})"
        )

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self.writer.write(surface, plan, output_path)
        except Exception as e:
            logger.error(f"PDF写入失败: {e}")
            raise self._failure(language, f"PDF写入失败: {e}") from e

        return plan

    async def export_region(
        self,
        region: Any,
        output_path: Path,
        language: Language,
    ) -> PagePlan:
        """光栅化预览区域后导出PDF"""
        if self.rasterizer is None:
            raise self._failure(language, "未配置光栅化器")

        try:
            surface = await self.rasterizer.rasterize(region)
        except Exception as e:
            logger.error(f"光栅化失败: {e}")
            raise self._failure(language, f"光栅化失败: {e}") from e

        return self.export_surface(surface, output_path, language)

    def count_pdf_pages(self, pdf_path: Path) -> int:
        """计算PDF页数（统计 /Type /Page，排除 /Type /Pages）"""
        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF文件不存在: {pdf_path}")

        data = pdf_path.read_bytes()
        needle = b"/Type /Page"
        count = 0
        i = 0
        while True:
            j = data.find(needle, i)
            if j < 0:
                break
            k = j + len(needle)
            if data[k:k + 1] != b"s":
                count += 1
            i = k
        return count

    def _failure(self, language: Language, detail: str) -> ExportFailure:
        return ExportFailure(
            self.catalog.get_message(ErrorKind.EXPORT_FAILURE, language),
            detail=detail,
        )
