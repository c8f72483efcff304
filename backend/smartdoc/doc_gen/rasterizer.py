"""
光栅化器 - 预览区域 -> RenderSurface

浏览器侧的截图由前端完成；后端/命令行以已渲染的图片文件作为预览区域。
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..interfaces import ISurfaceRasterizer
from ..models import RenderSurface


class ImageFileRasterizer(ISurfaceRasterizer):
    """图片文件光栅化器（区域即图片路径）"""

    async def rasterize(self, region: str | Path) -> RenderSurface:
        path = Path(region)
        if not path.exists():
            raise FileNotFoundError(f"预览图片不存在: {path}")
        return await asyncio.to_thread(RenderSurface.from_file, path)
