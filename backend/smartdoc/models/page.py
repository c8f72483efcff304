"""
分页模型 - 像素图、页面落点与分页方案

单位：写入器的长度单位（默认mm），原点在页面左上角，y向下为正。
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field


class RenderSurface(BaseModel):
    """渲染后的像素图（由外部光栅化器产出）"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @classmethod
    def from_file(cls, path: str | Path) -> RenderSurface:
        """从图片文件加载"""
        with Image.open(path) as img:
            img.load()
            return cls(image=img.copy())


class PagePlacement(BaseModel):
    """单页落点：整张图在该页上的绘制偏移"""

    model_config = ConfigDict(frozen=True)

    page_index: int = Field(ge=0)
    vertical_offset: float = 0.0


class DrawCall(BaseModel):
    """写入器绘制指令"""
    page_index: int
    x: float
    y: float
    width: float
    height: float


class PagePlan(BaseModel):
    """分页方案"""

    image_width: float     # 缩放后宽度（等于页宽）
    image_height: float    # 缩放后高度
    page_width: float
    page_height: float
    placements: list[PagePlacement] = Field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.placements)

    @property
    def is_degenerate(self) -> bool:
        """源图无有效尺寸"""
        return self.image_width <= 0 or self.image_height <= 0

    def draw_calls(self) -> list[DrawCall]:
        """转换为逐页绘制指令"""
        return [
            DrawCall(
                page_index=p.page_index,
                x=0.0,
                y=p.vertical_offset,
                width=self.image_width,
                height=self.image_height,
            )
            for p in self.placements
        ]
