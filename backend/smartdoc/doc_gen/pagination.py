"""
分页引擎 - 将一张长图切分到固定尺寸的多页

算法（定宽重排）：
1. 源图等比缩放到页宽：scaled_height = source_height * page_width / source_width
2. 第0页偏移0
3. remaining = scaled_height - page_height * 已输出页数
   remaining > 0 时继续输出一页，偏移 remaining - scaled_height
   （整图以更负的偏移重绘，页面内只露出下一段）

trailing_blank_page=True 时按 remaining >= 0 判定（旧版网页导出的行为）：
页高整数倍的图会多出一张空白尾页。

只计算落点，不处理像素。

测试要点：
- test_two_pages: 590高 -> 2页（0, -295）
- test_exact_fit: 295高 -> 1页
- test_degenerate: 高或宽<=0、或非有限值 -> 1页偏移0
"""

from __future__ import annotations

import math

from ..models import PagePlacement, PagePlan

DEFAULT_PAGE_WIDTH = 210.0
DEFAULT_PAGE_HEIGHT = 295.0

# 剩余高度的零容差（浮点误差）
_ZERO_TOL = 1e-6


def _has_more(remaining: float, trailing_blank_page: bool) -> bool:
    if math.isclose(remaining, 0.0, abs_tol=_ZERO_TOL):
        return trailing_blank_page
    return remaining > 0


def scaled_height(source_height: float, source_width: float, page_width: float) -> float:
    """缩放到页宽后的高度"""
    if source_height <= 0 or source_width <= 0:
        return 0.0
    height = source_height * page_width / source_width
    # inf/nan（含溢出）按无效尺寸处理
    return height if math.isfinite(height) else 0.0


def paginate(
    source_height: float,
    source_width: float,
    page_width: float = DEFAULT_PAGE_WIDTH,
    page_height: float = DEFAULT_PAGE_HEIGHT,
    *,
    trailing_blank_page: bool = False,
) -> list[PagePlacement]:
    """计算逐页落点"""
    placements = [PagePlacement(page_index=0, vertical_offset=0.0)]

    image_height = scaled_height(source_height, source_width, page_width)
    if image_height <= 0:
        return placements
    if page_height <= 0 or not math.isfinite(page_height):
        return placements

    remaining = image_height - page_height
    while _has_more(remaining, trailing_blank_page):
        placements.append(
            PagePlacement(
                page_index=len(placements),
                vertical_offset=remaining - image_height,
            )
        )
        remaining -= page_height

    return placements


def plan_pages(
    source_height: float,
    source_width: float,
    page_width: float = DEFAULT_PAGE_WIDTH,
    page_height: float = DEFAULT_PAGE_HEIGHT,
    *,
    trailing_blank_page: bool = False,
) -> PagePlan:
    """计算分页方案（落点 + 缩放后几何）"""
    image_height = scaled_height(source_height, source_width, page_width)
    return PagePlan(
        image_width=page_width if image_height > 0 else 0.0,
        image_height=image_height,
        page_width=page_width,
        page_height=page_height,
        placements=paginate(
            source_height,
            source_width,
            page_width,
            page_height,
            trailing_blank_page=trailing_blank_page,
        ),
    )
