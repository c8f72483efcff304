"""
命令行导出PDF：已渲染的预览图片 -> 多页PDF（210×295mm）
"""

from __future__ import annotations

import argparse
import asyncio

from smartdoc.config import get_config, setup_logging
from smartdoc.models import Language
from smartdoc.pipeline import DocumentService


def main() -> int:
    ap = argparse.ArgumentParser(description="Export a rendered preview image to a paginated PDF.")
    ap.add_argument("--image", required=True)
    ap.add_argument("--out", default="", help="输出PDF（默认取配置 export.output_dir/filename）")
    ap.add_argument("--lang", default=None, choices=[lang.value for lang in Language])
    args = ap.parse_args()

    config = get_config()
    setup_logging(config)

    service = DocumentService(config=config)
    result = asyncio.run(service.export_region(args.image, args.out or None, args.lang))

    if not result.ok:
        print(result.error.message)
        return 1

    print(f"{result.output_path} ({result.page_count} pages)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
