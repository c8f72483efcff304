"""
命令行生成文档：描述 -> Gemini -> 文本大纲（可选保存JSON）

示例：
    python tools/generate_document.py --type invoice --lang en \
        --description "Logo design for Nakheel Cafe, 2 revisions, 1500 SAR"
"""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from smartdoc.config import get_config, setup_logging
from smartdoc.doc_gen import render_outline
from smartdoc.models import DocumentType, Language
from smartdoc.pipeline import DocumentService


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a structured document from a description.")
    parser.add_argument("--type", required=True, choices=[t.value for t in DocumentType])
    parser.add_argument("--description", required=True)
    parser.add_argument("--lang", default=None, choices=[lang.value for lang in Language],
                        help="语言（默认取配置 app.default_language）")
    parser.add_argument("--out", default="", help="可选：保存文档JSON的路径")
    args = parser.parse_args()

    config = get_config()
    setup_logging(config)

    service = DocumentService(config=config)
    result = asyncio.run(service.generate_document(args.type, args.description, args.lang))

    if not result.ok:
        print(result.error.message)
        return 1

    for line in render_outline(result.document):
        print(line)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(
            json.dumps(result.document.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        print(f"saved: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
