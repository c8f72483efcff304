"""
生成客户端 - 提示词+结构约束 -> 类型化文档记录

职责：
1. 解析提示词与结构约束
2. 调用内容提供方（每次一次外呼，不重试、不缓存）
3. 解析返回文本并按文档类型校验结构
4. 将提供方失败映射为类型化错误（附按语言选择的提示）

测试要点：
- test_generate_returns_requested_variant: 返回记录标签与请求一致
- test_unconfigured_provider: 未配置时不外呼，报ProviderUnavailable
- test_malformed_response: 非JSON报MalformedResponse
- test_schema_mismatch: 结构不符报SchemaMismatch
"""

from __future__ import annotations

import json
import logging
from typing import Any

import pydantic

from ..config import TemplateCatalog, load_templates
from ..interfaces import (
    ErrorKind,
    GenerationError,
    IContentProvider,
    IDocumentGenerator,
    MalformedResponse,
    ProviderError,
    ProviderUnavailable,
    SchemaMismatch,
)
from ..models import DocumentRecord, GenerationRequest, Language
from .prompt_builder import build_prompt
from .schema_registry import record_type_for, schema_for

logger = logging.getLogger(__name__)


class GenerationClient(IDocumentGenerator):
    """生成客户端实现"""

    def __init__(
        self,
        provider: IContentProvider,
        catalog: TemplateCatalog | None = None,
    ):
        self.provider = provider
        self.catalog = catalog or load_templates()

    async def generate(self, request: GenerationRequest) -> DocumentRecord:
        """生成文档记录"""
        doc_type = request.document_type
        language = request.language

        # 1. 提示词与结构约束
        prompt = build_prompt(doc_type, request.description, language, self.catalog)
        schema = schema_for(doc_type)

        # 2. 未配置时直接失败
        if not self.provider.is_configured:
            raise self._error(ProviderUnavailable, language, "provider not configured")

        # 3. 外呼
        logger.info(f"开始生成: type={doc_type.value} lang={language.value}")
        try:
            text = await self.provider.generate_content(prompt, schema)
        except Exception as e:
            logger.error(f"调用内容提供方失败: {e}")
            raise self._error(ProviderError, language, str(e)) from e

        # 4. 解析
        payload = self._parse(text, language)

        # 5. 结构校验
        record_cls = record_type_for(doc_type)
        try:
            record = record_cls.model_validate(payload)
        except pydantic.ValidationError as e:
            logger.warning(f"返回结构不符: type={doc_type.value}: {e.error_count()} 处错误")
            raise self._error(SchemaMismatch, language, str(e)) from e

        logger.info(f"生成完成: type={doc_type.value}")
        return record

    def _parse(self, text: str | None, language: Language) -> Any:
        """解析返回文本为JSON"""
        json_text = (text or "").strip()
        if not json_text:
            raise self._error(MalformedResponse, language, "empty response text")
        try:
            return json.loads(json_text)
        except json.JSONDecodeError as e:
            logger.warning(f"返回内容无法解析: {e}")
            raise self._error(MalformedResponse, language, str(e)) from e

    def _error(
        self,
        error_cls: type[GenerationError],
        language: Language,
        detail: str,
    ) -> GenerationError:
        """构造带本地化提示的错误"""
        kind: ErrorKind = error_cls.kind
        return error_cls(self.catalog.get_message(kind, language), detail=detail)
