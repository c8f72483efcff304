"""
Gemini内容提供方 - 以结构化输出方式调用 Gemini API

凭据（按顺序）：
  runtime.yaml gemini.api_key / SMARTDOC_GEMINI__API_KEY
  GEMINI_API_KEY
  API_KEY
可写入项目根目录的 .env（由 python-dotenv 加载）。

无凭据时返回 UnconfiguredProvider，应用照常启动，生成时报 ProviderUnavailable。

依赖：
- google-genai: Gemini官方SDK（异步接口 client.aio）
"""

from __future__ import annotations

import functools
import logging

from google import genai
from google.genai import types

from ..config import RuntimeConfig, get_config
from ..interfaces import IContentProvider
from ..models import FieldSchema, SchemaKind

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
RESPONSE_MIME_TYPE = "application/json"

_TYPE_MAP = {
    SchemaKind.STRING: types.Type.STRING,
    SchemaKind.NUMBER: types.Type.NUMBER,
    SchemaKind.OBJECT: types.Type.OBJECT,
    SchemaKind.ARRAY: types.Type.ARRAY,
}


@functools.lru_cache(maxsize=4)
def _get_client(api_key: str) -> genai.Client:
    """返回（并缓存）指定密钥的Gemini客户端，复用其内部HTTP连接池"""
    return genai.Client(api_key=api_key)


def to_genai_schema(schema: FieldSchema) -> types.Schema:
    """FieldSchema -> google.genai Schema（保留字段顺序）"""
    kwargs: dict = {"type": _TYPE_MAP[schema.kind]}
    if schema.description:
        kwargs["description"] = schema.description
    if schema.kind == SchemaKind.OBJECT:
        kwargs["properties"] = {
            name: to_genai_schema(child) for name, child in schema.properties.items()
        }
        kwargs["property_ordering"] = schema.field_names()
    elif schema.kind == SchemaKind.ARRAY and schema.items is not None:
        kwargs["items"] = to_genai_schema(schema.items)
    return types.Schema(**kwargs)


class GeminiProvider(IContentProvider):
    """Gemini提供方实现"""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: genai.Client | None = None,
    ):
        self.model = model
        self._client = client or _get_client(api_key)

    async def generate_content(self, prompt: str, schema: FieldSchema) -> str:
        """单次调用，不重试；SDK异常原样上抛，由生成客户端归类"""
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type=RESPONSE_MIME_TYPE,
                response_schema=to_genai_schema(schema),
            ),
        )
        return response.text or ""


class UnconfiguredProvider(IContentProvider):
    """未配置状态：不持有客户端，不发起网络调用"""

    @property
    def is_configured(self) -> bool:
        return False

    async def generate_content(self, prompt: str, schema: FieldSchema) -> str:
        raise RuntimeError("Gemini provider is not configured")


def build_provider(config: RuntimeConfig | None = None) -> IContentProvider:
    """根据配置构建提供方"""
    config = config or get_config()
    api_key = config.gemini.resolve_api_key()
    if not api_key:
        logger.warning("未配置Gemini API密钥，应用可启动但生成将失败")
        return UnconfiguredProvider()
    return GeminiProvider(api_key=api_key, model=config.gemini.model)
