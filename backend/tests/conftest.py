"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(catalog, echo_provider):
        provider = echo_provider()
        assert provider.is_configured
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, Callable, Generator

import pytest
from PIL import Image

from smartdoc.config import RuntimeConfig, TemplateCatalog, load_templates
from smartdoc.doc_gen import schema_for
from smartdoc.interfaces import IContentProvider
from smartdoc.models import (
    DocumentType,
    FieldSchema,
    GenerationRequest,
    Language,
    RenderSurface,
    SchemaKind,
)


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """隔离本机环境中的凭据"""
    for name in ("GEMINI_API_KEY", "API_KEY", "SMARTDOC_GEMINI__API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def catalog() -> TemplateCatalog:
    """模板目录（会话级别缓存）"""
    return load_templates()


@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置"""
    return RuntimeConfig()


# ============================================================================
# 生成 Fixtures
# ============================================================================

def build_payload(schema: FieldSchema) -> Any:
    """按结构约束构造一个合法的返回值"""
    if schema.kind == SchemaKind.STRING:
        return "sample"
    if schema.kind == SchemaKind.NUMBER:
        return 2
    if schema.kind == SchemaKind.ARRAY:
        return [build_payload(schema.items)]
    return {name: build_payload(child) for name, child in schema.properties.items()}


@pytest.fixture
def payload_for() -> Callable[[DocumentType], Any]:
    """文档类型 -> 合法返回值"""
    return lambda doc_type: build_payload(schema_for(doc_type))


class FakeProvider(IContentProvider):
    """内容提供方替身：记录调用并返回预设文本/抛出预设异常"""

    def __init__(
        self,
        text: str | None = None,
        error: Exception | None = None,
        configured: bool = True,
    ):
        self.text = text
        self.error = error
        self.configured = configured
        self.calls: list[tuple[str, FieldSchema]] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate_content(self, prompt: str, schema: FieldSchema) -> str:
        self.calls.append((prompt, schema))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_provider() -> type[FakeProvider]:
    return FakeProvider


@pytest.fixture
def echo_provider() -> Callable[..., FakeProvider]:
    """返回与请求结构一致的JSON"""
    import json

    def _make(doc_type: DocumentType) -> FakeProvider:
        return FakeProvider(text=json.dumps(build_payload(schema_for(doc_type))))

    return _make


@pytest.fixture
def sample_request() -> GenerationRequest:
    """示例生成请求"""
    return GenerationRequest(
        document_type=DocumentType.INVOICE,
        description="Invoice for 3 hours of consulting at 100 USD per hour",
        language=Language.ENGLISH,
    )


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_surface() -> Callable[[int, int], RenderSurface]:
    """构造指定尺寸的白底像素图"""
    def _make(width: int, height: int) -> RenderSurface:
        return RenderSurface(image=Image.new("RGB", (width, height), "white"))
    return _make
