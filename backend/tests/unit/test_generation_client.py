"""
生成客户端单元测试

每个模块完成后必须运行：pytest tests/unit/test_generation_client.py -v
"""

import asyncio
import json
from types import SimpleNamespace

import pytest

from smartdoc.config import RuntimeConfig, TemplateCatalog
from smartdoc.doc_gen import GenerationClient, build_provider, schema_for
from smartdoc.doc_gen import gemini_provider
from smartdoc.doc_gen.gemini_provider import GeminiProvider, UnconfiguredProvider
from smartdoc.interfaces import (
    ErrorKind,
    MalformedResponse,
    ProviderError,
    ProviderUnavailable,
    SchemaMismatch,
)
from smartdoc.models import DocumentType, GenerationRequest, Language


def _request(doc_type: DocumentType, language: Language = Language.ENGLISH) -> GenerationRequest:
    return GenerationRequest(document_type=doc_type, description="a short description", language=language)


class TestGenerationClient:
    """生成客户端测试"""

    @pytest.mark.parametrize("doc_type", list(DocumentType))
    def test_generate_returns_requested_variant(self, doc_type: DocumentType, echo_provider):
        """测试返回记录标签与请求一致"""
        provider = echo_provider(doc_type)
        client = GenerationClient(provider)

        record = asyncio.run(client.generate(_request(doc_type)))

        assert record.doc_type == doc_type
        assert len(provider.calls) == 1

    def test_prompt_and_schema_sent(self, echo_provider, sample_request: GenerationRequest):
        """测试提示词与结构约束传给提供方"""
        provider = echo_provider(DocumentType.INVOICE)
        asyncio.run(GenerationClient(provider).generate(sample_request))

        prompt, schema = provider.calls[0]
        assert sample_request.description in prompt
        assert schema is schema_for(DocumentType.INVOICE)

    def test_response_whitespace_trimmed(self, fake_provider):
        """测试返回文本首尾空白"""
        provider = fake_provider(text='\n  {"title": "Annual Report", "findings": ["a", "b"]}  \n')
        record = asyncio.run(GenerationClient(provider).generate(_request(DocumentType.REPORT)))

        assert record.title == "Annual Report"
        assert record.findings == ["a", "b"]

    def test_unconfigured_provider(self, fake_provider, catalog: TemplateCatalog):
        """测试未配置时不外呼"""
        provider = fake_provider(text="{}", configured=False)

        with pytest.raises(ProviderUnavailable) as exc_info:
            asyncio.run(GenerationClient(provider).generate(_request(DocumentType.RESUME, Language.ARABIC)))

        assert provider.calls == []
        assert exc_info.value.kind == ErrorKind.PROVIDER_UNAVAILABLE
        assert exc_info.value.user_message == catalog.get_message(
            ErrorKind.PROVIDER_UNAVAILABLE, Language.ARABIC
        )

    def test_malformed_response(self, fake_provider, catalog: TemplateCatalog):
        """测试非JSON返回"""
        provider = fake_provider(text="Sure! Here is your resume: ...")

        with pytest.raises(MalformedResponse) as exc_info:
            asyncio.run(GenerationClient(provider).generate(_request(DocumentType.RESUME)))

        assert str(exc_info.value) == catalog.get_message(ErrorKind.MALFORMED_RESPONSE, Language.ENGLISH)
        assert exc_info.value.detail

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_response(self, fake_provider, text):
        """测试空返回"""
        with pytest.raises(MalformedResponse):
            asyncio.run(GenerationClient(fake_provider(text=text)).generate(_request(DocumentType.REPORT)))

    @pytest.mark.parametrize("payload", [
        [1, 2, 3],
        "just a string",
        {"findings": "not a list"},
        {"docType": "resume"},
    ])
    def test_schema_mismatch(self, fake_provider, payload):
        """测试可解析但结构不符"""
        provider = fake_provider(text=json.dumps(payload))

        with pytest.raises(SchemaMismatch) as exc_info:
            asyncio.run(GenerationClient(provider).generate(_request(DocumentType.REPORT)))

        assert exc_info.value.kind == ErrorKind.SCHEMA_MISMATCH

    def test_provider_error(self, fake_provider):
        """测试提供方异常归类为ProviderError"""
        provider = fake_provider(error=ConnectionError("503 Service Unavailable"))

        with pytest.raises(ProviderError) as exc_info:
            asyncio.run(GenerationClient(provider).generate(_request(DocumentType.NEWSLETTER)))

        assert "503" in exc_info.value.detail
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert len(provider.calls) == 1

    def test_independent_calls(self, echo_provider):
        """测试每次调用独立外呼（无缓存）"""
        provider = echo_provider(DocumentType.RESUME)
        client = GenerationClient(provider)
        request = _request(DocumentType.RESUME)

        asyncio.run(client.generate(request))
        asyncio.run(client.generate(request))

        assert len(provider.calls) == 2


class TestBuildProvider:
    """提供方构建测试"""

    def test_no_key_is_unconfigured(self, runtime_config: RuntimeConfig, monkeypatch: pytest.MonkeyPatch):
        """测试无凭据时不创建客户端"""
        def _fail(api_key: str):
            raise AssertionError("client must not be created")

        monkeypatch.setattr(gemini_provider, "_get_client", _fail)

        provider = build_provider(runtime_config)

        assert isinstance(provider, UnconfiguredProvider)
        assert provider.is_configured is False

    def test_key_from_env(self, runtime_config: RuntimeConfig, monkeypatch: pytest.MonkeyPatch):
        """测试从环境变量读取凭据"""
        created = []
        monkeypatch.setattr(gemini_provider, "_get_client", lambda api_key: created.append(api_key) or object())
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        provider = build_provider(runtime_config)

        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-2.5-flash"
        assert created == ["test-key"]


class TestGeminiProvider:
    """Gemini提供方测试"""

    def test_structured_output_request(self):
        """测试结构化输出参数"""
        captured = {}

        async def generate_content(**kwargs):
            captured.update(kwargs)
            return SimpleNamespace(text='{"title": "T"}')

        client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))
        provider = GeminiProvider(api_key="unused", model="gemini-test", client=client)

        text = asyncio.run(provider.generate_content("prompt", schema_for(DocumentType.REPORT)))

        assert text == '{"title": "T"}'
        assert captured["model"] == "gemini-test"
        assert captured["contents"] == "prompt"
        assert captured["config"].response_mime_type == "application/json"
        assert captured["config"].response_schema.property_ordering[0] == "title"

    def test_unconfigured_never_calls(self):
        """测试未配置提供方拒绝调用"""
        with pytest.raises(RuntimeError):
            asyncio.run(UnconfiguredProvider().generate_content("prompt", schema_for(DocumentType.REPORT)))
