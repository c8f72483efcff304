"""
提示词构建单元测试

每个模块完成后必须运行：pytest tests/unit/test_prompt_builder.py -v
"""

import pytest

from smartdoc.doc_gen import build_prompt
from smartdoc.models import DocumentType, Language


class TestBuildPrompt:
    """提示词构建测试"""

    @pytest.mark.parametrize("language", list(Language))
    @pytest.mark.parametrize("doc_type", list(DocumentType))
    def test_contains_description(self, doc_type: DocumentType, language: Language):
        """测试8种组合均包含原始描述"""
        description = "Senior data engineer, 8 years, Riyadh"
        prompt = build_prompt(doc_type, description, language)

        assert prompt
        assert description in prompt
        assert prompt.endswith(description)

    def test_description_verbatim(self):
        """测试描述原样插入（不转义、不解释占位符）"""
        description = 'Use {braces}, "quotes" and {description} literally <b>'
        prompt = build_prompt(DocumentType.REPORT, description, Language.ENGLISH)
        assert description in prompt
        assert prompt.count("{description}") == 1

    def test_language_selects_template(self):
        """测试按语言选择模板"""
        en = build_prompt(DocumentType.INVOICE, "x", Language.ENGLISH)
        ar = build_prompt(DocumentType.INVOICE, "x", Language.ARABIC)
        assert "invoice" in en
        assert "فاتورة" in ar
        assert en != ar

    def test_type_selects_template(self):
        """测试按文档类型选择模板"""
        prompts = {build_prompt(t, "x", Language.ENGLISH) for t in DocumentType}
        assert len(prompts) == len(DocumentType)
