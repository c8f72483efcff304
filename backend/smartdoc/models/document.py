"""
文档模型 - 文档类型、语言、生成请求与四类文档记录

文档记录在Python侧使用snake_case字段，线上（Gemini返回的JSON）使用camelCase。
每个记录自带 doc_type 标签，渲染代码按标签分支，不依赖外部界面状态。
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DocumentType(str, Enum):
    """文档类型（封闭集合）"""
    RESUME = "resume"
    INVOICE = "invoice"
    NEWSLETTER = "newsletter"
    REPORT = "report"


class Language(str, Enum):
    """语言"""
    ARABIC = "ar"
    ENGLISH = "en"

    @property
    def direction(self) -> str:
        """文字方向"""
        return "rtl" if self is Language.ARABIC else "ltr"


class GenerationRequest(BaseModel):
    """生成请求（不可变）"""

    model_config = ConfigDict(frozen=True)

    document_type: DocumentType
    description: str
    language: Language = Language.ARABIC

    @field_validator("description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description must not be blank")
        return value


class _WireModel(BaseModel):
    """线上字段为camelCase"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# === 简历 ===

class Experience(_WireModel):
    """工作经历"""
    position: str = ""
    company: str = ""
    period: str = ""
    achievements: list[str] = Field(default_factory=list)


class Education(_WireModel):
    """教育经历"""
    degree: str = ""
    institution: str = ""
    period: str = ""


class Resume(_WireModel):
    """简历"""
    doc_type: Literal[DocumentType.RESUME] = DocumentType.RESUME

    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)


# === 发票 ===

class Seller(_WireModel):
    name: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""


class Client(_WireModel):
    name: str = ""
    address: str = ""
    phone: str = ""


class InvoiceItem(_WireModel):
    """发票行项目"""
    description: str = ""
    quantity: float = 0
    price: float = 0
    total: float = 0


class Invoice(_WireModel):
    """发票"""
    doc_type: Literal[DocumentType.INVOICE] = DocumentType.INVOICE

    invoice_number: str = ""
    date: str = ""
    seller: Seller = Field(default_factory=Seller)
    client: Client = Field(default_factory=Client)
    items: list[InvoiceItem] = Field(default_factory=list)
    total: str = ""          # 总金额（含格式，按字符串返回）
    currency: str = ""

    @property
    def items_total(self) -> float:
        """行项目金额合计"""
        return sum(item.total for item in self.items)


# === 新闻简报 ===

class NewsStory(_WireModel):
    """简报条目（主新闻/活动）"""
    title: str = ""
    content: str = ""


class Newsletter(_WireModel):
    """新闻简报"""
    doc_type: Literal[DocumentType.NEWSLETTER] = DocumentType.NEWSLETTER

    title: str = ""
    date: str = ""
    main_news: NewsStory = Field(default_factory=NewsStory)
    updates: list[str] = Field(default_factory=list)
    events: NewsStory = Field(default_factory=NewsStory)


# === 报告 ===

class Report(_WireModel):
    """报告"""
    doc_type: Literal[DocumentType.REPORT] = DocumentType.REPORT

    title: str = ""
    subtitle: str = ""
    author: str = ""
    date: str = ""
    summary: str = ""
    introduction: str = ""
    findings: list[str] = Field(default_factory=list)
    recommendations: str = ""


DocumentRecord = Annotated[
    Union[Resume, Invoice, Newsletter, Report],
    Field(discriminator="doc_type"),
]
