"""
结构约束注册表 - 每种文档类型的输出形状

职责：
1. 为每种文档类型声明一次静态结构约束（交给生成方）
2. 维护文档类型 -> 记录类的映射（校验返回内容）

约束与记录类是两处声明，字段名/嵌套/类型必须保持一致，
由 tests/unit/test_schema_registry.py 校验。

测试要点：
- test_schema_stable: 重复查询返回同一结构
- test_schema_matches_record: 约束与记录类一致
"""

from __future__ import annotations

from ..models import (
    DocumentType,
    FieldSchema,
    Invoice,
    Newsletter,
    Report,
    Resume,
)
from ..models.field_schema import array, number, obj, string

RESUME_SCHEMA = obj(
    "A professional resume or curriculum vitae.",
    name=string("The person's full name."),
    title=string("The person's professional title (e.g., 'Senior Software Engineer')."),
    email=string("Contact email address."),
    phone=string("Contact phone number."),
    linkedin=string("URL of the person's LinkedIn profile."),
    summary=string("A 2-4 sentence professional summary."),
    experience=array(
        obj(
            position=string("The job title held."),
            company=string("The name of the company."),
            period=string("The dates of employment (e.g., '2020-Present')."),
            achievements=array(string(), "A list of key achievements for this role."),
        ),
        "A list of work experiences.",
    ),
    education=array(
        obj(
            degree=string("The degree or qualification obtained (e.g., 'B.S. in Computer Science')."),
            institution=string("The name of the educational institution."),
            period=string("The dates of attendance (e.g., '2016-2020')."),
        ),
        "A list of educational qualifications.",
    ),
    skills=array(string(), "A list of relevant skills."),
)

INVOICE_SCHEMA = obj(
    "A commercial invoice for goods or services.",
    invoiceNumber=string("The unique invoice identifier."),
    date=string("The date the invoice was issued."),
    seller=obj(
        "Information about the seller.",
        name=string(),
        address=string(),
        phone=string(),
        email=string(),
    ),
    client=obj(
        "Information about the client.",
        name=string(),
        address=string(),
        phone=string(),
    ),
    items=array(
        obj(
            description=string("Description of the product or service."),
            quantity=number("The quantity of the item."),
            price=number("The price per unit of the item."),
            total=number("The total price for the line item (quantity * price)."),
        ),
        "A list of line items in the invoice.",
    ),
    total=string("The grand total amount of the invoice."),
    currency=string("The currency of the amounts (e.g., 'USD', 'SAR')."),
)

NEWSLETTER_SCHEMA = obj(
    "A company or organization newsletter.",
    title=string("The main title of the newsletter."),
    date=string("The publication date of the newsletter."),
    mainNews=obj(
        "The main story or article.",
        title=string("Title of the main story."),
        content=string("Full content of the main story."),
    ),
    updates=array(string(), "A list of brief updates or announcements."),
    events=obj(
        "Information about an upcoming event.",
        title=string("Title of the event."),
        content=string("Details about the event (date, location, description)."),
    ),
)

REPORT_SCHEMA = obj(
    "A formal or academic report.",
    title=string("The main title of the report."),
    subtitle=string("The subtitle of the report."),
    author=string("The name of the author(s)."),
    date=string("The publication date of the report."),
    summary=string("An executive summary of the report."),
    introduction=string("The introduction section of the report."),
    findings=array(string(), "A list of key findings or results."),
    recommendations=string("The recommendations section of the report."),
)

_SCHEMAS: dict[DocumentType, FieldSchema] = {
    DocumentType.RESUME: RESUME_SCHEMA,
    DocumentType.INVOICE: INVOICE_SCHEMA,
    DocumentType.NEWSLETTER: NEWSLETTER_SCHEMA,
    DocumentType.REPORT: REPORT_SCHEMA,
}

RECORD_TYPES: dict[DocumentType, type[Resume | Invoice | Newsletter | Report]] = {
    DocumentType.RESUME: Resume,
    DocumentType.INVOICE: Invoice,
    DocumentType.NEWSLETTER: Newsletter,
    DocumentType.REPORT: Report,
}


def schema_for(doc_type: DocumentType) -> FieldSchema:
    """获取文档类型的结构约束"""
    return _SCHEMAS[doc_type]


def record_type_for(doc_type: DocumentType) -> type[Resume | Invoice | Newsletter | Report]:
    """获取文档类型的记录类"""
    return RECORD_TYPES[doc_type]
