"""
文本预览 - 按记录标签输出纯文本大纲（命令行预览用）
"""

from __future__ import annotations

from ..models import DocumentRecord, Invoice, Newsletter, Report, Resume


def _bullets(items: list[str], indent: str = "  ") -> list[str]:
    return [f"{indent}- {item}" for item in items]


def render_outline(record: DocumentRecord) -> list[str]:
    """文档记录 -> 大纲行"""
    match record:
        case Resume():
            lines = [record.name, record.title, f"{record.email} | {record.phone} | {record.linkedin}", "", record.summary]
            for exp in record.experience:
                lines.append(f"* {exp.position} @ {exp.company} ({exp.period})")
                lines.extend(_bullets(exp.achievements, "    "))
            for edu in record.education:
                lines.append(f"* {edu.degree}, {edu.institution} ({edu.period})")
            lines.extend(_bullets(record.skills))
            return lines

        case Invoice():
            lines = [
                f"#{record.invoice_number}  {record.date}",
                f"{record.seller.name} -> {record.client.name}",
            ]
            for item in record.items:
                lines.append(f"  {item.description}: {item.quantity:g} x {item.price:g} = {item.total:g}")
            lines.append(f"{record.total} {record.currency}")
            return lines

        case Newsletter():
            lines = [record.title, record.date, "", record.main_news.title, record.main_news.content]
            lines.extend(_bullets(record.updates))
            lines.extend([record.events.title, record.events.content])
            return lines

        case Report():
            lines = [record.title, record.subtitle, f"{record.author}, {record.date}", "", record.summary, record.introduction]
            lines.extend(_bullets(record.findings))
            lines.append(record.recommendations)
            return lines

    raise TypeError(f"未知文档记录: {type(record).__name__}")
