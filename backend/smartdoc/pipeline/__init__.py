"""
服务模块 - 面向调用方的入口

子模块：
- document_service: 生成文档 / 导出PDF
"""

from .document_service import DocumentService

__all__ = [
    "DocumentService",
]
