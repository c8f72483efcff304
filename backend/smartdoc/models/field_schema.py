"""
结构约束模型 - 交给生成方的输出形状描述

节点三种形态：
- 标量：string / number
- 对象：properties 为有序映射（插入顺序即展示顺序）
- 数组：items 为元素结构
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SchemaKind(str, Enum):
    """节点类型"""
    STRING = "string"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"


class FieldSchema(BaseModel):
    """结构约束节点（递归）"""

    model_config = ConfigDict(frozen=True)

    kind: SchemaKind
    description: str | None = None
    properties: dict[str, FieldSchema] = Field(default_factory=dict)
    items: FieldSchema | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> FieldSchema:
        if self.kind == SchemaKind.OBJECT and not self.properties:
            raise ValueError("object schema requires properties")
        if self.kind == SchemaKind.ARRAY and self.items is None:
            raise ValueError("array schema requires items")
        if self.kind in (SchemaKind.STRING, SchemaKind.NUMBER) and (self.properties or self.items):
            raise ValueError(f"{self.kind.value} schema cannot have children")
        return self

    def field_names(self) -> list[str]:
        """对象字段名（按展示顺序）"""
        return list(self.properties)


# 声明用的简写构造函数

def string(description: str | None = None) -> FieldSchema:
    return FieldSchema(kind=SchemaKind.STRING, description=description)


def number(description: str | None = None) -> FieldSchema:
    return FieldSchema(kind=SchemaKind.NUMBER, description=description)


def array(items: FieldSchema, description: str | None = None) -> FieldSchema:
    return FieldSchema(kind=SchemaKind.ARRAY, description=description, items=items)


def obj(description: str | None = None, /, **properties: FieldSchema) -> FieldSchema:
    return FieldSchema(kind=SchemaKind.OBJECT, description=description, properties=properties)
