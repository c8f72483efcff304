"""
智能文档生成系统 - 后端核心模块

模块结构：
- config/     运行期配置、提示词模板与日志
- models/     数据模型定义（文档记录/结构约束/分页）
- doc_gen/    文档生成（结构约束/提示词/Gemini调用/分页/PDF导出）
- pipeline/   面向调用方的服务入口
"""

__version__ = "0.1.0"
