"""
核心模块包
包含前缀工具和节点实现
"""

from .prefix import common_prefix
from .node import RadixNode, render_tree

__all__ = [
    'common_prefix',
    'RadixNode',
    'render_tree',
]
