"""
节点模块 - 基数树节点与渲染
"""

from .entity import RadixNode
from .printer import render_tree

__all__ = ['RadixNode', 'render_tree']
