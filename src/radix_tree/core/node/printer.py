"""
节点树文本渲染
"""
from typing import List

from .entity import RadixNode


def render_tree(node: RadixNode, show_values: bool = True) -> str:
    """
    渲染节点结构为文本树

    Args:
        node: 起始节点（通常为根哨兵）
        show_values: 是否显示节点值

    Returns:
        多行字符串，无值节点（分支/墓碑）以 [-] 标记
    """
    lines = [_format_node(node, show_values)]
    _render_children(node, "", lines, show_values)
    return "\n".join(lines)


def _render_children(node: RadixNode, prefix: str, lines: List[str], show_values: bool) -> None:
    """递归渲染子节点"""
    total = len(node.children)
    for i, child in enumerate(node.children):
        is_last = (i == total - 1)

        # 当前行的连接符
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_format_node(child, show_values)}")

        # 下一层的前缀
        extension = "    " if is_last else "│   "
        _render_children(child, prefix + extension, lines, show_values)


def _format_node(node: RadixNode, show_values: bool) -> str:
    if node.is_root:
        return "<root>"
    if not node.has_value:
        return f"{node.label} [-]"
    if show_values:
        return f"{node.label} = {node.value!r}"
    return node.label
