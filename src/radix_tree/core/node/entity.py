"""
基数树节点实体模块
定义压缩前缀树的节点，整棵树就是一个根哨兵节点
"""

from typing import Optional, Dict, Any, Iterator, List, Tuple

from ..prefix import common_prefix
from ...exceptions import DuplicateKeyError


# 区分“没有值”和“值为None/0/空串”
_MISSING = object()


class RadixNode:
    """
    基数树节点

    每个节点包含：
    1. label：节点代表的完整字符串（不是相对父节点的后缀）
    2. value：有值表示这是一个真实键；无值表示分支节点或已删除的墓碑节点
    3. children：子节点列表，由父节点独占
    4. is_root：根哨兵标记，根节点接受任意键作为后代
    """

    def __init__(self, label: str, value: Any = _MISSING, is_root: bool = False):
        """
        初始化节点

        Args:
            label: 节点标签（完整键或公共前缀）
            value: 节点值，不传表示无值
            is_root: 是否为根哨兵
        """
        self.label = label
        self._value = value
        self.is_root = is_root
        self.children: List['RadixNode'] = []

    @classmethod
    def root(cls) -> 'RadixNode':
        """创建根哨兵节点"""
        return cls("", is_root=True)

    # ========== 状态 ==========

    @property
    def value(self) -> Any:
        """节点值，无值时返回None"""
        return None if self._value is _MISSING else self._value

    @property
    def has_value(self) -> bool:
        return self._value is not _MISSING

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def is_parent_of(self, key: str) -> bool:
        """判断key是否应位于本节点之下（根节点无条件接受）"""
        return self.is_root or key.startswith(self.label)

    def _clear_value(self) -> None:
        """标记为墓碑"""
        self._value = _MISSING

    # ========== 插入 ==========

    def insert(self, key: str, value: Any) -> None:
        """
        插入键值对，保持树的最大压缩

        Raises:
            DuplicateKeyError: 树中已有未删除的同名键，此时树结构不变
        """
        if self.contains(key):
            raise DuplicateKeyError(key)

        self._add(RadixNode(key, value))

    def _add(self, new_node: 'RadixNode') -> None:
        """
        将新节点分派到唯一匹配的子节点

        兄弟节点之间没有公共前缀，所以每一层最多只有一个子节点能匹配：
        1. 复活：标签相同的墓碑/分支节点，直接写入新值
        2. 下降：子节点标签是新键的前缀，进入该子节点继续
        3. 分叉：与新键有更长的公共前缀，在公共前缀处插入分支节点
        都不匹配时作为直接子节点挂载

        逐层循环下降，树深度不受递归深度限制。
        """
        node = self
        while True:
            for index, child in enumerate(node.children):
                if child.label == new_node.label:
                    child._value = new_node._value
                    return

                if child.is_parent_of(new_node.label):
                    node = child
                    break

                if node._fork(index, child, new_node):
                    return
            else:
                if new_node.label == node.label:
                    # 只有根下的空键会走到这里：空键是所有键的前缀，接管根的全部子节点
                    new_node.children = node.children
                    node.children = []
                node.children.append(new_node)
                return

    def _fork(self, index: int, existing: 'RadixNode', new_node: 'RadixNode') -> bool:
        """
        在existing与new_node的公共前缀处分叉

        公共前缀必须比本节点标签更长，否则两者只是普通兄弟。
        若公共前缀就是新键本身，新节点直接成为existing的父节点。

        替换children[index]是一次完整的结构修改：摘下existing、挂到分支节点、
        分支节点占据原位置，三步必须整体完成。
        """
        shared = common_prefix(existing.label, new_node.label)
        if len(shared) <= len(self.label):
            return False

        if shared == new_node.label:
            branch = new_node
        else:
            branch = RadixNode(shared)
            branch.children.append(new_node)

        branch.children.append(existing)
        self.children[index] = branch
        return True

    # ========== 删除 ==========

    def delete(self, key: str) -> bool:
        """
        删除键

        有子节点的目标节点只清空值（墓碑），叶子节点直接从父节点移除。
        移除后沿路径留下的无值无子节点也会被逐级清理。

        Returns:
            是否删除了一个有效关联
        """
        path = [self]
        node = self
        while True:
            for child in node.children:
                if child.label == key:
                    if not child.has_value:
                        return False
                    if child.children:
                        child._clear_value()
                    else:
                        node.children.remove(child)
                        self._prune(path)
                    return True

                if child.is_parent_of(key):
                    path.append(child)
                    node = child
                    break
            else:
                return False

    @staticmethod
    def _prune(path: List['RadixNode']) -> None:
        """自下而上移除路径上无值无子的节点（根除外）"""
        while len(path) > 1:
            node = path.pop()
            if node.has_value or node.children:
                break
            path[-1].children.remove(node)

    # ========== 查询 ==========

    def _locate(self, key: str) -> Optional['RadixNode']:
        """按标签精确定位节点（包括墓碑节点），根哨兵本身不参与匹配"""
        node = self
        while True:
            if not node.is_root and node.label == key:
                return node

            for child in node.children:
                if child.is_parent_of(key):
                    node = child
                    break
            else:
                return None

    def find(self, key: str, default: Any = None) -> Any:
        """精确查找，不存在或已删除时返回default"""
        node = self._locate(key)
        if node is None or not node.has_value:
            return default
        return node._value

    def contains(self, key: str) -> bool:
        node = self._locate(key)
        return node is not None and node.has_value

    def search(self, prefix: str) -> List[Any]:
        """
        前缀搜索

        标签等于prefix时返回自身及全部后代的值；
        子节点标签以prefix开头时返回该子树；
        子节点标签是prefix的前缀时继续下降。
        """
        node = self
        while True:
            if node.label == prefix:
                return node._collect_values()

            for child in node.children:
                if child.label.startswith(prefix):
                    return child._collect_values()
                if child.is_parent_of(prefix):
                    node = child
                    break
            else:
                return []

    def _walk(self) -> Iterator['RadixNode']:
        """深度优先遍历自身及全部后代"""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def _collect_values(self) -> List[Any]:
        """深度优先收集自身及后代的值，跳过墓碑"""
        return [node._value for node in self._walk() if node.has_value]

    def items(self) -> List[Tuple[str, Any]]:
        """所有有效的(键, 值)对，结构顺序"""
        return [(node.label, node._value) for node in self._walk() if node.has_value]

    # ========== 统计信息 ==========

    def size(self) -> int:
        """有值节点数量"""
        return sum(1 for node in self._walk() if node.has_value)

    def node_count(self) -> int:
        """后代节点总数（含分支和墓碑节点，不含自身）"""
        return sum(1 for _ in self._walk()) - 1

    def depth(self) -> int:
        """子树深度，叶子为0"""
        deepest = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest

    # ========== 序列化 ==========

    def to_dict(self) -> Dict[str, Any]:
        """递归转换为字典（调试用）"""
        return {
            'label': self.label,
            'has_value': self.has_value,
            'value': self.value,
            'is_root': self.is_root,
            'children': [child.to_dict() for child in self.children]
        }

    # ========== 特殊方法 ==========

    def __repr__(self) -> str:
        status = "✓" if self.has_value else "✗"
        return f"RadixNode({self.label!r}, children={len(self.children)})[{status}]"

    def __str__(self) -> str:
        return self.label

    def __eq__(self, other) -> bool:
        if isinstance(other, RadixNode):
            return self.label == other.label
        if isinstance(other, str):
            return self.label == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.label)
