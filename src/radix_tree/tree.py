"""
基数树主入口
集成配置、键验证、日志和节点模块，提供完整的容器接口
"""

import logging
from collections.abc import Mapping
from typing import Dict, List, Optional, Any, Iterable, Tuple, Union

from .exceptions import DuplicateKeyError
from .config.settings import TreeSettings
from .config.validator import KeyValidator
from .interfaces import IPrefixIndex
from .core.node import RadixNode, render_tree


class RadixTree(IPrefixIndex):
    """
    基数树（压缩前缀树）

    以字符串为键保存任意值，支持精确查找、前缀搜索、
    自动路径压缩的插入以及墓碑式删除。
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        初始化基数树

        Args:
            config: 配置字典，见 TreeSettings
        """
        # 加载配置
        self.settings = TreeSettings.from_dict(config) if config else TreeSettings()
        self.validator = KeyValidator(max_key_length=self.settings.max_key_length)

        # 初始化日志
        self._setup_logging()
        self.logger = logging.getLogger(__name__)

        # 根哨兵
        self._root = RadixNode.root()

        self.logger.info(f"基数树初始化完成: {self.settings.tree_name}")

    def _setup_logging(self):
        """配置日志系统"""
        if not self.settings.enable_logging:
            return
        logging.basicConfig(
            level=getattr(logging, self.settings.log_level),
            format=self.settings.log_format,
            handlers=[logging.StreamHandler()]
        )

    @property
    def root(self) -> RadixNode:
        """根哨兵节点"""
        return self._root

    def _check_key(self, key: Any) -> str:
        if self.settings.enable_validation:
            return self.validator.validate_key(key)
        return key

    # ========== 基本操作 ==========

    def insert(self, key: str, value: Any) -> None:
        """
        插入键值对

        Raises:
            InvalidKeyError: 键无效
            DuplicateKeyError: 键已存在且未被删除
        """
        key = self._check_key(key)
        try:
            self._root.insert(key, value)
        except DuplicateKeyError:
            self.logger.warning(f"插入失败，键已存在: {key}")
            raise
        self.logger.debug(f"插入键: {key}")

    def delete(self, key: str) -> bool:
        """删除键，返回是否删除成功"""
        key = self._check_key(key)
        removed = self._root.delete(key)
        if removed:
            self.logger.debug(f"删除键: {key}")
        else:
            self.logger.debug(f"删除的键不存在: {key}")
        return removed

    def find(self, key: str, default: Optional[Any] = None) -> Any:
        """精确查找"""
        key = self._check_key(key)
        return self._root.find(key, default)

    def contains(self, key: str) -> bool:
        """检查键是否存在"""
        key = self._check_key(key)
        return self._root.contains(key)

    def search(self, prefix: str) -> List[Any]:
        """前缀搜索，空前缀返回全部值"""
        if self.settings.enable_validation:
            prefix = self.validator.validate_prefix(prefix)
        results = self._root.search(prefix)
        self.logger.debug(f"前缀搜索: '{prefix}' -> {len(results)}条结果")
        return results

    def size(self) -> int:
        """有效键数量"""
        return self._root.size()

    # ========== 批量操作 ==========

    def insert_many(
            self,
            pairs: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]],
            skip_duplicates: bool = False
    ) -> int:
        """
        批量插入

        Args:
            pairs: 字典或(键, 值)序列
            skip_duplicates: 为True时跳过重复键，否则遇到重复键立即抛出
                （此前已插入的键保留）

        Returns:
            实际插入的数量
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()

        inserted = 0
        skipped = 0
        for key, value in pairs:
            try:
                self.insert(key, value)
                inserted += 1
            except DuplicateKeyError:
                if not skip_duplicates:
                    raise
                skipped += 1

        self.logger.info(f"批量插入完成: 插入{inserted}个, 跳过重复{skipped}个")
        return inserted

    def clear(self) -> None:
        """清空所有键"""
        self._root = RadixNode.root()
        self.logger.info(f"基数树已清空: {self.settings.tree_name}")

    # ========== 信息与调试 ==========

    def items(self) -> List[Tuple[str, Any]]:
        """所有有效的(键, 值)对，顺序不保证"""
        return self._root.items()

    def get_stats(self) -> Dict[str, Any]:
        """
        获取统计信息

        Returns:
            {
                'tree_name': 树名称,
                'size': 有效键数量,
                'node_count': 节点总数（含分支和墓碑，不含根）,
                'depth': 树深度
            }
        """
        return {
            'tree_name': self.settings.tree_name,
            'size': self._root.size(),
            'node_count': self._root.node_count(),
            'depth': self._root.depth(),
        }

    def render(self, show_values: bool = True) -> str:
        """渲染为文本树"""
        return render_tree(self._root, show_values=show_values)

    # ========== 特殊方法 ==========

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._root.contains(key)

    def __getitem__(self, key: str) -> Any:
        key = self._check_key(key)
        if not self._root.contains(key):
            raise KeyError(key)
        return self._root.find(key)

    def __repr__(self) -> str:
        return f"RadixTree({self.settings.tree_name!r}, size={self.size()})"
