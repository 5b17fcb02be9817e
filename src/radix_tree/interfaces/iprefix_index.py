"""
前缀索引接口定义
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional


class IPrefixIndex(ABC):
    """前缀索引接口 - 定义字符串键容器的基本行为"""

    @abstractmethod
    def insert(self, key: str, value: Any) -> None:
        """
        插入键值对

        Raises:
            DuplicateKeyError: 键已存在且未被删除
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """删除键，返回是否删除了关联"""
        pass

    @abstractmethod
    def find(self, key: str, default: Optional[Any] = None) -> Any:
        """精确查找，不存在时返回default"""
        pass

    @abstractmethod
    def contains(self, key: str) -> bool:
        """检查键是否存在（未被删除）"""
        pass

    @abstractmethod
    def search(self, prefix: str) -> List[Any]:
        """
        前缀搜索

        Args:
            prefix: 键前缀

        Returns:
            所有以prefix开头的有效键对应的值，顺序不保证
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """有效键数量"""
        pass
