"""
键验证器
"""
from typing import Any, Optional

from ..exceptions import InvalidKeyError


class KeyValidator:
    """键与前缀参数验证器"""

    def __init__(self, max_key_length: Optional[int] = None):
        self._max_key_length = max_key_length

    def validate_key(self, key: Any) -> str:
        """
        验证插入、查找、删除所用的键

        Raises:
            InvalidKeyError: 非字符串或超过最大长度（空串是合法的键）
        """
        if not isinstance(key, str):
            raise InvalidKeyError(key, reason=f"键必须是字符串，实际为 {type(key).__name__}")

        if self._max_key_length is not None and len(key) > self._max_key_length:
            raise InvalidKeyError(
                key,
                reason=f"键长度超过限制: {len(key)} > {self._max_key_length}"
            )

        return key

    def validate_prefix(self, prefix: Any) -> str:
        """验证前缀搜索参数，空前缀合法"""
        if not isinstance(prefix, str):
            raise InvalidKeyError(
                prefix,
                reason=f"前缀必须是字符串，实际为 {type(prefix).__name__}",
                field="prefix"
            )
        return prefix
