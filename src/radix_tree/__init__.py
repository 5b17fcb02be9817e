"""
基数树 - 压缩前缀树键值容器
"""

__version__ = "1.0.0"

from .core import RadixNode, common_prefix
from .tree import RadixTree
from .exceptions import (
    BaseError, ConfigError, ValidationError, InvalidKeyError,
    TreeError, DuplicateKeyError, DataImportError
)

__all__ = [
    'RadixTree',
    'RadixNode',
    'common_prefix',
    'BaseError',
    'ConfigError',
    'ValidationError',
    'InvalidKeyError',
    'TreeError',
    'DuplicateKeyError',
    'DataImportError',
]
