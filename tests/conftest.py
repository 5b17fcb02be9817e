"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from radix_tree import RadixTree


# 经典基数树示例数据
CLASSIC_ENTRIES = [
    ("romane", 1),
    ("romanus", 2),
    ("romulus", 3),
    ("rubens", 4),
    ("ruber", 5),
    ("rubicon", 6),
    ("rubicundus", 7),
]


@pytest.fixture
def classic_entries():
    return list(CLASSIC_ENTRIES)


@pytest.fixture
def classic_tree():
    """按顺序插入经典示例数据的树"""
    tree = RadixTree({"tree_name": "classic", "enable_logging": False})
    for key, value in CLASSIC_ENTRIES:
        tree.insert(key, value)
    return tree
