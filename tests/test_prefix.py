"""
测试公共前缀工具
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from radix_tree.core.prefix import common_prefix


def test_common_beginning():
    """测试存在公共前缀"""
    assert common_prefix("HelloWorld", "HelloGold") == "Hello"


def test_no_common_beginning():
    """测试没有公共前缀"""
    assert common_prefix("HelloWorld", "Superman") == ""


def test_one_contains_the_other():
    """测试一个字符串是另一个的前缀"""
    assert common_prefix("roman", "romanus") == "roman"
    assert common_prefix("romanus", "roman") == "roman"
    assert common_prefix("ruber", "ruber") == "ruber"


def test_empty_strings():
    """测试空字符串"""
    assert common_prefix("", "abc") == ""
    assert common_prefix("abc", "") == ""
    assert common_prefix("", "") == ""


def test_case_and_whitespace_are_significant():
    """测试大小写和空白按原字符比较"""
    assert common_prefix("Abc", "abc") == ""
    assert common_prefix("a b", "a c") == "a "
