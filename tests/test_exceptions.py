"""
测试异常体系
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from radix_tree.exceptions import (
    BaseError, ConfigError, ValidationError, InvalidKeyError,
    TreeError, DuplicateKeyError, DataImportError
)


def test_duplicate_key_error():
    """测试重复键异常"""
    error = DuplicateKeyError("romulus")

    assert error.code == "DUPLICATE_KEY"
    assert error.key == "romulus"
    assert error.details["key"] == "romulus"
    assert "romulus" in str(error)
    assert str(error).startswith("[DUPLICATE_KEY]")


def test_invalid_key_error():
    """测试无效键异常"""
    error = InvalidKeyError(123, reason="键必须是字符串")

    assert error.code == "INVALID_KEY"
    assert error.details["value"] == 123
    assert error.details["field"] == "key"
    assert error.details["reason"] == "键必须是字符串"


def test_exception_inheritance():
    """测试异常继承关系"""
    assert issubclass(DuplicateKeyError, TreeError)
    assert issubclass(DuplicateKeyError, BaseError)
    assert issubclass(InvalidKeyError, ValidationError)
    assert issubclass(ConfigError, BaseError)
    assert issubclass(DataImportError, BaseError)
    assert not issubclass(DataImportError, ImportError)


def test_to_dict():
    """测试异常序列化"""
    data = DataImportError("读取失败", file_path="data.csv").to_dict()

    assert data["code"] == "IMPORT_ERROR"
    assert data["message"] == "读取失败"
    assert data["details"] == {"file_path": "data.csv"}
    assert data["context"] == {}
    assert "timestamp" in data


def test_context_is_kept():
    """测试附加上下文"""
    error = DuplicateKeyError("a", context={"operation": "insert_many"})
    assert error.context == {"operation": "insert_many"}
