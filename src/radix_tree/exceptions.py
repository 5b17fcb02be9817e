"""
基数树异常体系
"""
from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """所有异常的基类"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于序列化"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置和验证异常 ====================
class ConfigError(BaseError):
    """配置错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


class ValidationError(BaseError):
    """数据验证错误"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        reason: Optional[str] = None,
        code: str = "VALIDATION_ERROR",
        **kwargs
    ):
        details = {
            "field": field,
            "value": value,
            "reason": reason
        }
        super().__init__(message, code=code, details=details, **kwargs)


class InvalidKeyError(ValidationError):
    """键无效（非字符串、空串或超长）"""
    def __init__(self, key: Any, reason: str, field: str = "key", **kwargs):
        super().__init__(
            message=f"无效的键 {key!r}: {reason}",
            field=field,
            value=key,
            reason=reason,
            code="INVALID_KEY",
            **kwargs
        )


# ==================== 树结构相关异常 ====================
class TreeError(BaseError):
    """树结构错误基类"""
    pass


class DuplicateKeyError(TreeError):
    """键已存在且未被删除"""
    def __init__(self, key: str, **kwargs):
        super().__init__(
            message=f"重复的键: '{key}'",
            code="DUPLICATE_KEY",
            details={"key": key},
            **kwargs
        )

    @property
    def key(self) -> str:
        return self.details["key"]


# ==================== 导入相关异常 ====================
class DataImportError(BaseError):
    """批量导入过程异常"""
    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        details = {"file_path": file_path} if file_path else {}
        super().__init__(message, code="IMPORT_ERROR", details=details, **kwargs)
