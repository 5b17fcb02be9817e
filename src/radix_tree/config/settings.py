"""
基数树配置设置
"""
from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict

from ..exceptions import ConfigError


@dataclass
class TreeSettings:
    """
    基数树配置类
    使用dataclass确保配置的类型安全
    """

    # 基本配置
    tree_name: str = "radix_tree"
    version: str = "1.0.0"

    # 日志配置
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    enable_logging: bool = True

    # 键校验配置
    enable_validation: bool = True
    max_key_length: Optional[int] = None  # None表示不限制

    def __post_init__(self):
        """初始化后处理，验证配置"""
        self._validate_settings()

    def _validate_settings(self):
        """验证配置值"""
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if not isinstance(self.log_level, str) or self.log_level.upper() not in valid_log_levels:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level"
            )
        self.log_level = self.log_level.upper()

        if self.max_key_length is not None:
            if not isinstance(self.max_key_length, int) or self.max_key_length <= 0:
                raise ConfigError(
                    message=f"键最大长度必须是正整数: {self.max_key_length}",
                    config_key="max_key_length"
                )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'TreeSettings':
        """从字典创建配置"""
        # 过滤无效的配置键
        valid_keys = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_config)
