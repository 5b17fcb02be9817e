"""
配置模块
"""

from .settings import TreeSettings
from .validator import KeyValidator

__all__ = ['TreeSettings', 'KeyValidator']
