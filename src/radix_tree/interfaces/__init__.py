"""
接口定义包
"""

from .iprefix_index import IPrefixIndex

__all__ = ['IPrefixIndex']
