"""
导入导出服务
"""

from .base_importer import DataImporter
from .table_importer import TableImporter

__all__ = ['DataImporter', 'TableImporter']
