"""
数据导入器基类
子类负责把文件解析为行记录，基类负责校验条目并写入基数树
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Tuple

from radix_tree.exceptions import DataImportError, ValidationError
from radix_tree.tree import RadixTree


logger = logging.getLogger(__name__)


class DataImporter(ABC):
    """
    数据导入器抽象基类

    导入是整体操作：所有条目先通过键校验和重复检查，再一次性插入，
    任何一条不合格都不会改动树。
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.skip_duplicates = self.config.get('skip_duplicates', False)

        # 统计信息
        self.stats = {
            'files_processed': 0,
            'rows_read': 0,
            'rows_skipped': 0,
            'inserted': 0,
            'duplicates': 0
        }

        self._validate_config()

    def _validate_config(self):
        """验证配置参数"""
        if not isinstance(self.skip_duplicates, bool):
            raise DataImportError(f"skip_duplicates必须是布尔值: {self.skip_duplicates!r}")

    @abstractmethod
    def validate_file(self, file_path: str) -> bool:
        """验证文件是否可导入"""
        pass

    @abstractmethod
    def extract_metadata(self, file_path: str) -> Dict[str, Any]:
        """提取文件元数据"""
        pass

    @abstractmethod
    def parse_data(self, file_path: str) -> List[Dict[str, Any]]:
        """解析为行记录，每条记录至少包含 'key' 和 'value'"""
        pass

    def convert_to_entries(self, records: List[Dict[str, Any]]) -> List[Tuple[str, Any]]:
        """转换为(键, 值)条目"""
        return [(record['key'], record['value']) for record in records]

    def import_data(self, file_path: str) -> List[Tuple[str, Any]]:
        """验证文件并解析为条目"""
        if not self.validate_file(file_path):
            raise DataImportError(f"文件验证失败: {file_path}", file_path=file_path)

        return self.convert_to_entries(self.parse_data(file_path))

    # ============ 写入树 ============

    def import_into_tree(self, tree: RadixTree, file_path: str) -> Dict[str, Any]:
        """
        将文件导入到树

        Returns:
            导入统计信息，附带文件元数据
        """
        entries = self.import_data(file_path)
        result = self.import_entries(tree, entries)
        result['metadata'] = self.extract_metadata(file_path)
        logger.info(f"文件导入完成: {file_path}, 插入{result['inserted']}个键")
        return result

    def import_entries(self, tree: RadixTree, entries: List[Tuple[str, Any]]) -> Dict[str, Any]:
        """
        校验全部条目后插入树

        Raises:
            DataImportError: 存在无效键，或不跳过重复时存在重复键
        """
        self._check_entries(tree, entries)
        inserted = tree.insert_many(entries, skip_duplicates=self.skip_duplicates)

        duplicates = len(entries) - inserted
        self.stats['inserted'] += inserted
        self.stats['duplicates'] += duplicates

        return {
            'entries': len(entries),
            'inserted': inserted,
            'duplicates': duplicates,
            'tree_size': tree.size()
        }

    def _check_entries(self, tree: RadixTree, entries: List[Tuple[str, Any]]) -> None:
        """插入前检查键有效性和重复"""
        seen = set()
        for key, _ in entries:
            if tree.settings.enable_validation:
                try:
                    tree.validator.validate_key(key)
                except ValidationError as e:
                    raise DataImportError(f"导入失败，无效的键 {key!r}: {e.details['reason']}") from e

            if not self.skip_duplicates and (key in seen or tree.contains(key)):
                raise DataImportError(f"导入失败，存在重复键: {key}")
            seen.add(key)

    def get_import_statistics(self) -> Dict[str, Any]:
        """获取导入统计"""
        return dict(self.stats)

    def reset_statistics(self):
        """重置统计"""
        for key in self.stats:
            self.stats[key] = 0
