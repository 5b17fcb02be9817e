"""
表格导入器
从CSV或Excel表格批量加载键值对到基数树
"""
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Any, Optional, Tuple

import pandas as pd

from .base_importer import DataImporter
from radix_tree.exceptions import DataImportError
from radix_tree.tree import RadixTree


class TableImporter(DataImporter):
    """
    表格导入器

    功能：
    1. 读取CSV（read_csv）或Excel（read_excel）表格
    2. 键列按原样读为字符串（"NA"、"null"等不会被当作缺失值），空单元格的行跳过
    3. 值列只有空单元格记为None

    配置项：
        key_column: 键列名，默认 "key"
        value_column: 值列名，默认 "value"
        sheet_name: Excel工作表，默认第0张
        skip_duplicates: 是否跳过重复键，默认False
        strip_keys: 是否去除键两端空白，默认False
    """

    SUPPORTED_SUFFIXES = {'.csv', '.xlsx', '.xls'}

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        config = config or {}
        self.key_column = config.get('key_column', 'key')
        self.value_column = config.get('value_column', 'value')
        self.sheet_name = config.get('sheet_name', 0)
        self.strip_keys = config.get('strip_keys', False)
        super().__init__(config)

    def _validate_config(self):
        super()._validate_config()
        for name, column in (('key_column', self.key_column), ('value_column', self.value_column)):
            if not str(column).strip():
                raise DataImportError(f"列名不能为空: {name}")
        if self.key_column == self.value_column:
            raise DataImportError(f"键列和值列不能相同: {self.key_column}")

    # ============ 抽象方法实现 ============

    def validate_file(self, file_path: str) -> bool:
        """验证文件存在且格式受支持"""
        path = Path(file_path)
        return path.is_file() and path.suffix.lower() in self.SUPPORTED_SUFFIXES

    def extract_metadata(self, file_path: str) -> Dict[str, Any]:
        """提取文件元数据"""
        metadata = {
            'file_path': file_path,
            'file_name': Path(file_path).name,
            'import_time': datetime.now().isoformat(),
            'config': self.config
        }

        if os.path.exists(file_path):
            file_stat = os.stat(file_path)
            metadata.update({
                'file_size': file_stat.st_size,
                'modified_time': datetime.fromtimestamp(file_stat.st_mtime).isoformat()
            })

        return metadata

    def parse_data(self, file_path: str) -> List[Dict[str, Any]]:
        """读取表格并解析为行记录"""
        if not self.validate_file(file_path):
            raise DataImportError(f"无效的文件: {file_path}", file_path=file_path)

        # 关闭pandas默认的缺失值字符串，只把值列的空单元格当作缺失
        read_options = {
            'dtype': {self.key_column: str},
            'keep_default_na': False,
            'na_values': {self.value_column: ['']},
        }

        suffix = Path(file_path).suffix.lower()
        try:
            if suffix == '.csv':
                df = pd.read_csv(file_path, **read_options)
            else:
                df = pd.read_excel(file_path, sheet_name=self.sheet_name, **read_options)
        except Exception as e:
            raise DataImportError(f"读取表格失败: {e}", file_path=file_path) from e

        self.stats['files_processed'] += 1
        return self.parse_dataframe(df)

    def parse_dataframe(self, df: pd.DataFrame) -> List[Dict[str, Any]]:
        """从DataFrame提取行记录"""
        for column in (self.key_column, self.value_column):
            if column not in df.columns:
                raise DataImportError(f"表格缺少列: {column}")

        records = []
        for idx, row in df.iterrows():
            self.stats['rows_read'] += 1

            raw_key = row[self.key_column]
            if pd.isna(raw_key):
                self.stats['rows_skipped'] += 1
                continue

            key = str(raw_key).strip() if self.strip_keys else str(raw_key)
            # 表格里无法区分空键和空单元格，按空行处理
            if key == '':
                self.stats['rows_skipped'] += 1
                continue

            value = row[self.value_column]
            records.append({
                'row_index': idx,
                'key': key,
                'value': None if pd.isna(value) else value
            })

        return records

    # ============ 导入到树 ============

    def import_dataframe(self, tree: RadixTree, df: pd.DataFrame) -> Dict[str, Any]:
        """将DataFrame导入到树"""
        entries: List[Tuple[str, Any]] = self.convert_to_entries(self.parse_dataframe(df))
        return self.import_entries(tree, entries)
