"""
基数树基本使用示例
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from radix_tree import RadixTree, DuplicateKeyError


def main():
    """主函数"""
    print("=" * 60)
    print("基数树 - 基本使用示例")
    print("=" * 60)

    # 1. 创建树
    print("\n1. 创建基数树...")
    tree = RadixTree({
        "tree_name": "拉丁词根",
        "log_level": "INFO",
    })

    # 2. 插入经典示例数据
    print("\n2. 插入数据...")
    tree.insert_many([
        ("romane", 1),
        ("romanus", 2),
        ("romulus", 3),
        ("rubens", 4),
        ("ruber", 5),
        ("rubicon", 6),
        ("rubicundus", 7),
    ])
    print(f"   键数量: {tree.size()}")
    print(tree.render())

    # 3. 查询
    print("\n3. 查询...")
    print(f"   find('rubicon') = {tree.find('rubicon')}")
    print(f"   search('rom') = {sorted(tree.search('rom'))}")
    print(f"   search('rub') = {sorted(tree.search('rub'))}")

    # 4. 重复插入
    print("\n4. 重复插入...")
    try:
        tree.insert("romulus", 99)
    except DuplicateKeyError as e:
        print(f"   {e}")

    # 5. 删除
    print("\n5. 删除 ruber...")
    tree.delete("ruber")
    print(f"   contains('ruber') = {tree.contains('ruber')}")
    print(f"   search('rub') = {sorted(tree.search('rub'))}")

    # 6. 统计信息
    print("\n6. 统计信息:")
    for key, value in tree.get_stats().items():
        print(f"   {key}: {value}")


if __name__ == "__main__":
    main()
