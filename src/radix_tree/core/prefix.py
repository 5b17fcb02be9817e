"""
字符串前缀工具
"""


def common_prefix(a: str, b: str) -> str:
    """
    计算两个字符串的最长公共前缀

    从左到右逐字符比较，遇到不同字符或任一字符串结束即停止。

    Examples:
        >>> common_prefix("HelloWorld", "HelloGold")
        'Hello'
        >>> common_prefix("HelloWorld", "Superman")
        ''
    """
    length = min(len(a), len(b))
    index = 0
    while index < length and a[index] == b[index]:
        index += 1
    return a[:index]
