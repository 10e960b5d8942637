"""
hosts(7) 语法的底层扫描工具

    Entry   := WS* Address WS+ Name (WS+ Name)* (WS* Comment)?
    Comment := "#" any-character*
    WS      := " " | "\t"
"""

from typing import FrozenSet, Tuple

WHITESPACE: FrozenSet[str] = frozenset(" \t")
ADDRESS_ALPHABET: FrozenSet[str] = frozenset("0123456789abcdefABCDEF.:")
COMMENT_MARKER = "#"


def discard_ws(text: str, start: int = 0) -> int:
    """
    跳过空格和制表符

    参数:
        text: 输入文本
        start: 开始位置

    返回:
        第一个非空白字符的位置（或文本长度）
    """
    pos = start
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def scan_address(text: str, start: int = 0) -> Tuple[str, int]:
    """
    贪婪扫描地址字符集中的字符

    扫描时不校验地址语法，任何不在字符集中的字符都会终止扫描。

    返回:
        (候选地址, 结束位置)
    """
    pos = start
    while pos < len(text) and text[pos] in ADDRESS_ALPHABET:
        pos += 1
    return text[start:pos], pos


def is_comment(token: str) -> bool:
    return token.startswith(COMMENT_MARKER)


def strip_line_ending(line: str) -> str:
    """去掉行尾的 \\n 或 \\r\\n"""
    return line.rstrip("\r\n")
