"""
hosts 文件解析模块

逐行驱动条目解析器，要么返回全部条目，要么在第一个错误处中止。
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from hostsfile.entry_parser import parse_entry
from hostsfile.errors import (
    EntryParseError,
    HostsError,
    HostsNotAFileError,
    HostsNotFoundError,
    HostsOpenError,
    HostsReadError,
    LineParseError,
)
from hostsfile.grammar import discard_ws, is_comment, strip_line_ending
from hostsfile.models import HostEntry


def parse_lines(
    lines: Iterable[Union[str, bytes]],
    path: Union[Path, str, None] = None,
) -> List[HostEntry]:
    """
    解析任意行序列

    参数:
        lines: 行序列（文件对象、列表、StringIO 等），bytes 行按 UTF-8 逐行解码
        path: 行的来源，仅用于错误信息

    返回:
        按文件顺序排列的 HostEntry 列表

    异常:
        LineParseError: 某一行不符合语法
        HostsReadError: 读取某一行时发生 I/O 或解码错误
    """
    entries: List[HostEntry] = []
    line_number = 0
    iterator = iter(lines)

    while True:
        try:
            raw = next(iterator)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as e:
            raise HostsReadError(line_number + 1, str(e), path) from e
        line_number += 1

        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise HostsReadError(line_number, str(e), path) from e

        line = strip_line_ending(raw)
        line = line[discard_ws(line):]

        # 跳过空行和注释行
        if not line or is_comment(line):
            continue

        try:
            entries.append(parse_entry(line))
        except EntryParseError as e:
            raise LineParseError(e, line_number, line, path) from e

    return entries


def parse_file(path: Union[Path, str]) -> List[HostEntry]:
    """
    解析 hosts(7) 格式的文件

    参数:
        path: hosts 文件路径

    返回:
        按文件顺序排列的 HostEntry 列表

    异常:
        HostsNotFoundError: 路径不存在
        HostsNotAFileError: 路径不是普通文件
        HostsOpenError: 文件无法访问或无法打开
        HostsReadError: 读取过程中出错
        LineParseError: 某一行不符合语法
    """
    path = Path(path)
    try:
        exists = path.exists()
        is_file = exists and path.is_file()
    except OSError as e:
        raise HostsOpenError(path, str(e)) from e

    if not exists:
        raise HostsNotFoundError(path)
    if not is_file:
        raise HostsNotAFileError(path)

    try:
        # 按行解码，解码错误对应到具体行号
        f = open(path, "rb")
    except OSError as e:
        raise HostsOpenError(path, str(e)) from e

    with f:
        return parse_lines(f, path)


class HostsFileParser:
    """
    解析单个 hosts 文件并记录日志

    每次调用 parse() 都会重新打开文件，实例之间不共享状态。
    """

    def __init__(self, hosts_path: Union[Path, str], logger: Optional[logging.Logger] = None):
        """
        初始化 hosts 文件解析器

        参数:
            hosts_path: hosts 文件路径
            logger: 日志记录器实例
        """
        self.hosts_path = Path(hosts_path)
        self.logger = logger or logging.getLogger("hostsfile")

    def parse(self) -> List[HostEntry]:
        """
        解析 hosts 文件

        返回:
            HostEntry 对象列表

        异常:
            HostsError: 任何文件或语法错误
        """
        self.logger.debug(f"正在解析 hosts 文件: {self.hosts_path}")
        try:
            entries = parse_file(self.hosts_path)
        except LineParseError as e:
            self.logger.error(f"hosts 文件语法错误: {e}")
            raise
        except HostsError as e:
            self.logger.error(f"读取 hosts 文件失败: {e}")
            raise

        self.logger.info(f"已解析 {len(entries)} 条 host 记录: {self.hosts_path}")
        return entries
