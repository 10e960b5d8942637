"""
hostsfile - 解析 hosts(7) 格式的静态主机名解析表
"""

__version__ = "1.0.0"
__author__ = "hostsfile Project"

from hostsfile.app import HostsReader
from hostsfile.config import Config
from hostsfile.entry_parser import parse_entry
from hostsfile.errors import (
    EntryParseError,
    HostsError,
    HostsFileError,
    HostsNotAFileError,
    HostsNotFoundError,
    HostsOpenError,
    HostsReadError,
    InvalidAddressError,
    LineParseError,
    LocateError,
    MissingHostnameError,
    MissingSeparatorError,
)
from hostsfile.file_parser import HostsFileParser, parse_file, parse_lines
from hostsfile.locator import locate_system_hosts_file, parse_system_hosts_file
from hostsfile.models import HostEntry

__all__ = [
    "HostsReader",
    "Config",
    "HostEntry",
    "HostsFileParser",
    "parse_entry",
    "parse_lines",
    "parse_file",
    "locate_system_hosts_file",
    "parse_system_hosts_file",
    "HostsError",
    "EntryParseError",
    "InvalidAddressError",
    "MissingSeparatorError",
    "MissingHostnameError",
    "HostsFileError",
    "HostsNotFoundError",
    "HostsNotAFileError",
    "HostsOpenError",
    "HostsReadError",
    "LineParseError",
    "LocateError",
]
