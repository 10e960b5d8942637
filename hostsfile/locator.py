"""
定位系统 hosts 文件

平台相关的分支只存在于本模块，实现于导入时根据 sys.platform 选定。
"""

import sys
import uuid
from pathlib import Path
from typing import List

from hostsfile.errors import LocateError
from hostsfile.file_parser import parse_file
from hostsfile.models import HostEntry

POSIX_HOSTS_PATH = Path("/etc/hosts")

# FOLDERID_System (%windir%\System32)
FOLDERID_SYSTEM = uuid.UUID("1AC14E77-02E7-4E5D-B744-2EB1AE5198B7")


def _locate_posix() -> Path:
    return POSIX_HOSTS_PATH


def _known_folder_path(folder_id: uuid.UUID) -> Path:
    """
    通过 SHGetKnownFolderPath 解析 Windows 已知文件夹

    异常:
        LocateError: 系统调用失败
    """
    import ctypes
    from ctypes import wintypes

    class GUID(ctypes.Structure):
        _fields_ = [
            ("Data1", wintypes.DWORD),
            ("Data2", wintypes.WORD),
            ("Data3", wintypes.WORD),
            ("Data4", ctypes.c_ubyte * 8),
        ]

    guid = GUID(
        folder_id.time_low,
        folder_id.time_mid,
        folder_id.time_hi_version,
        (ctypes.c_ubyte * 8)(*folder_id.bytes[8:]),
    )
    path_ptr = ctypes.c_wchar_p()
    try:
        result = ctypes.windll.shell32.SHGetKnownFolderPath(
            ctypes.byref(guid), 0, None, ctypes.byref(path_ptr)
        )
    except OSError as e:
        raise LocateError(f"调用 SHGetKnownFolderPath 失败: {e}") from e

    try:
        if result != 0 or not path_ptr.value:
            raise LocateError(
                f"无法解析已知文件夹 {folder_id} (HRESULT 0x{result & 0xFFFFFFFF:08X})"
            )
        return Path(path_ptr.value)
    finally:
        ctypes.windll.ole32.CoTaskMemFree(path_ptr)


def _locate_windows() -> Path:
    return _known_folder_path(FOLDERID_SYSTEM) / "drivers" / "etc" / "hosts"


if sys.platform == "win32":
    _locate = _locate_windows
else:
    _locate = _locate_posix


def locate_system_hosts_file() -> Path:
    """
    返回当前平台约定的 hosts 文件路径

    异常:
        LocateError: 无法确定路径
    """
    return _locate()


def parse_system_hosts_file() -> List[HostEntry]:
    """解析系统 hosts 文件"""
    return parse_file(locate_system_hosts_file())
