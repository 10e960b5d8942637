"""语法扫描工具的测试"""

from hostsfile.grammar import discard_ws, is_comment, scan_address, strip_line_ending


def test_discard_ws() -> None:
    assert discard_ws("    asdf") == 4
    assert discard_ws("    ") == 4
    assert discard_ws(" \t \tx") == 4
    assert discard_ws(".") == 0
    assert discard_ws("") == 0


def test_discard_ws_from_offset() -> None:
    assert discard_ws("ab  cd", 2) == 4


def test_scan_ipv4() -> None:
    assert scan_address("127.0.0.1 localhost") == ("127.0.0.1", 9)


def test_scan_ipv6() -> None:
    assert scan_address("::1") == ("::1", 3)


def test_scan_stops_outside_alphabet() -> None:
    """十六进制字母会被吞入候选地址，其他字符终止扫描"""
    assert scan_address("127.0.0.1localhost") == ("127.0.0.1", 9)
    assert scan_address("10.0.0.1abc host") == ("10.0.0.1abc", 11)
    assert scan_address("FE80::Z") == ("FE80::", 6)


def test_scan_empty() -> None:
    assert scan_address("host 1.1.1.1") == ("", 0)


def test_is_comment() -> None:
    assert is_comment("#")
    assert is_comment("#note")
    assert not is_comment("a#b")


def test_strip_line_ending() -> None:
    assert strip_line_ending("a b\n") == "a b"
    assert strip_line_ending("a b\r\n") == "a b"
    assert strip_line_ending("a b \t") == "a b \t"
