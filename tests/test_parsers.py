from parsers import PosixOutputParser, WindowsOutputParser, parser_for_platform, to_whole_ms

MAC_REPLY = """PING 203.0.113.1 (203.0.113.1): 56 data bytes
64 bytes from 203.0.113.1: icmp_seq=0 ttl=57 time=19.6 ms

--- 203.0.113.1 ping statistics ---
1 packets transmitted, 1 packets received, 0.0% packet loss
round-trip min/avg/max/stddev = 19.602/19.602/19.602/0.000 ms
"""

WIN_REPLY = """
Pinging 203.0.113.1 with 32 bytes of data:
Reply from 203.0.113.1: bytes=32 time=12ms TTL=117

Ping statistics for 203.0.113.1:
    Packets: Sent = 1, Received = 1, Lost = 0 (0% loss),
"""

WIN_LOCAL = """
Pinging 127.0.0.1 with 32 bytes of data:
Reply from 127.0.0.1: bytes=32 time<1ms TTL=128
"""


def test_platform_selection():
    assert isinstance(parser_for_platform("win32"), WindowsOutputParser)
    assert isinstance(parser_for_platform("linux"), PosixOutputParser)
    assert isinstance(parser_for_platform("darwin"), PosixOutputParser)


def test_posix_reply_line_and_latency():
    reply = PosixOutputParser().find_reply(MAC_REPLY)
    assert reply.line == "64 bytes from 203.0.113.1: icmp_seq=0 ttl=57 time=19.6 ms"
    assert reply.latency_ms == 20


def test_posix_integer_latency():
    reply = PosixOutputParser().find_reply("64 bytes from h: icmp_seq=1 ttl=57 time=10 ms\n")
    assert reply.latency_ms == 10


def test_posix_sub_millisecond_counts_as_one():
    reply = PosixOutputParser().find_reply("64 bytes from 127.0.0.1: icmp_seq=1 ttl=64 time=0.045 ms\n")
    assert reply.latency_ms == 1


def test_posix_reply_without_time():
    reply = PosixOutputParser().find_reply("From 10.0.0.1 icmp_seq=1 Destination Host Unreachable\n")
    assert reply.line.startswith("From 10.0.0.1")
    assert reply.latency_ms is None


def test_posix_no_reply_line():
    assert PosixOutputParser().find_reply("PING host (1.2.3.4)\n\n") is None


def test_windows_reply():
    reply = WindowsOutputParser().find_reply(WIN_REPLY)
    assert reply.line == "Reply from 203.0.113.1: bytes=32 time=12ms TTL=117"
    assert reply.latency_ms == 12


def test_windows_sub_millisecond_marker_is_one():
    assert WindowsOutputParser().find_reply(WIN_LOCAL).latency_ms == 1


def test_windows_no_reply_line():
    assert WindowsOutputParser().find_reply("Request timed out.\n") is None


def test_to_whole_ms():
    assert to_whole_ms("10.4") == 10
    assert to_whole_ms("0") == 1
    assert to_whole_ms("x") is None


def test_halves_round_up():
    assert to_whole_ms("10.5") == 11
    assert to_whole_ms("11.5") == 12
    assert to_whole_ms("0.5") == 1
