"""
Parsers for the text printed by the platform ping utility.

Each parser looks for the reply line of a single echo request and pulls the
round-trip time out of it. Output formats differ between Windows and the
POSIX family, so one parser is chosen per process by parser_for_platform().
"""
import re, sys
from dataclasses import dataclass
from typing import Optional

SUB_MS_LATENCY = 1  # "time<1ms" is counted as one millisecond

POSIX_RE_TIME = re.compile(r"time[=<]\s*([\d.]+)\s*ms", re.IGNORECASE)
WIN_RE_TIME = re.compile(r"time=\s*(\d+)\s*ms", re.IGNORECASE)


@dataclass
class ParsedReply:
    line: str
    latency_ms: Optional[int] = None


def to_whole_ms(text: str) -> Optional[int]:
    """Round a latency like '10.4' to whole milliseconds (halves up), never below SUB_MS_LATENCY."""
    try:
        value = float(text)
    except ValueError:
        return None
    return max(SUB_MS_LATENCY, int(value + 0.5))


class OutputParser:
    name = "base"

    def find_reply(self, output: str) -> Optional[ParsedReply]:
        """Return the reply line (trimmed) and its latency, or None when no reply line is present."""
        for line in output.splitlines():
            if self.is_reply(line):
                line = line.strip()
                return ParsedReply(line=line, latency_ms=self.latency(line))
        return None

    def is_reply(self, line: str) -> bool:
        raise NotImplementedError

    def latency(self, line: str) -> Optional[int]:
        raise NotImplementedError


class PosixOutputParser(OutputParser):
    # 64 bytes from 203.0.113.1: icmp_seq=1 ttl=57 time=10.3 ms
    name = "posix"

    def is_reply(self, line):
        return "icmp_seq" in line

    def latency(self, line):
        m = POSIX_RE_TIME.search(line)
        return to_whole_ms(m.group(1)) if m else None


class WindowsOutputParser(OutputParser):
    # Reply from 203.0.113.1: bytes=32 time=10ms TTL=117
    # Reply from 127.0.0.1: bytes=32 time<1ms TTL=128
    name = "windows"

    def is_reply(self, line):
        return "time=" in line or "time<1ms" in line

    def latency(self, line):
        if "time<1ms" in line:
            return SUB_MS_LATENCY
        m = WIN_RE_TIME.search(line)
        return int(m.group(1)) if m else None


def is_windows(platform: Optional[str] = None) -> bool:
    return (platform or sys.platform).startswith("win")


def parser_for_platform(platform: Optional[str] = None) -> OutputParser:
    return WindowsOutputParser() if is_windows(platform) else PosixOutputParser()
