import subprocess
import pytest

LINUX_REPLY = """PING 203.0.113.1 (203.0.113.1) 56(84) bytes of data.
64 bytes from 203.0.113.1: icmp_seq=1 ttl=57 time={ms} ms

--- 203.0.113.1 ping statistics ---
1 packets transmitted, 1 received, 0% packet loss, time 0ms
"""

LINUX_TIMEOUT = """PING 203.0.113.1 (203.0.113.1) 56(84) bytes of data.

--- 203.0.113.1 ping statistics ---
1 packets transmitted, 0 received, 100% packet loss, time 0ms
"""


class FakeRunner:
    """Stands in for subprocess.run; replays a script of outcomes, one per call."""
    def __init__(self, outcomes, on_call=None):
        self.outcomes = list(outcomes); self.calls = []; self.on_call = on_call
    def __call__(self, cmd, **kwargs):
        self.calls.append(cmd)
        if self.on_call is not None:
            self.on_call(len(self.calls))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, (int, float)):
            return subprocess.CompletedProcess(cmd, 0, LINUX_REPLY.format(ms=outcome), "")
        return subprocess.CompletedProcess(cmd, 1, LINUX_TIMEOUT, "")


class BellCounter:
    def __init__(self): self.count = 0
    def __call__(self): self.count += 1


@pytest.fixture
def bell():
    return BellCounter()


@pytest.fixture
def fake_runner():
    return FakeRunner


@pytest.fixture
def no_config(monkeypatch, tmp_path):
    monkeypatch.setenv("APING_CONFIG", str(tmp_path / "missing.json"))
