from dataclasses import dataclass, field
from typing import Optional

@dataclass
class PingSample:
    ts: float
    seq: int
    success: bool
    latency_ms: Optional[int] = None
    line: Optional[str] = None

@dataclass
class PingStats:
    """Running totals for one destination over the life of the process."""
    sent: int = 0
    received: int = 0
    total_ms: int = 0
    min_ms: Optional[int] = None
    max_ms: Optional[int] = None
    _awaiting_reply: bool = field(default=False, repr=False, compare=False)

    def record_sent(self):
        """Count one echo request, whatever its outcome."""
        self.sent += 1
        self._awaiting_reply = True

    def record_reply(self, latency_ms: int):
        """Add a parsed round-trip time. Must follow the matching record_sent()."""
        if not self._awaiting_reply:
            raise ValueError("reply recorded without a matching request")
        self._awaiting_reply = False
        self.received += 1
        self.total_ms += latency_ms
        if self.min_ms is None or latency_ms < self.min_ms:
            self.min_ms = latency_ms
        if self.max_ms is None or latency_ms > self.max_ms:
            self.max_ms = latency_ms

    @property
    def lost(self) -> int:
        return self.sent - self.received

    def loss_pct(self) -> float:
        """
        Return lost/sent as a percentage (0-100).
        Nothing sent means nothing lost, so that case is 0.0.
        """
        if self.sent == 0:
            return 0.0
        return self.lost / self.sent * 100.0

    def average_ms(self) -> Optional[int]:
        """Integer mean of the received latencies, or None before the first reply."""
        if self.received == 0:
            return None
        return self.total_ms // self.received
