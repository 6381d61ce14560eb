import logging, subprocess, sys, threading, time
from typing import Callable, List, Optional
from models import PingSample, PingStats
from parsers import OutputParser
from utils import run_ping

PING_INTERVAL_S = 1.0
BELL = "\a"


class ShutdownLatch:
    """One-way stop flag shared by the signal handler, the key watcher and the ping loop."""
    def __init__(self):
        self._event = threading.Event()
    def trip(self): self._event.set()
    def is_set(self) -> bool: return self._event.is_set()
    def wait(self, timeout: Optional[float] = None) -> bool: return self._event.wait(timeout)


def should_alert(success: bool, inverse: bool) -> bool:
    return success != inverse


def ring_bell():
    sys.stdout.write(BELL); sys.stdout.flush()


def log_sample(sample: PingSample):
    logging.debug("seq=%d ts=%.3f success=%s latency_ms=%s line=%r",
                  sample.seq, sample.ts, sample.success, sample.latency_ms, sample.line)


class PingLoop:
    def __init__(self, destination: str, inverse: bool, latch: ShutdownLatch, parser: OutputParser, command: List[str],
                 runner: Callable = subprocess.run, bell: Callable[[], None] = ring_bell, interval_s: float = PING_INTERVAL_S,
                 on_sample: Optional[Callable[[PingSample], None]] = None):
        self.destination=destination; self.inverse=inverse; self.latch=latch; self.parser=parser; self.command=command
        self.runner=runner; self.bell=bell; self.interval_s=interval_s; self.on_sample=on_sample
        self.stats=PingStats(); self.seq=0

    def run(self) -> PingStats:
        while not self.latch.is_set():
            self.step()
            self.latch.wait(self.interval_s)
        return self.stats

    def step(self) -> PingSample:
        res = run_ping(self.command, runner=self.runner)
        self.stats.record_sent()
        sample = PingSample(ts=time.time(), seq=self.seq, success=res.success)
        self.seq += 1
        if res.error is not None:
            print(f"Error executing ping: {res.error}")
        elif not res.success:
            print(f"Ping failed to {self.destination}")
            print(f"Output: {res.output}")
        else:
            reply = self.parser.find_reply(res.stdout)
            if reply is None:
                logging.debug("%s parser found no reply line", self.parser.name)
                print(f"Unexpected output: {res.stdout}")
            else:
                print(reply.line)
                sample.line = reply.line
                if reply.latency_ms is not None:
                    self.stats.record_reply(reply.latency_ms)
                    sample.latency_ms = reply.latency_ms
        if should_alert(res.success, self.inverse):
            self.bell()
        if self.on_sample is not None:
            self.on_sample(sample)
        return sample
