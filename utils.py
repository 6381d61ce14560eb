import logging, os, subprocess
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from parsers import is_windows


@dataclass
class PingResult:
    success: bool
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None  # set when the process could not be started

    @property
    def output(self) -> str:
        return self.stdout or self.stderr


def ping_command(destination: str, executable: str = "ping", platform: Optional[str] = None) -> List[str]:
    if is_windows(platform): return [executable, "-n", "1", destination]
    return [executable, "-c", "1", destination]


def detached_kwargs() -> Dict:
    """Keep the child out of the terminal's process group so Ctrl+C only reaches us."""
    if os.name == "nt": return {"creationflags": subprocess.CREATE_NEW_PROCESS_GROUP}
    return {"start_new_session": True}


def run_ping(cmd: List[str], runner: Callable = subprocess.run) -> PingResult:
    """Run one ping invocation to completion; spawn failures become an unsuccessful result."""
    logging.debug("running %s", cmd)
    try:
        cp = runner(cmd, capture_output=True, text=True, errors="replace", **detached_kwargs())
    except OSError as e:
        return PingResult(success=False, error=str(e))
    return PingResult(success=cp.returncode == 0, stdout=cp.stdout or "", stderr=cp.stderr or "")
