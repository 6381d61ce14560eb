# analytics.py
from typing import Dict, List
from models import PingStats


def summarize(st: PingStats) -> Dict:
    """
    Final figures for the run.
    min/max/average are None when no reply was ever parsed.
    """
    return {
        "sent": st.sent,
        "received": st.received,
        "lost": st.lost,
        "loss_pct": round(st.loss_pct(), 2),
        "min_ms": st.min_ms,
        "max_ms": st.max_ms,
        "avg_ms": st.average_ms(),
    }


def format_summary(destination: str, st: PingStats) -> List[str]:
    s = summarize(st)
    lines = [
        "",
        f"Ping statistics for {destination}:",
        f"    Packets: Sent = {s['sent']}, Received = {s['received']}, Lost = {s['lost']} ({s['loss_pct']:.2f}% loss),",
    ]
    if s["received"] > 0:
        lines.append("Approximate round trip times in milli-seconds:")
        lines.append(f"    Minimum = {s['min_ms']}ms, Maximum = {s['max_ms']}ms, Average = {s['avg_ms']}ms")
    return lines
