# suprimentos/infrastructure/log.py
#
# Log line helper for the API process.
#
# Design decisions:
#   - Only two kinds of event are logged: storage fallbacks (a corrupt
#     document, a record kept without loading) and failed AI summaries.
#     Both are recoverable, so they are reported and never raised.
#   - Each line carries the uptime as hh:mm:ss. The API runs for days,
#     unlike a batch job, so hours are part of the stamp.
#   - The tag names the collaborator that emitted the line ("armazenamento",
#     "ia") so a grep separates storage noise from AI noise.
#   - Plain stdout with flush; one string per write.
from __future__ import annotations

import sys
import time

_inicio = time.monotonic()


def log(message: str, origem: str = "suprimentos") -> None:
    """Write one tagged line with process uptime to stdout."""
    horas, resto = divmod(int(time.monotonic() - _inicio), 3600)
    minutos, segundos = divmod(resto, 60)
    sys.stdout.write(f"[{origem} {horas:02d}:{minutos:02d}:{segundos:02d}] {message}\n")
    sys.stdout.flush()
