"""
Runtime settings for algokit.

Defaults are plain module constants; each one can be changed per process
through an ALGOKIT_* environment variable read at import time.
"""
import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


# ── Matrix zeroing ─────────────────────────────────────────────────────
DEFAULT_ZEROER: str = os.getenv("ALGOKIT_ZEROER", "constant_space")
VALIDATE_SHAPE: bool = _env_flag("ALGOKIT_VALIDATE_SHAPE", True)

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("ALGOKIT_LOG_LEVEL", "INFO").upper()

# ── Benchmarks ─────────────────────────────────────────────────────────
BENCH_REPEAT: int = int(os.getenv("ALGOKIT_BENCH_REPEAT", "5"))
