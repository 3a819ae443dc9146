"""
Shared constants used across all meter modules.

Centralises endpoints, sizes, and default headers so they live in
exactly one place.  ``meter.config.Settings`` takes its defaults from here.
"""

# ---------------------------------------------------------------------------
# HTTP headers
# ---------------------------------------------------------------------------

USER_AGENT = "speedcheck/1.0 (+https://github.com/speedcheck/speedcheck)"

COMMON_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "*/*",
    # Count raw wire bytes, not decompressed ones.
    "Accept-Encoding": "identity",
}

# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

PING_URL = "https://google.com"
DOWNLOAD_URL = "https://proof.ovh.net/files/10Mb.dat"
UPLOAD_URL = "https://postman-echo.com/post"

# ---------------------------------------------------------------------------
# Sampling
# ---------------------------------------------------------------------------

DEFAULT_PING_COUNT = 5
MIN_PING_COUNT = 1

# ---------------------------------------------------------------------------
# Data transfer
# ---------------------------------------------------------------------------

MEBIBYTE = 1024 * 1024
BITS_PER_MEGABIT = 1024 * 1024   # binary megabits

DOWNLOAD_FALLBACK_TOTAL = 10 * MEBIBYTE  # progress display only
UPLOAD_SIZE = 2 * MEBIBYTE               # 2,097,152 bytes
UPLOAD_FILL = b"x"
