# core/services/config.py
from __future__ import annotations

import os


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return v if v is not None and v != "" else default


# ---------------- HTTP server ----------------
PORT: int = int(_env("PORT", "3000"))
HOST: str = _env("HOST", "0.0.0.0")
LOG_LEVEL: str = _env("LOG_LEVEL", "INFO").upper()

# ---------------- Logo ----------------
# Empty string disables the logo fetch entirely.
PDF_LOGO_URL: str = _env(
    "PDF_LOGO_URL",
    "https://assets.velorona.com/logos/v2/icon-only/100x100px/png/transparent/blue.png",
)
PDF_LOGO_TIMEOUT: float = float(_env("PDF_LOGO_TIMEOUT", "5"))

# ---------------- Mock data ----------------
PDF_USERS_COUNT: int = int(_env("PDF_USERS_COUNT", "1001"))
PDF_INVOICE_ROWS: int = int(_env("PDF_INVOICE_ROWS", "150"))
# Upper bound for the `rows` query parameter.
PDF_MAX_ROWS: int = int(_env("PDF_MAX_ROWS", "10000"))
