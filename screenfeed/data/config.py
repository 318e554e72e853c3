"""Shared feed constants.

The screener only accepts browser-like connections, so the default headers
mirror what its web client sends.
"""

from __future__ import annotations

# Pairs stream as used by the screener web client (query string passed through untouched)
DEFAULT_WS_URL = (
    "wss://io.dexscreener.com/dex/screener/v4/pairs/h24/1"
    "?rankBy[key]=pairAge&rankBy[order]=asc"
    "&filters[chainIds][0]=solana&filters[dexIds][0]=moonshot"
    "&filters[excludedDexIds][]&filters[moonshotProgress][max]=99.99"
)

DEFAULT_HEADERS = {
    "Origin": "https://dexscreener.com",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/116.0.0.0 Safari/537.36"
    ),
}
