"""
Input validation utilities
"""
import math
import re
from typing import Optional

from guardian.core.data_models import AnalysisWindow, RequestParams


DEFAULT_CHAIN = "base"
DEFAULT_WINDOW_BLOCKS = 200
DEFAULT_SPAN = 5
DEFAULT_DELAY_MS = 500
MIN_SPAN, MAX_SPAN = 1, 10

SOL_ADDRESS_RE = re.compile(r'^[1-9A-HJ-NP-Za-km-z]{32,44}$')
EVM_ADDRESS_RE = re.compile(r'^0x[a-fA-F0-9]{40}$')


class AddressValidator:
    """Validate blockchain addresses"""

    @staticmethod
    def validate_evm_address(address: str) -> bool:
        """Validate EVM address format"""
        if not address:
            return False
        return bool(EVM_ADDRESS_RE.match(address))

    @staticmethod
    def validate_solana_address(address: str) -> bool:
        """Validate Solana (base58, 32-44 chars) address shape"""
        if not address:
            return False
        return bool(SOL_ADDRESS_RE.match(address))


def safe_number(raw: Optional[str], default: int) -> int:
    """
    Parse a query value as a number

    Missing, empty, unparsable and non-finite values fall back to the
    default. Fractions are truncated.
    """
    if raw is None:
        return default

    text = str(raw).strip()
    if not text:
        return default

    try:
        value = float(text)
    except ValueError:
        return default

    if not math.isfinite(value):
        return default

    return int(value)


def normalize_window(
    window: Optional[str],
    span: Optional[str],
    delay: Optional[str],
    fast: Optional[str] = None
) -> AnalysisWindow:
    """Build a bounded analysis window from raw query values"""
    return AnalysisWindow(
        window_blocks=max(1, safe_number(window, DEFAULT_WINDOW_BLOCKS)),
        span=max(MIN_SPAN, min(safe_number(span, DEFAULT_SPAN), MAX_SPAN)),
        delay_ms=max(0, safe_number(delay, DEFAULT_DELAY_MS)),
        fast=fast == "1"
    )


def normalize_request_params(
    chain: Optional[str] = None,
    token: Optional[str] = None,
    center: Optional[str] = None,
    fast: Optional[str] = None,
    window: Optional[str] = None,
    span: Optional[str] = None,
    delay: Optional[str] = None
) -> RequestParams:
    """
    Normalize raw query parameters

    Never raises: every input maps to a usable set of parameters.
    Identifier checks are left to the orchestrators.
    """
    chain_key = (chain or "").strip().lower() or DEFAULT_CHAIN

    return RequestParams(
        chain_key=chain_key,
        token=(token or "").strip(),
        center=(center or "").strip(),
        window=normalize_window(window, span, delay, fast)
    )
