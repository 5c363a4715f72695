"""Reproducible random streams for PNC generation.

When a secret is configured the stream is derived with HMAC-SHA256 under a
fixed namespace, so two runs with the same secret and ``kind`` draw the same
serials.  Without a secret an unseeded :class:`random.Random` is returned.
The secret is never logged.
"""

from __future__ import annotations

import hashlib
import hmac
import random
from typing import Final

from formcheck.config import ConfigModel

__all__ = ["get_secret_bytes", "rng_for"]

_NS_RNG: Final = b"formcheck/v1/pnc-rng"


def get_secret_bytes(cfg: ConfigModel) -> bytes:
    """Return the configured seed secret as bytes, or ``b""`` when unset."""

    secret = cfg.pnc.seed.secret
    if secret is None:
        return b""
    return secret.get_secret_value().encode("utf-8")


def rng_for(kind: str, *, cfg: ConfigModel) -> random.Random:
    """Return the random stream used to draw serials for ``kind``."""

    secret = get_secret_bytes(cfg)
    if not secret:
        return random.Random()
    digest = hmac.new(secret, _NS_RNG + kind.encode("utf-8"), hashlib.sha256).digest()
    return random.Random(int.from_bytes(digest, "big"))
