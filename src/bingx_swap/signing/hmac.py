"""HMAC-SHA256 signing and verification."""

from __future__ import annotations

import hashlib
import hmac as hmac_mod

__all__ = ["sign_message", "verify_signature"]


def _key(secret: str | bytes) -> bytes:
    return secret if isinstance(secret, bytes) else secret.encode("utf-8")


def sign_message(secret: str | bytes, message: str) -> str:
    """Sign a canonical string with HMAC-SHA256 and return the hex digest."""
    return hmac_mod.new(_key(secret), message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_signature(secret: str | bytes, message: str, signature: str) -> bool:
    """Check *signature* against a fresh signature of *message*."""
    if not signature:
        return False
    return hmac_mod.compare_digest(sign_message(secret, message), signature)
