"""Canonical parameter encoding and HMAC signing."""
