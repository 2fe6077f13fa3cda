"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "QuickDash"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: create and verify directory-wide file digests"
