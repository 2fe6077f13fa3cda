"""Configuration loading for Quickdash runs."""

from __future__ import annotations

from quickdash.config.loader import load_config
from quickdash.config.model import QuickdashConfig

__all__ = ["QuickdashConfig", "load_config"]
