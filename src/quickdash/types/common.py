"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

# Relative POSIX path -> uppercase hex digest (or an all-dash placeholder).
DigestMapping: TypeAlias = dict[str, str]

# Called with (files hashed so far, total files).
ProgressCallback: TypeAlias = Callable[[int, int], None]
