"""tqdm-backed progress rendering for the hashing phase."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager

from tqdm import tqdm

from quickdash.constants.reporting import PROGRESS_DESCRIPTION, PROGRESS_UNIT
from quickdash.types import ProgressCallback


@contextmanager
def progress_bar(enabled: bool) -> Iterator[ProgressCallback | None]:
    """Yield an ``on_progress`` callback drawing a bar on stderr, or None when disabled."""
    if not enabled:
        yield None
        return

    with tqdm(total=0, desc=PROGRESS_DESCRIPTION, unit=PROGRESS_UNIT, file=sys.stderr, leave=False) as bar:

        def _update(done: int, total: int) -> None:
            if bar.total != total:
                bar.reset(total=total)
            bar.update(done - bar.n)

        yield _update
