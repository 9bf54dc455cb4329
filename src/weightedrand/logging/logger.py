"""Diagnostic logger for per-draw sampling events.

Uses the standard ``logging`` module with the ``"weightedrand"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from weightedrand.config import WeightedRandConfig
    from weightedrand.logging.types import DrawRecord

logger = logging.getLogger("weightedrand")


class DrawLogger:
    """Per-draw diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One DEBUG line per draw (bucket, coin toss,
        probability, whether the alias was used).

        ``"full"``: JSON dump of all record fields.

    Per-draw output goes to DEBUG because a sampler may be drawn from
    millions of times.
    """

    def __init__(self, config: WeightedRandConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[DrawRecord] = []

    @property
    def enabled(self) -> bool:
        """Whether logging a record has any effect."""
        return self._diagnostic_mode or self._log_level != "none"

    def log_draw(self, record: DrawRecord) -> None:
        """Log a single draw.

        Args:
            record: Immutable record of the draw.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.debug(
                "draw index=%d coin=%s prob=%s%s item=%r",
                record.index,
                record.coin_toss,
                record.probability,
                " [ALIAS]" if record.used_alias else "",
                record.item,
            )
        elif self._log_level == "full":
            logger.debug("draw_record: %s", json.dumps(_record_payload(record), default=str))

    def get_diagnostic_data(self) -> list[DrawRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all DrawRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        alias_count = sum(1 for r in self._records if r.used_alias)
        item_counts = Counter(repr(r.item) for r in self._records)
        return {
            "total_draws": n,
            "alias_count": alias_count,
            "alias_rate": alias_count / n,
            "distinct_buckets": len({r.index for r in self._records}),
            "item_counts": dict(item_counts),
        }


def _record_payload(record: DrawRecord) -> dict[str, Any]:
    """Shallow field mapping of *record* for JSON output.

    The item is rendered with ``repr()`` and never copied, since callers may
    draw arbitrary objects (locks, generators, open files).
    """
    payload = {f.name: getattr(record, f.name) for f in fields(record)}
    payload["item"] = repr(record.item)
    return payload
