"""Persistent storage for productivity stats and streak bookkeeping."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from focuspro_cli.models.focus.streak import StreakKeeper
from focuspro_cli.models.focus.tracker import ProductivityStats, ProductivityTracker
from focuspro_cli.utils.logger import get_logger


@dataclass
class StatsSnapshot:
    """Everything the store persists."""

    stats: ProductivityStats = field(default_factory=ProductivityStats)
    streak: StreakKeeper = field(default_factory=StreakKeeper)

    def tracker(self) -> ProductivityTracker:
        """Build a tracker holding these stats."""
        return ProductivityTracker.from_stats(self.stats)

    def to_dict(self) -> dict:
        return {"stats": self.stats.to_dict(), "streak": self.streak.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "StatsSnapshot":
        return cls(
            stats=ProductivityStats.from_dict(data.get("stats", {})),
            streak=StreakKeeper.from_dict(data.get("streak", {})),
        )


class StatsStore:
    """Reads and writes productivity stats as JSON."""

    def __init__(self, data_dir: Path | None = None):
        """Initialize the store."""
        if data_dir is None:
            from platformdirs import user_data_dir

            data_dir = Path(user_data_dir("focuspro_cli"))

        self.data_dir = data_dir
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.stats_file = self.data_dir / "stats.json"
        self.corrupt_file = self.data_dir / "stats.json.corrupt"

    def load(self) -> StatsSnapshot:
        """Load stats. Missing or unreadable files yield defaults.

        An unreadable file is moved to ``stats.json.corrupt`` so the next
        save cannot overwrite it.
        """
        if not self.stats_file.exists():
            return StatsSnapshot()

        try:
            with open(self.stats_file, encoding="utf-8") as f:
                data = json.load(f)
            return StatsSnapshot.from_dict(data)
        except (json.JSONDecodeError, TypeError, ValueError, AttributeError) as e:
            self.corrupt_file.unlink(missing_ok=True)
            self.stats_file.rename(self.corrupt_file)
            get_logger().warning(
                "unreadable stats file moved to %s: %s", self.corrupt_file, e
            )
            return StatsSnapshot()

    def save(self, snapshot: StatsSnapshot) -> None:
        """Save stats to file."""
        with open(self.stats_file, "w", encoding="utf-8") as f:
            json.dump(snapshot.to_dict(), f, indent=2)

        self.stats_file.chmod(0o600)

    def save_tracker(self, tracker: ProductivityTracker, streak: StreakKeeper) -> None:
        """Persist the tracker's current stats together with the streak state."""
        self.save(StatsSnapshot(stats=tracker.stats, streak=streak))

    def delete(self) -> None:
        """Delete the stats file."""
        if self.stats_file.exists():
            self.stats_file.unlink()
