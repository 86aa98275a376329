"""Diagnostic logging for match attribution analysis.

Captures a JSON timeline of each match (start, goals with their touch
history, end, MVP) so disputed attributions can be inspected afterwards.

Usage:
    from matchroom.services.match_logger import MatchLogger

    match_logger = MatchLogger(output_dir=Path("logs/matches"), enabled=True)
    match_logger.start_match(red=["A"], blue=["B"], started_by="A")
    match_logger.log_goal(...)
    match_logger.end_match(red_score=1, blue_score=0, mvp="A")  # saves the file
"""
import json
import logging
import os
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

# Configure module logger
module_logger = logging.getLogger("matchroom.match_diagnostics")


class MatchLogger:
    """Captures a per-match diagnostic timeline."""

    def __init__(self, output_dir: Optional[Path] = None, enabled: bool = False):
        """Initialize match logger.

        Args:
            output_dir: Directory to save diagnostic files. Defaults to logs/matches/
            enabled: Whether logging is active. Can be overridden via MATCH_DIAGNOSTICS env var.
        """
        # Check environment variable for override
        env_enabled = os.environ.get("MATCH_DIAGNOSTICS", "").lower()
        if env_enabled == "true":
            enabled = True
        elif env_enabled == "false":
            enabled = False

        self.enabled = enabled
        self.output_dir = output_dir or Path("logs") / "matches"
        self.entries: list[dict] = []
        self.match_id: str = ""
        self._metadata: dict = {}

        if self.enabled:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            module_logger.info(f"Match diagnostics enabled, output dir: {self.output_dir}")

    def start_match(
        self,
        red: list[str],
        blue: list[str],
        started_by: Optional[str] = None,
        extra_metadata: Optional[dict] = None,
    ):
        """Begin a new timeline, discarding any unsaved one."""
        if not self.enabled:
            return

        self.match_id = str(uuid.uuid4())[:8]
        self.entries = []
        self._metadata = {
            "match_id": self.match_id,
            "red": red,
            "blue": blue,
            "started_by": started_by,
            "started_at": datetime.now().isoformat(),
            **(extra_metadata or {}),
        }
        self.entries.append({
            "event": "match_start",
            "timestamp": datetime.now().isoformat(),
            **self._metadata,
        })

    def log_goal(
        self,
        scoring_team: str,
        scorer: Optional[str],
        assistant: Optional[str],
        own_goal: bool,
        touches: list[dict[str, Any]],
        red_goals: int,
        blue_goals: int,
    ):
        """Log a goal together with the touches it was attributed from."""
        if not self.enabled:
            return

        self.entries.append({
            "event": "goal",
            "timestamp": datetime.now().isoformat(),
            "scoring_team": scoring_team,
            "scorer": scorer,
            "assistant": assistant,
            "own_goal": own_goal,
            "touches": touches,
            "score": {"red": red_goals, "blue": blue_goals},
        })

    def log_mvp(self, player_name: str, goals: int, assists: int, score: int):
        if not self.enabled:
            return

        self.entries.append({
            "event": "mvp",
            "timestamp": datetime.now().isoformat(),
            "player": player_name,
            "goals": goals,
            "assists": assists,
            "score": score,
        })

    def log_error(self, error_message: str):
        """Log an error that occurred during attribution."""
        if not self.enabled:
            return

        self.entries.append({
            "event": "error",
            "timestamp": datetime.now().isoformat(),
            "error": error_message,
        })
        module_logger.error(f"Match error logged: {error_message[:200]}...")

    def end_match(self, red_score: int, blue_score: int, mvp: Optional[str]) -> Optional[Path]:
        """Record the final result and save the timeline."""
        if not self.enabled:
            return None

        self.entries.append({
            "event": "match_end",
            "timestamp": datetime.now().isoformat(),
            "score": {"red": red_score, "blue": blue_score},
            "mvp": mvp,
        })
        return self.save()

    def save(self, suffix: str = "") -> Optional[Path]:
        """Save diagnostics to JSON file.

        Returns:
            Path to saved file, or None if disabled/empty
        """
        if not self.enabled or not self.entries:
            return None

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        match_short = self.match_id or "unknown"
        filename = f"match_{match_short}_{timestamp}{suffix}.json"
        output_path = self.output_dir / filename

        with open(output_path, "w") as f:
            json.dump({
                "metadata": self._metadata,
                "summary": self._compute_summary(),
                "entries": self.entries,
            }, f, indent=2)

        module_logger.info(f"Match diagnostics saved: {output_path}")
        self.entries = []
        return output_path

    def _compute_summary(self) -> dict:
        goals = [e for e in self.entries if e["event"] == "goal"]
        attributed = [e for e in goals if e["scorer"] is not None]
        return {
            "total_goals": len(goals),
            "attributed_goals": len(attributed),
            "unattributed_goals": len(goals) - len(attributed),
            "own_goals": sum(1 for e in attributed if e["own_goal"]),
            "assisted_goals": sum(1 for e in attributed if e["assistant"] is not None),
            "errors": sum(1 for e in self.entries if e["event"] == "error"),
        }
