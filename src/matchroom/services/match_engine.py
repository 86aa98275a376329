"""Goal, assist, result and MVP attribution for the match in progress."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from matchroom.models.events import GoalCelebration, RoomEvent
from matchroom.models.notification import Notification, NotificationField
from matchroom.models.session import PlayerSession, Team
from matchroom.models.stats import MatchStats
from matchroom.models.touch import BallTouch
from matchroom.services.match_logger import MatchLogger
from matchroom.services.notifier import Notifier
from matchroom.services.room_gateway import RoomGateway
from matchroom.services.session_state import MatchPhase, SessionState
from matchroom.utils import colors
from matchroom.utils.formatting import join_names

logger = logging.getLogger(__name__)

GOAL_POINTS = 2
ASSIST_POINTS = 1
CELEBRATION_DELAY_SECONDS = 1.0


@dataclass
class GoalAttribution:
    """Who a goal was credited to."""

    scoring_team: Team
    scorer: PlayerSession | None = None
    assistant: PlayerSession | None = None

    @property
    def own_goal(self) -> bool:
        return self.scorer is not None and self.scorer.team != self.scoring_team


@dataclass
class GameResult:
    red_score: int
    blue_score: int
    winner: Team | None  # None on a draw
    mvp: str | None


def mvp_score(match: MatchStats, player_name: str) -> int:
    return GOAL_POINTS * match.goals_by(player_name) + ASSIST_POINTS * match.assists_by(player_name)


class MatchAttributionEngine:
    """Turns touches and host results into statistics.

    Match state machine: IDLE -> IN_PROGRESS on game start, back to IDLE on
    game stop. Pausing does not change the phase. Starts while a match is in
    progress and stops while idle are ignored.
    """

    def __init__(
        self,
        state: SessionState,
        room: RoomGateway,
        notifier: Notifier,
        match_logger: MatchLogger | None = None,
        reset_touches_on_game_start: bool = False,
        schedule: Callable[[float, RoomEvent], None] | None = None,
    ):
        self.state = state
        self.room = room
        self.notifier = notifier
        self.match_logger = match_logger or MatchLogger(enabled=False)
        self.reset_touches_on_game_start = reset_touches_on_game_start
        self.schedule = schedule

    # Goals

    def attribute(self, scoring_team: Team, now_ms: float | None = None) -> GoalAttribution:
        """Pick scorer and assistant from the recent touch window.

        The scorer is the most recent toucher still on a team, whichever
        team that is. The assistant is the next most recent touch by a
        different player on the scorer's team.
        """
        connected = {p.id: p for p in self.room.get_player_list()}
        attribution = GoalAttribution(scoring_team=scoring_team)

        for touch in self.state.touches.recent_touches(now_ms=now_ms):
            player = connected.get(touch.player.id)
            if player is None or not player.on_team:
                continue
            if attribution.scorer is None:
                attribution.scorer = player
            elif player.id != attribution.scorer.id and player.team == attribution.scorer.team:
                attribution.assistant = player
                break

        return attribution

    def on_goal(self, scoring_team: Team, now_ms: float | None = None) -> GoalAttribution:
        scoring_team = Team(scoring_team)
        touches = self.state.touches.recent_touches(now_ms=now_ms)
        attribution = self.attribute(scoring_team, now_ms=now_ms)
        match = self.state.match
        scorer = attribution.scorer

        if scorer is not None and not attribution.own_goal:
            self.state.stats.get(scorer.name).goals += 1
            match.goal_scorers.append(scorer.name)
            self._announce_goal(scorer)
            if attribution.assistant is not None:
                self.state.stats.get(attribution.assistant.name).assists += 1
                match.assists.append(attribution.assistant.name)
                self._announce_assist(attribution.assistant)
        elif scorer is not None:
            self.state.stats.get(scorer.name).own_goals += 1
            attribution.assistant = None
            self._announce_own_goal(scorer)

        if scoring_team == Team.RED:
            match.red_goals += 1
        else:
            match.blue_goals += 1

        self._notify_goal(attribution)
        self.match_logger.log_goal(
            scoring_team=scoring_team.name.lower(),
            scorer=scorer.name if scorer else None,
            assistant=attribution.assistant.name if attribution.assistant else None,
            own_goal=attribution.own_goal,
            touches=[_touch_summary(t) for t in touches],
            red_goals=match.red_goals,
            blue_goals=match.blue_goals,
        )

        assist_text = f" (Assist: {attribution.assistant.name})" if attribution.assistant else ""
        scorer_text = scorer.name if scorer else "unknown"
        logger.info(
            f"Goal for {scoring_team.name.lower()} by {scorer_text}{assist_text}"
            f"{' [own goal]' if attribution.own_goal else ''}"
            f" - score {match.red_goals}:{match.blue_goals}"
        )
        return attribution

    def _announce_goal(self, scorer: PlayerSession) -> None:
        self.room.send_announcement(
            f"🎯⚡ GOAL! Amazing shot by {scorer.name}! ⚡🎯",
            None,
            colors.GREEN,
            "bold",
            2,
        )
        if self.schedule is not None:
            self.schedule(CELEBRATION_DELAY_SECONDS, GoalCelebration(scorer.name))

    def _announce_assist(self, assistant: PlayerSession) -> None:
        self.room.send_announcement(
            f"👊 Perfect assist by {assistant.name}! 👊",
            None,
            colors.ASSIST_BLUE,
            "bold",
            1,
        )

    def _announce_own_goal(self, scorer: PlayerSession) -> None:
        self.room.send_announcement(
            f"😂 Oops! Own goal by {scorer.name}! 😂",
            None,
            colors.OWN_GOAL_RED,
            "bold",
            1,
        )

    def _notify_goal(self, attribution: GoalAttribution) -> None:
        match = self.state.match
        team_name = "Red" if attribution.scoring_team == Team.RED else "Blue"
        scorer = attribution.scorer

        if scorer is None:
            title = "⚽ Goal!"
            description = f"Goal for {team_name} team"
        else:
            title = "⚽ Own Goal!" if attribution.own_goal else "⚽ Goal!"
            assist_text = f" (Assist: {attribution.assistant.name})" if attribution.assistant else ""
            description = f"**{scorer.name}** scored for {team_name} team{assist_text}"

        self.notifier.send(Notification(
            title=title,
            description=description,
            color=colors.RED if attribution.scoring_team == Team.RED else colors.BLUE,
            fields=[NotificationField("Score", f"🔴 {match.red_goals} - {match.blue_goals} 🔵")],
        ))

    # Game lifecycle

    def on_game_start(self, by_player: PlayerSession | None = None) -> None:
        if self.state.phase == MatchPhase.IN_PROGRESS:
            logger.warning("Game start reported while a match is in progress; ignoring")
            return

        self.state.match = MatchStats()
        self.state.phase = MatchPhase.IN_PROGRESS
        if self.reset_touches_on_game_start:
            self.state.touches.clear()

        players = self.room.get_player_list()
        red = [p.name for p in players if p.team == Team.RED]
        blue = [p.name for p in players if p.team == Team.BLUE]
        started_by = by_player.name if by_player else "System"
        logger.info(f"Game started by {started_by}")

        self.match_logger.start_match(red=red, blue=blue, started_by=started_by)
        self.room.send_announcement(
            "🚀 Game started! Good luck to both teams! 🍀",
            None,
            colors.GREEN,
            "bold",
            2,
        )
        self.notifier.send(Notification(
            title="🚀 Game Started",
            description=f"Match started by **{started_by}**",
            color=colors.GREEN,
            fields=[
                NotificationField("Red Team", join_names(red, "No players")),
                NotificationField("Blue Team", join_names(blue, "No players")),
            ],
        ))

    def on_game_stop(self, by_player: PlayerSession | None = None) -> GameResult | None:
        """Flush results into lifetime stats and pick the MVP."""
        stopped_by = by_player.name if by_player else "System"
        if self.state.phase == MatchPhase.IDLE:
            logger.warning(f"Game stop by {stopped_by} reported with no match in progress; ignoring")
            return None

        logger.info(f"Game stopped by {stopped_by}")
        self.state.phase = MatchPhase.IDLE

        result = None
        scores = self.room.get_scores()
        if scores is not None:
            result = self._process_game_end(scores.red, scores.blue)
        else:
            logger.warning("Host reported no scores at game stop; results not recorded")
            self.match_logger.log_error("Host reported no scores at game stop")

        match = self.state.match
        self.room.send_announcement("🛑 Game stopped!", None, colors.RED, "bold")

        fields = [NotificationField("Final Score", f"🔴 {match.red_goals} - {match.blue_goals} 🔵")]
        if result is not None and result.mvp:
            fields.append(NotificationField("🌟 MVP", result.mvp))
        self.notifier.send(Notification(
            title="🛑 Game Stopped",
            description=f"Match stopped by **{stopped_by}**",
            color=colors.RED,
            fields=fields,
        ))

        self.match_logger.end_match(
            red_score=result.red_score if result else match.red_goals,
            blue_score=result.blue_score if result else match.blue_goals,
            mvp=match.mvp,
        )
        self.state.last_match = match
        self.state.match = MatchStats()
        return result

    def _process_game_end(self, red_score: int, blue_score: int) -> GameResult:
        players = self.room.get_player_list()
        red = [p for p in players if p.team == Team.RED]
        blue = [p for p in players if p.team == Team.BLUE]

        if red_score > blue_score:
            winner, winners, losers = Team.RED, red, blue
        elif blue_score > red_score:
            winner, winners, losers = Team.BLUE, blue, red
        else:
            winner, winners, losers = None, [], []

        if winner is None:
            for player in red + blue:
                self.state.stats.get(player.name).games_played += 1
        else:
            for player in winners:
                stats = self.state.stats.get(player.name)
                stats.wins += 1
                stats.games_played += 1
            for player in losers:
                stats = self.state.stats.get(player.name)
                stats.losses += 1
                stats.games_played += 1

        mvp = self.determine_mvp(red + blue)
        return GameResult(red_score=red_score, blue_score=blue_score, winner=winner, mvp=mvp)

    def determine_mvp(self, participants: list[PlayerSession]) -> str | None:
        """Highest 2x goals + assists wins; ties go to the first participant."""
        match = self.state.match
        best: PlayerSession | None = None
        best_score = 0

        for player in participants:
            score = mvp_score(match, player.name)
            if score > best_score:
                best, best_score = player, score

        if best is None:
            return None

        match.mvp = best.name
        self.state.stats.get(best.name).mvps += 1
        goals = match.goals_by(best.name)
        assists = match.assists_by(best.name)
        self.match_logger.log_mvp(best.name, goals, assists, best_score)
        self.room.send_announcement(
            f"🌟 MVP: {best.name} ({goals} goals, {assists} assists)",
            None,
            colors.GOLD,
            "bold",
            2,
        )
        logger.info(f"MVP: {best.name} (score {best_score})")
        return best.name


def _touch_summary(touch: BallTouch) -> dict:
    return {
        "player_id": touch.player.id,
        "player": touch.player.name,
        "team": touch.team.name.lower(),
        "timestamp_ms": touch.timestamp_ms,
    }
