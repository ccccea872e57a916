"""
Per-player aggregation for one report period.

Architecture:
    PeriodAggregator -> UserRepository, WorkoutLogRepository,
                        TrainingAssignmentRepository, TrainingSessionRepository
    PeriodAggregator -> ScoreCalculator (current and previous range)

Players are processed one at a time, in roster order. The result holds the
player records sorted by current score plus the roster-wide rollup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy.orm import Session

from src.core.report_utils import round_half_up, round_one_decimal
from src.dtos.report_dto import (
    DeclineEntry,
    ImprovementEntry,
    PlayerReport,
    PlayerStatus,
    ReportSummary,
    TeamSessionSummary,
)
from src.entities.training_session import TrainingSession
from src.entities.user import User
from src.repositories.training_assignment_repo import TrainingAssignmentRepository
from src.repositories.training_session_repo import TrainingSessionRepository
from src.repositories.user_repo import UserRepository
from src.repositories.workout_log_repo import WorkoutLogRepository
from src.services.period_strategy import PeriodStrategy, frequency_label
from src.services.score_service import ScoreCalculator

logger = logging.getLogger(__name__)

TOP_PERFORMERS_LIMIT = 3
NEEDS_ATTENTION_LIMIT = 3
TREND_LIST_LIMIT = 5

AT_RISK_TREND = -5
AT_RISK_COMPLIANCE = 50
SIGNIFICANT_TREND = 10


def classify_status(completed: int, assigned: float) -> PlayerStatus:
    if completed == 0:
        return "absent"
    if completed >= assigned:
        return "active"
    return "partial"


def score_trend(current: int, previous: int) -> float:
    """Unrounded % change from *previous* to *current*; 0 without a previous score."""
    if previous <= 0:
        return 0.0
    return (current - previous) / previous * 100


def compliance_pct(completed: int, assigned: float) -> float:
    if assigned <= 0:
        return 0.0
    return completed / assigned * 100


@dataclass
class PeriodAggregate:
    """Player records and roster totals for one period."""

    players: list[PlayerReport] = field(default_factory=list)
    sessions: list[TrainingSession] = field(default_factory=list)
    active_players: int = 0
    partial_players: int = 0
    absent_players: int = 0
    total_minutes: int = 0
    total_score: int = 0
    total_compliance: float = 0.0
    improvements: list[ImprovementEntry] = field(default_factory=list)
    declines: list[DeclineEntry] = field(default_factory=list)
    roster_ids: set[str] = field(default_factory=set)

    @property
    def total_players(self) -> int:
        return len(self.players)

    def _average(self, total: float) -> int:
        if not self.players:
            return 0
        return round_half_up(total / len(self.players))

    @property
    def avg_score(self) -> int:
        return self._average(self.total_score)

    @property
    def avg_compliance(self) -> int:
        return self._average(self.total_compliance)

    @property
    def avg_minutes_per_player(self) -> int:
        return self._average(self.total_minutes)

    @property
    def top_performers(self) -> list[str]:
        return [p.player_id for p in self.players[:TOP_PERFORMERS_LIMIT]]

    @property
    def needs_attention(self) -> list[str]:
        flagged = [
            p
            for p in self.players
            if p.score_trend < AT_RISK_TREND or p.compliance < AT_RISK_COMPLIANCE
        ]
        flagged.sort(key=lambda p: p.score_trend)
        return [p.player_id for p in flagged[:NEEDS_ATTENTION_LIMIT]]

    def session_summaries(self) -> list[TeamSessionSummary]:
        return [
            TeamSessionSummary(
                date=s.date.isoformat(),
                start_time=s.start_time,
                end_time=s.end_time,
                players_attended=len(s.going_user_ids() & self.roster_ids),
                total_players=self.total_players,
                location=s.location,
                address=s.address,
            )
            for s in self.sessions
        ]

    def to_summary(
        self,
        strategy: PeriodStrategy,
        team_sessions: Optional[list[TeamSessionSummary]] = None,
    ) -> ReportSummary:
        return ReportSummary(
            period=strategy.period,
            date_iso=strategy.date_iso,
            total_players=self.total_players,
            active_players=self.active_players,
            partial_players=self.partial_players,
            absent_players=self.absent_players,
            avg_score=self.avg_score,
            avg_compliance=self.avg_compliance,
            total_minutes=self.total_minutes,
            avg_minutes_per_player=self.avg_minutes_per_player,
            top_performers=self.top_performers,
            needs_attention=self.needs_attention,
            team_sessions=team_sessions,
        )


class PeriodAggregator:
    """Builds a :class:`PeriodAggregate` for the active roster."""

    def __init__(self, session: Session) -> None:
        self.user_repo = UserRepository(session)
        self.workout_repo = WorkoutLogRepository(session)
        self.assignment_repo = TrainingAssignmentRepository(session)
        self.session_repo = TrainingSessionRepository(session)
        self.scorer = ScoreCalculator(session)

    def aggregate(self, strategy: PeriodStrategy) -> PeriodAggregate:
        """
        Compute every roster player's record for *strategy*'s period.

        Args:
            strategy: Period to aggregate over

        Returns:
            PeriodAggregate with players sorted by descending current score.
            Ties keep roster order.
        """
        period_range = strategy.date_range()
        result = PeriodAggregate(
            sessions=self.session_repo.get_by_date_range(
                period_range.start, period_range.end
            )
        )

        roster = self.user_repo.get_active_players()
        logger.info(
            "Aggregating %s %s..%s for %d players",
            strategy.period,
            period_range.start,
            period_range.end,
            len(roster),
        )

        for user in roster:
            record, trend, compliance = self._player_record(
                strategy, user, result.sessions
            )
            result.roster_ids.add(user.id)
            result.players.append(record)

            if record.status == "active":
                result.active_players += 1
            elif record.status == "partial":
                result.partial_players += 1
            else:
                result.absent_players += 1

            result.total_minutes += record.minutes_trained
            result.total_score += record.current_score
            result.total_compliance += compliance

            if strategy.period == "month":
                if trend >= SIGNIFICANT_TREND:
                    result.improvements.append(
                        ImprovementEntry(
                            player_id=user.id,
                            player_name=user.name,
                            improvement=round_one_decimal(trend),
                        )
                    )
                elif trend <= -SIGNIFICANT_TREND:
                    result.declines.append(
                        DeclineEntry(
                            player_id=user.id,
                            player_name=user.name,
                            decline=round_one_decimal(abs(trend)),
                        )
                    )

        result.players.sort(key=lambda p: p.current_score, reverse=True)
        result.improvements.sort(key=lambda e: e.improvement, reverse=True)
        result.declines.sort(key=lambda e: e.decline, reverse=True)
        del result.improvements[TREND_LIST_LIMIT:]
        del result.declines[TREND_LIST_LIMIT:]
        return result

    def _player_record(
        self,
        strategy: PeriodStrategy,
        user: User,
        sessions: list[TrainingSession],
    ) -> tuple[PlayerReport, float, float]:
        """Build one player's record; also return the unrounded trend and compliance."""
        period_range = strategy.date_range()
        previous_range = strategy.previous_range()

        workouts = self.workout_repo.get_by_player_and_range(
            user.id, period_range.start, period_range.end
        )
        assignment = self.assignment_repo.get_active_for_player(user.id)
        template = assignment.template if assignment is not None else None

        completed = len(workouts)
        assigned = strategy.assigned_workouts(template)
        minutes = sum(w.duration or 0 for w in workouts)

        current_score = self.scorer.calculate(
            user.id, period_range.start, period_range.end
        )
        previous_score = self.scorer.calculate(
            user.id, previous_range.start, previous_range.end
        )
        trend = score_trend(current_score, previous_score)
        compliance = compliance_pct(completed, assigned)

        sessions_attended = sum(1 for s in sessions if user.id in s.going_user_ids())

        counters = {}
        if strategy.tracks_period_counters:
            counters = {
                "days_trained_in_period": len({w.date for w in workouts}),
                "total_days_in_period": period_range.length_days,
                "team_sessions_attended": sessions_attended,
                "total_team_sessions": len(sessions),
            }

        record = PlayerReport(
            player_id=user.id,
            player_name=user.name,
            position=user.position or "N/A",
            status=classify_status(completed, assigned),
            workouts_completed=completed,
            workouts_assigned=round_half_up(assigned),
            minutes_trained=minutes,
            current_score=current_score,
            previous_score=previous_score,
            score_trend=round_one_decimal(trend),
            compliance=round_half_up(compliance),
            attendance=sessions_attended > 0,
            last_active=workouts[-1].date.isoformat() if workouts else "",
            frequency_per_week=frequency_label(template),
            **counters,
        )
        return record, trend, compliance
