"""
DTOs for player performance reports.

Report documents are built fresh for every request and frozen once built.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PlayerStatus = Literal["active", "partial", "absent"]
ReportPeriod = Literal["day", "week", "month"]


class ReportModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class PlayerReport(ReportModel):
    """One player's computed stats for one report period."""

    player_id: str
    player_name: str
    position: str = Field(default="N/A", description="Player position, N/A if unset")
    status: PlayerStatus
    workouts_completed: int
    workouts_assigned: int
    minutes_trained: int
    current_score: int
    previous_score: int
    score_trend: float = Field(..., description="% change vs previous period")
    compliance: int = Field(..., description="Completed / assigned as %")
    attendance: bool
    last_active: str = Field(default="", description="ISO date of last workout")
    days_trained_in_period: int | None = None
    total_days_in_period: int | None = None
    team_sessions_attended: int | None = None
    total_team_sessions: int | None = None
    frequency_per_week: str | None = None


class TeamSessionSummary(ReportModel):
    date: str
    start_time: str
    end_time: str
    players_attended: int
    total_players: int
    location: str | None = None
    address: str | None = None


class ReportSummary(ReportModel):
    """Roster-wide rollup for one period."""

    period: ReportPeriod
    date_iso: str
    total_players: int
    active_players: int
    partial_players: int
    absent_players: int
    avg_score: int
    avg_compliance: int
    total_minutes: int
    avg_minutes_per_player: int
    top_performers: list[str] = Field(default_factory=list, max_length=3)
    needs_attention: list[str] = Field(default_factory=list, max_length=3)
    team_sessions: list[TeamSessionSummary] | None = None


class DailyBreakdownItem(ReportModel):
    date: str
    active_players: int
    avg_score: int
    total_minutes: int


class WeeklyBreakdownItem(ReportModel):
    week: str
    active_players: int
    avg_score: int
    total_minutes: int


class ImprovementEntry(ReportModel):
    player_id: str
    player_name: str
    improvement: float


class DeclineEntry(ReportModel):
    player_id: str
    player_name: str
    decline: float


class DailyReport(ReportModel):
    summary: ReportSummary
    players: list[PlayerReport]
    generated_at: datetime


class WeeklyReport(ReportModel):
    summary: ReportSummary
    players: list[PlayerReport]
    daily_breakdown: list[DailyBreakdownItem]
    generated_at: datetime


class MonthlyReport(ReportModel):
    summary: ReportSummary
    players: list[PlayerReport]
    weekly_breakdown: list[WeeklyBreakdownItem]
    improvements: list[ImprovementEntry] = Field(default_factory=list, max_length=5)
    declines: list[DeclineEntry] = Field(default_factory=list, max_length=5)
    generated_at: datetime
