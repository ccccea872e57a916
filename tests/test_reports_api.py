"""
Tests for FastAPI endpoints — covers:
  report retrieval (daily / weekly / monthly)
  API-key auth on report routes
  structured error responses
"""

from datetime import date
from unittest.mock import patch

from src.core.report_utils import week_start


class TestPublicEndpoints:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "healthy"

    def test_request_id_in_response_header(self, client):
        r = client.get("/health")
        assert "X-Request-ID" in r.headers


class TestReportEndpoints:
    def _seed(self, seed):
        seed.player("p1", name="Ana", position="Guard")
        seed.workout("p1", date(2024, 3, 5), duration=50, completion=100)

    def test_daily_report(self, client, seed):
        self._seed(seed)

        r = client.get("/api/reports/daily/2024-03-05")

        assert r.status_code == 200
        body = r.json()
        assert body["summary"]["period"] == "day"
        assert body["summary"]["date_iso"] == "2024-03-05"
        assert body["summary"]["team_sessions"] == []
        assert body["players"][0]["player_id"] == "p1"
        assert body["players"][0]["position"] == "Guard"
        assert body["players"][0]["minutes_trained"] == 50
        assert body["players"][0]["last_active"] == "2024-03-05"
        assert "generated_at" in body

    def test_daily_report_defaults_to_today(self, client, seed):
        self._seed(seed)

        r = client.get("/api/reports/daily")

        assert r.status_code == 200
        assert r.json()["summary"]["date_iso"] == date.today().isoformat()

    def test_weekly_report(self, client, seed):
        self._seed(seed)

        r = client.get("/api/reports/weekly/2024-03-04")

        assert r.status_code == 200
        body = r.json()
        assert body["summary"]["period"] == "week"
        assert len(body["daily_breakdown"]) == 7
        assert body["daily_breakdown"][1]["total_minutes"] == 50

    def test_weekly_report_defaults_to_current_monday(self, client):
        r = client.get("/api/reports/weekly")

        assert r.status_code == 200
        assert r.json()["summary"]["date_iso"] == week_start(date.today()).isoformat()

    def test_monthly_report(self, client, seed):
        self._seed(seed)

        r = client.get("/api/reports/monthly/2024-03")

        assert r.status_code == 200
        body = r.json()
        assert body["summary"]["period"] == "month"
        assert body["summary"]["date_iso"] == "2024-03-01"
        assert body["improvements"] == []
        assert body["declines"] == []
        assert len(body["weekly_breakdown"]) == 5

    def test_monthly_report_defaults_to_current_month(self, client):
        r = client.get("/api/reports/monthly")

        assert r.status_code == 200
        assert r.json()["summary"]["date_iso"] == date.today().replace(day=1).isoformat()


class TestAuth:
    def test_reports_open_when_key_not_set(self, client):
        with patch("src.core.security.settings") as mock_settings:
            mock_settings.API_KEY = ""
            r = client.get("/api/reports/daily/2024-03-05")
            assert r.status_code == 200

    def test_reports_forbidden_with_wrong_key(self, client):
        with patch("src.core.security.settings") as mock_settings:
            mock_settings.API_KEY = "correct-key"
            r = client.get(
                "/api/reports/daily/2024-03-05",
                headers={"X-API-Key": "wrong-key"},
            )
            assert r.status_code == 403
            body = r.json()
            assert body["error"] == "http_error"
            assert "request_id" in body

    def test_reports_allowed_with_correct_key(self, client):
        with patch("src.core.security.settings") as mock_settings:
            mock_settings.API_KEY = "correct-key"
            r = client.get(
                "/api/reports/monthly/2024-03",
                headers={"X-API-Key": "correct-key"},
            )
            assert r.status_code == 200

    def test_health_needs_no_key(self, client):
        with patch("src.core.security.settings") as mock_settings:
            mock_settings.API_KEY = "correct-key"
            assert client.get("/health").status_code == 200


class TestErrorHandling:
    def test_invalid_month_returns_400(self, client):
        r = client.get("/api/reports/monthly/2024-13")

        assert r.status_code == 400
        body = r.json()
        assert body["error"] == "invalid_period"
        assert "request_id" in body

    def test_week_past_calendar_end_returns_400(self, client, seed):
        seed.player("p1")

        r = client.get("/api/reports/weekly/9999-12-30")

        assert r.status_code == 400
        assert r.json()["error"] == "invalid_period"

    def test_first_month_returns_400(self, client, seed):
        seed.player("p1")

        r = client.get("/api/reports/monthly/0001-01")

        assert r.status_code == 400
        assert r.json()["error"] == "invalid_period"

    def test_invalid_date_returns_422(self, client):
        r = client.get("/api/reports/daily/not-a-date")

        assert r.status_code == 422
        body = r.json()
        assert body["error"] == "validation_error"
        assert body["detail"]

    def test_unknown_path_returns_structured_404(self, client):
        r = client.get("/api/reports/yearly")

        assert r.status_code == 404
        assert r.json()["error"] == "http_error"

    def test_negative_duration_still_reports(self, client, seed):
        seed.player("p1")
        seed.workout("p1", date(2024, 3, 5), duration=-10)

        r = client.get("/api/reports/daily/2024-03-05")

        assert r.status_code == 200
        body = r.json()
        assert body["players"][0]["minutes_trained"] == -10
        assert body["summary"]["total_minutes"] == -10

    def test_report_model_error_returns_500(self, client):
        from pydantic import BaseModel, ValidationError

        class Strict(BaseModel):
            count: int

        try:
            Strict(count="many")
        except ValidationError as exc:
            error = exc

        with patch("src.main.settings") as mock_settings:
            mock_settings.DEBUG = False
            with patch(
                "src.routers.reports.ReportService.generate_daily_report",
                side_effect=error,
            ):
                r = client.get("/api/reports/daily/2024-03-05")

        assert r.status_code == 500
        assert r.json()["error"] == "internal_error"

    def test_unhandled_exception_returns_500(self, client):
        with patch("src.main.settings") as mock_settings:
            mock_settings.DEBUG = False
            with patch(
                "src.routers.reports.ReportService.generate_daily_report",
                side_effect=RuntimeError("database unreachable"),
            ):
                r = client.get("/api/reports/daily/2024-03-05")

        assert r.status_code == 500
        body = r.json()
        assert body["error"] == "internal_error"
        assert body["detail"] is None
        assert "request_id" in body
