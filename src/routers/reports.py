from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.core.database import get_db
from src.core.report_utils import week_start
from src.core.security import verify_api_key
from src.dtos.report_dto import DailyReport, MonthlyReport, WeeklyReport
from src.services.report_service import ReportService

router = APIRouter(
    prefix="/api/reports",
    tags=["reports"],
    dependencies=[Depends(verify_api_key)],
)


@router.get("/daily", response_model=DailyReport)
def get_today_report(db: Session = Depends(get_db)):
    return ReportService(db).generate_daily_report(date.today())


@router.get("/daily/{day}", response_model=DailyReport)
def get_daily_report(day: date, db: Session = Depends(get_db)):
    return ReportService(db).generate_daily_report(day)


@router.get("/weekly", response_model=WeeklyReport)
def get_current_week_report(db: Session = Depends(get_db)):
    return ReportService(db).generate_weekly_report(week_start(date.today()))


@router.get("/weekly/{start_date}", response_model=WeeklyReport)
def get_weekly_report(start_date: date, db: Session = Depends(get_db)):
    return ReportService(db).generate_weekly_report(start_date)


@router.get("/monthly", response_model=MonthlyReport)
def get_current_month_report(db: Session = Depends(get_db)):
    return ReportService(db).generate_monthly_report(date.today().strftime("%Y-%m"))


@router.get("/monthly/{month}", response_model=MonthlyReport)
def get_monthly_report(month: str, db: Session = Depends(get_db)):
    return ReportService(db).generate_monthly_report(month)
