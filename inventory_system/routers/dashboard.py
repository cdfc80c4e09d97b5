from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_system.dependencies import get_db
from inventory_system.schemas.dashboard import DashboardSummary
from inventory_system.services.dashboard_service import dashboard_summary

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/summary", response_model=DashboardSummary)
def get_summary(db: Session = Depends(get_db)):
    return dashboard_summary(db)


__all__ = ["router"]
