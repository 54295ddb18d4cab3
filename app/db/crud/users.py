from datetime import date
from typing import Iterable, Optional
from sqlalchemy.orm import Session, joinedload
from app.db.models.user import User
from app.db.models.career import EmploymentRecord
from app.core.utils import round_half_up

def get_user(db: Session, user_id: int) -> User | None:
    return (
        db.query(User)
        .options(
            joinedload(User.career_profile),
            joinedload(User.employment_history)
        )
        .filter(User.id == user_id)
        .first()
    )

def create_user(
    db: Session,
    email: str,
    full_name: str | None = None,
    **kwargs
) -> User:
    user = User(
        email=email,
        full_name=full_name,
        **kwargs
    )

    db.add(user)
    db.commit()
    db.refresh(user)
    return user

def calculate_total_experience(employment: Iterable[EmploymentRecord], today: Optional[date] = None) -> int:
    """
    Total years worked across all jobs, counted in whole calendar months
    and rounded to the nearest year. Ongoing jobs count until `today`.
    """
    today = today or date.today()
    total_months = 0
    for job in employment:
        end = job.end_date or today
        total_months += (end.year - job.start_date.year) * 12 + (end.month - job.start_date.month)

    return round_half_up(total_months / 12)
