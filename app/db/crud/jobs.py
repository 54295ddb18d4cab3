from sqlalchemy.orm import Session
from app.db.models.job import Job

def get_job(db: Session, job_id: int) -> Job | None:
    return db.query(Job).filter(Job.id == job_id).first()

def create_job(db: Session, title: str, **kwargs) -> Job:
    job = Job(title=title, **kwargs)
    db.add(job)
    db.commit()
    db.refresh(job)
    return job
