# app/tasks/activity.py
from app.celery_worker import celery_app
from app.data.database import SessionLocal
from app.data.models.activity_log import ActivityLogModel, ACTIVITY_CATEGORIES
from app.utils.logging import get_logger

logger = get_logger(__name__)


@celery_app.task(name="app.tasks.activity.record_activity_task")
def record_activity_task(
    category: str,
    description: str,
    user_email: str | None = None,
    user_name: str | None = None,
):
    """Zapis wpisu do activity log, poza sciezka requestu."""
    if category not in ACTIVITY_CATEGORIES:
        category = "Other"

    db = SessionLocal()
    try:
        entry = ActivityLogModel(
            category=category,
            description=description,
            user_email=user_email,
            user_name=user_name,
        )
        db.add(entry)
        db.commit()
        logger.info(f"[ACTIVITY] {category}: {description}")
        return entry.id
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
