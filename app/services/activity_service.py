# app/services/activity_service.py
from app.data.models.user import UserModel
from app.tasks.activity import record_activity_task
from app.utils.logging import get_logger
from app.utils.retry import broker_retry

logger = get_logger(__name__)


class ActivityService:
    """
    Serwis do zapisywania activity logu.
    Używa Celery - request nie czeka na zapis, a blad brokera nie psuje requestu.
    """

    def record(self, category: str, description: str, user: UserModel | None = None):
        try:
            self._dispatch(
                category,
                description,
                user.email if user else None,
                user.name if user else None,
            )
        except Exception as e:
            logger.warning(f"Failed to record activity '{category}': {e}")

    @broker_retry()
    def _dispatch(self, category, description, user_email, user_name):
        record_activity_task.delay(category, description, user_email, user_name)
