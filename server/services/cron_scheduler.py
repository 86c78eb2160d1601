"""
Periodic task schedule (Celery Beat).
"""
import os
from celery import Celery
from celery.schedules import crontab

DEADLINE_CHECK_HOUR = int(os.getenv("DEADLINE_CHECK_HOUR", "0"))


def configure_celery_beat(celery_app: Celery):
    """
    Register periodic tasks on the Celery app.

    Args:
        celery_app: Celery application instance
    """
    celery_app.conf.beat_schedule = {
        # Daily scan of favorited/applied matches for approaching deadlines
        'check-match-deadlines-daily': {
            'task': 'tasks.check_match_deadlines',
            'schedule': crontab(hour=DEADLINE_CHECK_HOUR, minute=0),
        },
    }

    celery_app.conf.update(
        timezone='UTC',
        enable_utc=True,
        beat_scheduler='celery.beat:PersistentScheduler',
        beat_schedule_filename=os.getenv("CELERY_BEAT_SCHEDULE_FILE", "/tmp/celerybeat-schedule"),
        beat_max_loop_interval=5,
    )
