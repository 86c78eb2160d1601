"""
Celery application configuration for background tasks.
"""
import os
from celery import Celery

# Get broker and backend URLs from environment
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/0")

# Create Celery app
celery_app = Celery(
    "scholarship_match_tasks",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
    include=["services.tasks"],
)

# Celery configuration
celery_app.conf.update(
    # Task settings
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # The deadline scan walks every profile once; keep it bounded
    task_track_started=True,
    task_time_limit=15 * 60,
    task_soft_time_limit=12 * 60,

    # Scan summaries are only interesting for a day
    result_expires=24 * 3600,

    worker_prefetch_multiplier=1,

    # Broker settings
    broker_connection_retry_on_startup=True,
)

# ==================== Configure Cron Scheduler ====================
from services.cron_scheduler import configure_celery_beat

configure_celery_beat(celery_app)
