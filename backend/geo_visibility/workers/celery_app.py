"""
Celery Application Configuration
Queue-based processing of fetched model responses
"""

import logging

from celery import Celery
from kombu import Queue, Exchange

from geo_visibility.config import get_settings

settings = get_settings()

# Engine loggers follow LOG_LEVEL; Celery configures the handlers
logging.getLogger("geo_visibility").setLevel(settings.LOG_LEVEL)

# Create Celery app
celery_app = Celery(
    "geo_visibility",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=[
        "geo_visibility.workers.tasks.analysis_tasks",
    ]
)

# Celery configuration
celery_app.conf.update(
    # Task settings
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # Result backend settings
    result_expires=86400,  # 24 hours

    # Task execution settings
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    task_time_limit=120,
    task_soft_time_limit=90,

    # Worker settings
    worker_prefetch_multiplier=1,

    # Queue configuration
    task_queues=(
        Queue("default", Exchange("default"), routing_key="default"),
        Queue("analysis", Exchange("analysis"), routing_key="analysis"),
    ),

    task_default_queue="default",
    task_default_exchange="default",
    task_default_routing_key="default",

    task_routes={
        "geo_visibility.workers.tasks.analysis_tasks.*": {"queue": "analysis"},
    },
)
