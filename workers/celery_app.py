import os
from celery import Celery
from celery.schedules import crontab
from dotenv import load_dotenv

load_dotenv()

broker = os.getenv("REDIS_URL", "redis://localhost:6379/0")
backend = broker

celery = Celery("papaya_workers", broker=broker, backend=backend, include=["workers.tasks"])
celery.conf.task_routes = {
    "tasks.sync_looks_to_recommender": {"queue": "recommender"},
}

celery.conf.beat_schedule = {
    "sync-looks-to-recommender-daily": {
        "task": "tasks.sync_looks_to_recommender",
        "schedule": crontab(hour=0, minute=0),  # midnight UTC
    },
}
