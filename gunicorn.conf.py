# gunicorn.conf.py
# gunicorn -c gunicorn.conf.py catalog.main:app
import multiprocessing
import os

from catalog.config import settings

bind = f"{settings.HOST}:{settings.PORT}"
worker_class = "uvicorn.workers.UvicornWorker"

# the app is sync over a pooled engine; each worker holds its own pool
workers = int(os.getenv("WORKERS", multiprocessing.cpu_count() + 1))
timeout = 60
graceful_timeout = 30

accesslog = "-"
errorlog = "-"
loglevel = settings.LOG_LEVEL.lower()

proc_name = settings.APP_NAME.lower().replace(" ", "-")

# the app configures its own root logging; only gunicorn's loggers are set here
logconfig_dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "catalog": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
        "stdout": {"class": "logging.StreamHandler", "formatter": "catalog", "stream": "ext://sys.stdout"},
    },
    "loggers": {
        "gunicorn.error": {"level": settings.LOG_LEVEL.upper(), "handlers": ["stdout"], "propagate": False},
        "gunicorn.access": {"level": "INFO", "handlers": ["stdout"], "propagate": False},
    },
}
