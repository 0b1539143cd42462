# gunicorn.conf.py — Production server configuration.
#
# Run from backend/ with:
#   gunicorn api.main:app -c gunicorn.conf.py
#
# Point DATABASE_URL at PostgreSQL before scaling past one worker; the default
# SQLite file does not tolerate concurrent writers well.

workers = 4
worker_class = "uvicorn.workers.UvicornWorker"

bind = "0.0.0.0:8000"

# stdout/stderr for the process manager; app logs are JSON via core/logging.py
accesslog = "-"
errorlog  = "-"
loglevel  = "info"

timeout          = 60
keepalive        = 5
graceful_timeout = 30
