"""
Gunicorn configuration for production deployment of the JobConnect API
Run with: gunicorn jobconnect.main:app -c gunicorn.conf.py
"""
import multiprocessing
import os

# Server socket
bind = f"{os.getenv('HOST', '0.0.0.0')}:{os.getenv('PORT', '8000')}"
backlog = 2048

# Worker processes
# Default (2 * CPU cores) + 1, capped by GUNICORN_WORKERS when set
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 100

# Worker lifecycle
max_requests = 1000  # Recycle workers periodically
max_requests_jitter = 100  # Spread restarts out

# Timeouts
timeout = 30
keepalive = 5
graceful_timeout = 30

# Process naming
proc_name = "jobconnect_api"

# Server mechanics
daemon = False  # Containers supervise the process
pidfile = None

# Logging
accesslog = "-"  # Log to stdout
errorlog = "-"   # Log to stderr
loglevel = os.getenv("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'


# Server hooks
def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info("Starting JobConnect API")


def when_ready(server):
    """Called just after the server is started."""
    server.log.info(f"JobConnect API ready on {bind} with {workers} workers")


def worker_abort(worker):
    """Called when a worker is aborted (usually a request timeout)."""
    worker.log.warning(f"Worker {worker.pid} aborted")
