# Used as: hypercorn --config python:services.form_echo_service.hypercorn_config \
#     "services.form_echo_service.app:create_app()"
import os

_default_host = "0.0.0.0"
_default_port = 3000

bind = (
    f"{os.getenv('FORM_ECHO_SERVICE_HOST', _default_host)}"
    f":{int(os.getenv('FORM_ECHO_SERVICE_PORT', _default_port))}"
)
workers = int(os.getenv("FORM_ECHO_SERVICE_WEB_CONCURRENCY", 1))
worker_class = "asyncio"

loglevel = os.getenv("FORM_ECHO_SERVICE_LOG_LEVEL", "info").lower()
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s"'

graceful_timeout = int(os.getenv("FORM_ECHO_SERVICE_GRACEFUL_TIMEOUT", 30))
keep_alive_timeout = int(os.getenv("FORM_ECHO_SERVICE_KEEP_ALIVE_TIMEOUT", 5))
