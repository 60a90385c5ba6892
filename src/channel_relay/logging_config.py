"""JSON logging for the Lambda functions and the local FastAPI app.

Every record is written to stdout as a single JSON object, so CloudWatch Logs
Insights can filter on ``severity``, ``logger`` or ``service`` directly.
Chatty AWS SDK and HTTP transport loggers are held at WARNING so that the
relay's own records are not buried under botocore's debug output.
"""

import logging.config

SERVICE_NAME = "channel-relay"

# Third-party loggers that stay at WARNING whatever the root level
QUIET_LOGGERS = ("boto3", "botocore", "urllib3")


def build_logging_config(level: str = "INFO") -> dict:
    """Return a ``dictConfig`` mapping with JSON output at ``level``."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                "rename_fields": {
                    "asctime": "timestamp",
                    "levelname": "severity",
                    "name": "logger",
                },
                "static_fields": {"service": SERVICE_NAME},
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        "root": {"level": level.upper(), "handlers": ["stdout"]},
    }


def configure_logging(level: str = "INFO") -> None:
    """Install JSON logging, replacing whatever handler the runtime set up.

    The Lambda runtime attaches its own plain-text root handler before user
    code runs; ``dictConfig`` swaps it for the JSON one.
    """
    logging.config.dictConfig(build_logging_config(level))
