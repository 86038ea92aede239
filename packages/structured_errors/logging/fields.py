"""Canonical logging field names for structured error log records."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Structured error fields.
ERROR = "error"
ERROR_ID = "error_id"
ERROR_CODE = "error_code"
ERROR_NAME = "error_name"
ERROR_MESSAGE = "error_message"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
