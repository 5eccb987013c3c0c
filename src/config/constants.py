"""
Application-wide constants.
"""

# Header names used for request tracing
CORRELATION_ID_HEADER = "X-Correlation-ID"
USER_ID_HEADER = "X-User-ID"
SESSION_ID_HEADER = "X-Session-ID"

# Requests slower than this are logged as warnings
SLOW_REQUEST_SECONDS = 2.0

# Log format selecting JSON output
LOG_FORMAT_JSON = "json"
