import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.pymongo import PyMongoIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

IGNORE_PATHS = {"/health"}

def init_sentry(
    dsn: str,
    environment: str = "development",
    release: str | None = None,
    traces_sample_rate: float = 0.2,
    send_default_pii: bool = False,
):
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        send_default_pii=send_default_pii,
        integrations=[
            FastApiIntegration(),
            PyMongoIntegration(),
            LoggingIntegration(level=None, event_level="ERROR"),
        ],
        traces_sample_rate=traces_sample_rate,
        before_send=strip_sensitive_headers,
        before_send_transaction=drop_health_transactions,
    )

def strip_sensitive_headers(event, hint):
    headers = event.get("request", {}).get("headers", {}) or {}
    for k in list(headers.keys()):
        if k.lower() in ("authorization", "cookie", "set-cookie"):
            headers[k] = "[Filtered]"
    return event

def drop_health_transactions(event, hint=None):
    name = event.get("transaction")
    if name and any(p in str(name) for p in IGNORE_PATHS):
        return None
    return event
