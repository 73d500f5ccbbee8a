"""Forwards configuration errors to an error-tracking webhook.

A mood stored under a name the vocabulary no longer knows is a deployment
problem, not a user error, so it is reported here instead of being shown
to the user.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from ..config import get_settings

logger = logging.getLogger(__name__)

REPORT_TIMEOUT = 5.0  # seconds


async def report_configuration_error(
    error: Exception,
    context: Optional[dict] = None,
    url: Optional[str] = None,
) -> bool:
    """
    POST a configuration error to the error-tracking webhook.

    Args:
        error: The exception to report
        context: Extra fields for the report (endpoint, mood, ...)
        url: Webhook URL (defaults to MOOD_ERROR_REPORT_URL)

    Returns:
        True if the webhook accepted the report
    """
    url = url or get_settings().error_report_url
    if not url:
        logger.debug("[REPORTER] No error report URL configured")
        return False

    payload = {
        "error_type": type(error).__name__,
        "message": str(error),
        "service": "mood-dashboard-api",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "context": context or {},
    }

    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(REPORT_TIMEOUT)) as client:
            response = await client.post(url, json=payload)

        if response.is_success:
            logger.info(f"[REPORTER] Reported {payload['error_type']}")
            return True

        logger.warning(f"[REPORTER] Status {response.status_code}: {response.text}")
        return False

    except httpx.ConnectError:
        logger.debug(f"[REPORTER] Error tracker not available at {url}")
        return False
    except httpx.HTTPError as e:
        logger.error(f"[REPORTER] Failed to report error: {e}")
        return False
