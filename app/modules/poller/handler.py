"""Trigger entrypoint for the guild poller.

``handle_poll_event`` has the AWS Lambda handler signature and is also
what the scheduler calls. It never raises: every outcome is reported as a
``{"message": ...}`` dict.
"""

from typing import Any, Dict, Optional

import structlog

from infrastructure.logging import bind_run_context
from modules.poller.errors import PollerError
from modules.poller.providers import get_poller_service
from modules.poller.service import PollerService

logger = structlog.get_logger()


def handle_poll_event(
    event: Optional[Dict[str, Any]] = None,
    context: Any = None,
    service: Optional[PollerService] = None,
) -> Dict[str, Any]:
    """Run one poll and report the result.

    Args:
        event: Trigger event (unused; present for the Lambda signature)
        context: Lambda context, whose ``aws_request_id`` becomes the run id
        service: PollerService to run; the process-scoped one when omitted

    Returns:
        ``{"message": "Success", "delivered": n, "watermark": w}`` or
        ``{"message": "Failure: <description>"}``
    """
    run_id = getattr(context, "aws_request_id", None)
    with bind_run_context(run_id=run_id):
        try:
            service = service or get_poller_service()
            summary = service.run()
        except PollerError as e:
            logger.error("poll_failed", error=str(e), error_code=e.error_code)
            return {"message": f"Failure: {e}"}
        except Exception as e:
            logger.exception("poll_failed_unexpectedly", error=str(e))
            return {"message": f"Failure: {e}"}

        return {
            "message": "Success",
            "delivered": summary.delivered,
            "watermark": summary.watermark,
        }
