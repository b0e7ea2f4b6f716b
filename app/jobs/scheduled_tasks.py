import threading
import time
from typing import Optional

import schedule
import structlog

from infrastructure.configuration import Settings
from infrastructure.services import get_settings
from modules.poller.handler import handle_poll_event
from modules.poller.providers import build_poller_service
from modules.poller.service import PollerService

logger = structlog.get_logger()


def safe_run(job):
    def wrapper(*args, **kwargs):
        try:
            job(*args, **kwargs)
        except Exception as e:
            logger.error("scheduled_job_failed", job=job.__name__, error=str(e))

    return wrapper


def init(
    settings: Optional[Settings] = None, service: Optional[PollerService] = None
) -> PollerService:
    """Register the poller jobs and return the service they run.

    The service is built once so an in-memory watermark survives between
    runs.
    """
    settings = settings or get_settings()
    service = service or build_poller_service(settings)
    interval = settings.poller.INTERVAL_MINUTES
    logger.info("scheduled_tasks_initialized", interval_minutes=interval)

    schedule.every(interval).minutes.do(safe_run(poll_guild), service=service)
    schedule.every(5).minutes.do(safe_run(scheduler_heartbeat))
    return service


def poll_guild(service: PollerService):
    result = handle_poll_event(service=service)
    if result["message"] == "Success":
        logger.info(
            "scheduled_poll_succeeded",
            delivered=result["delivered"],
            watermark=result["watermark"],
        )
    else:
        logger.error("scheduled_poll_failed", result=result["message"])


def scheduler_heartbeat():
    logger.info("scheduler_heartbeat", time=time.ctime())


def run_continuously(interval=1):
    """Continuously run, while executing pending jobs at each
    elapsed time interval.
    @return cease_continuous_run: threading. Event which can
    be set to cease continuous run. Please note that it is
    *intended behavior that run_continuously() does not run
    missed jobs*. For example, if you've registered a job that
    should run every minute and you set a continuous run
    interval of one hour then your job won't be run 60 times
    at each interval but only once.
    """
    cease_continuous_run = threading.Event()

    class ScheduleThread(threading.Thread):
        @classmethod
        def run(cls):
            while not cease_continuous_run.is_set():
                schedule.run_pending()
                time.sleep(interval)

    continuous_thread = ScheduleThread()
    continuous_thread.start()
    return cease_continuous_run
