import signal
import threading

from dotenv import load_dotenv

from infrastructure.logging import configure_logging, get_logger
from infrastructure.services import get_settings
from jobs import scheduled_tasks
from modules.poller.handler import handle_poll_event

load_dotenv()
configure_logging()
logger = get_logger(__name__)


def handler(event, context):
    """AWS Lambda entrypoint; the function is invoked on a fixed schedule."""
    return handle_poll_event(event, context)


def list_configs(settings):
    """List all configuration settings keys"""
    config_settings = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def main():
    """Run the poller on a schedule until interrupted."""
    settings = get_settings()
    logger.info("application_startup", prefix=settings.PREFIX)
    list_configs(settings)

    service = scheduled_tasks.init(settings)
    # first poll runs immediately instead of waiting a full interval
    scheduled_tasks.poll_guild(service)
    stop_run_continuously = scheduled_tasks.run_continuously()

    shutdown = threading.Event()

    def request_shutdown(signum, frame):
        logger.info("application_shutdown", signal=signum)
        shutdown.set()

    signal.signal(signal.SIGINT, request_shutdown)
    signal.signal(signal.SIGTERM, request_shutdown)
    shutdown.wait()
    stop_run_continuously.set()


if __name__ == "__main__":
    main()
