"""
Worker entry point.

Loads settings, configures logging, builds the container and consumes
the source queue until SIGINT/SIGTERM.

Dependencies: kombu, python-dotenv, source_service.dependencies
System role: Process lifecycle for the ingestion worker
"""

import logging
import signal

from dotenv import load_dotenv
from kombu import Connection

from source_service.configs import get_settings
from source_service.dependencies import build_container
from source_service.observability.logger import configure_logging
from source_service.worker.consumer import SourceQueueConsumer

logger = logging.getLogger(__name__)


def run_worker() -> None:
    """Run the consumer loop until a shutdown signal arrives."""
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level)

    container = build_container(settings)

    with Connection(settings.broker.url) as connection:
        consumer = SourceQueueConsumer(connection, container.handler, settings.broker)

        def _shutdown(signum, _frame) -> None:
            logger.info(f"{__name__}:run_worker - Received signal {signum}, shutting down")
            consumer.should_stop = True
            container.cancel_event.set()

        signal.signal(signal.SIGINT, _shutdown)
        signal.signal(signal.SIGTERM, _shutdown)

        logger.info(
            f"{__name__}:run_worker - Worker starting",
            extra={"environment": settings.environment, "queue": settings.broker.queue},
        )
        try:
            consumer.run()
        finally:
            container.close()
            logger.info(f"{__name__}:run_worker - Worker stopped")


if __name__ == "__main__":
    run_worker()
