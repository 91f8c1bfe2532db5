"""
RabbitMQ consumer.

Declares the durable exchange, queue and binding, consumes one delivery
at a time with manual acknowledgement, and applies the handler's
disposition. Retryable failures are republished with an incremented
x-retry-count header until the configured cap.

Dependencies: kombu, source_service.configs
System role: Queue intake for the ingestion worker
"""

import logging
from typing import Any

from kombu import Connection, Exchange, Message, Producer, Queue
from kombu.mixins import ConsumerMixin

from source_service.configs.broker import BrokerSettings
from source_service.worker.handler import Disposition, MessageHandler

logger = logging.getLogger(__name__)

RETRY_HEADER = "x-retry-count"


class SourceQueueConsumer(ConsumerMixin):
    """Long-running consumer for source processing messages."""

    def __init__(
        self,
        connection: Connection,
        handler: MessageHandler,
        settings: BrokerSettings,
    ) -> None:
        """
        Args:
            connection: kombu connection (not yet connected is fine)
            handler: Per-delivery handler
            settings: Broker topology and delivery limits
        """
        self.connection = connection
        self._handler = handler
        self._settings = settings
        self.exchange = Exchange(settings.exchange, type=settings.exchange_type, durable=True)
        self.queue = Queue(
            settings.queue,
            exchange=self.exchange,
            routing_key=settings.routing_key,
            durable=True,
        )

    def get_consumers(self, Consumer, channel) -> list[Any]:  # noqa: N803
        return [
            Consumer(
                queues=[self.queue],
                on_message=self.on_message,
                prefetch_count=self._settings.prefetch_count,
            )
        ]

    def on_consume_ready(self, connection, channel, consumers, **kwargs) -> None:
        logger.info(
            f"{__name__}:on_consume_ready - Consuming",
            extra={"queue": self.queue.name, "prefetch_count": self._settings.prefetch_count},
        )

    def on_message(self, message: Message) -> None:
        """Run the handler and settle the delivery."""
        disposition = self._handler.handle(message.body)

        if disposition is Disposition.REJECT:
            message.reject(requeue=False)
            return

        if disposition is Disposition.RETRY:
            self._retry_or_drop(message)
            return

        message.ack()

    def _retry_or_drop(self, message: Message) -> None:
        headers = dict(message.headers or {})
        retries = int(headers.get(RETRY_HEADER, 0))

        if retries >= self._settings.max_redeliveries:
            logger.error(
                f"{__name__}:_retry_or_drop - Redelivery limit reached, dropping message",
                extra={"retries": retries, "max_redeliveries": self._settings.max_redeliveries},
            )
            message.ack()
            return

        headers[RETRY_HEADER] = retries + 1
        producer = Producer(message.channel)
        producer.publish(
            message.body,
            exchange=self.exchange,
            routing_key=self._settings.routing_key,
            headers=headers,
            content_type=message.content_type or "application/json",
            content_encoding=message.content_encoding or "utf-8",
            delivery_mode=2,
        )
        message.ack()
        logger.warning(
            f"{__name__}:_retry_or_drop - Message republished",
            extra={"retry": retries + 1},
        )
