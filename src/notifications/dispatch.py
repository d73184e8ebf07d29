"""Renders shipment notices and receipts onto an output channel."""

from notifications.channel import get_channel
from notifications.notice import NoticeType
from notifications.templates import get_template
from shared.logging import get_logger

logger = get_logger(__name__)


class NoticeDispatcher:
    """Renders notices with the registered templates and writes them to a channel.

    Without an explicit channel, the one named by the ``OUTPUT_CHANNEL``
    setting is looked up on first use and kept from then on.
    """

    def __init__(self, channel=None):
        self._channel = channel

    @property
    def channel(self):
        if self._channel is None:
            self._channel = get_channel()
        return self._channel

    def dispatch(self, notice_type: str, context: dict) -> list[str]:
        lines = get_template(notice_type).render(context)
        self.channel.write_lines(lines)
        logger.debug("Notice written", notice_type=notice_type, line_count=len(lines))
        return lines

    def send_shipment_notice(self, quote) -> list[str]:
        return self.dispatch(NoticeType.SHIPMENT_NOTICE.value, {"units": quote.units})

    def send_receipt(self, receipt) -> list[str]:
        return self.dispatch(
            NoticeType.RECEIPT.value,
            {
                "lines": receipt.lines,
                "subtotal": receipt.subtotal,
                "shipping_fee": receipt.shipping_fee,
                "total": receipt.total,
            },
        )
