"""Template registry — maps NoticeType to template classes.

Each template renders its notice as a list of plain text lines from a
context dict.
"""

from notifications.notice import NoticeType
from notifications.templates.receipt import ReceiptTemplate
from notifications.templates.shipment_notice import ShipmentNoticeTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    NoticeType.SHIPMENT_NOTICE.value: ShipmentNoticeTemplate,
    NoticeType.RECEIPT.value: ReceiptTemplate,
}


def get_template(notice_type: str):
    """Look up a template class by notice type string."""
    template_cls = TEMPLATE_REGISTRY.get(notice_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notice type: {notice_type}")
    return template_cls
