"""Checkout receipt template — itemised lines followed by the totals."""

from notifications.notice import NoticeType

HEADER = "** Checkout receipt **"
SEPARATOR = "-" * 21


class ReceiptTemplate:
    notice_type = NoticeType.RECEIPT.value

    @staticmethod
    def render(context: dict) -> list[str]:
        """Render the receipt. Amounts are truncated toward zero, not rounded.

        Context keys:
            lines: sequence of objects with ``quantity``, ``name`` and ``line_total``
            subtotal, shipping_fee, total: numeric amounts
        """
        lines = [HEADER]
        for line in context.get("lines", ()):
            lines.append(f"{line.quantity}x {line.name:<12} {int(line.line_total)}")
        lines.append(SEPARATOR)
        lines.append(f"{'Subtotal':<17}{int(context.get('subtotal', 0))}")
        lines.append(f"{'Shipping':<17}{int(context.get('shipping_fee', 0))}")
        lines.append(f"{'Amount':<17}{int(context.get('total', 0))}")
        lines.append("")
        return lines
