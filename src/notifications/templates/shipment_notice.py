"""Shipment notice template — lists every unit that has to be shipped."""

from decimal import ROUND_HALF_UP, Decimal

from notifications.notice import NoticeType

HEADER = "** Shipment notice **"


class ShipmentNoticeTemplate:
    notice_type = NoticeType.SHIPMENT_NOTICE.value

    @staticmethod
    def render(context: dict) -> list[str]:
        """Render one ``1x <name> <grams>g`` line per unit and the package weight.

        Context keys:
            units: sequence of objects with ``name`` and ``weight`` (kg)
        """
        units = context.get("units", ())
        lines = [HEADER]
        total_weight = Decimal("0")
        for unit in units:
            grams = int(Decimal(unit.weight) * 1000)
            lines.append(f"1x {unit.name:<12} {grams}g")
            total_weight += Decimal(unit.weight)
        rounded = total_weight.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        lines.append(f"Total package weight {rounded}kg")
        lines.append("")
        return lines
