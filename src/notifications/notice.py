"""Notice kinds and output channel identifiers."""

from enum import Enum


class NoticeType(Enum):
    SHIPMENT_NOTICE = "shipment_notice"
    RECEIPT = "receipt"


class OutputChannel(Enum):
    STDOUT = "stdout"
    FAKE = "fake"
