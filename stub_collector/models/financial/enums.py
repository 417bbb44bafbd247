"""Enumeration types for financial domain entities."""

from enum import Enum


class AccountType(str, Enum):
    PAYMENT = "PAYMENT"
    SAVING = "SAVING"
    SHOPPING = "SHOPPING"


class TransactionType(str, Enum):
    PURCHASE = "PURCHASE"
    PAYMENT = "PAYMENT"
    TRANSFER = "TRANSFER"
    INTERNAL = "INTERNAL"
    OTHER = "OTHER"


class PaymentType(str, Enum):
    CARD = "CARD"
    TRANSFER = "TRANSFER"
    CHECK = "CHECK"


class BarcodeType(str, Enum):
    CODE_128 = "CODE_128"
    EAN_13 = "EAN_13"
    QR_CODE = "QR_CODE"


class ProductReferenceType(str, Enum):
    ASIN = "ASIN"
    SKU = "SKU"


class QuantityUnit(str, Enum):
    UNIT = "UNIT"
    KILOGRAM = "KILOGRAM"
    LITER = "LITER"


class RecurrenceUnit(str, Enum):
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"

