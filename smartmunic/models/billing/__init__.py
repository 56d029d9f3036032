# Local application imports
from smartmunic.models.billing.payment import Payment, PaymentStatus, PaymentType
from smartmunic.models.billing.voucher import Voucher, VoucherStatus, VoucherType

__all__ = ["Payment", "PaymentStatus", "PaymentType", "Voucher", "VoucherStatus", "VoucherType"]
