from .payment_schemas import PaymentCreate, PaymentResponse
from .voucher_schemas import VoucherPurchase, VoucherResponse, VoucherUse

__all__ = ["PaymentCreate", "PaymentResponse", "VoucherPurchase", "VoucherResponse", "VoucherUse"]
