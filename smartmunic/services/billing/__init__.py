# Local application imports
from smartmunic.services.billing.payment_services import (
    create_payment,
    get_payment,
    list_payments,
    mark_overdue_payments,
    pay_payment,
)
from smartmunic.services.billing.voucher_services import expire_vouchers, list_vouchers, purchase_voucher, use_voucher

__all__ = [
    "create_payment",
    "expire_vouchers",
    "get_payment",
    "list_payments",
    "list_vouchers",
    "mark_overdue_payments",
    "pay_payment",
    "purchase_voucher",
    "use_voucher",
]
