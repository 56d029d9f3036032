from .payment_routes import router as payment_router
from .voucher_routes import router as voucher_router

__all__ = ["payment_router", "voucher_router"]
