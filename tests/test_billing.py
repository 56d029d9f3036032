"""Municipal bills and prepaid vouchers."""

# Standard library imports
from datetime import timedelta
from decimal import Decimal
import re

# Third-party imports
import pytest

# Local application imports
from smartmunic.models.billing import VoucherStatus, VoucherType
from smartmunic.services.billing.payment_services import mark_overdue_payments
from smartmunic.services.billing.voucher_services import expire_vouchers, purchase_voucher
from smartmunic.utils.datetime_utils import utc_now

pytestmark = pytest.mark.asyncio


def _due_in(days):
    return (utc_now() + timedelta(days=days)).isoformat()


class TestPayments:
    async def test_create_payment(self, client):
        resp = await client.post(
            "/api/payments",
            json={"type": "water", "amount": 45050, "dueDate": _due_in(14), "accountNumber": "ACC-1001"},
        )
        assert resp.status_code == 201
        payment = resp.json()
        assert payment["status"] == "pending"
        assert payment["amount"] == 45050
        assert payment["paidAt"] is None

    async def test_non_positive_amount_rejected(self, client):
        resp = await client.post("/api/payments", json={"type": "rates", "amount": 0, "dueDate": _due_in(14)})
        assert resp.status_code == 400

    async def test_pay(self, client):
        created = (
            await client.post("/api/payments", json={"type": "electricity", "amount": 1000, "dueDate": _due_in(3)})
        ).json()

        resp = await client.post(f"/api/payments/{created['id']}/pay")
        assert resp.status_code == 200
        assert resp.json()["status"] == "paid"
        assert resp.json()["paidAt"] is not None

        again = await client.post(f"/api/payments/{created['id']}/pay")
        assert again.status_code == 409

    async def test_overdue_flagged_on_list(self, client):
        late = (await client.post("/api/payments", json={"type": "fine", "amount": 500, "dueDate": _due_in(-2)})).json()
        assert late["status"] == "pending"
        await client.post("/api/payments", json={"type": "fine", "amount": 700, "dueDate": _due_in(5)})

        payments = (await client.get("/api/payments")).json()
        assert [p["status"] for p in payments] == ["overdue", "pending"]

    async def test_overdue_bill_can_still_be_paid(self, client):
        late = (await client.post("/api/payments", json={"type": "fine", "amount": 500, "dueDate": _due_in(-1)})).json()
        await client.get("/api/payments")

        resp = await client.post(f"/api/payments/{late['id']}/pay")
        assert resp.status_code == 200
        assert resp.json()["status"] == "paid"

    async def test_filter_by_type(self, client):
        await client.post("/api/payments", json={"type": "water", "amount": 100, "dueDate": _due_in(1)})
        await client.post("/api/payments", json={"type": "rates", "amount": 200, "dueDate": _due_in(1)})

        payments = (await client.get("/api/payments", params={"type": "rates"})).json()
        assert [p["type"] for p in payments] == ["rates"]

    async def test_unknown_payment(self, client):
        assert (await client.get("/api/payments/9999")).status_code == 404
        assert (await client.post("/api/payments/9999/pay")).status_code == 404

    async def test_mark_overdue_service(self, client, db):
        await client.post("/api/payments", json={"type": "water", "amount": 100, "dueDate": _due_in(-3)})
        assert await mark_overdue_payments(db) == 1
        assert await mark_overdue_payments(db) == 0


class TestVouchers:
    async def test_purchase(self, client):
        resp = await client.post("/api/vouchers", json={"type": "electricity", "amount": "150.50"})
        assert resp.status_code == 201
        voucher = resp.json()
        assert voucher["amount"] == 15050
        assert voucher["status"] == "active"
        assert re.fullmatch(r"ELECTRICITY-\d+-[a-z0-9]{6}", voucher["voucherCode"])

    async def test_use_voucher_once(self, client):
        voucher = (await client.post("/api/vouchers", json={"type": "water", "amount": 50})).json()

        used = await client.post("/api/vouchers/use", json={"voucherCode": voucher["voucherCode"]})
        assert used.status_code == 200
        assert used.json()["status"] == "used"
        assert used.json()["usedDate"] is not None

        again = await client.post("/api/vouchers/use", json={"voucherCode": voucher["voucherCode"]})
        assert again.status_code == 409

    async def test_unknown_voucher(self, client):
        resp = await client.post("/api/vouchers/use", json={"voucherCode": "WATER-0-nothing"})
        assert resp.status_code == 404

    async def test_expired_voucher_cannot_be_used(self, client, db):
        voucher = await purchase_voucher(db, VoucherType.WATER, Decimal("20"))
        voucher.expiry_date = utc_now() - timedelta(days=1)
        await db.commit()

        resp = await client.post("/api/vouchers/use", json={"voucherCode": voucher.voucher_code})
        assert resp.status_code == 409

        listed = (await client.get("/api/vouchers")).json()
        assert listed[0]["status"] == "expired"

    async def test_expire_vouchers_service(self, db):
        stale = await purchase_voucher(db, VoucherType.ELECTRICITY, Decimal("10"))
        fresh = await purchase_voucher(db, VoucherType.ELECTRICITY, Decimal("10"))
        stale.expiry_date = utc_now() - timedelta(minutes=1)
        await db.commit()

        assert await expire_vouchers(db) == 1
        assert stale.status == VoucherStatus.EXPIRED
        assert fresh.status == VoucherStatus.ACTIVE
