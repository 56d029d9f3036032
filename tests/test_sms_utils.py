"""SMS gateway client and the status notification task."""

# Third-party imports
import httpx
import pytest

# Local application imports
from smartmunic.tasks import notification_tasks
from smartmunic.utils.sms_utils import SMSClient, SMSError, SMSNetworkError, map_error_code


def make_client(handler, **kwargs):
    return SMSClient(
        base_url="https://sms.example.test",
        username="user",
        password="secret",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestSMSClient:
    def test_send_normalises_and_posts(self):
        captured = {}

        def handler(request):
            captured["path"] = request.url.path
            captured["body"] = request.read()
            captured["auth"] = request.headers["authorization"]
            return httpx.Response(200, json={"Action": "enqueued", "Result": 1, "Number": "27821234567", "Key": "k1"})

        result = make_client(handler).send("082 123 4567", "Your issue has been received")

        assert captured["path"] == "/send/sms/"
        assert b'"to":"+27821234567"' in captured["body"].replace(b" ", b"")
        assert b'"ems":"0"' in captured["body"].replace(b" ", b"")
        assert captured["auth"].startswith("Basic ")
        assert result.status == "queued"
        assert result.total_sent == 1
        assert result.total_failed == 0

    def test_partial_failure_mapped(self):
        def handler(request):
            return httpx.Response(
                200,
                json=[
                    {"Action": "enqueued", "Result": 1, "Number": "27821234567"},
                    {"Action": "failed", "Result": 0, "Number": "27721234567", "Error": 162},
                ],
            )

        result = make_client(handler).send(["0821234567", "0721234567"], "Hello")
        assert result.status == "partial"
        assert result.failed[0].error == "Number is on Do Not Call list (WASPA DNC)"
        assert result.failed[0].error_code == 162

    def test_duplicate_suppressed(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"Action": "enqueued", "Result": 1})

        client = make_client(handler)
        client.send("0821234567", "Same text")
        with pytest.raises(SMSError):
            client.send("0821234567", "Same text")
        client.send("0821234567", "Different text")
        assert len(calls) == 2

    def test_duplicate_window_expires(self):
        def handler(request):
            return httpx.Response(200, json={"Action": "enqueued", "Result": 1})

        client = make_client(handler, duplicate_ttl=0)
        client.send("0821234567", "Same text")
        client._sent = {key: sent_at - 1 for key, sent_at in client._sent.items()}
        client.send("0821234567", "Same text")

    def test_invalid_number_rejected_before_sending(self):
        def handler(request):
            raise AssertionError("gateway must not be called")

        with pytest.raises(SMSError, match="Invalid phone number"):
            make_client(handler).send("12345", "Hello")

    def test_empty_message_rejected(self):
        with pytest.raises(SMSError):
            make_client(lambda request: httpx.Response(200, json={})).send("0821234567", "  ")

    def test_auth_failure(self):
        client = make_client(lambda request: httpx.Response(401))
        with pytest.raises(SMSError, match="Authentication failed"):
            client.send("0821234567", "Hello")

    def test_network_error_is_retryable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SMSNetworkError):
            make_client(handler).send("0821234567", "Hello")

    def test_missing_credentials(self):
        with pytest.raises(SMSError):
            SMSClient(base_url="https://sms.example.test", username="", password="")

    def test_error_codes(self):
        assert map_error_code(153) == "Insufficient credits"
        assert map_error_code(999) == "Unknown error (code: 999)"
        assert map_error_code(None) == "Unknown error"


class TestStatusNotificationTask:
    def test_message_text(self):
        message = notification_tasks.build_status_message("REF2026ABC123", "in_progress")
        assert "REF2026ABC123" in message
        assert "is being worked on" in message

    def test_skipped_when_sms_disabled(self):
        result = notification_tasks.send_status_change_sms.apply(args=("0821234567", "REF2026ABC123", "open")).get()
        assert result == {"status": "skipped"}

    def test_sends_through_client(self, monkeypatch):
        sent = []

        def handler(request):
            sent.append(request)
            return httpx.Response(200, json={"Action": "enqueued", "Result": 1})

        monkeypatch.setattr(notification_tasks, "get_sms_client", lambda: make_client(handler))

        result = notification_tasks.send_status_change_sms.apply(
            args=("0821234567", "REF2026ABC123", "resolved")
        ).get()
        assert result == {"status": "queued", "sent": 1, "failed": 0}
        assert len(sent) == 1

    def test_rejected_number_not_retried(self, monkeypatch):
        monkeypatch.setattr(
            notification_tasks,
            "get_sms_client",
            lambda: make_client(lambda request: httpx.Response(200, json={})),
        )

        result = notification_tasks.send_status_change_sms.apply(args=("12345", "REF2026ABC123", "open")).get()
        assert result["status"] == "failed"
