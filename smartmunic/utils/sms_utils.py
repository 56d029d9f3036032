# Standard library imports
import json
import threading
import time
from typing import Any

# Third-party imports
import httpx
from pydantic import BaseModel, Field

# Local application imports
from smartmunic.core.monitoring.logging import get_logger
from smartmunic.settings import settings
from smartmunic.utils.validators.phone_validator import mask_phone_number, validate_phone_number

logger = get_logger(__name__)

SMS_MAX_SINGLE_LENGTH = 160

# Gateway error codes
SMS_ERROR_MESSAGES = {
    150: "Invalid credentials",
    153: "Insufficient credits",
    154: "Invalid or banned phone number",
    155: "Duplicate message within 15 minutes",
    162: "Number is on Do Not Call list (WASPA DNC)",
}


class SMSError(Exception):
    """Raised when a message cannot be handed to the SMS gateway."""


class SMSNetworkError(SMSError):
    """The gateway could not be reached; the send may be retried."""


class SMSRecipientResult(BaseModel):
    number: str | None = None
    key: str | None = None
    error: str | None = None
    error_code: int | None = None


class SMSSendResult(BaseModel):
    status: str  # "queued" when every recipient was accepted, otherwise "partial"
    successful: list[SMSRecipientResult] = Field(default_factory=list)
    failed: list[SMSRecipientResult] = Field(default_factory=list)

    @property
    def total_sent(self) -> int:
        return len(self.successful)

    @property
    def total_failed(self) -> int:
        return len(self.failed)


def map_error_code(error_code: int | None) -> str:
    if error_code is None:
        return "Unknown error"
    return SMS_ERROR_MESSAGES.get(error_code, f"Unknown error (code: {error_code})")


class SMSClient:
    """
    Client for the bulk SMS gateway's REST API.

    Numbers are normalised to E.164 before sending and identical
    recipient/message pairs are suppressed for ``duplicate_ttl`` seconds.
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = 10.0,
        duplicate_ttl: int = 15 * 60,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not username or not password:
            raise SMSError("SMS credentials not configured")

        self.base_url = base_url.rstrip("/")
        self.duplicate_ttl = duplicate_ttl
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=(username, password),
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )
        self._sent: dict[str, float] = {}
        self._lock = threading.Lock()

    def close(self) -> None:
        self._client.close()

    def normalise_numbers(self, to: str | list[str]) -> list[str]:
        numbers = [to] if isinstance(to, str) else list(to)
        normalised = []
        for number in numbers:
            phone_value = validate_phone_number(number)
            if phone_value is None:
                raise SMSError(f"Invalid phone number: {mask_phone_number(number)}")
            normalised.append(phone_value)
        return normalised

    def is_duplicate(self, numbers: list[str], message: str) -> bool:
        key = json.dumps({"to": numbers, "message": message})
        now = time.monotonic()
        with self._lock:
            expired = [k for k, sent_at in self._sent.items() if now - sent_at > self.duplicate_ttl]
            for k in expired:
                del self._sent[k]

            if key in self._sent:
                return True

            self._sent[key] = now
            return False

    def send(self, to: str | list[str], message: str, ems: bool = False, userref: str | None = None) -> SMSSendResult:
        if not message or not message.strip():
            raise SMSError("Message cannot be empty")
        if not to:
            raise SMSError("Destination number(s) required")

        numbers = self.normalise_numbers(to)

        if len(message) > SMS_MAX_SINGLE_LENGTH and not ems:
            logger.warning(f"Message length {len(message)} > {SMS_MAX_SINGLE_LENGTH}; it will be truncated without EMS")

        if self.is_duplicate(numbers, message):
            raise SMSError("Duplicate message detected within the suppression window")

        payload: dict[str, Any] = {
            "to": numbers[0] if len(numbers) == 1 else numbers,
            "message": message,
            "ems": "1" if ems else "0",
        }
        if userref:
            payload["userref"] = userref

        masked = ", ".join(mask_phone_number(n) for n in numbers)
        logger.info(f"Sending SMS to {masked}: {message[:50]}{'...' if len(message) > 50 else ''}")

        try:
            response = self._client.post("/send/sms/", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 401:
                raise SMSError("Authentication failed - check SMS gateway credentials") from exc
            raise SMSError(f"SMS gateway error ({exc.response.status_code})") from exc
        except httpx.RequestError as exc:
            raise SMSNetworkError("Network error - unable to reach SMS gateway") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise SMSError("Invalid response from SMS gateway") from exc

        return self._parse_results(body)

    @staticmethod
    def _parse_results(body: Any) -> SMSSendResult:
        results = body if isinstance(body, list) else [body]
        successful: list[SMSRecipientResult] = []
        failed: list[SMSRecipientResult] = []

        for result in results:
            if not isinstance(result, dict):
                raise SMSError("Invalid response from SMS gateway")
            if result.get("Action") == "enqueued" and result.get("Result") == 1:
                successful.append(SMSRecipientResult(number=result.get("Number"), key=result.get("Key")))
            else:
                error_code = result.get("Error")
                failed.append(
                    SMSRecipientResult(
                        number=result.get("Number"),
                        error=map_error_code(error_code),
                        error_code=error_code,
                    )
                )

        return SMSSendResult(status="queued" if not failed else "partial", successful=successful, failed=failed)


_sms_client: SMSClient | None = None
_sms_client_lock = threading.Lock()


def get_sms_client() -> SMSClient | None:
    """
    Shared client built from settings, or None when SMS is disabled or
    credentials are missing.
    """
    global _sms_client

    if not settings.SMS_ENABLED or not settings.SMS_USERNAME or not settings.SMS_PASSWORD:
        return None

    with _sms_client_lock:
        if _sms_client is None:
            _sms_client = SMSClient(
                base_url=settings.SMS_BASE_URL,
                username=settings.SMS_USERNAME,
                password=settings.SMS_PASSWORD,
                timeout=settings.SMS_TIMEOUT_SECONDS,
                duplicate_ttl=settings.SMS_DUPLICATE_TTL_SECONDS,
            )
        return _sms_client
