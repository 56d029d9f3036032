# Standard library imports
import secrets
import string
import time

# Local application imports
from smartmunic.utils.datetime_utils import utc_now

REFERENCE_PREFIX = "REF"
REFERENCE_RANDOM_LENGTH = 6
REFERENCE_ALPHABET = string.ascii_uppercase + string.digits

VOUCHER_SUFFIX_LENGTH = 6
VOUCHER_ALPHABET = string.ascii_lowercase + string.digits


def generate_reference_number() -> str:
    """Return a reference number such as ``REF2026K7Q2ZD``: prefix, UTC year, six random characters."""
    suffix = "".join(secrets.choice(REFERENCE_ALPHABET) for _ in range(REFERENCE_RANDOM_LENGTH))
    return f"{REFERENCE_PREFIX}{utc_now().year}{suffix}"


def generate_voucher_code(voucher_type: str) -> str:
    """Return ``<TYPE>-<epoch millis>-<6 random lowercase characters>``."""
    suffix = "".join(secrets.choice(VOUCHER_ALPHABET) for _ in range(VOUCHER_SUFFIX_LENGTH))
    return f"{voucher_type.upper()}-{int(time.time() * 1000)}-{suffix}"
