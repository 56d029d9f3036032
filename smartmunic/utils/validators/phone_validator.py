# Third-party imports
import phonenumbers

# Local application imports
from smartmunic.settings import settings


def validate_phone_number(value: str | None, region: str | None = None) -> str | None:
    """
    Normalise a phone number to E.164 using the `phonenumbers` library.

    Local numbers are parsed for ``region`` (DEFAULT_PHONE_REGION, "ZA" by
    default), so ``0821234567`` becomes ``+27821234567``. Returns None when
    the number cannot be parsed or is not valid.
    """
    if value is None:
        return value

    cleaned = str(value).strip()
    if not cleaned:
        return None

    # "27821234567" style numbers are international without the plus
    if cleaned.isdigit() and not cleaned.startswith("0") and len(cleaned) > 10:
        cleaned = f"+{cleaned}"

    try:
        parsed = phonenumbers.parse(cleaned, region or settings.DEFAULT_PHONE_REGION)
    except phonenumbers.NumberParseException:
        return None

    if not phonenumbers.is_valid_number(parsed):
        return None

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def mask_phone_number(value: str | None) -> str:
    """Keep the first four and last two characters, e.g. ``+278*****67``."""
    if not value:
        return "<none>"
    if len(value) <= 6:
        return "*" * len(value)
    return f"{value[:4]}{'*' * (len(value) - 6)}{value[-2:]}"
