"""
Input checks shared by the user and transfer services
"""
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from email_validator import validate_email, EmailNotValidError

from paymybuddy.core.exceptions import InvalidEmailFormatError, InvalidAmountError

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# Largest value a Numeric(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")


def validate_email_format(email: str) -> str:
    """
    Check that an address has a local part, an "@" and a dotted domain.

    Deliverability (DNS) is not checked, but special-use domains such as
    ".test", ".local" and "localhost" are refused. Returns the address
    unchanged.

    Raises:
        InvalidEmailFormatError: if the address is malformed
    """
    if not email:
        raise InvalidEmailFormatError(email)
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        logger.warning(f"Rejected email address {email}: {str(e)}")
        raise InvalidEmailFormatError(email) from e
    return email


def parse_amount(amount: str) -> Decimal:
    """
    Parse a user-supplied amount into a two-decimal magnitude.

    A leading "-" is dropped, so "490.44" and "-490.44" give the same value.
    Values above MAX_AMOUNT are refused.
    """
    if amount is None:
        raise InvalidAmountError(amount)
    text = str(amount).strip()
    if text.startswith("-"):
        text = text[1:]
    try:
        value = Decimal(text)
    except InvalidOperation as e:
        raise InvalidAmountError(amount) from e
    if not value.is_finite() or value.is_signed():
        raise InvalidAmountError(amount)
    try:
        value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise InvalidAmountError(amount) from e
    if value > MAX_AMOUNT:
        raise InvalidAmountError(amount)
    return value
