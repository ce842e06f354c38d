"""
Validation functions for login input and transaction entry
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from ..models.transaction import TransactionCreate, TransactionKind
from .errors import ValidationError

EXPENSE_CATEGORIES = [
    "Food",
    "Ingredients",
    "Packaging",
    "Utilities",
    "Rent",
    "Staff Wages",
    "Marketing",
    "Equipment",
    "Transportation",
    "Other",
]

REVENUE_SOURCES = [
    "Zomato",
    "Swiggy",
    "Direct Orders",
    "Other",
]

OTP_LENGTH = 6

_LOCAL_PART = r"[a-zA-Z0-9._%+-]+"


def email_pattern(domain: str = "gmail.com") -> "re.Pattern[str]":
    """Address pattern restricted to a single permitted domain."""
    return re.compile(rf"^{_LOCAL_PART}@{re.escape(domain)}$")


def is_valid_email(email: Optional[str], domain: str = "gmail.com") -> bool:
    if not email:
        return False
    return email_pattern(domain).match(email) is not None


def validate_email(email: Optional[str], domain: str = "gmail.com") -> str:
    """
    Validate a login email address

    Args:
        email: Address typed by the user
        domain: The only permitted domain suffix

    Returns:
        The trimmed address

    Raises:
        ValidationError: If the address is malformed or on another domain
    """
    cleaned = (email or "").strip()
    if not is_valid_email(cleaned, domain):
        raise ValidationError(
            f"Please enter a valid address ending in @{domain}", "email", email
        )
    return cleaned


def sanitize_otp_input(raw: Optional[str]) -> str:
    """Keep only ASCII digits, at most six of them."""
    return re.sub(r"[^0-9]", "", raw or "")[:OTP_LENGTH]


def validate_otp_code(code: Optional[str]) -> str:
    if code is None or not re.fullmatch(rf"[0-9]{{{OTP_LENGTH}}}", code):
        raise ValidationError("Please enter all 6 digits", "otp", code)
    return code


def parse_amount(amount: Union[int, float, str, Decimal, None]) -> Decimal:
    """
    Parse and validate a transaction amount

    Raises:
        ValidationError: If the amount is missing, not numeric or not positive
    """
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        raise ValidationError("Amount is required", "amount", amount)

    try:
        if isinstance(amount, str):
            value = Decimal(amount.replace(",", "").strip())
        elif isinstance(amount, float):
            value = Decimal(str(amount))
        else:
            value = Decimal(amount)
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError("Invalid amount format", "amount", amount)

    if not value.is_finite() or value <= 0:
        raise ValidationError("Please enter a valid amount greater than 0.", "amount", amount)
    return value


def validate_restaurant_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Please enter a restaurant name", "restaurant_name", name)
    return cleaned


def _coerce_kind(kind: Any) -> TransactionKind:
    if isinstance(kind, TransactionKind):
        return kind
    try:
        return TransactionKind(kind)
    except ValueError:
        raise ValidationError("Please choose Expense or Revenue", "type", kind)


def build_transaction(
    kind: Any,
    category_source: Optional[str],
    amount: Union[int, float, str, Decimal, None],
    description: str = "",
) -> TransactionCreate:
    """
    Turn raw form input into a create request

    Revenue entries are always described as "<source> payout"; an expense
    without a description becomes "<category> expense".
    """
    category_source = (category_source or "").strip()
    if not kind or not category_source or amount in (None, ""):
        raise ValidationError("Please fill in all required fields.")

    kind = _coerce_kind(kind)
    value = parse_amount(amount)
    description = (description or "").strip()

    if kind == TransactionKind.REVENUE:
        description = f"{category_source} payout"
    elif not description:
        description = f"{category_source} expense"

    return TransactionCreate(
        kind=kind,
        description=description,
        category_source=category_source,
        amount=value,
    )


def categories_for(kind: Any) -> list:
    """Choices offered for the category/source field."""
    if _coerce_kind(kind) == TransactionKind.EXPENSE:
        return list(EXPENSE_CATEGORIES)
    return list(REVENUE_SOURCES)
