# storeapi/api/utils/validators.py
from __future__ import annotations

from decimal import Decimal, InvalidOperation

from storeapi.errors import ValidationError


def require_name(data: dict, label: str) -> str:
    name = data.get("name")
    name = name.strip() if isinstance(name, str) else ""
    if not name:
        raise ValidationError(f"{label} name is required.")
    return name


def optional_text(value) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


def parse_int(value, field: str) -> int:
    # bool is an int subclass, but never a valid id
    if isinstance(value, bool):
        raise ValidationError(f"Invalid '{field}'")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid '{field}'")


def parse_price(value) -> Decimal:
    if value is None or isinstance(value, bool) or str(value).strip() == "":
        raise ValidationError("Invalid 'price'")
    try:
        price = Decimal(str(value).strip())
        if not price.is_finite() or price < 0:
            raise ValidationError("Invalid 'price'")
        return price.quantize(Decimal("0.01"))
    except InvalidOperation:
        raise ValidationError("Invalid 'price'")


def check_id_matches(data: dict, path_id: int, label: str) -> None:
    """A body ``id`` is optional, but when present it must equal the path id."""
    if "id" not in data or data["id"] is None:
        return
    body_id = parse_int(data["id"], "id")
    if body_id != path_id:
        raise ValidationError(
            f"{label} ID mismatch. Provided ID: {path_id}, {label} ID: {body_id}"
        )
