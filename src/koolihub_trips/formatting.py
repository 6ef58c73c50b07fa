"""Display formatting for prices. Kept apart from the pricing computations."""

from koolihub_trips.utils.rounding import round_half_up

CURRENCY_SYMBOLS: dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def group_indian_digits(digits: str) -> str:
    """Group an unsigned integer string the Indian way: 12,34,567."""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join([*groups, tail])


def _format_number(amount: float, trim_zeros: bool) -> str:
    rounded = round_half_up(abs(amount))
    integer_part, fraction = f"{rounded:.2f}".split(".")
    if trim_zeros:
        fraction = fraction.rstrip("0")

    text = group_indian_digits(integer_part)
    if fraction:
        text = f"{text}.{fraction}"
    return f"-{text}" if amount < 0 and rounded != 0 else text


def format_price(amount: float, currency: str = "INR") -> str:
    """Format an amount for display, e.g. ₹1,00,000 or $1,059.00.

    Rupee amounts drop trailing fraction zeros; other currencies always
    show two decimals.
    """
    if currency == "INR":
        return f"₹{_format_number(amount, trim_zeros=True)}"

    number = _format_number(amount, trim_zeros=False)
    sign = ""
    if number.startswith("-"):
        sign, number = "-", number[1:]

    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        return f"{sign}{currency} {number}"
    return f"{sign}{symbol}{number}"
