"""Currency utilities — static multipliers used to localise synthetic prices."""

# Units of each currency per 1 USD (static, updated by hand)
CURRENCY_MULTIPLIERS: dict[str, float] = {
    "USD": 1.0,
    "INR": 83.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "CAD": 1.35,
    "AUD": 1.53,
    "JPY": 149.0,
    "SGD": 1.34,
    "HKD": 7.82,
    "AED": 3.67,
    "QAR": 3.64,
    "TRY": 32.0,
    "KRW": 1330.0,
    "TWD": 31.5,
}


def get_currency_rate(currency: str | None) -> float:
    """Get the USD→currency multiplier. Defaults to 1.0 for unknown codes."""
    if not currency:
        return 1.0
    return CURRENCY_MULTIPLIERS.get(currency.upper(), 1.0)
