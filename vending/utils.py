from typing import Callable, Iterable, Optional

from . import settings


def coin_value(label: str) -> Optional[int]:
    """Returns the value in pence of a coin label like '50p' or '£1', or None if unknown."""
    return settings.DENOMINATIONS.get(label.strip())


def format_pence(amount: int) -> str:
    """Formats an amount of pence for display, e.g. 150 -> '£1.50', 45 -> '45p'."""
    if amount < 100:
        return f"{amount}p"
    return f"£{amount // 100}.{amount % 100:02d}"


def format_coins(coins: dict[str, int]) -> str:
    """Renders a denomination -> count mapping as '2 x 20p, 1 x 5p'."""
    return ", ".join(f"{count} x {label}" for label, count in coins.items())


def token_source(tokens: Iterable[str]) -> Callable[[], str]:
    """
    Wraps a sequence of tokens as a zero-argument reader, the same shape as `input`.
    Raises EOFError once the tokens run out, just as `input` does at end of stream.
    """
    iterator = iter(tokens)

    def read_token() -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError("no more input") from None

    return read_token
