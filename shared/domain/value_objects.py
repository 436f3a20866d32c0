"""
Common Value Objects

Value objects used across multiple domains:
- Money: Represents monetary amounts with currency
- MinuteRange: Half-open interval measured in minutes from a day's midnight
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from shared.domain.base import ValueObject

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Represents a monetary amount with currency.
    Immutable and supports the arithmetic needed for hourly pricing.
    """
    amount: Decimal
    currency: str = 'INR'

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if not self.currency:
            raise ValueError("Currency is required")

    def __mul__(self, factor) -> 'Money':
        """Multiply money by a factor"""
        if not isinstance(factor, (int, float, Decimal)):
            raise TypeError("Can only multiply Money by number")
        return Money(self.amount * Decimal(str(factor)), self.currency)

    def quantized(self) -> 'Money':
        """Round to cents (two decimal places)"""
        return Money(self.amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP), self.currency)

    def __str__(self):
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class MinuteRange(ValueObject):
    """
    Minute range value object

    Represents [start, end) in minutes counted from midnight of the booking
    date. ``end`` may exceed one day when the range crosses midnight.
    """
    start: int
    end: int

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Range start ({self.start}) must be before end ({self.end})")

    def overlaps_with(self, other: 'MinuteRange') -> bool:
        """
        Check if this range overlaps with another

        Adjacent ranges (one ends exactly when the other starts) do not overlap.

        Examples:
            - MinuteRange(840, 900) overlaps with MinuteRange(780, 960) -> True
            - MinuteRange(540, 600) overlaps with MinuteRange(600, 660) -> False (adjacent)
        """
        if not isinstance(other, MinuteRange):
            raise TypeError("Can only check overlap with another MinuteRange")

        return (
            (self.start >= other.start and self.start < other.end)
            or (self.end > other.start and self.end <= other.end)
            or (self.start <= other.start and self.end >= other.end)
        )

    def shifted(self, days: int) -> 'MinuteRange':
        """Same range moved by whole days"""
        offset = days * MINUTES_PER_DAY
        return MinuteRange(self.start + offset, self.end + offset)

    @property
    def ends_next_day(self) -> bool:
        """True when the end falls on or after the following midnight"""
        return self.end >= MINUTES_PER_DAY

    def __len__(self) -> int:
        """Length of the range in minutes"""
        return self.end - self.start

    def __str__(self):
        return f"[{self.start}, {self.end})"

    def __repr__(self):
        return f"MinuteRange({self.start}, {self.end})"
