"""Session-wide holiday lookup accumulated month by month."""

from dataclasses import dataclass, field


@dataclass
class HolidayIndex:
    """
    Mapping of 'YYYY-MM-DD' -> holiday name.

    Entries are only ever added. A month that was fetched once is not
    fetched again for the lifetime of the index.
    """

    holidays: dict[str, str] = field(default_factory=dict)
    fetched_months: set[tuple[int, int]] = field(default_factory=set)

    def has_month(self, year: int, month: int) -> bool:
        return (year, month) in self.fetched_months

    def merge(self, year: int, month: int, new_holidays: dict[str, str]) -> None:
        """Add one month's holidays; existing keys are overwritten, never removed."""
        self.holidays.update(new_holidays)
        self.fetched_months.add((year, month))

    def __len__(self) -> int:
        return len(self.holidays)
