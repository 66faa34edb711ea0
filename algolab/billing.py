"""Phone subscribers with a balance, a per-minute tariff and a call history."""

from __future__ import annotations

from dataclasses import dataclass, field

from algolab.calendar_time import DateTime, TimeSpan


@dataclass(frozen=True)
class Call:
    """A call to ``number`` started at ``date`` and lasting ``duration``."""

    number: int = 0
    date: DateTime = field(default_factory=DateTime)
    duration: TimeSpan = field(default_factory=TimeSpan)

    @classmethod
    def parse(cls, text: str) -> Call:
        """Read ``number day.month.year hour:minute:second seconds``."""
        parts = text.split()
        if len(parts) != 4:
            raise ValueError(f"not a call record: {text!r}")
        number, date, clock, seconds = parts
        try:
            return cls(int(number), DateTime.parse(f"{date} {clock}"), TimeSpan(int(seconds)))
        except ValueError as error:
            raise ValueError(f"not a call record: {text!r}") from error

    def __str__(self) -> str:
        return f"{self.number} | {self.date} | {self.duration}"


@dataclass
class Subscriber:
    """A subscriber paying ``tariff`` per minute of calls out of ``money``."""

    name: str = ""
    tariff: float = 0.0
    money: float = 0.0
    _calls: list[Call] = field(default_factory=list, init=False, repr=False)

    @property
    def balance(self) -> float:
        """The money left."""
        return self.money

    def recharge(self, amount: float) -> None:
        """Add the absolute value of ``amount`` to the balance."""
        self.money += abs(amount)

    def add_call(self, call: Call) -> None:
        """Record ``call`` and charge for its duration."""
        self._calls.insert(0, call)
        self.money -= (self.tariff / 60) * call.duration.seconds

    def history(self) -> list[Call]:
        """Return every call, the most recently added first."""
        return list(self._calls)

    def history_between(self, first: DateTime, second: DateTime) -> list[Call]:
        """Return the calls started between ``first`` and ``second`` inclusive."""
        start, stop = first.unixtime(), second.unixtime()
        return [call for call in self._calls if start <= call.date.unixtime() <= stop]

    def history_for_number(self, number: int) -> list[Call]:
        """Return the calls made to ``number``."""
        return [call for call in self._calls if call.number == number]

    def __str__(self) -> str:
        return f"{self.name} | {self.tariff:g} | {self.money:g}"