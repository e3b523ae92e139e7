from datetime import date, datetime

from invoice_manager.lib.clock import FixedClock, SystemClock
from invoice_manager.lib.ids import new_id


def test_fixed_clock_accepts_dates_and_datetimes():
    clock = FixedClock(date(2025, 1, 1))
    assert clock.now() == datetime(2025, 1, 1)
    clock.set(datetime(2025, 6, 30, 23, 59))
    assert clock.today() == date(2025, 6, 30)


def test_system_clock_returns_today():
    assert SystemClock().today() == date.today()


def test_new_id_is_unique_hex():
    generated = {new_id() for _ in range(1000)}
    assert len(generated) == 1000
    assert all(len(value) == 32 and int(value, 16) >= 0 for value in generated)
