from datetime import date

from debtplan.engine.months import add_months, month_iso, month_label


class TestAddMonths:
    def test_rolls_year(self):
        assert add_months(date(2026, 10, 17), 3) == date(2027, 1, 1)

    def test_zero_is_current_month(self):
        assert add_months(date(2026, 12, 31), 0) == date(2026, 12, 1)

    def test_negative(self):
        assert add_months(date(2026, 1, 5), -1) == date(2025, 12, 1)

    def test_thirty_years(self):
        assert add_months(date(2026, 10, 17), 360) == date(2056, 10, 1)


class TestFormatting:
    def test_label(self):
        assert month_label(date(2026, 10, 17), 1) == "Nov 2026"

    def test_iso(self):
        assert month_iso(date(2026, 10, 17), 3) == "2027-01"
