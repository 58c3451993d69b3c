from nomina.models import WeeklyPayInput
from nomina.wizard import PayrollPreview


def test_preview_aggregates_totals():
    requests = {
        "emp1": WeeklyPayInput(hourly_rate=30, hours=40, overtime_hours=5),
        "emp2": WeeklyPayInput(hourly_rate=100, hours=40, bonuses=(500, 200), deductions=(150, 50)),
    }

    totals = PayrollPreview().preview(requests)

    assert set(totals.employees) == {"emp1", "emp2"}
    assert totals.regular_pay == 5200
    assert totals.overtime_pay == 225
    assert totals.total_bonuses == 700
    assert totals.total_deductions == 200
    assert totals.gross_pay == 6125
    assert totals.total_net_pay == 5925


def test_preview_of_nobody_is_zero():
    totals = PayrollPreview().preview({})

    assert totals.employees == {}
    assert totals.gross_pay == 0
