from datetime import date

import pytest

from nomina.attendance import AttendanceRecord, SalaryProfile, estimate_weekly_pay, load_attendance_csv, week_bounds
from nomina.errors import DataFileError, InvalidArgument


def build_records() -> list[AttendanceRecord]:
    return [
        AttendanceRecord(date(2024, 5, 13), total_hours=8, clock_in="08:00", clock_out="16:00"),
        AttendanceRecord(date(2024, 5, 14), total_hours=0, clock_in="08:00"),
        AttendanceRecord(date(2024, 5, 15), total_hours=0),
        AttendanceRecord(date(2024, 5, 16), total_hours=9, overtime_hours=2),
        AttendanceRecord(date(2024, 5, 20), total_hours=8, clock_in="08:00"),
    ]


def test_week_bounds_runs_monday_to_sunday():
    assert week_bounds(date(2024, 5, 15)) == (date(2024, 5, 13), date(2024, 5, 19))
    assert week_bounds(date(2024, 5, 13)) == (date(2024, 5, 13), date(2024, 5, 19))


def test_daily_salary_estimate_pays_worked_days():
    start, end = week_bounds(date(2024, 5, 15))
    profile = SalaryProfile(employee_id="emp1", salary_type="daily", daily_salary=400)

    estimate = estimate_weekly_pay(profile, build_records(), start, end)

    assert estimate.worked_days == 3
    assert estimate.regular_hours == 17
    assert estimate.overtime_hours == 2
    assert estimate.base_pay == 1200
    assert estimate.overtime_pay == 150
    assert estimate.gross_total == 1350
    assert estimate.net_total == estimate.gross_total
    assert len(estimate.records) == 4


def test_hourly_estimate_pays_hours():
    start, end = week_bounds(date(2024, 5, 15))
    profile = SalaryProfile(employee_id="emp2", salary_type="Hourly", hourly_rate=50)

    estimate = estimate_weekly_pay(profile, build_records(), start, end)

    assert estimate.salary_type == "hourly"
    assert estimate.base_pay == 850
    assert estimate.overtime_pay == 150
    assert estimate.gross_total == 1000


def test_project_estimate_follows_daily_rules():
    start, end = week_bounds(date(2024, 5, 15))
    profile = SalaryProfile(employee_id="emp3", salary_type="project", daily_salary=400)

    estimate = estimate_weekly_pay(profile, build_records(), start, end)

    assert estimate.gross_total == 1350


def test_non_numeric_hours_count_as_zero():
    records = [AttendanceRecord(date(2024, 5, 13), total_hours="abc", overtime_hours=None)]
    profile = SalaryProfile(employee_id="emp1", salary_type="hourly", hourly_rate=50)

    estimate = estimate_weekly_pay(profile, records, date(2024, 5, 13), date(2024, 5, 19))

    assert estimate.worked_days == 0
    assert estimate.gross_total == 0


def test_unknown_salary_type_follows_daily_rules():
    start, end = week_bounds(date(2024, 5, 15))
    profile = SalaryProfile(employee_id="emp4", salary_type="Commission", daily_salary=400)

    estimate = estimate_weekly_pay(profile, build_records(), start, end)

    assert estimate.salary_type == "commission"
    assert estimate.gross_total == 1350


def test_negative_salary_rejected():
    with pytest.raises(InvalidArgument):
        SalaryProfile(employee_id="emp1", daily_salary=-1)


def test_load_attendance_csv(tmp_path):
    path = tmp_path / "attendance.csv"
    path.write_text(
        "date,total_hours,overtime_hours,clock_in,clock_out\n"
        "2024-05-13,8,1.5,08:00,17:30\n"
        "2024-05-14,n/a,,,\n"
    )

    records = load_attendance_csv(path)

    assert records[0].worked_date == date(2024, 5, 13)
    assert records[0].overtime_hours == 1.5
    assert records[0].clock_out == "17:30"
    assert records[1].total_hours == 0
    assert records[1].clock_in is None


def test_load_attendance_csv_rejects_non_iso_dates(tmp_path):
    path = tmp_path / "attendance.csv"
    path.write_text("date,total_hours\n2024-05-13,8\n13/05/2024,8\n")

    with pytest.raises(DataFileError, match="line 3"):
        load_attendance_csv(path)


def test_load_attendance_csv_requires_date_column(tmp_path):
    path = tmp_path / "attendance.csv"
    path.write_text("day,total_hours\n2024-05-13,8\n")

    with pytest.raises(DataFileError, match="missing 'date' column"):
        load_attendance_csv(path)
