from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Mapping

from .calculator import compute_weekly_pay
from .models import WeeklyPayInput, WeeklyPayResult
from .money import ZERO, round_money


@dataclass
class PreviewTotals:
    employees: Dict[str, WeeklyPayResult]
    regular_pay: Decimal
    overtime_pay: Decimal
    total_bonuses: Decimal
    total_deductions: Decimal
    gross_pay: Decimal
    total_net_pay: Decimal


class PayrollPreview:
    """Weekly pay for a group of employees plus period totals."""

    def preview(self, requests: Mapping[str, WeeklyPayInput]) -> PreviewTotals:
        employee_results: Dict[str, WeeklyPayResult] = {}
        totals = dict(regular=ZERO, overtime=ZERO, bonuses=ZERO, deductions=ZERO, gross=ZERO, net=ZERO)

        for employee_id, request in requests.items():
            result = compute_weekly_pay(request)
            employee_results[employee_id] = result
            totals["regular"] += result.regular_pay
            totals["overtime"] += result.overtime_pay
            totals["bonuses"] += result.total_bonuses
            totals["deductions"] += result.total_deductions
            totals["gross"] += result.gross_pay
            totals["net"] += result.net_pay

        return PreviewTotals(
            employees=employee_results,
            regular_pay=round_money(totals["regular"]),
            overtime_pay=round_money(totals["overtime"]),
            total_bonuses=round_money(totals["bonuses"]),
            total_deductions=round_money(totals["deductions"]),
            gross_pay=round_money(totals["gross"]),
            total_net_pay=round_money(totals["net"]),
        )
