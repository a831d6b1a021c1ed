from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import PeriodType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import WageBreakdown, WageCalculation
from .repository import WageCalculationRepository

CALCULATION_COLUMNS = (
    "id",
    "employee_id",
    "period_start",
    "period_end",
    "period_type",
    "present_days",
    "half_days",
    "absent_days",
    "total_overtime_hours",
    "base_wage",
    "overtime_amount",
    "half_day_amount",
    "total_advances",
    "gross_amount",
    "net_amount",
    "is_paid",
    "created_at",
    "updated_at",
)


def select_list(alias: str, prefix: str = "") -> str:
    return ", ".join(f"{alias}.{c} AS {prefix}{c}" for c in CALCULATION_COLUMNS)


def row_to_calculation(r: dict, prefix: str = "") -> WageCalculation:
    def col(name: str):
        return r.get(f"{prefix}{name}")

    return WageCalculation(
        calculation_id=int(col("id")),
        employee_id=int(col("employee_id")),
        period_start=col("period_start"),
        period_end=col("period_end"),
        period_type=PeriodType(col("period_type")),
        breakdown=WageBreakdown(
            present_days=int(col("present_days") or 0),
            half_days=int(col("half_days") or 0),
            absent_days=int(col("absent_days") or 0),
            total_overtime_hours=col("total_overtime_hours"),
            base_wage=col("base_wage"),
            overtime_amount=col("overtime_amount"),
            half_day_amount=col("half_day_amount"),
            total_advances=col("total_advances"),
            gross_amount=col("gross_amount"),
            net_amount=col("net_amount"),
        ),
        is_paid=bool(col("is_paid")),
        created_at=col("created_at"),
        updated_at=col("updated_at"),
    )


class MySQLWageCalculationRepository(WageCalculationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: int,
        period_start: date,
        period_end: date,
        period_type: PeriodType,
        breakdown: WageBreakdown,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO wage_calculations(
                    employee_id, period_start, period_end, period_type,
                    present_days, half_days, absent_days, total_overtime_hours,
                    base_wage, overtime_amount, half_day_amount, total_advances,
                    gross_amount, net_amount, is_paid
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,0)
                """,
                (
                    int(employee_id),
                    period_start,
                    period_end,
                    period_type.value,
                    breakdown.present_days,
                    breakdown.half_days,
                    breakdown.absent_days,
                    breakdown.total_overtime_hours,
                    breakdown.base_wage,
                    breakdown.overtime_amount,
                    breakdown.half_day_amount,
                    breakdown.total_advances,
                    breakdown.gross_amount,
                    breakdown.net_amount,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, calculation_id: int) -> Optional[WageCalculation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {select_list('wc')} FROM wage_calculations wc WHERE wc.id=%s",
                (int(calculation_id),),
            )
            r = fetchone(cur)
            return row_to_calculation(r) if r else None

    def list_recent(self, *, employee_id: Optional[int] = None, limit: int = 20) -> Sequence[WageCalculation]:
        clauses = ["1=1"]
        params: list[object] = []
        if employee_id is not None:
            clauses.append("wc.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {select_list('wc')}
                FROM wage_calculations wc
                WHERE {where}
                ORDER BY wc.created_at DESC, wc.id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [row_to_calculation(r) for r in fetchall(cur)]
