"""
Job persistence (raw SQL).
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from core import db, sql

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

JOB_FILTERS = sql.FilterVocabulary(
    select=f"SELECT {JOB_COLUMNS}\nFROM jobs",
    order_by="title",
    rules={
        "title": sql.contains("title"),
        "minSalary": sql.at_least("salary"),
        "hasEquity": sql.literal("equity > 0"),
    },
)

# Every updatable job field already matches its column name.
UPDATE_TRANSLATION: dict[str, str] = {}


async def insert_job(
    *,
    title: str,
    salary: int | None,
    equity: Decimal | None,
    company_handle: str,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES ($1, $2, $3, $4)
        RETURNING {JOB_COLUMNS}
        """,
        title,
        salary,
        equity,
        company_handle,
    )
    if row is None:
        raise RuntimeError("Failed to create job.")
    return row


async def list_jobs(filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
    """
    Filters are keyed by external names: title, minSalary, hasEquity.
    """
    query = sql.build_filter_query(filters, JOB_FILTERS)
    return await db.fetch_all(query.statement, *query.values)


async def get_job(job_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        WHERE id = $1
        """,
        job_id,
    )


async def get_job_company(handle: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT handle,
               name,
               description,
               num_employees AS "numEmployees",
               logo_url AS "logoUrl"
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )


async def update_job(job_id: int, data: Mapping[str, Any]) -> dict[str, Any] | None:
    update = sql.sql_for_partial_update(data, UPDATE_TRANSLATION)
    return await db.fetch_one(
        f"""
        UPDATE jobs
        SET {update.assignments}
        WHERE id = ${update.next_index}
        RETURNING {JOB_COLUMNS}
        """,
        *update.values,
        job_id,
    )


async def delete_job(job_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM jobs
        WHERE id = $1
        RETURNING id
        """,
        job_id,
    )
