"""
Company persistence (raw SQL).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core import db, sql

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'

COMPANY_FILTERS = sql.FilterVocabulary(
    select=f"SELECT {COMPANY_COLUMNS}\nFROM companies",
    order_by="name",
    rules={
        "name": sql.contains("name"),
        "minEmployees": sql.at_least("num_employees"),
        "maxEmployees": sql.at_most("num_employees"),
    },
)

# external field name -> column
UPDATE_TRANSLATION = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


async def get_company_handle(handle: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT handle
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )


async def insert_company(
    *,
    handle: str,
    name: str,
    description: str,
    num_employees: int | None,
    logo_url: str | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO companies (handle, name, description, num_employees, logo_url)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {COMPANY_COLUMNS}
        """,
        handle,
        name,
        description,
        num_employees,
        logo_url,
    )
    if row is None:
        raise RuntimeError("Failed to create company.")
    return row


async def list_companies(filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
    """
    Filters are keyed by external names: name, minEmployees, maxEmployees.
    """
    query = sql.build_filter_query(filters, COMPANY_FILTERS)
    return await db.fetch_all(query.statement, *query.values)


async def get_company(handle: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {COMPANY_COLUMNS}
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )


async def list_company_jobs(handle: str) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        handle,
    )


async def update_company(handle: str, data: Mapping[str, Any]) -> dict[str, Any] | None:
    update = sql.sql_for_partial_update(data, UPDATE_TRANSLATION)
    return await db.fetch_one(
        f"""
        UPDATE companies
        SET {update.assignments}
        WHERE handle = ${update.next_index}
        RETURNING {COMPANY_COLUMNS}
        """,
        *update.values,
        handle,
    )


async def delete_company(handle: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM companies
        WHERE handle = $1
        RETURNING handle
        """,
        handle,
    )
