"""
seed.py
-------
One-shot script to import jobs from a CSV or Excel (.xlsx) export into a
tenant. For workbooks only the first worksheet is read.

The tenant is taken from SEED_COMPANY_SLUG (default "acme") and is created
with the seed defaults if it does not exist yet. Run create_tables.py first
on a fresh database.

Usage:
    python seed.py jobs.csv
    python seed.py jobs.xlsx

Exit codes:
    1  bad usage or unsupported file type
    2  file not found
"""

import asyncio
import csv
import sys
from pathlib import Path

from openpyxl import load_workbook

from careers.core.config import settings
from careers.core.logging import configure_logging, get_logger
from careers.db.session import AsyncSessionLocal, engine
from careers.services.container import build_services

logger = get_logger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm")
SUPPORTED_SUFFIXES = (".csv",) + EXCEL_SUFFIXES


def read_csv_rows(path: Path) -> list[dict]:
    with path.open(newline="", encoding="utf-8-sig") as fh:
        return list(csv.DictReader(fh))


def read_excel_rows(path: Path) -> list[dict]:
    """First worksheet, first row as headers. Blank rows and unnamed columns are skipped."""
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        values = workbook.worksheets[0].iter_rows(values_only=True)
        header = next(values, None)
        if header is None:
            return []
        keys = [str(h).strip() if h is not None else None for h in header]
        rows = []
        for row in values:
            if all(cell is None for cell in row):
                continue
            cells = list(row) + [None] * (len(keys) - len(row))
            rows.append({key: cell for key, cell in zip(keys, cells) if key})
        return rows
    finally:
        workbook.close()


def read_rows(path: Path) -> list[dict]:
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return read_excel_rows(path)
    return read_csv_rows(path)


async def seed(path: Path) -> None:
    services = build_services()
    rows = read_rows(path)
    logger.info("Loaded rows", file=str(path), count=len(rows))

    async with AsyncSessionLocal() as session:
        async with session.begin():
            result = await services.importer.import_jobs(
                session, settings.SEED_COMPANY_SLUG, rows
            )
    await engine.dispose()

    logger.info(
        "Seed completed",
        slug=result.slug,
        tenant_created=result.tenant_created,
        inserted=result.inserted,
        skipped=result.skipped,
    )


def main(argv: list[str]) -> int:
    configure_logging()
    if len(argv) != 2:
        print("Usage: python seed.py <file.csv|file.xlsx>", file=sys.stderr)
        return 1

    path = Path(argv[1]).expanduser().resolve()
    if not path.exists():
        logger.error("Cannot access file", file=argv[1], resolved=str(path))
        return 2
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        logger.error("Unsupported file type, use CSV or Excel (.xlsx)", file=str(path))
        return 1

    asyncio.run(seed(path))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
