#!/usr/bin/env python3
"""
Apply the SQL files in migrations/ to the Supabase Postgres database.

Usage:
    python run_migrations.py             # apply pending migrations
    python run_migrations.py --status    # list applied and pending migrations
    python run_migrations.py --dry-run   # list what would be applied

Configuration:
    SUPABASE_DB_URL=postgresql://postgres.[project-ref]:[password]@[host]:6543/postgres
"""

import argparse
import hashlib
import sys
from pathlib import Path

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
LEDGER_TABLE = "_schema_migrations"


def checksum(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()[:16]


def connect():
    """Open a connection or exit with a hint about configuration."""
    db_url = get_settings().supabase_db_url
    if not db_url:
        console.print("[red]SUPABASE_DB_URL is not set.[/red]")
        sys.exit(1)
    try:
        return psycopg2.connect(db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def applied_migrations(conn) -> dict[str, str]:
    """Name -> checksum of every recorded migration, creating the ledger if needed."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                "CREATE TABLE IF NOT EXISTS {} ("
                "name TEXT PRIMARY KEY, checksum TEXT NOT NULL, "
                "applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW())"
            ).format(sql.Identifier(LEDGER_TABLE))
        )
        cur.execute(sql.SQL("SELECT name, checksum FROM {}").format(sql.Identifier(LEDGER_TABLE)))
        rows = cur.fetchall()
    conn.commit()
    return {name: digest for name, digest in rows}


def pending_migrations(applied: dict[str, str]) -> list[Path]:
    pending = []
    for path in sorted(MIGRATIONS_DIR.glob("*.sql")):
        if path.name not in applied:
            pending.append(path)
        elif applied[path.name] != checksum(path):
            console.print(f"[yellow]Warning:[/yellow] {path.name} changed after it was applied")
    return pending


def apply(conn, path: Path) -> None:
    """Run one migration and record it in the same transaction."""
    try:
        with conn.cursor() as cur:
            cur.execute(path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(LEDGER_TABLE)
                ),
                (path.name, checksum(path)),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {path.name}: {e}")
        raise
    console.print(f"[green]✓[/green] {path.name}")


def print_status(applied: dict[str, str], pending: list[Path]) -> None:
    table = Table(title="Migrations")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    for name in sorted(applied):
        table.add_row(name, "[green]applied[/green]")
    for path in pending:
        table.add_row(path.name, "[yellow]pending[/yellow]")
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Apply Supabase SQL migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status only")
    parser.add_argument("--dry-run", action="store_true", help="List pending migrations only")
    args = parser.parse_args()

    conn = connect()
    try:
        applied = applied_migrations(conn)
        pending = pending_migrations(applied)

        if args.status:
            print_status(applied, pending)
            return
        if not pending:
            console.print("[green]Schema is up to date.[/green]")
            return
        for path in pending:
            if args.dry_run:
                console.print(f"[cyan]Would apply:[/cyan] {path.name}")
            else:
                apply(conn, path)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
