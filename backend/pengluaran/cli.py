"""CLI for user management, reports and exports.

Usage:
    python -m pengluaran.cli init-db
    python -m pengluaran.cli create-user --username budi --email budi@example.com --password secret
    python -m pengluaran.cli list-users
    python -m pengluaran.cli set-active --username budi --inactive
    python -m pengluaran.cli reset-password --username budi --password newpass
    python -m pengluaran.cli report --username budi --range 6M
    python -m pengluaran.cli export-csv --username budi --range ALL --output laporan.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from pengluaran.config import settings
from pengluaran.database import Base, sync_engine, sync_session_factory
from pengluaran.models import *  # noqa: F401, F403
from pengluaran.models.category import Category
from pengluaran.models.transaction import Transaction
from pengluaran.models.user import User
from pengluaran.reporting import build_report, export_filename, to_csv
from pengluaran.reporting.formatting import LOCALES, format_currency
from pengluaran.reporting.periods import start_date_for_range
from pengluaran.reporting.report import filter_since
from pengluaran.schemas.category import CategoryResponse
from pengluaran.schemas.report import DateRange, Report
from pengluaran.schemas.transaction import TransactionResponse
from pengluaran.services.auth_service import hash_password

logger = logging.getLogger(__name__)


def _get_user(db: Session, username: str) -> User:
    user = db.execute(select(User).where(User.username == username)).scalar_one_or_none()
    if user is None:
        print(f"Error: user '{username}' not found")
        sys.exit(1)
    return user


def _load_snapshot(
    db: Session, user: User
) -> tuple[list[TransactionResponse], list[CategoryResponse]]:
    txns = db.execute(
        select(Transaction)
        .options(selectinload(Transaction.category))
        .where(Transaction.user_id == user.id)
        .order_by(Transaction.date.desc())
    ).scalars().all()
    cats = db.execute(
        select(Category).where(Category.user_id == user.id).order_by(Category.name)
    ).scalars().all()
    return (
        [TransactionResponse.model_validate(t) for t in txns],
        [CategoryResponse.model_validate(c) for c in cats],
    )


def render_report(report: Report, currency: str, locale: str) -> str:
    def money(amount) -> str:
        return format_currency(amount, currency=currency, locale=locale)

    s = report.summary
    lines = [
        f"Laporan {report.range_label} ({report.start_date} s/d {report.end_date})",
        "=" * 60,
        f"{'Total Pemasukan':<20} {money(s.total_income):>20}  (rata-rata {money(report.average_income)})",
        f"{'Total Pengeluaran':<20} {money(s.total_expense):>20}  (rata-rata {money(report.average_expense)})",
        f"{'Saldo Bersih':<20} {money(s.balance):>20}",
        f"{'Transaksi':<20} {s.transaction_count:>20}",
        f"{'Tingkat Tabungan':<20} {report.savings_rate:>19.1f}%",
        "",
        f"{'Bulan':<10} {'Pemasukan':>18} {'Pengeluaran':>18} {'Saldo':>18}",
        "-" * 66,
    ]
    for bucket in report.monthly:
        lines.append(
            f"{bucket.label:<10} {money(bucket.income):>18} "
            f"{money(bucket.expense):>18} {money(bucket.balance):>18}"
        )

    for title, rows in (
        ("Pengeluaran per Kategori", report.expense_by_category),
        ("Pemasukan per Kategori", report.income_by_category),
    ):
        lines.extend(["", title, "-" * 66])
        if not rows:
            lines.append("(tidak ada data)")
        for row in rows:
            lines.append(
                f"{row.category.name:<30} {money(row.amount):>20} "
                f"{row.count:>4}x {row.percentage:>6.1f}%"
            )
    return "\n".join(lines)


def init_db(_args: argparse.Namespace) -> None:
    Base.metadata.create_all(sync_engine)
    print("Database tables created.")


def create_user(args: argparse.Namespace) -> None:
    with sync_session_factory() as db:
        existing = db.execute(
            select(User).where((User.username == args.username) | (User.email == args.email))
        ).scalar_one_or_none()
        if existing is not None:
            print(f"Error: username '{args.username}' or email '{args.email}' already exists")
            sys.exit(1)

        user = User(
            username=args.username,
            email=args.email,
            hashed_password=hash_password(args.password),
            full_name=args.full_name,
            currency=args.currency,
            is_admin=args.admin,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        print(f"Created user: {user.username} (id={user.id}, currency={user.currency})")


def list_users(_args: argparse.Namespace) -> None:
    with sync_session_factory() as db:
        users = db.execute(select(User).order_by(User.created_at)).scalars().all()

        if not users:
            print("No users found.")
            return

        print(f"{'ID':<38} {'Username':<20} {'Email':<30} {'Currency':<9} {'Active':<8}")
        print("-" * 105)
        for u in users:
            print(
                f"{str(u.id):<38} {u.username:<20} {u.email:<30} "
                f"{u.currency:<9} {'yes' if u.is_active else 'no':<8}"
            )
        print(f"\nTotal: {len(users)} user(s)")


def set_active(args: argparse.Namespace) -> None:
    with sync_session_factory() as db:
        user = _get_user(db, args.username)
        user.is_active = not args.inactive
        db.commit()
        print(f"User '{user.username}' active={'yes' if user.is_active else 'no'}")


def reset_password(args: argparse.Namespace) -> None:
    with sync_session_factory() as db:
        user = _get_user(db, args.username)
        user.hashed_password = hash_password(args.password)
        db.commit()
        print(f"Password reset for user '{user.username}'")


def report(args: argparse.Namespace) -> None:
    with sync_session_factory() as db:
        user = _get_user(db, args.username)
        txns, cats = _load_snapshot(db, user)

    result = build_report(txns, cats, DateRange(args.range))
    try:
        text = render_report(result, currency=user.currency, locale=args.locale)
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    print(text)


def export_csv(args: argparse.Namespace) -> None:
    today = date.today()
    with sync_session_factory() as db:
        user = _get_user(db, args.username)
        txns, _ = _load_snapshot(db, user)

    selected = filter_since(txns, start_date_for_range(DateRange(args.range), today, txns))
    output = Path(args.output or export_filename(today))
    output.write_text(to_csv(selected) + "\n", encoding="utf-8")
    logger.info("Exported %d transactions for %s to %s", len(selected), user.username, output)
    print(f"Exported {len(selected)} transaction(s) to {output}")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(message)s")

    parser = argparse.ArgumentParser(prog="pengluaran.cli", description="Pengluaran administration")
    subparsers = parser.add_subparsers(dest="command", required=True)
    ranges = [r.value for r in DateRange]

    # init-db
    p_init = subparsers.add_parser(
        "init-db", help="Create tables directly (development; use alembic upgrade head otherwise)"
    )
    p_init.set_defaults(func=init_db)

    # create-user
    p_create = subparsers.add_parser("create-user", help="Create a new user")
    p_create.add_argument("--username", required=True)
    p_create.add_argument("--email", required=True)
    p_create.add_argument("--password", required=True)
    p_create.add_argument("--full-name", default=None)
    p_create.add_argument("--currency", default=settings.DEFAULT_CURRENCY)
    p_create.add_argument("--admin", action="store_true", default=False)
    p_create.set_defaults(func=create_user)

    # list-users
    p_list = subparsers.add_parser("list-users", help="List all users")
    p_list.set_defaults(func=list_users)

    # set-active
    p_active = subparsers.add_parser("set-active", help="Activate or deactivate a user")
    p_active.add_argument("--username", required=True)
    group = p_active.add_mutually_exclusive_group(required=True)
    group.add_argument("--active", action="store_false", dest="inactive")
    group.add_argument("--inactive", action="store_true", dest="inactive")
    p_active.set_defaults(func=set_active)

    # reset-password
    p_reset = subparsers.add_parser("reset-password", help="Reset user password")
    p_reset.add_argument("--username", required=True)
    p_reset.add_argument("--password", required=True)
    p_reset.set_defaults(func=reset_password)

    # report
    p_report = subparsers.add_parser("report", help="Print a financial report")
    p_report.add_argument("--username", required=True)
    p_report.add_argument("--range", choices=ranges, default=settings.DEFAULT_DATE_RANGE)
    p_report.add_argument("--locale", choices=list(LOCALES), default=settings.DEFAULT_LOCALE)
    p_report.set_defaults(func=report)

    # export-csv
    p_export = subparsers.add_parser("export-csv", help="Export transactions to CSV")
    p_export.add_argument("--username", required=True)
    p_export.add_argument("--range", choices=ranges, default=DateRange.ALL.value)
    p_export.add_argument("--output", default=None, help="Output path")
    p_export.set_defaults(func=export_csv)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
