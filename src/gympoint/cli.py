"""CLI entry point for Gympoint.

Serves the REST API and seeds the students and plans registrations refer to.
"""

from __future__ import annotations

import sys
from decimal import Decimal

import click

from gympoint.config import get_settings
from gympoint.logging import setup_logging
from gympoint.store import Store, StudentExistsError

# One hundred years
MAX_PLAN_MONTHS = 1200


def _open_store(db_path: str | None) -> Store:
    return Store(db_path or get_settings().database_path)


@click.group()
@click.version_option(package_name="gympoint")
def main() -> None:
    """Gympoint - gym-membership registrations."""
    pass


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind.")
@click.option("--port", default=8000, show_default=True, type=int, help="Port to listen on.")
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn  # noqa: PLC0415

    setup_logging()
    uvicorn.run("gympoint.api.app:app", host=host, port=port, reload=reload)


@main.command("init-db")
@click.option("--db", "db_path", default=None, help="SQLite database path.")
def init_db(db_path: str | None) -> None:
    """Create the database tables if they don't exist."""
    store = _open_store(db_path)
    store.close()
    click.echo("Database ready.")


@main.command("add-student")
@click.argument("name")
@click.argument("email")
@click.option("--db", "db_path", default=None, help="SQLite database path.")
def add_student(name: str, email: str, db_path: str | None) -> None:
    """Add a student that registrations can refer to."""
    store = _open_store(db_path)
    try:
        student = store.create_student(name=name, email=email)
    except StudentExistsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        store.close()
    click.echo(f"Created student {student.id}: {student.name} <{student.email}>")


@main.command("add-plan")
@click.argument("title")
@click.option(
    "--duration",
    required=True,
    type=click.IntRange(min=1, max=MAX_PLAN_MONTHS),
    help="Plan length in months.",
)
@click.option("--price", required=True, type=str, help="Price per month, e.g. 129.90.")
@click.option("--db", "db_path", default=None, help="SQLite database path.")
def add_plan(title: str, duration: int, price: str, db_path: str | None) -> None:
    """Add a membership plan."""
    try:
        monthly_price = Decimal(price)
    except ArithmeticError:
        raise click.BadParameter(f"'{price}' is not a valid price", param_hint="--price") from None
    if not monthly_price.is_finite():
        raise click.BadParameter(f"'{price}' is not a valid price", param_hint="--price")
    if monthly_price < 0:
        raise click.BadParameter("price must not be negative", param_hint="--price")

    store = _open_store(db_path)
    try:
        plan = store.create_plan(title=title, duration=duration, price=monthly_price)
    finally:
        store.close()
    click.echo(f"Created plan {plan.id}: {plan.title} ({plan.duration} months at {plan.price})")


@main.command("list-plans")
@click.option("--db", "db_path", default=None, help="SQLite database path.")
def list_plans(db_path: str | None) -> None:
    """List membership plans."""
    store = _open_store(db_path)
    try:
        plans = store.list_plans()
    finally:
        store.close()

    if not plans:
        click.echo("No plans.")
        return
    for plan in plans:
        click.echo(f"{plan.id}\t{plan.title}\t{plan.duration} months\t{plan.price}")


if __name__ == "__main__":
    main()
