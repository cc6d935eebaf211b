import json
import os
import click
from flask import current_app
from flask.cli import with_appcontext
from flask_migrate import upgrade as alembic_upgrade, stamp as alembic_stamp, migrate as alembic_migrate
from pydantic import ValidationError

from app.utils.db import transactional


def _assert_safe_for_upgrade():
    # Production upgrades need ALLOW_DB_MIGRATIONS=true
    env = (current_app.config.get("ENV") or "").lower()
    app_env = (os.getenv("APP_ENV") or "").lower()
    if "production" in (env, app_env):
        if (os.getenv("ALLOW_DB_MIGRATIONS") or "").lower() not in ("1", "true", "yes"):
            raise click.ClickException("Refusing to run DB migration in production without ALLOW_DB_MIGRATIONS=true")


@click.command("db-migrate-safe")
@click.option("-m", "--message", default="auto migration", help="Migration message")
@with_appcontext
def db_migrate_safe(message):
    """Generate a migration script from the shop models."""
    alembic_migrate(message=message)
    click.echo("Migration script generated.")


@click.command("db-upgrade-safe")
@with_appcontext
def db_upgrade_safe():
    """Apply migrations to the configured database."""
    _assert_safe_for_upgrade()
    alembic_upgrade()
    click.echo("Database upgraded.")


@click.command("db-stamp-safe")
@click.option("--revision", default="head", help="Revision to stamp, default 'head'")
@with_appcontext
def db_stamp_safe(revision):
    """Mark the database at a revision without running migrations."""
    _assert_safe_for_upgrade()
    alembic_stamp(revision)
    click.echo(f"Database stamped at {revision}.")


@click.command("create-root-admin")
@with_appcontext
def create_root_admin():
    """Create the root admin from ADMIN_EMAIL / ADMIN_PASS if it is missing."""
    from app.services.accounts import ensure_root_admin

    with transactional("Failed to create root admin"):
        user = ensure_root_admin()
    if user is None:
        raise click.ClickException("ADMIN_EMAIL and ADMIN_PASS must be set")
    click.echo(f"Root admin ready: {user.email}")


@click.command("import-items")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def import_items(path):
    """Load catalog items from a JSON array file.

    Each entry uses the same fields as ``POST /admin/items``. The whole file
    is rejected if any entry is invalid.
    """
    from app.schemas.catalog import ItemCreateRequest
    from app.services import catalog

    with open(path, encoding="utf-8") as fh:
        try:
            entries = json.load(fh)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"{path} is not valid JSON: {e}")
    if not isinstance(entries, list):
        raise click.ClickException(f"{path} must contain a JSON array of items")

    requests = []
    for index, entry in enumerate(entries):
        try:
            requests.append(ItemCreateRequest.model_validate(entry))
        except ValidationError as e:
            raise click.ClickException(f"Item #{index} is invalid: {e.errors(include_url=False)[0]['msg']}")

    with transactional("Failed to import items"):
        for req in requests:
            catalog.create_item(req.model_dump())
    click.echo(f"Imported {len(requests)} item(s).")


@click.command("stock-report")
@with_appcontext
def stock_report():
    """Print available and reserved units per item."""
    from app.services import inventory

    rows = inventory.stock_report()
    if not rows:
        click.echo("Catalog is empty.")
        return
    for row in rows:
        click.echo(
            f"{row['itemId']:>6}  available={row['availableCount']:<6} "
            f"reserved={row['reserved']:<6} {row['title']}"
        )


def register_cli(app):
    for command in (
        db_migrate_safe,
        db_upgrade_safe,
        db_stamp_safe,
        create_root_admin,
        import_items,
        stock_report,
    ):
        app.cli.add_command(command)
