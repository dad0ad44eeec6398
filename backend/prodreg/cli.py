# Overview: Flask CLI command groups for bootstrap, demo data, and report inspection.

# backend/prodreg/cli.py
# Commands Legend (run from the backend directory):
# Prereqs:
# - Activate your virtualenv.
# - Set FLASK_APP to prodreg (PowerShell: $env:FLASK_APP="prodreg").
# - Use: python -m flask <group> <command> [options]
#
# System bootstrap/repair:
# - python -m flask system init
#   Create any missing tables (idempotent).
# - python -m flask system reset-db --yes
#   DEV/TEST only: drop and recreate all tables (deletes all data).
#
# Demonstration data:
# - python -m flask demo seed
#   Load the built-in demo users, products, locations, purposes and history.
#
# Reports:
# - python -m flask reports top --dimension product --limit 5
#   Print a top-N ranking of registrations.

import click
from flask.cli import with_appcontext

from .extensions import db
from .services import reporting_service
from .services.seed_service import seed_demo_data


@click.group('system')
def system_group():
    """System bootstrap and repair commands."""


@system_group.command('init')
@with_appcontext
def init_system():
    """Create all tables that do not exist yet."""
    db.create_all()
    click.echo("PASS Schema ready.")


@system_group.command('reset-db')
@click.option('--yes', is_flag=True, help='Skip confirmation')
@with_appcontext
def reset_db(yes):
    """
    DANGER: Drop all tables and recreate schema.

    This will DELETE ALL DATA!
    """
    if not yes:
        click.confirm("WARN This will DELETE ALL DATA. Are you sure?", abort=True)

    click.echo("DELETE  Dropping all tables...")
    db.drop_all()

    click.echo("BUILD  Creating all tables...")
    db.create_all()

    click.echo("PASS Database reset complete. Run 'python -m flask demo seed' for sample data.")


@click.group('demo')
def demo_group():
    """Demonstration dataset commands."""


@demo_group.command('seed')
@with_appcontext
def seed_demo():
    """Load the demonstration dataset (safe to run twice)."""
    counts = seed_demo_data()
    for kind, created in counts.items():
        click.echo(f"PASS {kind}: {created} created")


@click.group('reports')
def reports_group():
    """Report inspection commands."""


@reports_group.command('top')
@click.option('--dimension', type=click.Choice(['user', 'product', 'location']), default='product')
@click.option('--limit', type=int, default=5, show_default=True)
@with_appcontext
def top_command(dimension, limit):
    """Print the most frequent users, products or locations."""
    try:
        report = reporting_service.top_report(dimension=dimension, limit=limit)
    except reporting_service.ReportError as exc:
        raise click.ClickException(str(exc))

    if report["source"] != "database":
        click.echo("WARN Database unavailable, showing demonstration data")
    if not report["rows"]:
        click.echo("No registrations found.")
        return
    for rank, row in enumerate(report["rows"], start=1):
        click.echo(f"{rank:>2}. {row['name']:<45} {row['count']:>5}")


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(system_group)
    app.cli.add_command(demo_group)
    app.cli.add_command(reports_group)
