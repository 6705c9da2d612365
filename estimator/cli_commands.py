"""
Flask CLI commands for database management.

Commands:
- flask init-db: Create all tables
- flask seed-data: Load the default pricing catalog (idempotent)
"""

import click

from estimator import seed_data
from estimator.database import db_session, create_tables
from estimator.exceptions import EstimatorError
from estimator.services import catalog_service


# (entity, rows, payload key identifying an existing row, model attribute)
SEED_PLAN = (
    (catalog_service.CURRENCIES, seed_data.CURRENCIES, 'code', 'code'),
    (catalog_service.INDUSTRIES, seed_data.INDUSTRIES, 'name', 'name'),
    (catalog_service.SOFTWARE_TYPES, seed_data.SOFTWARE_TYPES, 'name', 'name'),
    (catalog_service.TECH_STACKS, seed_data.TECH_STACKS, 'name', 'name'),
    (catalog_service.TIMELINES, seed_data.TIMELINES, 'label', 'label'),
    (catalog_service.FEATURES, seed_data.FEATURES, 'name', 'name'),
)


def seed_catalog(session):
    """
    Insert every seed row whose natural key is not already present.

    Returns a dict of label -> number of rows created.
    """
    created = {}
    for entity, rows, key, attr in SEED_PLAN:
        column = getattr(entity.model, attr)
        count = 0
        for row in rows:
            if session.query(entity.model).filter(column == row[key]).first():
                continue
            catalog_service.create_item(session, entity, row)
            count += 1
        created[entity.label] = count
    return created


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('init-db')
    def init_db_command():
        """Create database tables."""
        create_tables()
        click.echo(click.style('✅ Tables created', fg='green', bold=True))

    @app.cli.command('seed-data')
    def seed_data_command():
        """Load the default industries, software types, features, timelines and currencies."""
        try:
            created = seed_catalog(db_session)
        except EstimatorError as e:
            click.echo(click.style(f'❌ Error seeding data: {e.message}', fg='red'))
            raise SystemExit(1)

        click.echo(click.style('\n✅ Seed data loaded', fg='green', bold=True))
        for label, count in created.items():
            click.echo(f'   {label}: {count} created')
