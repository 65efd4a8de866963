import click

from .extensions import db
from .seed import seed_defaults


def register_cli(app):
    @app.cli.command("seed")
    def seed_command():
        """Insert the default template and system presets."""
        created = seed_defaults(db.session)
        if created:
            click.echo(f"Seeded: {', '.join(created)}")
        else:
            click.echo("Nothing to seed")

    @app.cli.command("autopost-tick")
    def autopost_tick_command():
        """Run every due autopost schedule once and exit."""
        from .application.autopost.scheduler import AutopostScheduler

        summary = AutopostScheduler(app).tick()
        click.echo(
            f"due={summary['due']} succeeded={summary['succeeded']} failed={summary['failed']}"
        )
