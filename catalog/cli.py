import click
from flask import Flask

from .extensions import db
from .factories import make_products
from .store import store


def register_cli(app: Flask) -> None:
    @app.cli.command("init-db")
    def init_db():
        """Create database tables"""
        with app.app_context():
            db.create_all()
        click.echo("Database initialized")

    @app.cli.command("seed-demo")
    @click.option("--count", "count_", type=click.IntRange(min=1), default=10, show_default=True)
    def seed_demo(count_: int):
        """Seed demo products"""
        with app.app_context():
            make_products(count_)
            total = store.count()
        click.echo(f"Seeded {count_} products ({total} total)")
