from school_mis import create_app
from school_mis.seed import seed_data
from flask.cli import with_appcontext
from flask_migrate import upgrade, migrate, init
import click

app = create_app()

@app.cli.command("db-init")
@with_appcontext
def db_init():
    """Initializes migrations directory"""
    init()

@app.cli.command("db-migrate")
@with_appcontext
def db_migrate():
    """Creates a new migration"""
    migrate()

@app.cli.command("db-upgrade")
@with_appcontext
def db_upgrade():
    """Applies migrations"""
    upgrade()

@app.cli.command("seed")
@with_appcontext
def seed():
    """Loads the demo school data"""
    seed_data()
    click.echo("Demo data loaded.")


if __name__ == "__main__":
    app.run(debug=app.config.get("FLASK_ENV") == "development")
