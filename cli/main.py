# cli/main.py


import typer
from cli.auth.commands import app as auth_app
from cli.cars.commands import app as cars_app
from cli.favorites.commands import app as favorites_app

app = typer.Typer(help="CarMarket command-line client")
app.add_typer(auth_app, name="auth")
app.add_typer(cars_app, name="cars")
app.add_typer(favorites_app, name="favorites")

if __name__ == "__main__":
    app()
