import typer

from cli.core.api import api_add_favorite, api_get_favorites, api_remove_favorite
from cli.core.utils import call_api, format_car, require_token


app = typer.Typer(help="Favorite car commands (add, list, remove)")


@app.command("add")
def add(car_id: str = typer.Argument(..., help="Car ID")):
    token = require_token()
    result = call_api(api_add_favorite, token, car_id)
    typer.echo(f"{result['message']}: {result['car']['make']} {result['car']['model']}")


@app.command("list")
def list_favorites():
    """
    List your favorite cars.
    """
    token = require_token()
    cars = call_api(api_get_favorites, token)
    if not cars:
        typer.echo("No favorite cars yet.")
        return
    for car in cars:
        typer.echo(format_car(car))


@app.command("remove")
def remove(car_id: str = typer.Argument(..., help="Car ID")):
    token = require_token()
    result = call_api(api_remove_favorite, token, car_id)
    typer.echo(result["message"])
