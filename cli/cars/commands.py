from typing import List, Optional

import typer

from cli.core.api import (
    api_get_cars,
    api_search_cars,
    api_get_car,
    api_create_car,
    api_delete_car,
    api_get_selling_cars,
)
from cli.core.utils import call_api, format_car, require_token


app = typer.Typer(help="Car listing commands (list, search, sell, remove)")


def _print_cars(cars: List[dict], empty: str) -> None:
    if not cars:
        typer.echo(empty)
        return
    for car in cars:
        typer.echo(format_car(car))


@app.command("list")
def list_cars():
    """
    List every car for sale.
    """
    _print_cars(call_api(api_get_cars), "No cars listed.")


@app.command("search")
def search(query: str = typer.Argument(..., help="Pattern matched against make and model")):
    """
    Search cars by make or model (case-insensitive regular expression).
    """
    _print_cars(call_api(api_search_cars, query), f"No cars match '{query}'.")


@app.command("show")
def show(car_id: str = typer.Argument(..., help="Car ID")):
    """
    Show a car's details.
    """
    token = require_token()
    result = call_api(api_get_car, token, car_id)
    car = result["car"]

    typer.echo(format_car(car))
    if car.get("description"):
        typer.echo(car["description"])
    for picture in car.get("pictures", []):
        typer.echo(f"  picture: {picture}")
    if result.get("user"):
        typer.echo("You are the seller of this car.")


@app.command("sell")
def sell(
    make: str = typer.Option(..., "--make", help="Manufacturer"),
    model: str = typer.Option(..., "--model", help="Model"),
    year: Optional[int] = typer.Option(None, "--year", help="Model year"),
    price: Optional[float] = typer.Option(None, "--price", help="Asking price"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Description"),
    pictures: List[str] = typer.Option([], "--picture", "-p", help="Picture URL (repeatable)"),
):
    """
    List a car for sale.
    """
    token = require_token()
    car_data = {
        "make": make,
        "model": model,
        "year": year,
        "price": price,
        "description": description,
        "pictures": pictures,
    }
    result = call_api(api_create_car, token, car_data)
    typer.echo(f"Car listed: {format_car(result['car'])}")


@app.command("remove")
def remove(
    car_id: str = typer.Argument(..., help="Car ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Delete without confirmation"),
):
    """
    Remove one of your listings.
    """
    token = require_token()
    if not force and not typer.confirm(f"Remove car {car_id}?"):
        typer.echo("Aborted.")
        raise typer.Exit(code=1)

    result = call_api(api_delete_car, token, car_id)
    typer.echo(f"Car removed: {format_car(result['car'])}")


@app.command("mine")
def mine():
    """
    List the cars you are selling.
    """
    token = require_token()
    _print_cars(call_api(api_get_selling_cars, token), "You are not selling any cars.")
