import requests
import typer

from .api import ApiError
from .session import load_token


def require_token() -> str:
    """
    Returns the stored session token or exits if there is no session.
    """
    token = load_token()
    if not token:
        typer.echo("No active session. Please run `carmarket auth login` first.")
        raise typer.Exit(code=1)
    return token


def call_api(func, *args, **kwargs):
    """
    Calls an api_* function, turning failures into a message and exit code 1.
    """
    try:
        return func(*args, **kwargs)
    except ApiError as e:
        typer.echo(f"Error ({e.status_code}): {e.message}")
        raise typer.Exit(code=1)
    except requests.RequestException as e:
        typer.echo(f"Could not reach the API: {e}")
        raise typer.Exit(code=1)


def format_car(car: dict) -> str:
    year = car.get("year") or "?"
    price = car.get("price")
    price_text = f"{price:,.2f}" if isinstance(price, (int, float)) else "n/a"
    title = " ".join(part for part in (car.get("make"), car.get("model")) if part) or "(untitled)"
    return f"[{car['id']}] {title} ({year}) - {price_text}"
