import getpass
import re

import requests
import typer

from cli.core.session import save_token, load_token, clear_token, is_logged_in
from cli.core.api import api_register, api_login, api_logout, api_get_profile, ApiError
from cli.core.utils import call_api, require_token


app = typer.Typer(help="Authentication commands (register, login, logout)")

EMAIL_REGEX = re.compile(r"^[\w\.+-]+@[\w\.-]+\.\w+$")


def _prompt_email(email):
    if email is None:
        email = typer.prompt("Email")
    if not EMAIL_REGEX.match(email):
        typer.echo("Invalid email.")
        raise typer.Exit(code=1)
    return email


@app.command("register")
def register(
    email: str = typer.Option(None, "--email", "-e", help="Email"),
    username: str = typer.Option(None, "--username", "-u", help="Username"),
    first_name: str = typer.Option(None, "--first-name", help="First name"),
    last_name: str = typer.Option(None, "--last-name", help="Last name"),
    phone: str = typer.Option(None, "--phone", help="Phone number"),
):
    """
    Create an account and start a session with it.
    """
    if is_logged_in():
        typer.echo("Session already active. Logout first.")
        raise typer.Exit(code=1)

    email = _prompt_email(email)
    password = getpass.getpass("Password: ")
    password_confirm = getpass.getpass("Confirm password: ")

    if not password:
        typer.echo("Password cannot be empty.")
        raise typer.Exit(code=1)
    if password != password_confirm:
        typer.echo("Passwords do not match.")
        raise typer.Exit(code=1)

    user_data = {
        "email": email,
        "password": password,
        "username": username,
        "firstName": first_name,
        "lastName": last_name,
        "phoneNumber": phone,
    }
    result = call_api(api_register, user_data)

    save_token(result["token"])
    typer.echo(f"Account created. Logged in as '{result['user']['email']}'.")


@app.command("login")
def login(
    email: str = typer.Option(None, "--email", "-e", help="Email"),
):
    """
    Login to the system. Only allowed if no session is active.
    """
    if is_logged_in():
        typer.echo("Session already active. Logout first to remove current session token.")
        raise typer.Exit(code=1)

    email = _prompt_email(email)
    password = getpass.getpass("Password: ")

    result = call_api(api_login, email, password)

    save_token(result["token"])
    typer.echo(f"Login successful as '{email}'.")


@app.command("logout")
def logout():
    """
    Invalidate the session token on the server and delete it locally.
    """
    token = load_token()
    if token:
        try:
            api_logout(token)
            typer.echo("Logged out from backend.")
        except (ApiError, requests.RequestException) as e:
            typer.echo(f"Warning: Failed to logout from backend ({e}). The token may have already expired.")

    clear_token()
    typer.echo("Session ended.")


@app.command("profile")
def profile():
    """
    Show the logged-in user's profile.
    """
    token = require_token()
    user = call_api(api_get_profile, token)

    typer.echo(f"ID:        {user['id']}")
    typer.echo(f"Email:     {user['email']}")
    typer.echo(f"Username:  {user.get('username') or '-'}")
    name = " ".join(part for part in (user.get("firstName"), user.get("lastName")) if part)
    typer.echo(f"Name:      {name or '-'}")
    typer.echo(f"Phone:     {user.get('phoneNumber') or '-'}")
    typer.echo(f"Selling:   {len(user.get('sellingCars', []))} car(s)")
    typer.echo(f"Favorites: {len(user.get('favoriteCars', []))} car(s)")
