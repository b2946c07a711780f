import unittest
from unittest.mock import patch

import requests
from typer.testing import CliRunner

from cli.main import app
from cli.core.api import ApiError

runner = CliRunner()


class TestCLIAuth(unittest.TestCase):

    @patch("cli.auth.commands.save_token")
    @patch("cli.auth.commands.api_login")
    @patch("cli.auth.commands.is_logged_in")
    @patch("getpass.getpass")
    def test_login_success(self, mock_getpass, mock_logged_in, mock_login, mock_save):
        mock_getpass.return_value = "secret123"
        mock_logged_in.return_value = False
        mock_login.return_value = {"user": {"id": "u1"}, "token": "tok"}

        result = runner.invoke(app, ["auth", "login", "--email", "alice@example.com"])
        self.assertEqual(result.exit_code, 0, result.stdout)
        self.assertIn("Login successful as 'alice@example.com'", result.stdout)
        mock_login.assert_called_once_with("alice@example.com", "secret123")
        mock_save.assert_called_once_with("tok")

    @patch("cli.auth.commands.save_token")
    @patch("cli.auth.commands.api_login")
    @patch("cli.auth.commands.is_logged_in")
    @patch("getpass.getpass")
    def test_login_invalid_credentials(self, mock_getpass, mock_logged_in, mock_login, mock_save):
        mock_getpass.return_value = "wrong"
        mock_logged_in.return_value = False
        mock_login.side_effect = ApiError(401, "Invalid credentials")

        result = runner.invoke(app, ["auth", "login", "--email", "alice@example.com"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error (401): Invalid credentials", result.stdout)
        mock_save.assert_not_called()

    @patch("cli.auth.commands.is_logged_in")
    def test_login_rejects_bad_email(self, mock_logged_in):
        mock_logged_in.return_value = False
        result = runner.invoke(app, ["auth", "login", "--email", "not-an-email"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid email", result.stdout)

    @patch("cli.auth.commands.save_token")
    @patch("cli.auth.commands.api_register")
    @patch("cli.auth.commands.is_logged_in")
    @patch("getpass.getpass")
    def test_register(self, mock_getpass, mock_logged_in, mock_register, mock_save):
        mock_getpass.side_effect = ["secret123", "secret123"]
        mock_logged_in.return_value = False
        mock_register.return_value = {"user": {"id": "u1", "email": "alice@example.com"}, "token": "tok"}

        result = runner.invoke(app, ["auth", "register", "-e", "alice@example.com", "--first-name", "Alice"])
        self.assertEqual(result.exit_code, 0, result.stdout)
        sent = mock_register.call_args[0][0]
        self.assertEqual(sent["email"], "alice@example.com")
        self.assertEqual(sent["firstName"], "Alice")
        mock_save.assert_called_once_with("tok")

    @patch("cli.auth.commands.api_register")
    @patch("cli.auth.commands.is_logged_in")
    @patch("getpass.getpass")
    def test_register_password_mismatch(self, mock_getpass, mock_logged_in, mock_register):
        mock_getpass.side_effect = ["secret123", "other"]
        mock_logged_in.return_value = False

        result = runner.invoke(app, ["auth", "register", "-e", "alice@example.com"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Passwords do not match", result.stdout)
        mock_register.assert_not_called()

    @patch("cli.auth.commands.clear_token")
    @patch("cli.auth.commands.api_logout")
    @patch("cli.auth.commands.load_token")
    def test_logout(self, mock_load, mock_logout, mock_clear):
        mock_load.return_value = "tok"
        mock_logout.return_value = {"message": "Logout successful."}

        result = runner.invoke(app, ["auth", "logout"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Logged out from backend", result.stdout)
        mock_logout.assert_called_once_with("tok")
        mock_clear.assert_called_once()

    @patch("cli.auth.commands.clear_token")
    @patch("cli.auth.commands.api_logout")
    @patch("cli.auth.commands.load_token")
    def test_logout_clears_session_even_if_server_refuses(self, mock_load, mock_logout, mock_clear):
        mock_load.return_value = "tok"
        mock_logout.side_effect = ApiError(401, "Token has already been invalidated.")

        result = runner.invoke(app, ["auth", "logout"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Warning", result.stdout)
        mock_clear.assert_called_once()


class TestCLICars(unittest.TestCase):

    def setUp(self):
        self.car = {"id": "c1", "make": "Toyota", "model": "Corolla", "year": 2018, "price": 12500.0, "user": "u1"}

    @patch("cli.cars.commands.api_get_cars")
    def test_list(self, mock_get_cars):
        mock_get_cars.return_value = [self.car]
        result = runner.invoke(app, ["cars", "list"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("[c1] Toyota Corolla (2018) - 12,500.00", result.stdout)

    @patch("cli.cars.commands.api_search_cars")
    def test_search_without_results(self, mock_search):
        mock_search.return_value = []
        result = runner.invoke(app, ["cars", "search", "lada"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No cars match 'lada'", result.stdout)
        mock_search.assert_called_once_with("lada")

    @patch("cli.cars.commands.api_get_cars")
    def test_api_unreachable(self, mock_get_cars):
        mock_get_cars.side_effect = requests.ConnectionError("refused")
        result = runner.invoke(app, ["cars", "list"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Could not reach the API", result.stdout)

    @patch("cli.core.utils.load_token")
    def test_sell_requires_session(self, mock_load):
        mock_load.return_value = None
        result = runner.invoke(app, ["cars", "sell", "--make", "Fiat", "--model", "Panda"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No active session", result.stdout)

    @patch("cli.cars.commands.api_create_car")
    @patch("cli.core.utils.load_token")
    def test_sell(self, mock_load, mock_create):
        mock_load.return_value = "tok"
        mock_create.return_value = {"car": dict(self.car, make="Fiat", model="Panda"), "user": {}}

        result = runner.invoke(app, [
            "cars", "sell", "--make", "Fiat", "--model", "Panda", "--year", "2012", "-p", "a.jpg", "-p", "b.jpg",
        ])
        self.assertEqual(result.exit_code, 0, result.stdout)
        token, car_data = mock_create.call_args[0]
        self.assertEqual(token, "tok")
        self.assertEqual(car_data["year"], 2012)
        self.assertEqual(car_data["pictures"], ["a.jpg", "b.jpg"])

    @patch("cli.cars.commands.api_delete_car")
    @patch("cli.core.utils.load_token")
    def test_remove_not_owner(self, mock_load, mock_delete):
        mock_load.return_value = "tok"
        mock_delete.side_effect = ApiError(403, "Unauthorized")

        result = runner.invoke(app, ["cars", "remove", "c1", "--force"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error (403): Unauthorized", result.stdout)

    @patch("cli.cars.commands.api_get_car")
    @patch("cli.core.utils.load_token")
    def test_show_own_car(self, mock_load, mock_get_car):
        mock_load.return_value = "tok"
        mock_get_car.return_value = {"car": dict(self.car, description="Low mileage"), "user": {"id": "u1"}}

        result = runner.invoke(app, ["cars", "show", "c1"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Low mileage", result.stdout)
        self.assertIn("You are the seller", result.stdout)


class TestCLIFavorites(unittest.TestCase):

    @patch("cli.favorites.commands.api_add_favorite")
    @patch("cli.core.utils.load_token")
    def test_add(self, mock_load, mock_add):
        mock_load.return_value = "tok"
        mock_add.return_value = {"message": "Car added to favorites", "car": {"id": "c1", "make": "Mazda", "model": "MX-5"}}

        result = runner.invoke(app, ["favorites", "add", "c1"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Car added to favorites: Mazda MX-5", result.stdout)

    @patch("cli.favorites.commands.api_get_favorites")
    @patch("cli.core.utils.load_token")
    def test_list_empty(self, mock_load, mock_get):
        mock_load.return_value = "tok"
        mock_get.return_value = []

        result = runner.invoke(app, ["favorites", "list"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No favorite cars yet", result.stdout)


if __name__ == "__main__":
    unittest.main()
