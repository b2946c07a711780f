import requests
from typing import List
from .config import BASE_URL, TIMEOUT


class ApiError(Exception):
    """
    Raised when the API answers with an error status.
    """
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def _message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            if key in body:
                return str(body[key])
    return str(body)


def _request(method: str, path: str, expected: int = 200, **kwargs):
    resp = requests.request(method, f"{BASE_URL}{path}", timeout=TIMEOUT, **kwargs)
    if resp.status_code != expected:
        raise ApiError(resp.status_code, _message(resp))
    return resp.json()


def api_register(user_data: dict) -> dict:
    """
    Creates an account. Returns {"user": ..., "token": ...}.
    """
    return _request("POST", "/users/register", expected=201, json=user_data)


def api_login(email: str, password: str) -> dict:
    """
    Logs in and returns {"user": ..., "token": ...}.
    """
    return _request("POST", "/users/login", json={"email": email, "password": password})


def api_logout(token: str) -> dict:
    return _request("POST", "/logout", json={"token": token})


def api_get_profile(token: str) -> dict:
    return _request("GET", "/user/profile", headers=_auth(token))


def api_get_cars() -> List[dict]:
    return _request("GET", "/cars")


def api_search_cars(query: str) -> List[dict]:
    return _request("GET", "/cars/search", params={"query": query})


def api_get_car(token: str, car_id: str) -> dict:
    return _request("GET", f"/cars/{car_id}", headers=_auth(token))


def api_create_car(token: str, car_data: dict) -> dict:
    return _request("POST", "/cars", expected=201, json=car_data, headers=_auth(token))


def api_delete_car(token: str, car_id: str) -> dict:
    return _request("DELETE", f"/cars/{car_id}", headers=_auth(token))


def api_get_selling_cars(token: str) -> List[dict]:
    return _request("GET", "/user/selling-cars", headers=_auth(token))["sellingCars"]


def api_add_favorite(token: str, car_id: str) -> dict:
    return _request("POST", "/users/favorites", expected=201, json={"carId": car_id}, headers=_auth(token))


def api_get_favorites(token: str) -> List[dict]:
    return _request("GET", "/users/favoriteCars", headers=_auth(token))


def api_remove_favorite(token: str, car_id: str) -> dict:
    return _request("DELETE", f"/users/favorites/{car_id}", headers=_auth(token))
