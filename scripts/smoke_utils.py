import json
import os

import httpx

BASE_URL = os.getenv("SMOKE_BASE_URL", "http://127.0.0.1:8080")
API = os.getenv("SMOKE_API_PREFIX", "/noi-intervistiamo/api")


class SmokeClient:
    """
    Thin wrapper over ``httpx.Client`` for the smoke scripts.

    Every call prints one JSON line with the observed and the expected status
    and counts the calls whose status did not match.
    """

    def __init__(self, base_url: str = BASE_URL, timeout: float = 30.0):
        self.client = httpx.Client(base_url=f"{base_url}{API}", timeout=timeout)
        self.token: str | None = None
        self.failures = 0

    def __enter__(self) -> "SmokeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.client.close()

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def check(self, name: str, method: str, path: str, *, expected: int = 200, **kwargs) -> httpx.Response | None:
        kwargs.setdefault("headers", self.headers)
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.HTTPError as transport_error:
            self.failures += 1
            print(json.dumps({"name": name, "expected": expected, "status": None, "error": str(transport_error)}))
            return None

        passed = response.status_code == expected
        if not passed:
            self.failures += 1
        is_json = response.headers.get("content-type", "").startswith("application/json")
        print(json.dumps({
            "name": name,
            "expected": expected,
            "status": response.status_code,
            "passed": passed,
            "body": response.json() if is_json else response.text[:200],
        }, default=str))
        return response

    def login(self, username: str, password: str) -> str | None:
        response = self.check(f"login as {username}", "POST", "/auth/login", json={"username": username, "password": password})
        self.token = response.json()["token"] if response is not None and response.status_code == 200 else None
        return self.token


def created_id(response: httpx.Response | None) -> str | None:
    if response is None or response.status_code != 201:
        return None
    body = response.json()
    return body[0]["id"] if isinstance(body, list) else body["id"]
