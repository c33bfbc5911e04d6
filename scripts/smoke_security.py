from scripts.smoke_utils import SmokeClient


def main() -> int:
    with SmokeClient() as smoke:
        smoke.check("login with wrong password", "POST", "/auth/login", expected=401, json={"username": "admin", "password": "wrong"})
        smoke.check("login without password", "POST", "/auth/login", expected=400, json={"username": "admin"})

        smoke.check("profile without token", "GET", "/auth/profile", expected=401)
        smoke.check("profile with forged token", "GET", "/auth/profile", expected=401, headers={"Authorization": "Bearer forged"})
        smoke.check("refresh with forged token", "POST", "/auth/refresh", expected=401, json={"refreshToken": "forged"})

        # a token stops working once logged out
        if smoke.login("hr", "hr123"):
            smoke.check("logout", "POST", "/auth/logout", expected=204)
            smoke.check("profile after logout", "GET", "/auth/profile", expected=401)
            smoke.token = None

        smoke.check("duplicate role", "POST", "/roles", expected=409, json={"name": "Amministratore", "code": "ADMIN", "color": "#dc3545"})
        smoke.check("delete system role", "DELETE", "/roles/1", expected=400)
        smoke.check("non-recipient deletes notification", "DELETE", "/notifications/1", expected=404, params={"userId": "1"})

        smoke.check("page size too large", "GET", "/users", expected=400, params={"pageSize": 500})
        smoke.check("candidate with bad phone", "POST", "/candidates", expected=400, json={"firstName": "X", "phone": "abc"})
        smoke.check("user update with null email", "PUT", "/users/2", expected=400, json={"email": None})
        smoke.check("unknown user", "GET", "/users/does-not-exist", expected=404)
        smoke.check("unknown route", "GET", "/does-not-exist", expected=404)

        smoke.check(
            "upload of unsupported type",
            "POST",
            "/files/upload",
            expected=400,
            files={"files": ("sample.bin", b"\x00\x01\x02", "application/octet-stream")},
        )
        smoke.check("upload without files", "POST", "/files/upload", expected=400, data={"category": "cv"})
        return smoke.failures


if __name__ == "__main__":
    raise SystemExit(1 if main() else 0)
