from __future__ import annotations

from flask import Flask

from ..common.http import bearer_token, fail, handle_errors, json_body, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    _, admin_required = make_guards(container.auth_service)

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    @handle_errors("logging in")
    def login():
        data = json_body()
        result = container.auth_service.login(data.get("username", ""), data.get("password", ""))
        return ok(**result.to_dict())

    @app.route("/api/auth/verify", methods=["POST"], endpoint="verify_token")
    def verify_token():
        token = json_body().get("token") or bearer_token()
        claims = container.auth_service.verify(token)
        if claims is None:
            return fail("Invalid or expired token", 401)
        return ok(user={"id": claims["id"], "username": claims["username"], "role": claims["role"]})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout(json_body().get("token") or bearer_token())
        return ok()

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @admin_required
    @handle_errors("listing users")
    def list_users():
        return ok(users=[u.to_public() for u in container.user_service.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @admin_required
    @handle_errors("creating user")
    def create_user():
        data = json_body()
        user_id = container.user_service.create_user(
            username=data.get("username", ""),
            password=data.get("password", ""),
            role=data.get("role", "user"),
        )
        return ok(201, id=user_id)

    @app.route("/api/users/<int:user_id>", methods=["PUT"], endpoint="update_user")
    @admin_required
    @handle_errors("updating user")
    def update_user(user_id: int):
        data = json_body()
        user = container.user_service.update_user(user_id, username=data.get("username", ""), role=data.get("role", ""))
        return ok(user=user.to_public())

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @admin_required
    @handle_errors("deleting user")
    def delete_user(user_id: int):
        container.user_service.delete_user(user_id)
        return ok()
