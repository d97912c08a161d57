"""Auth middleware - resolves the acting user from a bearer token or allows anonymous."""

import falcon.asgi

from docfork.domain.value_objects import Actor

ANONYMOUS = Actor(user_id="anonymous", display_name="Anonymous")


class AuthMiddleware:
    """Middleware that validates JWT and sets req.context.user to an Actor.

    A rejected token leaves req.context.user as None; resources answer 401.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from Authorization header."""
        auth = req.get_header("Authorization")
        if not auth:
            req.context.user = ANONYMOUS
            return
        if not auth.startswith("Bearer ") or not self._keycloak:
            req.context.user = None
            return
        req.context.user = self._keycloak.decode_token(auth[7:])
