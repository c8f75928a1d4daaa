from fastapi.routing import APIRoute
from starlette.routing import Match

# Methods advertised for the routes; any other verb is served as well
ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


class AnyMethodRoute(APIRoute):
    """
    APIRoute that fires regardless of the HTTP verb (TRACE, PROPFIND, ...).

    Starlette only reports a partial match when the path matches and the
    method does not, so that case is promoted to a full match.
    """

    def matches(self, scope):
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope, receive, send):
        await self.app(scope, receive, send)
