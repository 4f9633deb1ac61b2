"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 10) -> AsyncConnectionPool:
    """Create the storeadmin connection pool, unopened.

    PoolLifespanMiddleware opens it on ASGI startup. Connections are checked
    before being handed out so a restarted database does not fail the first
    requests after it comes back.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        name="storeadmin",
        check=AsyncConnectionPool.check_connection,
        open=False,
    )
