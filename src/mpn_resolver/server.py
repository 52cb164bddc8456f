"""MPN Resolver MCP Server - classify part numbers and check interchangeability."""

import logging
import time
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from . import __version__
from . import engine
from .config import HTTP_PORT, MAX_MPN_LENGTH, MAX_TEXT_LENGTH, RATE_LIMIT_REQUESTS
from .types import ComponentType

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    """Build the pattern catalog on startup (not on first request)."""
    catalog = engine.get_catalog()
    logger.info(f"Catalog ready: {len(catalog.registry)} patterns")
    yield


# Create MCP server
mcp = FastMCP(
    name="mpn-resolver",
    instructions="Classifies electronic component manufacturer part numbers (MPNs), extracts attributes encoded in them (series, package, pin count, value, ...) and checks whether one part can replace another. No auth required. All tools are offline and deterministic.",
    lifespan=lifespan,
)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-IP rate limiting over a sliding 60 second window.

    At most MAX_TRACKED_IPS addresses are tracked; stale ones are dropped
    every minute, and new clients are refused while the table is full.
    """

    MAX_TRACKED_IPS = 10_000
    WINDOW_SECONDS = 60

    def __init__(self, app, requests_per_minute: int = RATE_LIMIT_REQUESTS):
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.request_counts: dict[str, list[float]] = {}
        self._last_cleanup = time.time()

    def _get_client_ip(self, request) -> str:
        """Rightmost X-Forwarded-For entry (set by the last proxy), else the peer address."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ips = [ip.strip() for ip in forwarded.split(",")]
            return ips[-1] if ips else "unknown"
        return request.client.host if request.client else "unknown"

    def _cleanup_stale_ips(self, now: float) -> None:
        window_start = now - self.WINDOW_SECONDS
        for ip in [ip for ip, stamps in self.request_counts.items() if not stamps or stamps[-1] < window_start]:
            del self.request_counts[ip]

    def is_limited(self, client_ip: str, now: float | None = None) -> bool:
        """Record one request from client_ip; True if it must be refused."""
        now = time.time() if now is None else now
        window_start = now - self.WINDOW_SECONDS

        if now - self._last_cleanup > self.WINDOW_SECONDS:
            self._cleanup_stale_ips(now)
            self._last_cleanup = now

        if client_ip not in self.request_counts:
            if len(self.request_counts) >= self.MAX_TRACKED_IPS:
                self._cleanup_stale_ips(now)
                if len(self.request_counts) >= self.MAX_TRACKED_IPS:
                    return True
            self.request_counts[client_ip] = [now]
            return False

        recent = [t for t in self.request_counts[client_ip] if t > window_start]
        if len(recent) >= self.requests_per_minute:
            self.request_counts[client_ip] = recent
            return True
        recent.append(now)
        self.request_counts[client_ip] = recent
        return False

    async def dispatch(self, request, call_next):
        if request.url.path == "/health":
            return await call_next(request)

        if self.is_limited(self._get_client_ip(request)):
            return JSONResponse(
                status_code=429,
                content={"error": "Rate limit exceeded", "retry_after": self.WINDOW_SECONDS},
                headers={"Retry-After": str(self.WINDOW_SECONDS)},
            )
        return await call_next(request)


def _check_mpn(mpn: str | None, field: str = "mpn") -> str | None:
    """Validation error message for an MPN argument, or None if it is usable."""
    if not mpn or not mpn.strip():
        return f"{field} is required"
    if len(mpn) > MAX_MPN_LENGTH:
        return f"{field} too long (max {MAX_MPN_LENGTH} characters)"
    return None


# Tools

@mcp.tool(
    annotations=ToolAnnotations(
        title="Classify MPN",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def classify_mpn(mpn: str, manufacturer: str | None = None) -> dict:
    """Classify a manufacturer part number into a component type.

    Args:
        mpn: Manufacturer part number (e.g., "PMBT2222A,215", "R5F100LEAFB#30")
        manufacturer: Optional manufacturer hint (e.g., "Nexperia", "NXP", "TI")

    Returns:
        component_type, base_type, winning manufacturer and sub-variant tags.
        component_type is "UNKNOWN" when no pattern matches.
    """
    error = _check_mpn(mpn)
    if error:
        return {"error": error}
    return engine.resolve(mpn, manufacturer).to_dict()


@mcp.tool(
    annotations=ToolAnnotations(
        title="Extract MPN Attributes",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def extract_mpn_attributes(mpn: str, manufacturer: str | None = None) -> dict:
    """Read the attributes encoded in a part number.

    Args:
        mpn: Manufacturer part number (e.g., "61300211121", "BZX84-C5V1")
        manufacturer: Optional manufacturer hint

    Returns:
        Classification plus an attributes map (series, package_code, pin_count,
        value, tolerance, ...). Attributes that cannot be read are omitted.
    """
    error = _check_mpn(mpn)
    if error:
        return {"error": error}
    record = engine.describe(mpn, manufacturer)
    return {
        "mpn": record.mpn,
        "normalized": record.normalized,
        "component_type": record.component_type.name,
        "manufacturer": record.manufacturer,
        "attributes": dict(record.attributes),
    }


@mcp.tool(
    annotations=ToolAnnotations(
        title="Check Interchangeable",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def check_interchangeable(mpn_a: str, mpn_b: str, component_type: str | None = None) -> dict:
    """Check whether mpn_b can be used where mpn_a is specified.

    Logic ICs and RF parts are directional: an HCT part may replace an HC
    part but not the other way round.

    Args:
        mpn_a: The specified (required) part
        mpn_b: The candidate replacement
        component_type: Category to compare as (e.g., "MOSFET", "resistor").
            Defaults to the detected type of mpn_a.

    Returns:
        compatible (bool), score (0-1) and the reasons behind the verdict.
    """
    for value, field in ((mpn_a, "mpn_a"), (mpn_b, "mpn_b")):
        error = _check_mpn(value, field)
        if error:
            return {"error": error}

    if component_type:
        try:
            resolved_type = ComponentType.from_name(component_type)
        except ValueError as e:
            return {"error": str(e)}
    else:
        resolved_type = engine.classify(mpn_a)

    verdict = engine.are_interchangeable(mpn_a, mpn_b, resolved_type)
    return {
        "mpn_a": mpn_a,
        "mpn_b": mpn_b,
        "component_type": resolved_type.name,
        **verdict.to_dict(),
    }


@mcp.tool(
    annotations=ToolAnnotations(
        title="Find MPN in Text",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def find_mpn_in_text(text: str) -> dict:
    """Find the first recognizable part number in free text (BOM line, comment).

    Args:
        text: Free text (e.g., "U3 P/N: LM358DR; op-amp")

    Returns:
        mpn (or null) and its classification when one is found.
    """
    if not text or not text.strip():
        return {"error": "text is required"}
    if len(text) > MAX_TEXT_LENGTH:
        return {"error": f"text too long (max {MAX_TEXT_LENGTH} characters)"}

    mpn = engine.find_mpn_in_text(text)
    if mpn is None:
        return {"mpn": None}
    return {"mpn": mpn, "component_type": engine.classify(mpn).name}


# Health check endpoint
async def health(request):
    return JSONResponse({
        "status": "healthy",
        "service": "mpn-resolver",
        "version": __version__,
    })


# Create ASGI app
def create_app():
    """Create the ASGI application."""
    middleware = [
        Middleware(RateLimitMiddleware, requests_per_minute=RATE_LIMIT_REQUESTS),
    ]

    app = mcp.http_app(
        path="/mcp",
        middleware=middleware,
        transport="streamable-http",
        stateless_http=True,
    )

    app.routes.append(Route("/health", health))

    return app


app = create_app()


class _HealthFilterLog(logging.Filter):
    """Suppress /health access logs from container healthchecks."""

    def filter(self, record: logging.LogRecord) -> bool:
        return "/health" not in record.getMessage()


def main():
    """Run the server."""
    import uvicorn

    logging.getLogger("uvicorn.access").addFilter(_HealthFilterLog())

    uvicorn.run(
        "mpn_resolver.server:app",
        host="0.0.0.0",
        port=HTTP_PORT,
        lifespan="on",
    )


if __name__ == "__main__":
    main()
