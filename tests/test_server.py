"""Tests for the MCP tool surface."""

import json
import logging
import time

import pytest
from fastmcp import Client

from mpn_resolver import __version__
from mpn_resolver.config import MAX_MPN_LENGTH, MAX_TEXT_LENGTH
from mpn_resolver.server import RateLimitMiddleware, _HealthFilterLog, health, mcp


async def _call(tool: str, arguments: dict) -> dict:
    async with Client(mcp) as client:
        result = await client.call_tool(tool, arguments)
    return result.structured_content


@pytest.mark.asyncio
class TestTools:
    async def test_tools_registered(self):
        async with Client(mcp) as client:
            tools = {tool.name for tool in await client.list_tools()}
        assert tools == {"classify_mpn", "extract_mpn_attributes", "check_interchangeable", "find_mpn_in_text"}

    async def test_classify(self):
        result = await _call("classify_mpn", {"mpn": "PMBT2222A,215"})
        assert result["component_type"] == "TRANSISTOR"
        assert result["normalized"] == "PMBT2222A"
        assert result["manufacturer"] == "nexperia"

    async def test_classify_with_hint(self):
        result = await _call("classify_mpn", {"mpn": "BAV99", "manufacturer": "NXP"})
        assert result["manufacturer"] == "nexperia"

    async def test_classify_unknown(self):
        result = await _call("classify_mpn", {"mpn": "NOT-A-PART"})
        assert result["component_type"] == "UNKNOWN"

    async def test_classify_rejects_long_input(self):
        result = await _call("classify_mpn", {"mpn": "X" * (MAX_MPN_LENGTH + 1)})
        assert "error" in result

    async def test_classify_rejects_blank(self):
        result = await _call("classify_mpn", {"mpn": "  "})
        assert result == {"error": "mpn is required"}

    async def test_extract_attributes(self):
        result = await _call("extract_mpn_attributes", {"mpn": "61300211121"})
        assert result["component_type"] == "CONNECTOR"
        assert result["attributes"]["pin_count"] == "2"
        assert result["attributes"]["series"] == "61300"

    async def test_check_interchangeable(self):
        result = await _call("check_interchangeable", {"mpn_a": "PSMN3R5-30YLT", "mpn_b": "PSMN3R5-30YLU"})
        assert result["component_type"] == "MOSFET"
        assert result["compatible"] is True
        assert result["score"] == pytest.approx(1.0)
        assert result["reasons"]

    async def test_check_interchangeable_directional(self):
        forward = await _call("check_interchangeable", {
            "mpn_a": "74HC00D", "mpn_b": "74HCT00D", "component_type": "logic_ic",
        })
        reverse = await _call("check_interchangeable", {
            "mpn_a": "74HCT00D", "mpn_b": "74HC00D", "component_type": "logic_ic",
        })
        assert forward["compatible"] is True
        assert reverse["compatible"] is False

    async def test_check_interchangeable_bad_type(self):
        result = await _call("check_interchangeable", {
            "mpn_a": "BAV99", "mpn_b": "BAT54", "component_type": "FLUX_CAPACITOR",
        })
        assert "Unknown component type" in result["error"]

    async def test_check_interchangeable_missing_mpn(self):
        result = await _call("check_interchangeable", {"mpn_a": "BAV99", "mpn_b": ""})
        assert result == {"error": "mpn_b is required"}

    async def test_find_mpn_in_text(self):
        result = await _call("find_mpn_in_text", {"text": "U3 P/N: LM358DR; op-amp"})
        assert result == {"mpn": "LM358DR", "component_type": "OPAMP"}

    async def test_find_mpn_in_text_none(self):
        assert await _call("find_mpn_in_text", {"text": "hello world"}) == {"mpn": None}

    async def test_find_mpn_in_text_too_long(self):
        result = await _call("find_mpn_in_text", {"text": "a" * (MAX_TEXT_LENGTH + 1)})
        assert "error" in result


@pytest.mark.asyncio
async def test_health():
    response = await health(None)
    assert json.loads(response.body) == {
        "status": "healthy",
        "service": "mpn-resolver",
        "version": __version__,
    }


class TestRateLimit:
    def _middleware(self, limit: int) -> RateLimitMiddleware:
        async def app(scope, receive, send):
            pass
        return RateLimitMiddleware(app, requests_per_minute=limit)

    def test_limit_per_ip(self):
        limiter = self._middleware(2)
        now = time.time()
        assert limiter.is_limited("1.2.3.4", now) is False
        assert limiter.is_limited("1.2.3.4", now + 1) is False
        assert limiter.is_limited("1.2.3.4", now + 2) is True
        assert limiter.is_limited("5.6.7.8", now + 2) is False

    def test_window_expires(self):
        limiter = self._middleware(1)
        now = time.time()
        assert limiter.is_limited("1.2.3.4", now) is False
        assert limiter.is_limited("1.2.3.4", now + 1) is True
        assert limiter.is_limited("1.2.3.4", now + 120) is False

    def test_tracked_ip_cap(self):
        limiter = self._middleware(10)
        limiter.MAX_TRACKED_IPS = 2
        now = time.time()
        assert limiter.is_limited("a", now) is False
        assert limiter.is_limited("b", now) is False
        assert limiter.is_limited("c", now) is True
        assert limiter.is_limited("a", now) is False


class TestHealthFilter:
    def _record(self, message: str):
        return logging.LogRecord("uvicorn.access", logging.INFO, __file__, 1, message, None, None)

    def test_filters_health(self):
        assert _HealthFilterLog().filter(self._record('"GET /health HTTP/1.1" 200')) is False

    def test_keeps_other_requests(self):
        assert _HealthFilterLog().filter(self._record('"POST /mcp HTTP/1.1" 200')) is True
