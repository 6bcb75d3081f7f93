"""
Unit tests for store-call timeout and connectivity mapping
"""
import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from travel_hub.core.exceptions import ErrorCode, NetworkError, NotFoundError, RequestTimeoutError
from travel_hub.core.store_guard import run_store_call, store_call


@pytest.mark.asyncio
async def test_result_is_passed_through():
    async def fetch(value):
        return value * 2

    assert await run_store_call("fetch", fetch, 21) == 42


@pytest.mark.asyncio
async def test_timeout_maps_to_request_timeout():
    async def slow():
        await asyncio.sleep(1)

    with pytest.raises(RequestTimeoutError) as exc_info:
        await run_store_call("fetch_groups", slow, timeout_seconds=0.01)

    assert exc_info.value.status_code == 504
    assert exc_info.value.error_code == ErrorCode.REQUEST_TIMEOUT


@pytest.mark.asyncio
async def test_connectivity_failure_maps_to_network_error():
    async def unreachable():
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("refused"))

    with pytest.raises(NetworkError) as exc_info:
        await run_store_call("fetch_groups", unreachable)

    assert exc_info.value.status_code == 503
    assert isinstance(exc_info.value.__cause__, OperationalError)


@pytest.mark.asyncio
async def test_domain_errors_propagate_unchanged():
    class Store:
        @store_call("get_group")
        async def get_group(self, group_id):
            raise NotFoundError("Travel group", group_id)

    with pytest.raises(NotFoundError):
        await Store().get_group("missing")
