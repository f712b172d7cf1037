"""
Tests for device discovery and selection.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from services.directory import Device, DeviceDirectory
from utils.exceptions import DiscoveryError, RequestInProgressError, SelectionError
from tests.conftest import LEFT, RIGHT


def make_directory(devices=None):
    client = AsyncMock()
    client.discover.return_value = list(devices if devices is not None else [LEFT, RIGHT])
    return DeviceDirectory(client), client


def test_device_json_round_trip():
    data = {"device_name": "CHEMION", "device_address": "11:22:33:44:55:66"}
    device = Device.from_json(data)
    assert device.name == "CHEMION"
    assert device.to_json() == data
    assert str(device) == "CHEMION (11:22:33:44:55:66)"


@pytest.mark.asyncio
async def test_discover_replaces_list():
    directory, client = make_directory()
    assert await directory.discover() == [LEFT, RIGHT]

    client.discover.return_value = [RIGHT]
    assert await directory.discover() == [RIGHT]
    assert directory.devices == [RIGHT]
    assert len(directory) == 1


@pytest.mark.asyncio
async def test_discover_clears_selection_even_for_same_devices():
    directory, _ = make_directory()
    await directory.discover()
    directory.select(1)
    assert directory.selected() == RIGHT

    await directory.discover()

    assert directory.devices == [LEFT, RIGHT]
    assert directory.selected() is None
    assert directory.selected_index is None


@pytest.mark.asyncio
async def test_discover_failure_leaves_no_selection():
    directory, client = make_directory()
    await directory.discover()
    directory.select(0)

    client.discover.side_effect = DiscoveryError("Couldn't get adapter")
    with pytest.raises(DiscoveryError, match="Couldn't get adapter"):
        await directory.discover()

    assert directory.selected() is None
    assert directory.devices == []


@pytest.mark.asyncio
async def test_select_bounds():
    directory, _ = make_directory()
    with pytest.raises(SelectionError):
        directory.select(0)

    await directory.discover()
    assert directory.select(0) == LEFT
    for index in (2, -1, "1", None):
        with pytest.raises(SelectionError):
            directory.select(index)
    # A rejected selection keeps the previous one
    assert directory.selected() == LEFT


@pytest.mark.asyncio
async def test_overlapping_discover_rejected():
    directory, client = make_directory()
    release = asyncio.Event()

    async def slow_discover():
        await release.wait()
        return [LEFT]

    client.discover.side_effect = slow_discover
    first = asyncio.create_task(directory.discover())
    for _ in range(3):
        await asyncio.sleep(0)

    with pytest.raises(RequestInProgressError):
        await directory.discover()

    release.set()
    assert await first == [LEFT]
    assert client.discover.await_count == 1
