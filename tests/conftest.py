"""Shared fixtures for dbt-simulator tests."""

from datetime import datetime, timezone

import pytest

from dbt_simulator.config import SimConfig
from dbt_simulator.interpreter import Interpreter, InterpreterState
from dbt_simulator.vfs import VirtualFileSystem

FIXED_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_TIME


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def interpreter() -> Interpreter:
    return Interpreter(SimConfig(), clock=fixed_clock)


@pytest.fixture
def orders_vfs() -> VirtualFileSystem:
    """Two models: a staging model over a source and a mart that refs it."""
    return VirtualFileSystem(
        {
            "dbt_project.yml": "name: shop\n",
            "models/staging/stg_orders.sql": (
                "select order_id, status\n"
                "from {{ source('shop', 'orders') }}\n"
            ),
            "models/marts/fct_orders.sql": (
                "{{ config(materialized='table') }}\n"
                "select * from {{ ref('stg_orders') }}\n"
            ),
        }
    )


@pytest.fixture
def orders_state(interpreter: Interpreter, orders_vfs: VirtualFileSystem) -> InterpreterState:
    return interpreter.initial_state(orders_vfs)
