"""Tests for Session command submission."""

import asyncio

import pytest

from dbt_simulator.interpreter import Session


@pytest.fixture
def session(interpreter, orders_state) -> Session:
    return Session(interpreter, orders_state)


class TestSession:
    """Tests for the single-writer session."""

    @pytest.mark.asyncio
    async def test_submit_threads_state(self, session) -> None:
        await session.submit("cd models")
        result = await session.submit("pwd")
        assert result.output == "/dbt-project/models\n"
        assert session.state.working_directory == "/dbt-project/models"

    @pytest.mark.asyncio
    async def test_compile_updates_vfs(self, session, orders_state) -> None:
        await session.submit("dbt compile")
        assert "target/manifest.json" in session.state.vfs
        assert "target/manifest.json" not in orders_state.vfs

    @pytest.mark.asyncio
    async def test_failed_command_keeps_state(self, session, orders_state) -> None:
        result = await session.submit("cd /does-not-exist")
        assert result.exit_code == 1
        assert session.state == orders_state

    @pytest.mark.asyncio
    async def test_submission_while_busy_is_ignored(self, session) -> None:
        first, second = await asyncio.gather(
            session.submit("cd models"),
            session.submit("cd models/marts"),
        )
        assert first is not None and first.ok
        assert second is None
        assert session.state.working_directory == "/dbt-project/models"
        assert not session.busy

    @pytest.mark.asyncio
    async def test_history(self, session) -> None:
        for line in ["pwd", "", "ls", "pwd"]:
            await session.submit(line)
        assert session.history == ["ls", "pwd"]
