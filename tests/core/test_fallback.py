"""
Test suite for the degrade decorator.

System role: Verification of the adapter failure policy
"""

import logging

import pytest

from backend.core.fallback import degrade


class _Echo:
    def __init__(self, fail: bool) -> None:
        self.fail = fail

    @degrade(lambda self, text, **kwargs: f"fallback:{text}", operation="echo")
    async def echo(self, text: str, suffix: str = "") -> str:
        if self.fail:
            raise RuntimeError("boom")
        return text + suffix


class TestDegrade:
    """Test suite for degrade."""

    @pytest.mark.asyncio
    async def test_degrade_should_pass_through_success(self) -> None:
        assert await _Echo(fail=False).echo("hi", suffix="!") == "hi!"

    @pytest.mark.asyncio
    async def test_degrade_should_call_fallback_with_call_arguments(self) -> None:
        assert await _Echo(fail=True).echo("hi", suffix="!") == "fallback:hi"

    @pytest.mark.asyncio
    async def test_degrade_should_log_warning(self, caplog) -> None:
        # Act
        with caplog.at_level(logging.WARNING, logger="backend.core.fallback"):
            await _Echo(fail=True).echo("hi")

        # Assert
        assert "echo failed, using fallback: RuntimeError: boom" in caplog.text

    def test_degrade_should_preserve_function_name(self) -> None:
        assert _Echo.echo.__name__ == "echo"
