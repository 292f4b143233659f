"""
Shared pytest fixtures and configuration for run-spine tests.

This module provides:
- Auto-marking of tests by directory
- structlog / settings reset between tests for isolation
- A fully-populated builder used by round-trip tests
"""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog

from runspine.core.settings import clear_settings_cache
from runspine.run import LogConfig, RestartPolicy, RunSpecBuilder, VolumeConfig, WaitConfig


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.path).relative_to(Path(__file__).parent)
        if test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.cli)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _isolate_logging_and_settings(monkeypatch: pytest.MonkeyPatch):
    """Each test starts with default structlog config and fresh settings."""
    for name in ("RUNSPINE_API_VERSION", "RUNSPINE_LOG_LEVEL", "RUNSPINE_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    clear_settings_cache()


@pytest.fixture
def full_builder() -> RunSpecBuilder:
    """A builder with every field set to a distinctive value."""
    return (
        RunSpecBuilder()
        .env({"JAVA_OPTS": "-Xmx512m", "MODE": "test"})
        .labels({"com.example.team": "build"})
        .env_property_file("src/main/docker/env.properties")
        .cmd("java -jar app.jar")
        .entrypoint(["/docker-entrypoint.sh", "--"])
        .domainname("example.com")
        .hostname("app")
        .user("1000:1000")
        .working_dir("/opt/app")
        .shm_size(67108864)
        .memory(536870912)
        .memory_swap(-1)
        .port_property_file("target/ports.properties")
        .net("bridge")
        .dns(["10.0.0.2", "10.0.0.1"])
        .dns_search(["corp.example.com"])
        .cap_add(["NET_ADMIN", "SYS_TIME"])
        .cap_drop(["MKNOD"])
        .extra_hosts(["db:10.0.0.9"])
        .links(["db:database", "cache"])
        .privileged(False)
        .ports(["tomcat.port:8080", "9000:9000", "+host.ip:jolokia.port:8778"])
        .naming_strategy("alias")
        .volumes(VolumeConfig(from_=["data-image"], bind=["/tmp/logs:/logs"]))
        .wait(WaitConfig(url="http://localhost:8080/health", time=20000))
        .log(LogConfig(prefix="APP", color="cyan"))
        .restart_policy(RestartPolicy(name="on-failure", retry=3))
        .skip("false")
    )
