"""Tests for runspine.run.networking: classification of the ``net`` token."""

from __future__ import annotations

import pytest

from runspine.run.networking import NetworkingMode, NetworkMode


class TestParse:
    @pytest.mark.parametrize("token", [None, "", "   ", "default"])
    def test_default(self, token):
        mode = NetworkingMode.parse(token)
        assert mode.mode is NetworkMode.DEFAULT
        assert mode.is_default
        assert not mode.is_custom_network
        assert mode.name is None

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("bridge", NetworkMode.BRIDGE), ("host", NetworkMode.HOST), ("none", NetworkMode.NONE)],
    )
    def test_standard_modes(self, token, expected):
        mode = NetworkingMode.parse(token)
        assert mode.mode is expected
        assert mode.is_standard
        assert not mode.is_custom_network

    def test_container_reference(self):
        mode = NetworkingMode.parse("container:foo")
        assert mode.is_container
        assert mode.container_name == "foo"
        assert mode.network_name is None
        assert not mode.is_custom_network

    def test_custom_network_plain_token(self):
        mode = NetworkingMode.parse("my-custom-net")
        assert mode.is_custom_network
        assert mode.network_name == "my-custom-net"
        assert mode.container_name is None

    def test_custom_prefix_is_stripped(self):
        mode = NetworkingMode.parse("custom:backend")
        assert mode.is_custom_network
        assert mode.network_name == "backend"

    @pytest.mark.parametrize("token", ["container:", "custom:", "container:  "])
    def test_prefix_without_name_is_default(self, token):
        assert NetworkingMode.parse(token).is_default

    def test_surrounding_whitespace_ignored(self):
        assert NetworkingMode.parse("  host ").mode is NetworkMode.HOST

    def test_reserved_tokens_are_case_sensitive(self):
        # The runtime treats "Bridge" as a user-defined network name.
        assert NetworkingMode.parse("Bridge").is_custom_network


class TestToDocker:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            (None, None),
            ("bridge", "bridge"),
            ("none", "none"),
            ("container:db", "container:db"),
            ("custom:backend", "backend"),
            ("overlay-1", "overlay-1"),
        ],
    )
    def test_round_trip_token(self, token, expected):
        assert NetworkingMode.parse(token).to_docker() == expected

    def test_str_of_default(self):
        assert str(NetworkingMode.parse(None)) == "default"
