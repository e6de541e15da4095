"""Tests for container wiring."""

from joke_board.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.joke_service.auth_gate is container.auth_gate
    assert container.session_codec.config.cookie_name == "RJ_session"
    assert container.login_service.accessor is container.session_accessor
