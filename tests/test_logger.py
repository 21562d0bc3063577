import logging

from sharekit.core.logger import (
    configure_root_logger,
    current_action_id,
    get_logger,
    push_action_id,
    reset_action_id,
)


def test_push_and_reset_action_id():
    assert current_action_id() == "-"

    token = push_action_id("act-1")
    assert current_action_id() == "act-1"

    reset_action_id(token)
    assert current_action_id() == "-"


def test_push_empty_action_id_is_noop():
    assert push_action_id(None) is None
    assert push_action_id("") is None
    reset_action_id(None)
    assert current_action_id() == "-"


def test_configure_root_logger_is_idempotent():
    configure_root_logger("DEBUG")
    handlers_before = list(logging.getLogger().handlers)

    configure_root_logger("WARNING")

    assert logging.getLogger().handlers == handlers_before
    assert logging.getLogger("sharekit").level == logging.WARNING


def test_get_logger_is_namespaced():
    assert get_logger("sharekit.dispatcher").name == "sharekit.dispatcher"
    assert get_logger().name == "sharekit"
