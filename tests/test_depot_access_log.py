import logging

import pytest

from mallbots.depot.access_log import LoggedApplication, log_application_access
from mallbots.depot.application import (
    AssignShoppingList,
    CancelShoppingList,
    CompleteShoppingList,
    CreateShoppingList,
    GetShoppingList,
)
from mallbots.depot.domain import ShoppingListStatus, create_shopping

LOGGER_NAME = "tests.depot.access"


class RecordingApp:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail
        self.shopping = create_shopping("list-1", "order-1")

    def _record(self, name, arg):
        self.calls.append((name, arg))
        if self.fail:
            raise RuntimeError("boom")

    def create_shopping_list(self, cmd):
        self._record("create", cmd)

    def cancel_shopping_list(self, cmd):
        self._record("cancel", cmd)

    def assign_shopping_list(self, cmd):
        self._record("assign", cmd)

    def complete_shopping_list(self, cmd):
        self._record("complete", cmd)

    def get_shopping_list(self, query):
        self._record("get", query)
        return self.shopping


def messages(caplog):
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


@pytest.fixture
def logger(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    return logging.getLogger(LOGGER_NAME)


@pytest.mark.parametrize(
    "method, arg, name, label",
    [
        ("create_shopping_list", CreateShoppingList("list-1", "order-1"), "create", "CreateShoppingList"),
        ("cancel_shopping_list", CancelShoppingList("list-1"), "cancel", "CancelShoppingList"),
        ("assign_shopping_list", AssignShoppingList("list-1", "bot-1"), "assign", "AssignShoppingList"),
        ("complete_shopping_list", CompleteShoppingList("list-1"), "complete", "CompleteShoppingList"),
    ],
)
def test_commands_are_delegated_and_logged(caplog, logger, method, arg, name, label):
    app = RecordingApp()
    logged = log_application_access(app, logger)
    getattr(logged, method)(arg)
    assert app.calls == [(name, arg)]
    assert messages(caplog) == [f"--> Depot.{label}", f"<-- Depot.{label}"]


def test_get_returns_result_of_wrapped_app(caplog, logger):
    app = RecordingApp()
    logged = LoggedApplication(app, logger)
    result = logged.get_shopping_list(GetShoppingList("list-1"))
    assert result is app.shopping
    assert result.status is ShoppingListStatus.AVAILABLE
    assert messages(caplog) == ["--> Depot.GetShoppingList", "<-- Depot.GetShoppingList"]


def test_exit_is_logged_when_call_fails(caplog, logger):
    logged = log_application_access(RecordingApp(fail=True), logger)
    with pytest.raises(RuntimeError, match="boom"):
        logged.cancel_shopping_list(CancelShoppingList("list-1"))
    assert messages(caplog) == ["--> Depot.CancelShoppingList", "<-- Depot.CancelShoppingList"]