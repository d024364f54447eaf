"""Tests for the status polling loop with backoff."""

import threading
from unittest.mock import MagicMock

import pytest

from bosonnlp.exceptions import (
    TaskCancelledError,
    TaskError,
    TaskNotFoundError,
    TaskTimeoutError,
)
from bosonnlp.tasks.cluster import ClusterTask


def _make_task(
    transport: MagicMock,
    statuses: list[str],
    *,
    poll_interval: float = 1.0,
    max_poll_interval: float = 64.0,
) -> ClusterTask:
    """Create a task whose successive status checks report the given values."""
    transport.get.side_effect = [
        {"_id": "t1", "status": s, "count": 1} for s in statuses
    ]
    return ClusterTask(
        transport,
        "t1",
        poll_interval=poll_interval,
        max_poll_interval=max_poll_interval,
    )


def _sleeps(mock_sleep: MagicMock) -> list[float]:
    return [c.args[0] for c in mock_sleep.call_args_list]


class TestWaitCompletion:
    def test_first_check_is_immediate(self, mock_transport: MagicMock, mock_sleep: MagicMock) -> None:
        task = _make_task(mock_transport, ["done"])

        task.wait()

        assert mock_transport.get.call_count == 1
        assert _sleeps(mock_sleep) == [0.0]

    def test_zero_interval_checks_immediately(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(
            mock_transport, ["received", "running", "running", "done"], poll_interval=0.0
        )

        task.wait()

        assert mock_transport.get.call_count == 4
        assert _sleeps(mock_sleep) == [0.0, 0.0, 0.0, 0.0]

    def test_polls_status_endpoint(self, mock_transport: MagicMock, mock_sleep: MagicMock) -> None:
        task = _make_task(mock_transport, ["running", "done"])

        task.wait()

        assert all(c.args == ("/cluster/status/t1",) for c in mock_transport.get.call_args_list)


class TestWaitBackoff:
    def test_doubles_every_third_check_up_to_cap(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(mock_transport, ["running"] * 22 + ["done"])

        task.wait()

        assert _sleeps(mock_sleep) == (
            [0.0] + [1.0] * 2 + [2.0] * 3 + [4.0] * 3 + [8.0] * 3
            + [16.0] * 3 + [32.0] * 3 + [64.0] * 5
        )

    def test_never_exceeds_max_interval(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(
            mock_transport, ["running"] * 6 + ["done"], poll_interval=48.0
        )

        task.wait()

        assert _sleeps(mock_sleep) == [0.0] + [48.0] * 2 + [64.0] * 4


class TestWaitTimeout:
    def test_times_out_at_check_boundary(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(mock_transport, ["running"] * 10)

        with pytest.raises(TaskTimeoutError) as exc_info:
            task.wait(timeout=10)

        assert exc_info.value.task_id == "t1"
        # elapsed after each check: 0, 1, 2, 4, 6, 8, 12
        assert _sleeps(mock_sleep) == [0.0, 1.0, 1.0, 2.0, 2.0, 2.0, 4.0]
        assert mock_transport.get.call_count == 7

    def test_done_on_last_check_before_timeout(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(mock_transport, ["running"] * 6 + ["done"])

        task.wait(timeout=10)

        assert mock_transport.get.call_count == 7

    def test_first_interval_capped_by_timeout(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(mock_transport, ["running", "running"])

        with pytest.raises(TaskTimeoutError):
            task.wait(timeout=0.5)

        assert _sleeps(mock_sleep) == [0.0, 0.5]

    def test_zero_timeout_checks_once(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(mock_transport, ["running"])

        with pytest.raises(TaskTimeoutError):
            task.wait(timeout=0)

        assert mock_transport.get.call_count == 1


class TestWaitFailures:
    def test_error_status_keeps_polling(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(mock_transport, ["error", "error", "done"])

        task.wait()

        assert mock_transport.get.call_count == 3

    def test_error_status_raises_when_requested(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(mock_transport, ["running", "error", "done"])

        with pytest.raises(TaskError) as exc_info:
            task.wait(fail_on_error=True)

        assert type(exc_info.value) is TaskError
        assert mock_transport.get.call_count == 2

    def test_not_found_stops_polling(
        self, mock_transport: MagicMock, mock_sleep: MagicMock
    ) -> None:
        task = _make_task(mock_transport, ["running", "not found", "done"])

        with pytest.raises(TaskNotFoundError):
            task.wait(timeout=100)

        assert mock_transport.get.call_count == 2


class TestWaitCancellation:
    def test_cancelled_before_first_check(self, mock_transport: MagicMock) -> None:
        task = _make_task(mock_transport, ["done"])
        cancel = threading.Event()
        cancel.set()

        with pytest.raises(TaskCancelledError) as exc_info:
            task.wait(cancel=cancel)

        assert exc_info.value.task_id == "t1"
        mock_transport.get.assert_not_called()

    def test_unset_event_sleeps_through_it(self, mock_transport: MagicMock) -> None:
        task = _make_task(mock_transport, ["running", "done"])
        cancel = MagicMock(spec=threading.Event)
        cancel.wait.return_value = False

        task.wait(cancel=cancel)

        assert [c.args[0] for c in cancel.wait.call_args_list] == [0.0, 1.0]
        assert mock_transport.get.call_count == 2
