import threading

from clishell.loopscheduler import LoopScheduler


def test_poll_one_runs_posted_task():
    s = LoopScheduler()
    done = []
    s.post(lambda: done.append("x"))
    assert s.poll_one() is True
    assert done == ["x"]


def test_poll_one_empty_returns_false():
    s = LoopScheduler()
    assert s.poll_one() is False


def test_tasks_run_in_fifo_order():
    s = LoopScheduler()
    done = []
    for n in range(5):
        s.post(lambda n=n: done.append(n))
    while s.poll_one():
        pass
    assert done == list(range(5))


def test_stop_prevents_execution():
    s = LoopScheduler()
    done = []
    s.post(lambda: done.append(1))
    s.stop()
    assert s.stopped() is True
    assert s.poll_one() is False
    assert s.exec_one() is False
    assert done == []


def test_run_until_stop_task():
    s = LoopScheduler()
    done = []
    s.post(lambda: done.append(1))
    s.post(lambda: done.append(2))
    s.post(s.stop)
    s.run()
    assert done == [1, 2]
    assert s.stopped() is True


def test_none_task_is_accepted():
    s = LoopScheduler()
    s.post(None)
    assert s.exec_one() is True


def test_exec_one_wakes_on_post_from_other_thread():
    s = LoopScheduler()
    done = []
    results = []
    worker = threading.Thread(target=lambda: results.append(s.exec_one()))
    worker.start()
    s.post(lambda: done.append("ran"))
    worker.join(timeout=5)
    assert results == [True]
    assert done == ["ran"]


def test_stop_wakes_blocked_run():
    s = LoopScheduler()
    worker = threading.Thread(target=s.run)
    worker.start()
    s.stop()
    worker.join(timeout=5)
    assert worker.is_alive() is False


def test_context_manager_stops():
    with LoopScheduler() as s:
        assert s.stopped() is False
    assert s.stopped() is True