from __future__ import annotations

from textrain.rain.scheduler import FRAME_INTERVAL, Tick


def test_start_arms_single_daemon_timer(scheduler, timers):
    scheduler.start()
    assert scheduler.running
    assert len(timers) == 1
    t = timers[0]
    assert t.started and t.daemon
    assert t.interval == FRAME_INTERVAL == 0.08


def test_fire_posts_one_tick_without_rearming(scheduler, timers, posted):
    scheduler.start()
    timers[0].fire()
    assert posted == [Tick(scheduler.generation)]
    assert len(timers) == 1
    assert scheduler.accepts(posted[0])


def test_rearm_arms_exactly_one_more(scheduler, timers):
    scheduler.start()
    scheduler.rearm()
    assert len(timers) == 2


def test_stop_cancels_and_is_idempotent(scheduler, timers):
    scheduler.start()
    scheduler.stop()
    state = (scheduler.running, scheduler.generation, len(timers), timers[0].cancelled)
    scheduler.stop()
    assert (scheduler.running, scheduler.generation, len(timers), timers[0].cancelled) == state
    assert state[0] is False
    assert timers[0].cancelled


def test_stop_on_never_started_scheduler(scheduler, timers):
    scheduler.stop()
    assert not scheduler.running
    assert timers == []


def test_no_rearm_after_stop(scheduler, timers):
    scheduler.start()
    scheduler.stop()
    scheduler.rearm()
    assert len(timers) == 1


def test_in_flight_tick_rejected_after_stop(scheduler, timers, posted):
    scheduler.start()
    scheduler.stop()
    timers[0].fire()
    assert posted
    assert not scheduler.accepts(posted[0])


def test_restart_rejects_previous_generation(scheduler, timers, posted):
    scheduler.start()
    old = timers[0]
    scheduler.stop()
    scheduler.start()
    old.fire()
    timers[1].fire()
    stale, fresh = posted
    assert not scheduler.accepts(stale)
    assert scheduler.accepts(fresh)


def test_start_while_running_cancels_pending(scheduler, timers):
    scheduler.start()
    scheduler.start()
    assert timers[0].cancelled
    assert len(timers) == 2
    assert scheduler.running
