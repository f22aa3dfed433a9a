"""Tests for event subscription and isolated emission."""

from __future__ import annotations

import unittest
from dataclasses import dataclass

from pluginbridge.bus.emitter import EventEmitter


class RecordingSink:
    """Diagnostic sink that keeps every reported error."""

    def __init__(self) -> None:
        self.errors: list[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)


@dataclass
class Recorder:
    """Callable dataclass; eq=True makes instances unhashable."""

    tag: str
    log: list

    def __call__(self, payload) -> None:
        self.log.append((self.tag, payload))

    def record(self, payload) -> None:
        self.log.append((self.tag, payload))


class AlwaysEqual:
    """Distinct listeners that compare and hash as equal."""

    def __init__(self, hits: list) -> None:
        self.hits = hits

    def __call__(self, payload) -> None:
        self.hits.append(id(self))

    def __eq__(self, other) -> bool:
        return True

    def __hash__(self) -> int:
        return 0


class EventEmitterTests(unittest.TestCase):
    """Validate listener sets and per-listener fault isolation."""

    def setUp(self) -> None:
        self.sink = RecordingSink()
        self.emitter = EventEmitter(self.sink)

    def test_emit_without_listeners_is_noop(self) -> None:
        self.emitter.emit("nothing", {"x": 1})
        self.assertEqual(self.sink.errors, [])

    def test_listener_receives_payload(self) -> None:
        received: list[dict] = []
        self.emitter.subscribe("evt", received.append)
        self.emitter.emit("evt", {"name": "a"})
        self.emitter.emit("other", {"name": "b"})
        self.assertEqual(received, [{"name": "a"}])

    def test_duplicate_subscription_fires_once(self) -> None:
        received: list[int] = []
        self.emitter.subscribe("evt", received.append)
        self.emitter.subscribe("evt", received.append)
        self.emitter.emit("evt", 1)
        self.assertEqual(received, [1])
        self.assertEqual(self.emitter.listener_count("evt"), 1)

    def test_failing_listener_is_isolated(self) -> None:
        received: list[int] = []

        def broken(payload):
            raise RuntimeError("listener broke")

        self.emitter.subscribe("evt", broken)
        self.emitter.subscribe("evt", received.append)
        self.emitter.emit("evt", 7)

        self.assertEqual(received, [7])
        self.assertEqual(len(self.sink.errors), 1)
        self.assertIn("evt", self.sink.errors[0])
        self.assertIn("listener broke", self.sink.errors[0])

    def test_unsubscribe_is_idempotent(self) -> None:
        received: list[int] = []
        self.emitter.subscribe("evt", received.append)
        self.emitter.unsubscribe("evt", received.append)
        self.emitter.unsubscribe("evt", received.append)
        self.emitter.unsubscribe("never-subscribed", received.append)
        self.emitter.emit("evt", 1)
        self.assertEqual(received, [])
        self.assertEqual(self.emitter.listener_count("evt"), 0)

    def test_subscribe_during_emit_waits_for_next_emission(self) -> None:
        received: list[str] = []

        def late(payload):
            received.append("late")

        def first(payload):
            received.append("first")
            self.emitter.subscribe("evt", late)

        self.emitter.subscribe("evt", first)
        self.emitter.emit("evt", None)
        self.assertEqual(received, ["first"])

        self.emitter.emit("evt", None)
        self.assertEqual(received, ["first", "first", "late"])

    def test_async_listener_result_is_discarded(self) -> None:
        called: list[bool] = []

        async def async_listener(payload):
            called.append(True)

        self.emitter.subscribe("evt", async_listener)
        self.emitter.emit("evt", None)
        self.assertEqual(called, [])
        self.assertEqual(len(self.sink.errors), 1)
        self.assertIn("must be synchronous", self.sink.errors[0])

    def test_unhashable_callable_listener(self) -> None:
        log: list[tuple[str, object]] = []
        recorder = Recorder("a", log)

        self.emitter.subscribe("evt", recorder)
        self.emitter.emit("evt", 1)
        self.emitter.unsubscribe("evt", recorder)
        self.emitter.emit("evt", 2)

        self.assertEqual(log, [("a", 1)])

    def test_equal_but_distinct_listeners_both_fire(self) -> None:
        hits: list[int] = []
        first = AlwaysEqual(hits)
        second = AlwaysEqual(hits)

        self.emitter.subscribe("evt", first)
        self.emitter.subscribe("evt", second)
        self.emitter.emit("evt", None)
        self.assertEqual(len(hits), 2)

        self.emitter.unsubscribe("evt", second)
        self.emitter.emit("evt", None)
        self.assertEqual(len(hits), 3)
        self.assertEqual(self.emitter.listener_count("evt"), 1)

    def test_bound_method_resubscription_is_deduplicated(self) -> None:
        log: list[tuple[str, object]] = []
        recorder = Recorder("m", log)

        self.emitter.subscribe("evt", recorder.record)
        self.emitter.subscribe("evt", recorder.record)
        self.emitter.emit("evt", 1)
        self.emitter.unsubscribe("evt", recorder.record)
        self.emitter.emit("evt", 2)

        self.assertEqual(log, [("m", 1)])


if __name__ == "__main__":
    unittest.main()
