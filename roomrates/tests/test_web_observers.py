import unittest
from datetime import date
from roomrates.events.Event_Bus import EventBus, OVERLAY_CELL_EDITED, CATALOG_CHANGED, UI_POINTER_DOWN
from roomrates.events.web_observers import EventLog


class TestEventLog(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.log = EventLog(max_events=3).start(self.bus)

    def test_start_is_idempotent(self):
        self.log.start(self.bus)
        self.assertEqual(self.bus.subscriber_count(CATALOG_CHANGED), 1)

    def test_records_and_serializes_dates(self):
        self.bus.publish(OVERLAY_CELL_EDITED, {"week_start": date(2024, 3, 11), "room_index": 0, "value": 5})
        events = self.log.get_events()["events"]
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0]["type"], OVERLAY_CELL_EDITED)
        self.assertEqual(events[0]["week_start"], "2024-03-11")

    def test_ignores_ui_events(self):
        self.bus.publish(UI_POINTER_DOWN, {"inside": False})
        self.assertEqual(self.log.get_events()["events"], [])

    def test_cursor_and_ring_buffer(self):
        for i in range(5):
            self.bus.publish(CATALOG_CHANGED, {"action": "add_room", "room_index": i})
        result = self.log.get_events()
        self.assertEqual([e["id"] for e in result["events"]], [3, 4, 5])
        self.assertEqual(result["next_cursor"], 5)
        self.assertEqual([e["id"] for e in self.log.get_events(since=4)["events"]], [5])
        self.assertEqual(self.log.get_events(since=5), {"events": [], "next_cursor": 5})

    def test_failing_subscriber_does_not_stop_delivery(self):
        def broken(name, payload):
            raise RuntimeError("boom")
        bus = EventBus()
        bus.subscribe(CATALOG_CHANGED, broken)
        log = EventLog().start(bus)
        with self.assertLogs("roomrates.events.Event_Bus", level="ERROR"):
            bus.publish(CATALOG_CHANGED, {"action": "delete_room"})
        self.assertEqual(len(log.get_events()["events"]), 1)


if __name__ == '__main__':
    unittest.main()
