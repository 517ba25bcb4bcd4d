import unittest
from datetime import date, timedelta
from roomrates.domain.RatePlan import PlanTemplate, RatePlanDetails
from roomrates.domain.RoomCatalog import RoomCatalog
from roomrates.events.Event_Bus import CALENDAR_WEEK_CHANGED
from roomrates.infra.Room_Repository import load_room_templates
from roomrates.logic.calendar.week import LAST_WEEK_START
from roomrates.logic.session import CalendarSession, CatalogMissingError
from roomrates.logic.synthesis.generator import synthesize_prices, synthesize_room

TODAY = date(2024, 3, 15)
WEEK = date(2024, 3, 11)


class TestCalendarSession(unittest.TestCase):

    def setUp(self):
        self.catalog = RoomCatalog(load_room_templates())
        self.session = CalendarSession(self.catalog, today=lambda: TODAY)

    def test_requires_catalog(self):
        with self.assertRaises(CatalogMissingError):
            CalendarSession(None)

    def test_starts_on_monday_of_today(self):
        self.assertEqual(self.session.week_start, WEEK)

    def test_days_headers(self):
        days = self.session.days()
        self.assertEqual([d["day_name"] for d in days], ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"])
        self.assertEqual(days[0]["label"], "11 Mar")
        self.assertEqual([d["is_today"] for d in days], [False, False, False, False, True, False, False])

    def test_navigation(self):
        self.assertEqual(self.session.go_to_next_week(), date(2024, 3, 18))
        self.assertEqual(self.session.go_to_prev_week(), WEEK)
        self.assertEqual(self.session.select_date(date(2024, 2, 29)), date(2024, 2, 26))
        self.assertEqual(self.session.go_to_today(), WEEK)

    def test_navigation_stops_at_calendar_edges(self):
        last = self.session.select_date(date.max)
        self.assertEqual(last, LAST_WEEK_START)
        self.assertEqual(self.session.go_to_next_week(), last)
        self.assertLessEqual(self.session.week_start + timedelta(days=6), date.max)
        self.assertEqual(len(self.session.rooms()[0].inventory), 7)

        self.assertEqual(self.session.select_date(date.min), date.min)
        self.assertEqual(self.session.go_to_prev_week(), date.min)

    def test_month_view_past_last_week_raises(self):
        with self.assertRaises(ValueError):
            self.session.month_view(9999, 12)

    def test_rooms_match_catalog(self):
        rooms = self.session.rooms()
        self.assertEqual([r.name for r in rooms], [t.name for t in self.catalog.list_rooms()])
        self.assertEqual(rooms[0], synthesize_room(WEEK, 0, self.catalog.list_rooms()[0]))

    def test_edit_discarded_after_week_round_trip(self):
        self.session.set_inventory_cell(0, 3, "available", 77)
        self.assertEqual(self.session.get_effective_room(0).inventory[3].available, 77)
        self.session.go_to_next_week()
        self.session.go_to_prev_week()
        room = self.session.get_effective_room(0)
        self.assertEqual(room, synthesize_room(WEEK, 0, self.catalog.list_rooms()[0]))

    def test_sunday_price_restored_after_shift(self):
        baseline = self.session.get_effective_room(0).rate_plans[0].prices[6]
        self.assertEqual(baseline, 6186)
        self.assertEqual(self.session.set_price_cell(0, 0, 6, 7000), 7000)
        self.assertEqual(self.session.get_effective_room(0).rate_plans[0].prices[6], 7000)
        self.session.go_to_next_week()
        self.session.go_to_prev_week()
        self.assertEqual(self.session.get_effective_room(0).rate_plans[0].prices[6], baseline)

    def test_reselecting_same_week_keeps_edits(self):
        self.session.set_inventory_cell(1, 0, "sold", 12)
        self.session.select_date(date(2024, 3, 13))
        self.assertEqual(self.session.get_effective_room(1).inventory[0].sold, 12)

    def test_week_change_event(self):
        seen = []
        self.catalog.event_bus.subscribe(CALENDAR_WEEK_CHANGED, lambda name, payload: seen.append(payload))
        self.session.go_to_next_week()
        self.session.select_date(date(2024, 3, 20))
        self.assertEqual(seen, [{"previous": WEEK, "week_start": date(2024, 3, 18)}])

    def test_catalog_changes_show_up_on_next_render(self):
        self.catalog.delete_room(0)
        rooms = self.session.rooms()
        self.assertEqual(rooms[0].name, "Superior Suite")
        # room index 0 is now re-derived from the current catalog
        self.assertEqual(rooms[0], synthesize_room(WEEK, 0, self.catalog.list_rooms()[0]))

    def test_new_plan_gets_prices(self):
        self.catalog.add_plan(0, PlanTemplate.from_details(RatePlanDetails(name="Promo", base_rate=3000)))
        plans = self.session.get_effective_room(0).rate_plans
        self.assertEqual(plans[-1].name, "Promo")
        self.assertEqual(plans[-1].prices, synthesize_prices(WEEK, 0, 5, 3000))

    def test_month_view(self):
        view = self.session.month_view(2024, 2)
        self.assertEqual(view["title"], "February 2024")
        self.assertEqual(view["day_labels"][0], "Mo")
        self.assertEqual(len(view["cells"]), 35)
        self.assertFalse(any(c["in_selected_week"] for c in view["cells"]))


if __name__ == '__main__':
    unittest.main()
