import unittest
from fastapi.testclient import TestClient
from roomrates.api.api_run import create_app
from roomrates.domain.RoomCatalog import RoomCatalog
from roomrates.infra.Room_Repository import load_room_templates
from roomrates.logic.session import CalendarSession


class TestRoomsAPI(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(create_app(CalendarSession(RoomCatalog(load_room_templates()))))

    def test_list_rooms(self):
        data = self.client.get('/api/rooms').json()
        self.assertEqual(data['count'], 5)
        self.assertEqual(data['rooms'][4]['name'], 'Honeymoon Suite')

    def test_add_update_delete_room(self):
        data = self.client.post('/api/rooms', json={'name': '  Garden Villa ', 'room_count': 3}).json()
        self.assertEqual(data['count'], 6)
        self.assertEqual(data['rooms'][5], {'name': 'Garden Villa', 'room_count': 3, 'max_guests': 2, 'plans': []})
        data = self.client.patch('/api/rooms/5', json={'max_guests': 6}).json()
        self.assertEqual(data['rooms'][5]['max_guests'], 6)
        self.assertEqual(data['rooms'][5]['name'], 'Garden Villa')
        data = self.client.delete('/api/rooms/5').json()
        self.assertEqual(data['count'], 5)

    def test_blank_room_name_defaults(self):
        resp = self.client.post('/api/rooms', json={'name': '   '})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['rooms'][-1]['name'], 'New Room')
        data = self.client.post('/api/rooms', json={'room_count': 2}).json()
        self.assertEqual(data['rooms'][-1]['name'], 'New Room')
        self.assertEqual(data['rooms'][-1]['room_count'], 2)

    def test_update_room_name_is_stripped(self):
        data = self.client.patch('/api/rooms/0', json={'name': '  Garden Suite  '}).json()
        self.assertEqual(data['rooms'][0]['name'], 'Garden Suite')
        data = self.client.patch('/api/rooms/0', json={'name': ''}).json()
        self.assertEqual(data['rooms'][0]['name'], 'New Room')
        self.assertEqual(self.client.patch('/api/rooms/0', json={'name': 'x' * 101}).status_code, 422)

    def test_plan_lifecycle(self):
        data = self.client.post('/api/rooms/0/plans', json={'meal_plan_type': 'Room only', 'base_rate': 3999}).json()
        plan = data['rooms'][0]['plans'][-1]
        self.assertEqual(plan['name'], 'New Plan')
        self.assertEqual(plan['base_price'], 3999)
        self.assertEqual(plan['details']['min_length_of_stay'], 1)

        data = self.client.put('/api/rooms/0/plans/5',
                               json={'name': 'Promo', 'meal_plan_type': 'Room only', 'base_rate': 3499}).json()
        plan = data['rooms'][0]['plans'][5]
        self.assertEqual((plan['name'], plan['base_price'], plan['details']['base_rate']), ('Promo', 3499, 3499))

        data = self.client.post('/api/rooms/0/plans/5/toggle').json()
        self.assertFalse(data['rooms'][0]['plans'][5]['details']['active'])

        data = self.client.delete('/api/rooms/0/plans/5').json()
        self.assertEqual(len(data['rooms'][0]['plans']), 5)

    def test_catalog_change_reaches_calendar(self):
        self.client.put('/api/rooms/0/plans/0', json={'name': 'EP', 'meal_plan_type': 'Room only', 'base_rate': 1000})
        calendar = self.client.get('/api/calendar').json()
        prices = calendar['rooms'][0]['rate_plans'][0]['prices']
        self.assertTrue(all(500 <= p <= 3499 for p in prices))

    def test_stale_indices_are_noops(self):
        before = self.client.get('/api/rooms').json()
        self.assertEqual(self.client.delete('/api/rooms/40').json(), before)
        self.assertEqual(self.client.delete('/api/rooms/0/plans/40').json(), before)
        self.assertEqual(self.client.patch('/api/rooms/40', json={'name': 'Ghost'}).json(), before)
        self.assertEqual(self.client.post('/api/rooms/0/plans/40/toggle').json(), before)

    def test_negative_rate_rejected(self):
        resp = self.client.post('/api/rooms/0/plans', json={'name': 'Bad', 'base_rate': -1})
        self.assertEqual(resp.status_code, 422)


if __name__ == '__main__':
    unittest.main()
