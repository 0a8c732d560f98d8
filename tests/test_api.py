# tests/test_api.py
import asyncio
import tempfile
import unittest
import sys
import os
from unittest.mock import patch

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.endpoints import api_router
from api.schemas import LayoutRequest
from core.exceptions import LayoutCalculationError
from core.preview import STATUS_NO_LAYOUT
from services.layout_service import LayoutService

HYBRID_REQUEST = {
    'sheet_width': 110,
    'sheet_height': 130,
    'item_width': 60,
    'item_height': 40,
    'margin': 5,
    'gap_x': 0,
    'gap_y': 0,
}


class TestLayoutEndpoints(unittest.TestCase):

    def setUp(self):
        app = FastAPI()
        app.include_router(api_router, prefix="/api")
        self.client = TestClient(app)

    def test_calculate_layout(self):
        """Тест расчета раскладки через API"""
        response = self.client.post("/api/calculate-layout", json={**HYBRID_REQUEST, 'include_positions': True})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['strict']['total'], 3)
        self.assertEqual(data['optimized']['total'], 5)
        self.assertTrue(data['optimized']['hybrid'])
        self.assertEqual(len(data['optimized']['segments']), 2)
        self.assertEqual(data['optimized']['segments'][1]['offset'], {'x': 60.0, 'y': 0.0})
        self.assertEqual(len(data['optimized']['positions']), 5)
        self.assertEqual(data['gain'], 2)

    def test_positions_are_opt_in(self):
        response = self.client.post("/api/calculate-layout", json=HYBRID_REQUEST)

        data = response.json()
        self.assertTrue(data['success'])
        self.assertNotIn('positions', data['optimized'])

    def test_calculate_layout_in_centimeters(self):
        """Ответ приходит в единицах запроса"""
        response = self.client.post("/api/calculate-layout", json={
            'sheet_width': 11, 'sheet_height': 13, 'item_width': 6, 'item_height': 4,
            'margin': 0.5, 'gap_x': 0, 'gap_y': 0, 'unit': 'cm', 'include_positions': True
        })

        data = response.json()
        optimized = data['optimized']
        self.assertEqual(optimized['total'], 5)
        self.assertEqual(optimized['unit'], 'cm')
        self.assertEqual(optimized['sheet_label'], '11 × 13 cm')
        self.assertAlmostEqual(optimized['sheet']['width'], 11)
        self.assertAlmostEqual(optimized['sheet']['margin'], 0.5)
        self.assertAlmostEqual(optimized['segments'][1]['offset']['x'], 6)
        self.assertAlmostEqual(optimized['segments'][1]['cell']['width'], 4)
        last = optimized['positions'][-1]
        self.assertAlmostEqual(last['x'], 6.5)
        self.assertAlmostEqual(last['y'], 6.5)
        self.assertAlmostEqual(last['height'], 6)

    def test_item_out_of_range(self):
        """Слишком маленькое изделие отклоняется до расчета"""
        for item_size, unit in ((0.5, 'mm'), (0.01, 'cm'), (2000, 'mm'), (0.01, 'in')):
            with self.subTest(item_size=item_size, unit=unit):
                response = self.client.post("/api/calculate-layout", json={
                    'item_width': item_size, 'item_height': item_size, 'gap_x': 0, 'gap_y': 0,
                    'unit': unit
                })
                self.assertEqual(response.status_code, 400)

    def test_partial_sheet_size(self):
        response = self.client.post("/api/calculate-layout", json={
            'sheet_width': 300, 'item_width': 50, 'item_height': 50
        })
        self.assertEqual(response.status_code, 400)

    def test_calculate_layout_preset(self):
        response = self.client.post("/api/calculate-layout", json={
            'preset': 'a4', 'item_width': 90, 'item_height': 50
        })

        data = response.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['strict']['sheet'], {'width': 210, 'height': 297, 'margin': 5})

    def test_calculate_layout_no_fit(self):
        """Тест когда изделия не помещаются"""
        response = self.client.post("/api/calculate-layout", json={
            'item_width': 500, 'item_height': 500
        })

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertFalse(data['success'])
        self.assertEqual(data['error'], STATUS_NO_LAYOUT)

    def test_unknown_unit(self):
        response = self.client.post("/api/calculate-layout", json={
            'item_width': 5, 'item_height': 5, 'unit': 'ft'
        })
        self.assertEqual(response.status_code, 400)

    def test_sheets_needed(self):
        """Тест расчета количества листов через API"""
        response = self.client.post("/api/sheets-needed", json={
            'item_width': 50, 'item_height': 50, 'gap_x': 5, 'gap_y': 5, 'quantity': 100
        })

        data = response.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['per_sheet'], 15)
        self.assertEqual(data['sheets'], 7)

    def test_sheets_needed_negative(self):
        response = self.client.post("/api/sheets-needed", json={
            'item_width': 50, 'item_height': 50, 'quantity': -1
        })
        self.assertEqual(response.status_code, 400)

    def test_presets(self):
        response = self.client.get("/api/presets")

        data = response.json()
        self.assertEqual(data['presets']['a4'], [210, 297])
        self.assertIn('in', data['units'])


class TestLayoutService(unittest.TestCase):

    def test_service_raises_on_empty_layout(self):
        service = LayoutService()
        request = LayoutRequest(item_width=500, item_height=500)

        with self.assertRaises(LayoutCalculationError):
            asyncio.run(service.calculate_layout(request))


class TestApplication(unittest.TestCase):

    def test_health(self):
        with patch.dict(os.environ, {'LAYOUT_LOG_DIR': tempfile.mkdtemp()}):
            import main

        response = TestClient(main.app).get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], 'ok')


if __name__ == '__main__':
    unittest.main()
