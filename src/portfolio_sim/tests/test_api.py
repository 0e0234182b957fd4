# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Tests for the JSON API.
"""

import unittest

from ..api.app import app


class TestSimulateApi(unittest.TestCase):
    """Tests for the Flask endpoints."""

    def setUp(self):
        app.config["TESTING"] = True
        self.client = app.test_client()
        self.payload = {
            "stocks": [0.12, -0.08, 0.21, 0.05],
            "bonds": [0.03, 0.05, 0.01, 0.04],
            "config": {"num_simulations": 25, "random_seed": 7, "horizon_years": 20,
                       "contribution_years": 10, "annual_withdrawal": 40000},
        }

    def test_health(self):
        """Test the health check."""
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.get_json()["ok"])

    def test_simulate(self):
        """Test a successful simulation request."""
        response = self.client.post("/api/v1/simulate", json=self.payload)
        self.assertEqual(response.status_code, 200)

        body = response.get_json()
        self.assertTrue(body["success"])
        self.assertEqual(body["summary"]["num_simulations"], 25)
        self.assertTrue(body["report"].startswith("Out of 25 simulations you passed"))
        self.assertEqual(body["details"]["historical_periods"], 4)
        self.assertNotIn("histogram", body)

    def test_simulate_is_reproducible(self):
        """Test that a seeded request gives the same summary twice."""
        first = self.client.post("/api/v1/simulate", json=self.payload).get_json()
        second = self.client.post("/api/v1/simulate", json=self.payload).get_json()
        self.assertEqual(first["summary"], second["summary"])

    def test_simulate_with_histogram(self):
        """Test optional histogram and final values."""
        self.payload["include_histogram"] = True
        self.payload["include_final_values"] = True
        self.payload["config"]["histogram_bins"] = 5
        body = self.client.post("/api/v1/simulate", json=self.payload).get_json()

        self.assertEqual(len(body["histogram"]["counts"]), 5)
        self.assertEqual(len(body["histogram"]["bin_edges"]), 6)
        self.assertEqual(sum(body["histogram"]["counts"]), 25)
        self.assertEqual(len(body["final_values"]), 25)

    def test_series_as_text(self):
        """Test that newline-delimited text is accepted for the series."""
        self.payload["stocks"] = "0.12\n-0.08\n0.21\n0.05\n"
        response = self.client.post("/api/v1/simulate", json=self.payload)
        self.assertEqual(response.status_code, 200)

    def test_missing_body(self):
        """Test that a request without JSON is rejected."""
        response = self.client.post("/api/v1/simulate")
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.get_json()["success"])

    def test_mismatched_series(self):
        """Test that series of different length are rejected."""
        self.payload["bonds"] = [0.03, 0.05]
        response = self.client.post("/api/v1/simulate", json=self.payload)
        self.assertEqual(response.status_code, 400)
        self.assertIn("lengths differ", response.get_json()["error"])

    def test_bad_weights(self):
        """Test that invalid weights are rejected."""
        self.payload["config"]["stock_weight"] = 0.9
        self.payload["config"]["bond_weight"] = 0.3
        response = self.client.post("/api/v1/simulate", json=self.payload)
        self.assertEqual(response.status_code, 400)

    def test_zero_simulations(self):
        """Test that a zero simulation count is rejected."""
        self.payload["config"]["num_simulations"] = 0
        response = self.client.post("/api/v1/simulate", json=self.payload)
        self.assertEqual(response.status_code, 400)

    def test_bad_return_value(self):
        """Test that a non-numeric return is rejected."""
        self.payload["stocks"] = [0.1, "abc", 0.2, 0.3]
        response = self.client.post("/api/v1/simulate", json=self.payload)
        self.assertEqual(response.status_code, 400)

    def test_missing_series(self):
        """Test that a request without bonds is rejected."""
        del self.payload["bonds"]
        response = self.client.post("/api/v1/simulate", json=self.payload)
        self.assertEqual(response.status_code, 400)


if __name__ == '__main__':
    unittest.main()
