#!/usr/bin/env python3
import dataclasses
import unittest

from app.constants import DEFAULT_PORT, Settings


class TestSettings(unittest.TestCase):
    def test_defaults_when_env_is_empty(self):
        s = Settings.from_env({})
        self.assertIsNone(s.teams_webhook_url)
        self.assertEqual(s.port, DEFAULT_PORT)
        self.assertEqual(s.port, 3000)
        self.assertFalse(s.debug)
        self.assertFalse(s.webhook_configured)

    def test_reads_values_from_env(self):
        s = Settings.from_env({
            'TEAMS_WEBHOOK_URL': 'https://teams.example/hook',
            'PORT': '8080',
            'DEBUG_MODE': 'true',
        })
        self.assertEqual(s.teams_webhook_url, 'https://teams.example/hook')
        self.assertEqual(s.port, 8080)
        self.assertTrue(s.debug)
        self.assertTrue(s.webhook_configured)

    def test_non_numeric_port_falls_back_to_default(self):
        self.assertEqual(Settings.from_env({'PORT': 'abc'}).port, 3000)
        self.assertEqual(Settings.from_env({'PORT': ''}).port, 3000)

    def test_out_of_range_port_falls_back_to_default(self):
        for raw in ('0', '-1', '65536', '99999'):
            self.assertEqual(Settings.from_env({'PORT': raw}).port, 3000, raw)
        self.assertEqual(Settings.from_env({'PORT': '1'}).port, 1)
        self.assertEqual(Settings.from_env({'PORT': '65535'}).port, 65535)

    def test_blank_webhook_url_is_not_configured(self):
        s = Settings.from_env({'TEAMS_WEBHOOK_URL': '   '})
        self.assertIsNone(s.teams_webhook_url)
        self.assertFalse(s.webhook_configured)

    def test_settings_are_immutable(self):
        s = Settings(teams_webhook_url='https://teams.example/hook')
        with self.assertRaises(dataclasses.FrozenInstanceError):
            s.teams_webhook_url = 'https://other.example/hook'


if __name__ == '__main__':
    unittest.main()
