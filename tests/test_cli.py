#!/usr/bin/python3
import io
import json
import unittest
from pathlib import Path
from unittest.mock import patch
from tempfile import TemporaryDirectory
from contextlib import redirect_stderr, redirect_stdout

import requests
from helpers import make_response, make_session
from rltranslate import cli
from rltranslate.models import ProbeResult
from rltranslate.services.libretranslate_service import LibreTranslateService

class CliTests(unittest.TestCase):
    def setUp(self):
        tmp = TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.config_dir = Path(tmp.name) / ".rustlator"
        self.config_file = self.config_dir / "config.json"

        for patcher in (
            patch("rltranslate.config.CONFIG_DIR", self.config_dir),
            patch("rltranslate.config.CONFIG_FILE", self.config_file),
            patch("rltranslate.cli.init_logging", return_value=None),
        ):
            patcher.start()
            self.addCleanup(patcher.stop)

        self.session = None
        self.requested_urls = []

    def write_config(self, payload):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(json.dumps(payload), encoding="utf-8")

    def read_config(self):
        return json.loads(self.config_file.read_text(encoding="utf-8"))

    def service_factory(self, api_url):
        self.requested_urls.append(api_url)
        return LibreTranslateService(api_url, session=self.session)

    def invoke(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = cli.run(list(argv), service_factory=self.service_factory)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_translate_prints_service_text(self):
        self.write_config({"api_url": "http://localhost:5000"})
        self.session = make_session(make_response({"translatedText": "hei"}))

        code, out, err = self.invoke("hello")

        self.assertEqual(code, 0)
        self.assertEqual(out, "hei\n")
        self.assertEqual(err, "")
        self.session.request.assert_called_once_with(
            "POST",
            "http://localhost:5000/translate",
            json={"q": "hello", "source": "en", "target": "fi"},
        )

    def test_list_prints_padded_entries(self):
        self.write_config({"api_url": "http://localhost:5000/"})
        payload = [{"code": "en", "name": "English"}, {"code": "fi", "name": "Finnish"}]
        self.session = make_session(make_response(payload))

        code, out, _ = self.invoke("--list")

        self.assertEqual(code, 0)
        self.assertEqual(
            out.splitlines(),
            ["Available languages:", "en         - English", "fi         - Finnish"],
        )

    def test_missing_text_exits_non_zero(self):
        self.write_config({"api_url": "http://localhost:5000"})

        code, out, err = self.invoke()

        self.assertNotEqual(code, 0)
        self.assertEqual(out, "")
        self.assertIn("missing TEXT argument", err)
        self.assertEqual(self.requested_urls, [])

    def test_status_with_unreachable_host_still_succeeds(self):
        self.write_config({"api_url": "http://nowhere.invalid", "to": "sv"})
        self.session = make_session(error=requests.ConnectionError("name resolution failed"))

        code, out, _ = self.invoke("--status")

        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(
            lines[:4],
            ["Current language settings:", "From: en", "To: sv", "API URL: http://nowhere.invalid"],
        )
        self.assertTrue(lines[4].startswith("Failed to reach API URL: "))
        self.assertIn("name resolution failed", lines[4])

    def test_status_reports_reachable_host(self):
        self.write_config({"api_url": "http://localhost:5000"})
        self.session = make_session(make_response({}))

        code, out, _ = self.invoke("-s")

        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines()[-1], "API URL is accessible.")

    def test_api_with_text_only_updates_config(self):
        self.write_config({"api_url": "http://old", "theme": "dark"})

        code, out, _ = self.invoke("--api", "http://new", "hello")

        self.assertEqual(code, 0)
        self.assertEqual(out, "API URL updated to: http://new\n")
        self.assertEqual(self.read_config(), {"api_url": "http://new", "theme": "dark"})
        self.assertEqual(self.requested_urls, [])

    def test_api_creates_missing_config_file(self):
        code, _, _ = self.invoke("-a", "http://localhost:5000")

        self.assertEqual(code, 0)
        self.assertEqual(self.read_config(), {"api_url": "http://localhost:5000"})

    def test_to_with_text_updates_preferences_only(self):
        self.write_config({"api_url": "http://localhost:5000", "from": "de"})

        code, out, _ = self.invoke("-t", "sv", "hello")

        self.assertEqual(code, 0)
        self.assertEqual(out, "Language settings updated.\n")
        self.assertEqual(self.read_config(), {"api_url": "http://localhost:5000", "from": "de", "to": "sv"})
        self.assertEqual(self.requested_urls, [])

    def test_missing_config_file_is_fatal(self):
        code, out, err = self.invoke("hello")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("Error: "))

    def test_undecodable_config_file_is_fatal(self):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_bytes(b"\xff{}")

        code, out, err = self.invoke("hello")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("Error: "))
        self.assertEqual(self.requested_urls, [])

    def test_missing_api_url_is_fatal(self):
        self.write_config({"to": "sv"})

        code, _, err = self.invoke("--list")

        self.assertEqual(code, 1)
        self.assertIn("api_url", err)

    def test_transport_failure_is_fatal_for_translate(self):
        self.write_config({"api_url": "http://localhost:5000"})
        self.session = make_session(error=requests.ConnectionError("connection refused"))

        code, out, err = self.invoke("hello")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("connection refused", err)

    def test_malformed_response_is_fatal(self):
        self.write_config({"api_url": "http://localhost:5000"})
        self.session = make_session(make_response({"unexpected": True}))

        code, _, err = self.invoke("hello")

        self.assertEqual(code, 1)
        self.assertIn("translatedText", err)

    def test_verbose_requests_debug_logging(self):
        self.write_config({"api_url": "http://localhost:5000"})
        self.session = make_session(make_response({"translatedText": "hei"}))

        with patch("rltranslate.cli.init_logging", return_value=None) as mock_init:
            self.invoke("-v", "hello")

        mock_init.assert_called_once_with(level=cli.logging.DEBUG, console_level=cli.logging.DEBUG)

class DescribeProbeTests(unittest.TestCase):
    def test_reachable(self):
        self.assertEqual(cli.describe_probe(ProbeResult(reachable=True, status_code=200)), "API URL is accessible.")

    def test_error_status(self):
        result = ProbeResult(reachable=False, status_code=502, reason="Bad Gateway")
        self.assertEqual(cli.describe_probe(result), "API URL responded with status: 502 Bad Gateway")

    def test_transport_failure(self):
        result = ProbeResult(reachable=False, reason="timed out")
        self.assertEqual(cli.describe_probe(result), "Failed to reach API URL: timed out")

class ParserTests(unittest.TestCase):
    def test_from_flag_maps_to_source(self):
        args = cli.build_parser().parse_args(["-f", "de", "-t", "en"])
        self.assertEqual((args.source, args.to), ("de", "en"))
        self.assertIsNone(args.text)

    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        self.assertFalse(args.status)
        self.assertFalse(args.list)
        self.assertIsNone(args.api)

if __name__ == "__main__":
    unittest.main()
