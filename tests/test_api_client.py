import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

import requests

from client.api_client import WaterApiClient
from client.main import cli, format_listing, main

def _response(status=200, payload=None):
    r = mock.Mock()
    r.status_code = status
    r.json.return_value = payload or {}
    if status >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    else:
        r.raise_for_status.return_value = None
    return r

class TestWaterApiClient(unittest.TestCase):
    def setUp(self):
        self.session = mock.Mock()
        self.client = WaterApiClient(base_url="http://water.test/", timeout_seconds=2, session=self.session)

    def test_submit_survey_posts_form_with_timestamp(self):
        self.session.request.return_value = _response(payload={"message": "ok", "data": {"id": 0}})
        result = self.client.submit_survey("Alice", "120")
        self.assertEqual(result["data"]["id"], 0)

        method, url = self.session.request.call_args.args
        kwargs = self.session.request.call_args.kwargs
        self.assertEqual((method, url), ("POST", "http://water.test/survey"))
        self.assertEqual(kwargs["json"]["name"], "Alice")
        self.assertEqual(kwargs["json"]["usage"], 120)
        self.assertTrue(kwargs["json"]["timestamp"])
        self.assertEqual(kwargs["timeout"], 2)

    def test_missing_fields_never_reach_the_server(self):
        with self.assertRaises(ValueError):
            self.client.submit_survey("", 10)
        with self.assertRaises(ValueError):
            self.client.submit_survey("Alice", "")
        with self.assertRaises(ValueError):
            self.client.report_issue("North well", "")
        self.session.request.assert_not_called()

    def test_non_numeric_usage_never_reaches_the_server(self):
        with self.assertRaises(ValueError) as ctx:
            self.client.submit_survey("Alice", "lots")
        self.assertIn("whole number", str(ctx.exception))
        self.session.request.assert_not_called()

    def test_report_issue(self):
        self.session.request.return_value = _response(payload={"message": "ok"})
        self.client.report_issue("North well", "Dry")
        method, url = self.session.request.call_args.args
        self.assertEqual((method, url), ("POST", "http://water.test/issue"))
        self.assertEqual(self.session.request.call_args.kwargs["json"]["problem"], "Dry")

    def test_delete_not_found_raises_http_error(self):
        self.session.request.return_value = _response(status=404)
        with self.assertRaises(requests.HTTPError):
            self.client.delete_issue(999)
        method, url = self.session.request.call_args.args
        self.assertEqual((method, url), ("DELETE", "http://water.test/issue/999"))

    def test_fetch_all_data(self):
        self.session.request.return_value = _response(payload={"surveys": [], "issues": []})
        self.assertEqual(self.client.fetch_all_data(), {"surveys": [], "issues": []})
        self.assertEqual(self.session.request.call_args.args, ("GET", "http://water.test/data"))

class TestClientCli(unittest.TestCase):
    DATA = {
        "surveys": [{"id": 1, "name": "Bob", "usage": 80, "timestamp": "t1"}],
        "issues": [{"id": 0, "location": "North well", "problem": "Dry", "timestamp": "t2"}],
        "totalSurveys": 1,
        "totalIssues": 1,
        "timestamp": "now",
    }

    def test_format_listing(self):
        text = format_listing(self.DATA)
        self.assertIn("Surveys (1)", text)
        self.assertIn("#1 Bob: 80 L/day (t1)", text)
        self.assertIn("#0 North well: Dry (t2)", text)

    def test_list_command(self):
        api = mock.Mock()
        api.fetch_all_data.return_value = self.DATA
        out = io.StringIO()
        with redirect_stdout(out):
            main(["list"], client=api)
        self.assertIn("Issues (1)", out.getvalue())

    def test_survey_command(self):
        api = mock.Mock()
        api.submit_survey.return_value = {"message": "Survey submitted successfully!"}
        out = io.StringIO()
        with redirect_stdout(out):
            main(["survey", "--name", " Alice ", "--usage", "120"], client=api)
        api.submit_survey.assert_called_once_with("Alice", 120)
        self.assertIn("Survey submitted successfully!", out.getvalue())

    def test_delete_survey_command(self):
        api = mock.Mock()
        api.delete_survey.return_value = {"message": "Survey deleted successfully!"}
        with redirect_stdout(io.StringIO()):
            main(["delete-survey", "3"], client=api)
        api.delete_survey.assert_called_once_with(3)

    def test_issue_command(self):
        api = mock.Mock()
        api.report_issue.return_value = {"message": "Issue reported successfully!"}
        out = io.StringIO()
        with redirect_stdout(out):
            main(["issue", "--location", " North well ", "--problem", "Dry "], client=api)
        api.report_issue.assert_called_once_with("North well", "Dry")
        self.assertIn("Issue reported successfully!", out.getvalue())

    def test_delete_issue_command(self):
        api = mock.Mock()
        api.delete_issue.return_value = {"message": "Issue deleted successfully!"}
        with redirect_stdout(io.StringIO()):
            main(["delete-issue", "1"], client=api)
        api.delete_issue.assert_called_once_with(1)

    def test_cli_reports_errors_without_traceback(self):
        api = mock.Mock()
        api.delete_issue.side_effect = requests.HTTPError("404 Client Error: Not Found")
        err = io.StringIO()
        with mock.patch("client.main.WaterApiClient", return_value=api), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                cli(["delete-issue", "999"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(err.getvalue(), "Error: 404 Client Error: Not Found\n")

if __name__ == "__main__":
    unittest.main()
