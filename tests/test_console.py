"""Tests for the console module."""

import sys
import unittest
from unittest.mock import patch

from lifecycle_timeline import console as c
from lifecycle_timeline.console import gha_error, gha_warning, print_banner, print_status_summary
from lifecycle_timeline.models import StatusCounts


class TestGHAAnnotations(unittest.TestCase):
    """Tests for GitHub Actions annotation functions."""

    def test_gha_warning_gha_mode(self):
        with patch.object(c, "IS_GITHUB_ACTIONS", True), patch("builtins.print") as mock_print:
            gha_warning("Site 'Berlin' is not in the site mapping", title="Unknown site")
        mock_print.assert_called_once_with(
            "::warning title=Unknown site::Site 'Berlin' is not in the site mapping", file=sys.stderr
        )

    def test_gha_error_gha_mode_without_title(self):
        with patch.object(c, "IS_GITHUB_ACTIONS", True), patch("builtins.print") as mock_print:
            gha_error("data.json not found")
        mock_print.assert_called_once_with("::error::data.json not found", file=sys.stderr)

    def test_gha_warning_local(self):
        with patch.object(c, "IS_GITHUB_ACTIONS", False), patch.object(c.console, "print") as mock_print:
            gha_warning("No sites defined", title="Site mapping")
        mock_print.assert_called_once_with("[warning]Warning (Site mapping):[/warning] No sites defined")

    def test_local_message_markup_is_escaped(self):
        with patch.object(c, "IS_GITHUB_ACTIONS", False), patch.object(c.console, "print") as mock_print:
            gha_error("Unknown section '[bold]'")
        mock_print.assert_called_once_with("[error]Error:[/error] Unknown section '\\[bold]'")


class TestPrinters(unittest.TestCase):
    def test_print_banner(self):
        with patch.object(c.console, "print") as mock_print:
            print_banner("1.0.0")
        self.assertIn("v1.0.0", mock_print.call_args[0][0].plain)

    def test_print_status_summary(self):
        counts = StatusCounts(all=4, supported=2, extended=1, unsupported=1)
        with patch.object(c.console, "print") as mock_print:
            print_status_summary(counts, title="Support Status: sharedInfrastructure")
        table = mock_print.call_args[0][0]
        self.assertEqual(table.title, "Support Status: sharedInfrastructure")
        self.assertEqual(table.row_count, 4)
