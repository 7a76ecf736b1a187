"""Tests for report assembly."""

import asyncio
import dataclasses
import unittest

from analyzers.base import AnalysisError
from reports.assembler import SupersedingAuditor, build_report, build_report_async
from pages import PERFECT_PAGE, with_body


class TestBuildReport(unittest.TestCase):
    def test_empty_input_report(self):
        report = build_report("")

        self.assertEqual(report.score, 44)
        self.assertEqual(report.grade, "poor")
        self.assertEqual(report.metrics.h1_count, 0)
        self.assertEqual(len(report.findings), 4)
        self.assertEqual(sum(d.points for d in report.deductions), 56)

    def test_perfect_page_report(self):
        report = build_report(PERFECT_PAGE)

        self.assertEqual(report.score, 100)
        self.assertEqual(report.grade, "good")
        self.assertEqual(report.findings, ())
        self.assertEqual(report.deductions, ())

    def test_deterministic(self):
        html = with_body('<a href="https://x.example" target="_blank">here</a>')
        self.assertEqual(build_report(html), build_report(html))

    def test_report_is_immutable(self):
        report = build_report(PERFECT_PAGE)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            report.score = 0

    def test_errors_propagate(self):
        with self.assertRaises(TypeError):
            build_report(None)


class TestBuildReportAsync(unittest.IsolatedAsyncioTestCase):
    async def test_matches_sync_report(self):
        html = with_body("<img src='x.png'>")
        report = await build_report_async(html, delay=0)

        self.assertEqual(report, build_report(html))

    async def test_cancellable(self):
        task = asyncio.create_task(build_report_async(PERFECT_PAGE, delay=10))
        await asyncio.sleep(0.2)
        task.cancel()

        with self.assertRaises(asyncio.CancelledError):
            await task

    async def test_rejects_non_text(self):
        with self.assertRaises(TypeError):
            await build_report_async(b"<p>x</p>", delay=0)


class TestSupersedingAuditor(unittest.IsolatedAsyncioTestCase):
    async def test_newer_submit_cancels_pending(self):
        auditor = SupersedingAuditor(delay=0.05)

        first = asyncio.create_task(auditor.submit(""))
        await asyncio.sleep(0)
        second = await auditor.submit(PERFECT_PAGE)

        self.assertEqual(second.score, 100)
        with self.assertRaises(asyncio.CancelledError):
            await first

    async def test_sequential_submits_both_complete(self):
        auditor = SupersedingAuditor(delay=0)

        first = await auditor.submit("")
        second = await auditor.submit(PERFECT_PAGE)

        self.assertEqual((first.score, second.score), (44, 100))


class TestAnalysisErrorSurface(unittest.TestCase):
    def test_is_exception(self):
        self.assertTrue(issubclass(AnalysisError, Exception))


if __name__ == "__main__":
    unittest.main()
