#!/usr/bin/env python3
"""
Sheet Quality Demo for the sheet-quality package.

Reads a CSV export of a spreadsheet (or a built-in sample), runs the quality
analysis with and without outlier detection, and prints the score, grade,
severity breakdown and the individual issues found.
"""

import dataclasses
import sys
from pathlib import Path

from sheet_quality import analyse_quality, default_settings
from sheet_quality.adapters import parse_csv_table
from sheet_quality.domain.quality import (
    QualityReport,
    count_by_severity,
    grade_score,
    is_dashboard_ready,
)

SAMPLE_CSV = """Product,Unit Price,Quantity,Notes
Widget,4.50,10,
Gadget,-2.00,3,refund
Doohickey,5.25,,
Sprocket,4.75,12,bulk
Gizmo,5.10,11,
Thing,4.90,9,
Whatsit,5.00,10,
Bauble,250.00,8,typo?
"""


def print_separator(title: str) -> None:
    """Print a formatted section separator."""
    print(f"\n{'=' * 60}")
    print(f" {title}")
    print(f"{'=' * 60}")


def load_csv_text(argv: list[str]) -> str:
    """Return CSV text from the path given on the command line, or the sample."""
    if len(argv) > 1:
        return Path(argv[1]).read_text(encoding="utf-8")
    print("No CSV path given, using the built-in sample sheet.")
    return SAMPLE_CSV


def print_report(report: QualityReport) -> None:
    """Print the headline numbers and every issue of a report."""
    print(f"Score: {report.score}% ({grade_score(report.score).value})")
    print(f"Rows: {report.total_rows:,} | Columns: {report.total_columns:,}")
    print(f"Clean rows: {report.clean_rows:,} | Rows with issues: {report.issue_rows:,}")

    for severity, count in count_by_severity(report).items():
        print(f"  {severity.value:<8} {count:,}")

    for issue in report.issues:
        print(f"  row {issue.row:>4} | {issue.column:<12} | {issue.message}")

    ready = "yes" if is_dashboard_ready(report) else "no"
    print(f"Ready for dashboards: {ready}")


def main() -> None:
    """Run the sheet quality demo."""
    try:
        table = parse_csv_table(load_csv_text(sys.argv))
    except (OSError, ValueError) as error:
        print(f"❌ Could not load sheet: {error}")
        sys.exit(1)

    print_separator("📋 DEFAULT QUALITY CHECKS")
    print_report(analyse_quality(table))

    print_separator("📈 WITH OUTLIER DETECTION")
    settings = dataclasses.replace(default_settings(), detect_outliers=True)
    print_report(analyse_quality(table, settings))


if __name__ == "__main__":
    main()
