"""Console report generator."""

import sys
from typing import List, Optional, TextIO

from ..core.findings import CheckResult, Finding, FindingKind
from ..utils.colors import Colors

LABELS = {
    FindingKind.MISSING_BUNDLE: 'Missing bundle',
    FindingKind.UNUSED_BUNDLE: 'Unused bundle',
    FindingKind.INVALID_BUNDLE: 'Invalid bundle',
}


class ConsoleReporter:
    """Print findings to the terminal (stderr by default)."""

    @staticmethod
    def print_report(
        result: CheckResult,
        use_colors: bool = True,
        show_summary: bool = True,
        file: Optional[TextIO] = None,
    ):
        """
        Print every finding, the created bundles and a summary line.

        Args:
            result: Check result
            use_colors: Color errors red and warnings yellow
            show_summary: Print the closing summary line
            file: Output stream (default: sys.stderr)
        """
        out = file or sys.stderr

        for finding in result.findings:
            for line in ConsoleReporter.format_finding(finding, use_colors):
                print(line, file=out)

        for path in result.created_bundles:
            print(Colors.success(f"Created bundle: {path}", use_colors), file=out)

        if show_summary:
            print(ConsoleReporter.format_summary(result, use_colors), file=out)

    @staticmethod
    def format_finding(finding: Finding, use_colors: bool = True) -> List[str]:
        """
        Render a finding as console lines.

        Example:
            Invalid bundle: en/greeting.properties
            \tMissing keys: bye
            \tUnused keys: extra
        """
        lines = [f"{LABELS[finding.kind]}: {finding.bundle_path}"]
        if finding.missing_keys:
            lines.append(f"\tMissing keys: {', '.join(finding.missing_keys)}")
        if finding.unused_keys:
            lines.append(f"\tUnused keys: {', '.join(finding.unused_keys)}")

        paint = Colors.error if finding.is_error else Colors.warning
        return [paint(line, use_colors) for line in lines]

    @staticmethod
    def format_summary(result: CheckResult, use_colors: bool = True) -> str:
        """One-line summary of the result."""
        if not result.has_findings:
            return Colors.success('✓ All bundles are valid', use_colors)

        text = (
            f"✗ {len(result.findings)} problem(s): "
            f"{result.error_count} error(s), {result.warning_count} warning(s)"
        )
        if result.has_errors:
            return Colors.error(text, use_colors)
        return Colors.warning(text, use_colors)
