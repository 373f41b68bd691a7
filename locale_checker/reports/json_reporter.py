"""JSON report generator."""

import json
from pathlib import Path
from datetime import datetime
from typing import Optional

from ..__version__ import __version__
from ..core.findings import CheckResult
from ..utils.config import Config


class JSONReporter:
    """Generate JSON reports for check results."""

    @staticmethod
    def build(
        result: CheckResult,
        project_dir: Optional[Path] = None,
        config: Optional[Config] = None,
    ) -> dict:
        """
        Build the report structure.

        Args:
            result: Check result
            project_dir: Checked project directory
            config: Configuration used for the run

        Returns:
            Report dictionary
        """
        config = config or Config()

        return {
            'metadata': {
                'generated_at': datetime.now().isoformat(),
                'version': __version__,
                'project_dir': str(project_dir) if project_dir is not None else None,
                'config': config.to_dict(),
            },
            'summary': result.summary(),
            'findings': [finding.to_dict() for finding in result.findings],
            'created_bundles': list(result.created_bundles),
        }

    @staticmethod
    def generate(
        result: CheckResult,
        output_path: Optional[Path] = None,
        project_dir: Optional[Path] = None,
        config: Optional[Config] = None,
        pretty: bool = True
    ) -> Path:
        """
        Generate JSON report.

        Args:
            result: Check result
            output_path: Output file path
            project_dir: Checked project directory
            config: Configuration used for the run
            pretty: Pretty print JSON

        Returns:
            Path to generated report
        """
        if output_path is None:
            output_path = Path.cwd() / 'locale_report.json'

        report = JSONReporter.build(result, project_dir=project_dir, config=config)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            if pretty:
                json.dump(report, f, indent=2, ensure_ascii=False)
            else:
                json.dump(report, f, ensure_ascii=False)

        return output_path

    @staticmethod
    def load(report_path: Path) -> dict:
        """
        Load JSON report from file.

        Args:
            report_path: Path to JSON report

        Returns:
            Report dictionary
        """
        with open(report_path, 'r', encoding='utf-8') as f:
            return json.load(f)
