"""
Keyspace Report Generator
==========================

Generates HTML and JSON reports from Keyspace analysis results.
The HTML report uses inline CSS for portability and shows the strength
findings as colour-coded cards followed by the raw reading.

The JSON report provides machine-readable structured output for scripts
and CI pipelines that enforce password policy.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult


# ===================================================================== #
#  HTML Template
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Keyspace Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 960px; margin: 0 auto; }}
        h1 {{ color: var(--accent-cyan); margin-bottom: 0.5rem; }}
        .meta {{ color: var(--text-secondary); margin-bottom: 1.5rem; }}
        .meter {{ background: var(--bg-tertiary); border-radius: 4px; height: 12px; margin: 1rem 0; }}
        .meter-fill {{ height: 12px; border-radius: 4px; background: linear-gradient(90deg, #f85149, #d29922, #3fb950); }}
        .section {{ background: var(--bg-secondary); border: 1px solid var(--border); border-radius: 6px; padding: 1.25rem; margin-bottom: 1.5rem; }}
        .finding {{ border-left: 4px solid var(--border); padding: 0.75rem 1rem; margin-bottom: 0.75rem; background: var(--bg-tertiary); }}
        .severity-critical {{ border-left-color: #ff0040; }}
        .severity-high {{ border-left-color: #f85149; }}
        .severity-medium {{ border-left-color: #d29922; }}
        .severity-low {{ border-left-color: #58a6ff; }}
        .severity-info {{ border-left-color: #8b949e; }}
        .badge {{ font-size: 0.75rem; font-weight: bold; padding: 0.1rem 0.4rem; border-radius: 3px; background: var(--border); }}
        pre {{ background: var(--bg-tertiary); padding: 1rem; border-radius: 4px; overflow-x: auto; font-size: 0.85rem; color: var(--text-secondary); }}
    </style>
</head>
<body>
<div class="container">
    <h1>Keyspace Password Report</h1>
    <p class="meta">Target: {target} &middot; Generated: {timestamp}</p>
    <div class="section">
        <h2>Summary</h2>
        <p>{summary}</p>
        <div class="meter"><div class="meter-fill" style="width: {percent}%;"></div></div>
        <p class="meta">Findings: {finding_count}</p>
    </div>
    <div class="section">
        <h2>Findings</h2>
        {findings_html}
    </div>
    {raw_data_section}
</div>
</body>
</html>
"""


class KeyspaceReportGenerator:
    """Generate JSON and HTML reports from a :class:`ScanResult`.

    Usage::

        generator = KeyspaceReportGenerator()
        generator.generate_html(scan_result, Path("report.html"))
        generator.generate_json(scan_result, Path("report.json"))
    """

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write an HTML report and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_html(result, title), encoding="utf-8")
        return output_path

    def render_html(self, result: ScanResult, title: Optional[str] = None) -> str:
        """Render *result* as a standalone HTML document."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        reading = result.metadata.get("reading", {})
        percent = reading.get("estimate", {}).get("percent", 0)

        return _HTML_TEMPLATE.format(
            title=html.escape(title or result.target),
            target=html.escape(result.target),
            timestamp=timestamp,
            summary=html.escape(result.summary),
            percent=int(percent),
            finding_count=result.finding_count,
            findings_html=self._build_findings_html(result),
            raw_data_section=self._build_raw_data_section(result),
        )

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write a JSON report and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result), encoding="utf-8")
        return output_path

    def render_json(self, result: ScanResult) -> str:
        """Render *result* as an indented JSON document."""
        report_data: dict[str, Any] = {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": "1.0.0",
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "highest_severity": (
                    result.highest_severity.value if result.highest_severity else None
                ),
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "metadata": result.metadata,
        }
        return json.dumps(
            report_data, indent=2, ensure_ascii=False, allow_nan=False, default=str
        )

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_findings_html(result: ScanResult) -> str:
        if not result.findings:
            return '<p class="meta">No findings.</p>'

        parts: list[str] = []
        for finding in result.findings:
            parts.append(
                f'<div class="finding {finding.severity.css_class}">'
                f'<h3><span class="badge">{finding.severity.value}</span> '
                f"{html.escape(finding.title)}</h3>"
                f"<p>{html.escape(finding.description)}</p>"
            )
            if finding.recommendation:
                parts.append(
                    f"<p><strong>Recommendation:</strong> "
                    f"{html.escape(finding.recommendation)}</p>"
                )
            parts.append("</div>")
        return "\n".join(parts)

    @staticmethod
    def _build_raw_data_section(result: ScanResult) -> str:
        if not result.metadata:
            return ""
        json_str = json.dumps(
            result.metadata, indent=2, ensure_ascii=False, allow_nan=False, default=str
        )
        return (
            '<div class="section">'
            "<h2>Raw Analysis Data</h2>"
            f"<pre>{html.escape(json_str)}</pre>"
            "</div>"
        )
