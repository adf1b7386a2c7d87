"""
Vigenere Report Generator
==========================

Generates HTML and JSON reports from analysis results, and persists
recovered plaintext.  The HTML report uses inline CSS so it renders
without external assets; the JSON report is meant for scripts and
pipelines.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult


_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Vigenere Analysis Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-yellow: #d29922;
            --accent-red: #f85149;
            --accent-purple: #bc8cff;
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
        .container {{ max-width: 1200px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.4rem;
            margin-bottom: 1rem;
            padding-bottom: 0.5rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{ padding: 0.5rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); }}
        .key {{ font-family: monospace; font-size: 1.6rem; color: var(--accent-green); }}
        pre {{
            background: var(--bg-tertiary);
            padding: 1rem;
            border-radius: 4px;
            white-space: pre-wrap;
            word-break: break-all;
            font-size: 0.85rem;
        }}
        .badge {{ padding: 0.2rem 0.6rem; border-radius: 4px; font-weight: 700; font-size: 0.8rem; }}
        .severity-info {{ background: rgba(88, 166, 255, 0.2); color: var(--accent-cyan); }}
        .severity-low {{ background: rgba(63, 185, 80, 0.2); color: var(--accent-green); }}
        .severity-medium {{ background: rgba(210, 153, 34, 0.2); color: var(--accent-yellow); }}
        .severity-high {{ background: rgba(248, 81, 73, 0.2); color: var(--accent-red); }}
        .finding {{
            padding: 1rem;
            margin: 0.5rem 0;
            border-left: 4px solid var(--border);
            background: var(--bg-tertiary);
        }}
        .finding p {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Vigenere Cryptanalysis</h1>
            <div class="subtitle">
                {target}<br>
                Generated: {timestamp}
            </div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            <table>
                <tr>
                    <th>Tool</th><td>{tool}</td>
                    <th>Target</th><td>{target}</td>
                </tr>
                <tr>
                    <th>Duration</th><td>{duration}</td>
                    <th>Findings</th><td>{finding_count}</td>
                </tr>
            </table>
        </div>

        {analysis_section}

        <div class="section">
            <h2>Findings</h2>
            {findings_html}
        </div>

        {raw_data_section}

        <div class="footer">
            Vigenere Cryptanalysis v{version} | Report generated {timestamp}
        </div>
    </div>
</body>
</html>
"""


class VigenereReportGenerator:
    """Generates HTML and JSON reports from analysis results.

    Usage::

        generator = VigenereReportGenerator()
        generator.generate_html(scan_result, Path("report.html"))
        generator.generate_json(scan_result, Path("report.json"))
        generator.write_plaintext(analysis.plaintext, Path("plainNoKey.txt"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write an HTML report for *result* to *output_path*.

        Returns:
            Path to the generated HTML file.
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        report_title = title or f"Analysis of {result.target}"
        duration = result.duration_seconds

        html_content = _HTML_TEMPLATE.format(
            title=self._escape_html(report_title),
            target=self._escape_html(result.target),
            timestamp=timestamp,
            summary=self._escape_html(result.summary),
            tool=self._escape_html(result.tool_name),
            duration=f"{duration:.3f}s" if duration is not None else "n/a",
            finding_count=result.finding_count,
            analysis_section=self._build_analysis_section(result),
            findings_html=self._build_findings_html(result),
            raw_data_section=self._build_raw_data_section(result),
            version=self.version,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write a JSON report for *result* to *output_path*.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_json(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    def build_json(self, result: ScanResult) -> dict[str, Any]:
        """Structured report payload shared by :meth:`generate_json` and stdout output."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": self.version,
            },
            "summary": {
                "total_findings": result.finding_count,
                "high_findings": result.high_count,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [
                {
                    "title": f.title,
                    "description": f.description,
                    "severity": f.severity.value,
                    "evidence": f.evidence,
                    "recommendation": f.recommendation,
                    "references": f.references,
                }
                for f in result.findings
            ],
            "analysis": result.metadata,
        }

    @staticmethod
    def write_plaintext(text: str, output_path: Path, encoding: str = "utf-8") -> Path:
        """Persist recovered text, exactly as produced, to *output_path*."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding=encoding)
        return output_path

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    def _build_analysis_section(self, result: ScanResult) -> str:
        """Key, key length and per-column IOC table, when available."""
        meta = result.metadata
        if "key" not in meta or "columns" not in meta:
            return ""

        rows = "\n".join(
            f"<tr><td>{col['index']}</td><td>{col['length']}</td>"
            f"<td>{'n/a' if col['ioc'] is None else format(col['ioc'], '.6f')}</td>"
            f"<td>{col['shift']}</td><td>{self._escape_html(col['letter'])}</td>"
            f"<td>{col['score']:.6f}</td></tr>"
            for col in meta["columns"]
        )
        return (
            '<div class="section">'
            "  <h2>Recovered Key</h2>"
            f'  <p class="key">{self._escape_html(meta["key"])}</p>'
            f"  <p>Key length {meta['key_length']} from "
            f"{len(meta.get('distances', []))} Kasiski distances "
            f"({self._escape_html(str(meta.get('scoring_mode', '')))} scoring).</p>"
            "  <table><tr><th>Column</th><th>Letters</th><th>IOC</th>"
            "<th>Shift</th><th>Letter</th><th>Score</th></tr>"
            f"{rows}</table>"
            "  <h2>Plaintext</h2>"
            f"  <pre>{self._escape_html(meta.get('plaintext', ''))}</pre>"
            "</div>"
        )

    def _build_findings_html(self, result: ScanResult) -> str:
        if not result.findings:
            return '<p style="color: var(--text-secondary);">No findings.</p>'

        html_parts: list[str] = []
        for finding in result.findings:
            severity = finding.severity.value
            html_parts.append(
                f'<div class="finding">'
                f'  <h3><span class="badge {finding.severity.css_class}">{severity}</span> '
                f'  {self._escape_html(finding.title)}</h3>'
                f'  <p>{self._escape_html(finding.description)}</p>'
            )
            if finding.recommendation:
                html_parts.append(
                    f'  <p><strong>Recommendation:</strong> '
                    f'{self._escape_html(finding.recommendation)}</p>'
                )
            if finding.references:
                refs = ", ".join(self._escape_html(r) for r in finding.references)
                html_parts.append(f'  <p style="font-size: 0.8rem;">References: {refs}</p>')
            html_parts.append("</div>")

        return "\n".join(html_parts)

    def _build_raw_data_section(self, result: ScanResult) -> str:
        if not result.metadata:
            return ""

        json_str = json.dumps(result.metadata, indent=2, ensure_ascii=False, default=str)
        return (
            '<div class="section">'
            "  <h2>Raw Analysis Data</h2>"
            f"  <pre>{self._escape_html(json_str)}</pre>"
            "</div>"
        )

    @staticmethod
    def _escape_html(text: str) -> str:
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&#x27;")
        )
