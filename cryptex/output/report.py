"""
Cryptex Report Generator
=========================

Writes JSON and HTML reports for a single encrypt/decrypt run, optionally
with the letter frequency profile of the output.

The HTML report uses inline CSS so the file is self-contained. The JSON
report is the same data in machine-readable form and is also what the
CLI prints to stdout for ``--output json``.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from cryptex.core.models import CipherDescriptor, CipherResult, FrequencyResult


# ===================================================================== #
#  HTML Template (inline CSS)
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Cryptex Report - {title}</title>
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
        .container {{ max-width: 1000px; margin: 0 auto; }}
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
        th, td {{ padding: 0.6rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); font-weight: 600; }}
        pre {{
            background: var(--bg-tertiary);
            padding: 1rem;
            border-radius: 4px;
            white-space: pre-wrap;
            word-break: break-all;
            font-size: 0.95rem;
        }}
        .output {{ color: var(--accent-green); font-weight: 700; }}
        .note {{ color: var(--accent-yellow); font-size: 0.9rem; }}
        .bar {{ height: 12px; background: var(--accent-cyan); border-radius: 6px; }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
            border-top: 1px solid var(--border);
            margin-top: 2rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Cryptex :: {cipher_name}</h1>
            <div class="subtitle">
                {operation} report<br>
                Generated: {timestamp}
            </div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            <table>
                <tr><th>Cipher</th><td>{cipher_id}</td><th>Operation</th><td>{operation}</td></tr>
                <tr><th>Key</th><td>{key}</td><th>Elapsed</th><td>{elapsed_ms:.3f} ms</td></tr>
            </table>
            {lossy_note}
        </div>

        <div class="section">
            <h2>Input</h2>
            <pre>{input_text}</pre>
        </div>

        <div class="section">
            <h2>Output</h2>
            <pre class="output">{output_text}</pre>
        </div>

        {profile_section}

        <div class="footer">
            Cryptex v{version} | Classical Cipher Toolkit<br>
            Historical ciphers only; none of them protects real secrets.
        </div>
    </div>
</body>
</html>
"""


class CryptexReportGenerator:
    """Generates HTML and JSON reports for Cryptex results.

    Usage::

        generator = CryptexReportGenerator()
        generator.generate_html(result, descriptor, Path("report.html"))
        generator.generate_json(result, descriptor, Path("report.json"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def build_report(
        self,
        result: CipherResult,
        descriptor: CipherDescriptor,
        profile: Optional[FrequencyResult] = None,
    ) -> dict[str, Any]:
        """Assemble the JSON-serialisable report structure."""
        report: dict[str, Any] = {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "cryptex",
                "version": self.version,
            },
            "cipher": descriptor.model_dump(mode="json"),
            "result": result.model_dump(mode="json"),
            "summary": result.summary,
        }
        if profile is not None:
            report["profile"] = profile.model_dump(mode="json")
        return report

    def generate_json(
        self,
        result: CipherResult,
        descriptor: CipherDescriptor,
        output_path: Path,
        profile: Optional[FrequencyResult] = None,
    ) -> Path:
        """Write the JSON report and return its path."""
        report = self.build_report(result, descriptor, profile)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(report, indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    def generate_html(
        self,
        result: CipherResult,
        descriptor: CipherDescriptor,
        output_path: Path,
        profile: Optional[FrequencyResult] = None,
    ) -> Path:
        """Write the HTML report and return its path."""
        lossy_note = ""
        if result.normalized:
            lossy_note = (
                '<p class="note">This cipher drops case, spacing and '
                "punctuation; decryption recovers letters only.</p>"
            )

        html_content = _HTML_TEMPLATE.format(
            title=html.escape(f"{descriptor.name} {result.operation.value}"),
            cipher_name=html.escape(descriptor.name),
            cipher_id=html.escape(descriptor.id),
            operation=result.operation.value,
            timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
            summary=html.escape(result.summary),
            key=html.escape(result.key) if result.key is not None else "&mdash;",
            elapsed_ms=result.elapsed_ms,
            lossy_note=lossy_note,
            input_text=html.escape(result.input_text),
            output_text=html.escape(result.output_text),
            profile_section=self._build_profile_section(profile),
            version=self.version,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_profile_section(profile: Optional[FrequencyResult]) -> str:
        if profile is None or not profile.letter_count:
            return ""

        peak = max(profile.distribution.values()) or 1.0
        rows = "\n".join(
            f"<tr><td>{letter}</td><td>{profile.counts[letter]}</td>"
            f"<td>{share:.2%}</td>"
            f'<td><div class="bar" style="width: {share / peak * 100:.0f}%"></div></td></tr>'
            for letter, share in profile.distribution.items()
            if profile.counts.get(letter)
        )
        return (
            '<div class="section">'
            "<h2>Frequency Profile</h2>"
            f"<p>Letters: {profile.letter_count} | IC: {profile.ic:.4f} | "
            f"chi-squared: {profile.chi_squared:.2f} | "
            f"likely class: {profile.likely_class.value}</p>"
            "<table><tr><th>Letter</th><th>Count</th><th>Share</th><th></th></tr>"
            f"{rows}</table>"
            "</div>"
        )
