"""HTML report generator for vendor risk profiles."""

import html
from datetime import datetime, timezone
from pathlib import Path

from vendorlens.models import StepResult, VendorRiskProfile
from vendorlens.pipeline.scoring import format_points


class HTMLReportGenerator:
    """Generate self-contained HTML reports from risk profiles."""

    def generate(
        self,
        profile: VendorRiskProfile,
        output_path: Path | str,
        title: str | None = None,
    ) -> Path:
        """Generate HTML report and save to file."""
        output_path = Path(output_path)
        output_path.write_text(self.generate_string(profile, title), encoding="utf-8")
        return output_path

    def generate_string(
        self,
        profile: VendorRiskProfile,
        title: str | None = None,
    ) -> str:
        """Generate HTML report as string."""
        title = title or f"Vendor Risk Report - {profile.domain}"
        return self._build_html(profile, title)

    def _build_html(self, profile: VendorRiskProfile, title: str) -> str:
        """Build complete HTML document."""
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title)}</title>
    {self._get_styles()}
</head>
<body>
    <div class="container">
        {self._build_header(profile, title)}
        {self._build_summary(profile)}
        {self._build_checklist(profile)}
        {self._build_footer()}
    </div>
</body>
</html>"""

    def _get_styles(self) -> str:
        """Get embedded CSS styles."""
        return """<style>
:root {
    --success: #22c55e;
    --danger: #ef4444;
    --warning: #f59e0b;
    --gray-50: #f9fafb;
    --gray-200: #e5e7eb;
    --gray-600: #4b5563;
    --gray-800: #1f2937;
    --gray-900: #111827;
}

body {
    margin: 0;
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, sans-serif;
    line-height: 1.6;
    color: var(--gray-800);
    background: var(--gray-50);
}

.container {
    max-width: 1000px;
    margin: 0 auto;
    padding: 2rem;
}

header {
    background: linear-gradient(135deg, var(--gray-900), var(--gray-800));
    color: white;
    padding: 2rem;
    border-radius: 12px;
    margin-bottom: 2rem;
}

.summary {
    padding: 1.5rem;
    border-radius: 12px;
    border-left: 6px solid var(--gray-600);
    background: white;
    margin-bottom: 2rem;
}

.summary.pass { border-color: var(--success); }
.summary.fail { border-color: var(--danger); }

table {
    width: 100%;
    border-collapse: collapse;
    background: white;
}

th, td {
    padding: 0.75rem;
    border-bottom: 1px solid var(--gray-200);
    text-align: left;
    vertical-align: top;
}

.points-positive { color: var(--success); font-weight: 600; }
.points-negative { color: var(--danger); font-weight: 600; }
.status-error { color: var(--danger); }
.status-pending { color: var(--gray-600); font-style: italic; }

footer {
    margin-top: 2rem;
    color: var(--gray-600);
    font-size: 0.875rem;
    text-align: center;
}
</style>"""

    def _build_header(self, profile: VendorRiskProfile, title: str) -> str:
        """Build report header."""
        return f"""<header>
    <h1>{html.escape(title)}</h1>
    <div class="meta">Domain: {html.escape(profile.domain)}</div>
</header>"""

    def _build_summary(self, profile: VendorRiskProfile) -> str:
        """Build the verdict block."""
        if profile.is_disqualified:
            verdict, css = "DISQUALIFIED", "fail"
        elif profile.passed:
            verdict, css = "PASS", "pass"
        else:
            verdict, css = "FAIL", "fail"

        score = format_points(profile.total_score)
        if profile.percentage is not None:
            score += f" ({profile.percentage:.1f}%)"

        return f"""<div class="summary {css}">
    <h2>{verdict}</h2>
    <p><strong>Score:</strong> {score}</p>
    <p>{html.escape(profile.summary)}</p>
</div>"""

    def _build_checklist(self, profile: VendorRiskProfile) -> str:
        """Build the detailed checklist table."""
        rows = "\n".join(self._build_row(result) for result in profile.checklist_results)
        return f"""<section>
    <h2>Detailed Checklist</h2>
    <table>
        <thead>
            <tr><th>Question</th><th>Status</th><th>Points</th><th>Finding</th><th>Justification</th></tr>
        </thead>
        <tbody>
{rows}
        </tbody>
    </table>
</section>"""

    def _build_row(self, result: StepResult) -> str:
        if result.points > 0:
            points_class = "points-positive"
        elif result.points < 0:
            points_class = "points-negative"
        else:
            points_class = ""

        return f"""            <tr>
                <td>{html.escape(result.question)}</td>
                <td class="status-{result.status.value}">{result.status.value}</td>
                <td class="{points_class}">{format_points(result.points)}</td>
                <td>{html.escape(result.finding)}</td>
                <td>{html.escape(result.justification)}</td>
            </tr>"""

    def _build_footer(self) -> str:
        """Build report footer."""
        gen_time = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        return f"""<footer>
    <p>Generated by VendorLens. Findings are model-generated and unverified.</p>
    <p>Report generated at {gen_time}</p>
</footer>"""
