from __future__ import annotations

import html
from pathlib import Path

import markdown

HTML_FILENAME = "public_holiday_report.html"

BASE_CSS = """
body {
    font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
    font-size: 14px;
    line-height: 1.5;
    color: #222;
    margin: 0;
    padding: 2rem;
    background: #f5f5f5;
}

.report-container {
    max-width: 900px;
    margin: 0 auto;
    background: #fff;
    padding: 2rem 2.5rem;
    border-radius: 8px;
    box-shadow: 0 2px 8px rgba(0,0,0,0.06);
}

h1 {
    font-size: 1.8rem;
    margin-bottom: 0.75rem;
}

h2 {
    font-size: 1.3rem;
    margin-top: 2rem;
    border-bottom: 1px solid #e5e7eb;
    padding-bottom: 0.25rem;
}

table {
    border-collapse: collapse;
    width: 100%;
    margin: 0.75rem 0;
    font-size: 0.9rem;
}

th, td {
    border: 1px solid #e5e7eb;
    padding: 0.4rem 0.5rem;
    text-align: left;
}

th {
    background: #f9fafb;
    font-weight: 600;
}
"""


def markdown_to_html(md_text: str, title: str = "Public Holidays") -> str:
    """Wrap rendered Markdown in a standalone, styled HTML page."""
    body_html = markdown.markdown(md_text, extensions=["tables"])

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>{html.escape(title)}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <style>
  {BASE_CSS}
  </style>
</head>
<body>
  <div class="report-container">
    {body_html}
  </div>
</body>
</html>
"""


def build_html_report(
    md_path: Path,
    out_dir: Path,
    title: str = "Public Holidays",
) -> Path:
    """
    Convert a Markdown report on disk to a styled HTML file next to it.
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    md_text = md_path.read_text(encoding="utf-8")
    html_path = out_dir / HTML_FILENAME
    html_path.write_text(markdown_to_html(md_text, title=title), encoding="utf-8")
    return html_path
