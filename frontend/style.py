# frontend/style.py
# Page styles: cards, tag colors and the dark theme overrides

LIGHT_VARS = """
:root {
    --bg-color: #f5f7fb;
    --card-bg: #ffffff;
    --text-color: #1f2430;
    --accent-color: #3a6ff7;
}
"""

DARK_VARS = """
:root {
    --bg-color: #12151c;
    --card-bg: #1d2230;
    --text-color: #e6e9f0;
    --accent-color: #7aa2ff;
}
[data-testid="stAppViewContainer"], [data-testid="stHeader"] {
    background-color: var(--bg-color);
    color: var(--text-color);
}
"""

BASE_CSS = """
.devtec-title a { color: var(--text-color); text-decoration: none; cursor: pointer; }
.card-container { display: flex; flex-wrap: wrap; gap: 1rem; }
.search-info { width: 100%; margin: 0 0 .5rem 0; opacity: .85; color: var(--text-color); }
.empty-state { color: var(--text-color); }
.card {
    background: var(--card-bg);
    color: var(--text-color);
    border-radius: 10px;
    padding: 1rem 1.25rem;
    width: calc(33% - 1rem);
    min-width: 260px;
    display: flex;
    flex-direction: column;
    justify-content: space-between;
    box-shadow: 0 2px 8px rgba(0, 0, 0, .12);
}
.card h2 { font-size: 1.3rem; margin: 0 0 .4rem 0; color: var(--text-color); }
.card a[rel] { color: var(--accent-color); font-weight: 600; }
.tags-container { display: flex; flex-wrap: wrap; gap: .35rem; margin-top: .5rem; }
.tag {
    border-radius: 999px;
    padding: .1rem .6rem;
    font-size: .8rem;
    color: #fff !important;
    text-decoration: none !important;
    cursor: pointer;
}
.tag-color-1 { background: #3a6ff7; }
.tag-color-2 { background: #e0563b; }
.tag-color-3 { background: #2fa36b; }
.tag-color-4 { background: #9b51e0; }
.tag-color-5 { background: #d99a1e; }
"""


def page_css(dark: bool) -> str:
    """Return the <style> block for the current theme."""
    return f"<style>{DARK_VARS if dark else LIGHT_VARS}{BASE_CSS}</style>"
