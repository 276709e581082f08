APP_ORG = "PyPad"
APP_NAME = "PyPad"

UNTITLED = "Untitled"
SAVE_AS_DEFAULT_NAME = "Untitled.txt"

# Initial window geometry; overridable from [window] in config.ini
WINDOW_WIDTH = 700
WINDOW_HEIGHT = 400
WINDOW_MIN_WIDTH = 400
WINDOW_MIN_HEIGHT = 300
CASCADE_DX = 30
CASCADE_DY = 30

MARKDOWN_EXTENSIONS = frozenset({"md", "markdown", "mdown"})
HTML_EXTENSIONS = frozenset({"html", "htm"})

PREVIEW_PLACEHOLDER = "## Hello World\n\nRender Markdown text in PyPad."

LAST_EDITED_FORMAT = "%d/%m/%y - %H:%M"

OPEN_FILTER = (
    "Text files (*.txt *.md *.markdown *.mdown *.html *.htm);;"
    "Markdown (*.md *.markdown *.mdown);;HTML (*.html *.htm);;All files (*)"
)
SAVE_FILTER = "All files (*)"

CSS_PREVIEW = """
:root { --bg:#ffffff; --fg:#111; --muted:#555; --code:#f4f6f8; --border:#ddd; --link:#0b6bfd; }
@media (prefers-color-scheme: dark) {
  :root { --bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --code:#1a1d24; --border:#2a2f3a; --link:#7aa2ff; }
}
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1rem; line-height: 1.5; }
pre { padding:.75rem; overflow:auto; background:var(--code); }
code { background:var(--code); padding:.15rem .3rem; }
blockquote { border-left:4px solid var(--border); margin:1em 0; padding:.25em .75em; color:var(--muted); }
table { border-collapse: collapse; }
th, td { border:1px solid var(--border); padding:.4rem .6rem; }
a { color:var(--link); text-decoration:none; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

SETTINGS_RECENTS = "file/recent"
SETTINGS_PREVIEW_VISIBLE = "view/preview_visible"
MAX_RECENTS = 8
