from html import escape
from typing import List

from .llm.prompts import GENRES
from .workflow.state import WorkflowSnapshot

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Story Generator</title>
    <style>
      body {{ font-family: Arial, sans-serif; margin: 0; background: linear-gradient(135deg, #faf5ff, #eff6ff); color: #1f2937; min-height: 100vh; }}
      .container {{ max-width: 768px; margin: 0 auto; padding: 24px; }}
      .header {{ text-align: center; margin-bottom: 32px; }}
      h1 {{ margin: 0 0 8px; font-size: 30px; }}
      .muted {{ color: #4b5563; }}
      .card {{ background: white; border-radius: 8px; box-shadow: 0 10px 25px rgba(0, 0, 0, 0.1); padding: 24px; margin-bottom: 24px; }}
      label {{ display: block; font-size: 14px; font-weight: 600; color: #374151; margin-bottom: 8px; }}
      input, select {{ width: 100%; box-sizing: border-box; padding: 8px 16px; border: 1px solid #d1d5db; border-radius: 6px; margin-bottom: 16px; }}
      button {{ width: 100%; padding: 10px 16px; border: 0; border-radius: 6px; background: #9333ea; color: white; cursor: pointer; }}
      button:disabled {{ opacity: 0.5; cursor: not-allowed; }}
      .error {{ margin-top: 16px; color: #dc2626; font-size: 14px; }}
      .story p {{ margin: 0 0 16px; color: #374151; line-height: 1.6; }}
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h1>Story Generator</h1>
        <div class="muted">Create unique stories with AI using keywords and genres</div>
      </div>
      <form class="card" id="storyForm" method="post" action="/">
        <label for="keywords">Keywords</label>
        <input type="text" id="keywords" name="keywords" value="{keywords}" placeholder="Enter keywords (e.g., dragon, castle, princess)" />
        <label for="genre">Genre</label>
        <select id="genre" name="genre">
{options}
        </select>
        <input type="hidden" name="story" value="{story_value}" />
        <button type="submit" id="generateBtn"{disabled}>{button_label}</button>
{error}
      </form>
{story}
    </div>
    <script>
      const form = document.getElementById("storyForm");
      const btn = document.getElementById("generateBtn");
      form.addEventListener("submit", (event) => {{
        if (btn.disabled) {{
          event.preventDefault();
          return;
        }}
        btn.disabled = true;
        btn.textContent = "Generating Story...";
      }});
    </script>
  </body>
</html>
"""


def render_genre_options(selected: str) -> str:
    lines: List[str] = []
    for genre in GENRES:
        marker = " selected" if genre == selected else ""
        lines.append(
            f'          <option value="{escape(genre)}"{marker}>{escape(genre)}</option>'
        )
    return "\n".join(lines)


def render_error(message: str) -> str:
    if not message:
        return ""
    return f'        <div class="error" id="error">{escape(message)}</div>'


def render_story(paragraphs: List[str]) -> str:
    if not paragraphs:
        return ""
    blocks = "\n".join(f"          <p>{escape(p)}</p>" for p in paragraphs)
    return (
        '      <div class="card" id="story">\n'
        "        <h2>Your Story</h2>\n"
        '        <div class="story">\n'
        f"{blocks}\n"
        "        </div>\n"
        "      </div>"
    )


def render_page(view: WorkflowSnapshot) -> str:
    """Render the whole page from one snapshot; no other input is read."""
    return PAGE_TEMPLATE.format(
        keywords=escape(view.keywords),
        options=render_genre_options(view.genre),
        story_value=escape(view.story),
        disabled=" disabled" if view.loading else "",
        button_label="Generating Story..." if view.loading else "Generate Story",
        error=render_error(view.error_message),
        story=render_story(view.paragraphs),
    )
