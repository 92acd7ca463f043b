"""Markdown + LaTeX rendering for question prompts.

Prompts are authored as markdown with ``$...$`` math. The renderer turns the
markdown into HTML and leaves math to MathJax inside the QWebEngineView, so
chemistry and physics notation renders the way quiz authors typed it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip() or ""
        if not sanitized:
            return "<p><em>No question text.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_with_mathjax(
        self,
        body_html: str,
        title: str = "SciQuest",
        font_size: int = 14,
        image_ref: str | None = None,
    ) -> str:
        """Wrap a fragment inside a minimal HTML document that loads MathJax."""

        image_html = ""
        if image_ref:
            image_html = f'<img class="visual-aid" src="{html.escape(image_ref, quote=True)}" alt="Question visual aid" />'
        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(title)}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; color: #f5f7ff; text-align: center; }}
      .question-html {{ font-size: {font_size}pt; line-height: 1.5; font-weight: 600; }}
      .visual-aid {{ max-height: 32vh; max-width: 100%; border-radius: 0.5rem; margin-bottom: 0.75rem; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
    {image_html}
    <div class=\"question-html\">{body_html}</div>
  </body>
</html>"""

    def render_full_document(
        self,
        markdown_text: str,
        title: str = "SciQuest",
        font_size: int = 14,
        image_ref: str | None = None,
    ) -> str:
        """Convenience wrapper to render markdown and embed MathJax."""

        fragment = self.render_fragment(markdown_text)
        return self.wrap_with_mathjax(fragment, title=title, font_size=font_size, image_ref=image_ref)


renderer = MarkdownMathRenderer()
# Shared instance; the Qt view renders from the GUI thread only.
