"""
Compiler for sherp slide lists to HTML

Assembles the slides produced by the segmenter into one standalone
index.html, applying each slide's effective directives (styles, classes,
header/footer, page numbers).
"""

import html
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import appsettings
from ..models.directives import DirectiveName, directive_resolve
from ..models.presentation import PresentationMeta
from ..models.slide import Slide
from .log import LOG
from .markdown import HtmlRenderer, blocks_render
from .styles import slideClasses_get, slidePaginate_is, slideStyles_get


BASE_CSS = """
      body { margin: 0; background: #444; font-family: sans-serif; }
      section.slide {
        position: relative; box-sizing: border-box;
        width: 1280px; height: 720px; margin: 24px auto; padding: 64px;
        background: #fff; color: #222; overflow: hidden;
      }
      section.slide > header, section.slide > footer {
        position: absolute; left: 64px; right: 64px; font-size: 18px; opacity: 0.7;
      }
      section.slide > header { top: 20px; }
      section.slide > footer { bottom: 20px; }
      section.slide > .pagination { position: absolute; right: 32px; bottom: 20px; font-size: 18px; }
"""


class Compiler:
    """
    Compiles a slide list to a standalone HTML presentation

    Responsibilities:
    - Render slide content (block tokens) to HTML
    - Materialize directives as classes, inline styles, header/footer
    - Number paginated slides
    - Write index.html (and optionally slides.json)
    """

    def __init__(
        self,
        slides: List[Slide],
        output_dir: str,
        meta: Optional[PresentationMeta] = None,
        verbosity: int = 1,
        write_json: bool = False,
    ) -> None:
        """
        Initialize compiler

        Args:
            slides: Slides in deck order (block-list or HTML content)
            output_dir: Directory for compiled output
            meta: Front matter of the deck; defaults from settings if None
            verbosity: Output verbosity level (0-3)
            write_json: Also dump the slide list as JSON
        """
        self.slides = slides
        self.output_dir = Path(output_dir)
        self.meta = meta or PresentationMeta()
        self.verbosity = verbosity
        self.write_json = write_json
        self.renderer = HtmlRenderer()

    def compile(self) -> Dict[str, Any]:
        """
        Compile slides to an HTML presentation

        Returns:
            dict with status, output_file, slide_count and json_file
            (None unless write_json)
        """
        LOG("Starting compilation...", level=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        sections = '\n'.join(self.slide_compile(slide) for slide in self.slides)
        full_html = self.htmlDocument_build(sections)

        output_file = appsettings.outputFile_get(self.output_dir)
        output_file.write_text(full_html, encoding='utf-8')
        LOG(f"Wrote {output_file}", level=2)

        json_file = self.json_write() if self.write_json else None

        return {
            'status': True,
            'output_file': str(output_file),
            'slide_count': len(self.slides),
            'json_file': str(json_file) if json_file else None,
        }

    def content_render(self, slide: Slide) -> str:
        """Slide content as HTML, rendering block tokens if needed"""
        if isinstance(slide.content, str):
            return slide.content
        return blocks_render(slide.content, self.renderer)

    def slide_compile(self, slide: Slide) -> str:
        """
        Compile one slide to a <section> element

        Header and footer text are HTML-escaped; slide content is not.
        """
        directives = slide.directives
        classes = ' '.join(slideClasses_get(directives))
        style = slideStyles_get(directives)
        style_attr = f' style="{html.escape(style)}"' if style else ''

        parts = [f'<section class="{html.escape(classes)}" data-slide="{slide.index}"{style_attr}>']

        header = directive_resolve(directives, DirectiveName.HEADER)
        if isinstance(header, str):
            parts.append(f'  <header>{html.escape(header)}</header>')

        parts.append(self.content_render(slide))

        footer = directive_resolve(directives, DirectiveName.FOOTER)
        if isinstance(footer, str):
            parts.append(f'  <footer>{html.escape(footer)}</footer>')

        if slidePaginate_is(directives, default=self.meta.paginate):
            parts.append(f'  <span class="pagination">{slide.index}</span>')

        for note in slide.notes:
            parts.append(f'  <aside class="notes">{html.escape(note)}</aside>')

        parts.append('</section>')
        LOG(f"Compiled slide {slide.index} ({classes})", level=3)
        return '\n'.join(parts)

    def htmlDocument_build(self, content: str) -> str:
        """
        Build complete HTML document around the compiled sections

        Args:
            content: Compiled <section> elements

        Returns:
            Complete HTML document
        """
        title = html.escape(self.meta.title or 'sherp presentation')
        theme = html.escape(self.meta.theme)
        description = ''
        if self.meta.description:
            description = f'\n    <meta name="description" content="{html.escape(self.meta.description)}">'
        author = ''
        if self.meta.author:
            author = f'\n    <meta name="author" content="{html.escape(self.meta.author)}">'

        return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>{description}{author}
    <style>{BASE_CSS}      aside.notes {{ display: none; }}
    </style>
  </head>
  <body class="theme-{theme}" data-slide-count="{len(self.slides)}">
{content}
  </body>
</html>"""

    def json_write(self) -> Path:
        """Dump the slide list (with rendered content) to slides.json"""
        json_file = appsettings.jsonFile_get(self.output_dir)
        payload = {
            'meta': self.meta.model_dump(mode='json'),
            'slides': [
                {**slide.to_dict(), 'content': self.content_render(slide)}
                for slide in self.slides
            ],
        }
        json_file.write_text(json.dumps(payload, indent=2), encoding='utf-8')
        LOG(f"Wrote {json_file}", level=2)
        return json_file
