"""Rendering of generated symbol tables from jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from symbolgen.core.config import BASE_CURRENCIES
from symbolgen.core.errors import RenderError
from symbolgen.core.logging import get_logger
from symbolgen.schemas.asset import Asset

log = get_logger("renderer")


_ESCAPES = {"\\": "\\\\", "\"": "\\\"", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def string_literal(value: object) -> str:
    """Double-quoted literal that Rust and TypeScript both accept."""
    text = "" if value is None else str(value)
    # Other control characters have no common escape syntax; drop them
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in text if ch in _ESCAPES or ch.isprintable())
    return f"\"{escaped}\""


class ArtifactRenderer:
    """Turns the final, identifier-ordered asset list into source files.

    The renderer does no filtering or sorting; it writes what it is given.
    """

    def __init__(self, templates_dir: str | Path, base_currencies: Sequence[str] = BASE_CURRENCIES):
        self.templates_dir = Path(templates_dir)
        self.base_currencies: List[Tuple[int, str]] = list(enumerate(base_currencies))
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )
        self.env.filters["literal"] = string_literal

    def render(self, template_name: str, assets: Sequence[Asset]) -> str:
        try:
            template = self.env.get_template(template_name)
            return template.render(assets=list(assets), base_currencies=self.base_currencies)
        except TemplateError as exc:
            raise RenderError(f"Cannot render {template_name}: {exc}") from exc

    def write(self, template_name: str, assets: Sequence[Asset], destination: str | Path) -> Path:
        """Render fully, then write the whole destination file."""
        return self.write_text(self.render(template_name, assets), destination)

    def write_text(self, text: str, destination: str | Path) -> Path:
        """Replace ``destination`` with already rendered text."""
        dest = Path(destination)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with dest.open("w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as exc:
            raise RenderError(f"Cannot write {dest}: {exc}") from exc
        log.info(f"Wrote {dest} ({len(text)} bytes)")
        return dest
