"""Rendering helpers for the editor gutter (line numbers, syllables, rhyme dots)."""

from __future__ import annotations

from html import escape
from typing import List

from songpad.core import COLOR_CYCLE, BufferAnalysis, GroupKind, LineAnnotation


def _palette_css() -> str:
    rules = []
    for index in range(COLOR_CYCLE):
        hue = (index * 137) % 360
        rules.append(f".rhyme-color-{index} {{--rhyme-color: hsl({hue}, 70%, 45%);}}")
    return "\n".join(rules)


GUTTER_CSS = (
    """
.sp-gutter {font-family: ui-monospace, monospace; border-collapse: collapse; width: 100%;}
.sp-gutter td {padding: 0 8px; line-height: 1.5rem; vertical-align: top;}
.sp-line-number {color: #94a3b8; text-align: right; width: 3rem;}
.sp-line-text {white-space: pre-wrap;}
.syllable-count {color: #475569; text-align: right; width: 2.5rem;}
.rhyme-indicator {width: 1.5rem;}
.rhyme-dot {width: 0.7rem; height: 0.7rem; border-radius: 50%; margin-top: 0.4rem; background: var(--rhyme-color);}
.rhyme-dot.near-rhyme {background: transparent; border: 2px solid var(--rhyme-color); box-sizing: border-box;}
"""
    + _palette_css()
)


class GutterFormatter:
    """Render a :class:`BufferAnalysis` as gutter markup."""

    break_symbol = "—"

    def line_number(self, analysis: BufferAnalysis, index: int) -> str:
        line = analysis.lines[index]
        return self.break_symbol if line.is_break else str(index + 1)

    @staticmethod
    def syllables(annotation: LineAnnotation) -> str:
        if annotation.syllable_count is None:
            return ""
        return str(annotation.syllable_count)

    @staticmethod
    def indicator(annotation: LineAnnotation) -> str:
        if annotation.group_kind is GroupKind.NONE or annotation.group_color_index is None:
            return '<div class="rhyme-indicator"></div>'
        dot_class = "rhyme-dot near-rhyme" if annotation.group_kind is GroupKind.NEAR_RHYME else "rhyme-dot"
        return (
            f'<div class="rhyme-indicator rhyme-color-{annotation.group_color_index}">'
            f'<div class="{dot_class}"></div></div>'
        )

    def render_line_numbers(self, analysis: BufferAnalysis) -> str:
        return "".join(
            f"<div>{self.line_number(analysis, index)}</div>"
            for index in range(len(analysis.lines))
        )

    def render_syllable_counts(self, analysis: BufferAnalysis) -> str:
        return "".join(
            f'<div class="syllable-count">{self.syllables(annotation)}</div>'
            for annotation in analysis.annotations
        )

    def render_indicators(self, analysis: BufferAnalysis) -> str:
        return "".join(self.indicator(annotation) for annotation in analysis.annotations)

    def render_table(self, analysis: BufferAnalysis) -> str:
        """Render gutter and line text side by side as one HTML table."""

        rows: List[str] = []
        for index, (line, annotation) in enumerate(zip(analysis.lines, analysis.annotations)):
            rows.append(
                "<tr>"
                f'<td class="sp-line-number">{self.line_number(analysis, index)}</td>'
                f'<td class="syllable-count">{self.syllables(annotation)}</td>'
                f"<td>{self.indicator(annotation)}</td>"
                f'<td class="sp-line-text">{escape(line.text)}</td>'
                "</tr>"
            )
        return f'<table class="sp-gutter">{"".join(rows)}</table>'

    def render_text(self, analysis: BufferAnalysis) -> str:
        """Plain text gutter: number, syllables, group marker and the line itself.

        Rhyme groups are marked ``R<n>`` and near-rhyme groups ``N<n>``.
        """

        output: List[str] = []
        for index, (line, annotation) in enumerate(zip(analysis.lines, analysis.annotations)):
            if annotation.group_kind is GroupKind.RHYME:
                marker = f"R{annotation.group_color_index}"
            elif annotation.group_kind is GroupKind.NEAR_RHYME:
                marker = f"N{annotation.group_color_index}"
            else:
                marker = ""
            output.append(
                f"{self.line_number(analysis, index):>4} "
                f"{self.syllables(annotation):>3} "
                f"{marker:<4} {line.text}".rstrip()
            )
        return "\n".join(output)

    @staticmethod
    def summary(analysis: BufferAnalysis) -> str:
        content_lines = sum(1 for line in analysis.lines if line.is_content)
        total_syllables = sum(annotation.syllable_count or 0 for annotation in analysis.annotations)
        return (
            f"{content_lines} lines · {total_syllables} syllables · "
            f"{len(analysis.rhyme_groups)} rhyme groups · "
            f"{len(analysis.near_rhyme_groups)} near-rhyme groups"
        )


__all__ = ["GutterFormatter", "GUTTER_CSS"]
