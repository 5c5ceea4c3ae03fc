from songpad.app.services.gutter_formatter import GUTTER_CSS, GutterFormatter
from songpad.core import COLOR_CYCLE, analyze_buffer


def test_line_numbers_use_dash_for_breaks():
    formatter = GutterFormatter()
    analysis = analyze_buffer("day\n---\nway")

    assert formatter.render_line_numbers(analysis) == "<div>1</div><div>—</div><div>3</div>"


def test_syllable_column_is_blank_for_blank_and_break_lines():
    formatter = GutterFormatter()
    analysis = analyze_buffer("the table\n\n---")

    assert formatter.render_syllable_counts(analysis) == (
        '<div class="syllable-count">3</div>'
        '<div class="syllable-count"></div>'
        '<div class="syllable-count"></div>'
    )


def test_indicators_distinguish_rhyme_and_near_rhyme():
    formatter = GutterFormatter()
    analysis = analyze_buffer("cat\nbat\n---\ncap\nlad\nlog")

    indicators = formatter.render_indicators(analysis)

    assert indicators.count('<div class="rhyme-dot"></div>') == 2
    assert indicators.count('<div class="rhyme-dot near-rhyme"></div>') == 2
    assert indicators.count("rhyme-color-0") == 4
    assert indicators.endswith('<div class="rhyme-indicator"></div>')


def test_render_text_marks_groups():
    formatter = GutterFormatter()
    analysis = analyze_buffer("cat\nbat\n---\ncap\nlad")

    rows = formatter.render_text(analysis).split("\n")

    assert rows[0] == "   1   1 R0   cat"
    assert rows[2].split() == ["—", "---"]
    assert rows[3] == "   4   1 N0   cap"


def test_summary_counts():
    analysis = analyze_buffer("cat\nbat\n\nkit")

    assert GutterFormatter.summary(analysis) == (
        "3 lines · 3 syllables · 1 rhyme groups · 0 near-rhyme groups"
    )


def test_css_covers_every_colour():
    for index in range(COLOR_CYCLE):
        assert f".rhyme-color-{index} " in GUTTER_CSS
