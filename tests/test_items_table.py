import math

import pytest

from paged_reports.utils.pdf.sections.items_table import Column, TableLayout, column_offsets, render_table

ROW_FILL = "#EEEEEE"
HEADER_FILL = "#333333"


def _layout(style, **overrides):
    params = dict(
        columns=(
            Column("A", 50),
            Column("B", 100, align="right"),
            Column("C", 80, align="center", header_align="left"),
        ),
        header_style=style,
        row_style=style,
        header_height=20,
        row_height=20,
        text_offset=5,
    )
    params.update(overrides)
    return TableLayout(**params)


def _rows(count):
    return [["a", "b", "c"] for _ in range(count)]


@pytest.mark.parametrize("row_count", [0, 1, 10, 11, 12, 22, 23, 100])
def test_page_count_follows_header_per_page_arithmetic(ctx, recording_surface, text_style, row_count):
    # header 20 + 11 rows of 20 fill the 20..260 band exactly
    rows_per_page = 11

    breaks = render_table(ctx, _layout(text_style), _rows(row_count))

    expected_pages = max(1, math.ceil(row_count / rows_per_page))
    assert recording_surface.page_count() == expected_pages
    assert breaks == expected_pages - 1


def test_zero_rows_draws_header_only(ctx, recording_surface, text_style):
    render_table(ctx, _layout(text_style, header_fill=HEADER_FILL, row_fill=ROW_FILL), [])

    assert recording_surface.page_count() == 1
    assert recording_surface.texts() == ["A", "B", "C"]
    rects = recording_surface.of_kind("rect")
    assert [r["color"] for r in rects] == [HEADER_FILL]
    assert ctx.y == 40


def test_exact_fit_does_not_add_a_page(ctx, recording_surface, text_style):
    render_table(ctx, _layout(text_style), _rows(11))

    assert recording_surface.page_count() == 1
    assert ctx.y == 260


def test_one_row_past_the_floor_adds_one_page_with_header(ctx, recording_surface, text_style):
    render_table(ctx, _layout(text_style), _rows(12))

    assert recording_surface.page_count() == 2
    assert recording_surface.texts(page=1) == ["A", "B", "C", "a", "b", "c"]
    header_a = recording_surface.of_kind("text", page=1)[0]
    assert header_a["y"] == 25
    assert ctx.y == 60


def test_header_repeats_on_every_page_with_rows(ctx, recording_surface, text_style):
    render_table(ctx, _layout(text_style), _rows(30))

    assert recording_surface.page_count() == 3
    for page in range(3):
        texts = recording_surface.texts(page=page)
        assert texts[:3] == ["A", "B", "C"]
        assert texts.count("A") == 1
        assert "a" in texts


def test_table_starting_lower_fits_fewer_rows_on_first_page(ctx, recording_surface, text_style):
    ctx.move_to(100)
    render_table(ctx, _layout(text_style), _rows(7))
    assert recording_surface.page_count() == 1

    # a second table at the floor moves its header to the next page
    render_table(ctx, _layout(text_style), _rows(1))
    assert recording_surface.page_count() == 2
    assert recording_surface.texts(page=0).count("A") == 1
    assert recording_surface.texts(page=1) == ["A", "B", "C", "a", "b", "c"]


@pytest.mark.parametrize("row_count, expected_pages", [(10, 1), (11, 2)])
def test_break_height_reserves_room_below_each_row(ctx, recording_surface, text_style, row_count, expected_pages):
    render_table(ctx, _layout(text_style, break_height=40), _rows(row_count))

    assert recording_surface.page_count() == expected_pages


def test_shading_parity_counts_from_table_start(ctx, recording_surface, text_style):
    render_table(ctx, _layout(text_style, header_fill=HEADER_FILL, row_fill=ROW_FILL), _rows(15))

    first = [r["y"] for r in recording_surface.of_kind("rect", page=0) if r["color"] == ROW_FILL]
    second = [r["y"] for r in recording_surface.of_kind("rect", page=1) if r["color"] == ROW_FILL]
    # rows 1,3,5,7,9 on page one; rows 11 and 13 on page two
    assert first == [60, 100, 140, 180, 220]
    assert second == [40, 80]


def test_row_fill_is_drawn_before_row_text(ctx, recording_surface, text_style):
    render_table(ctx, _layout(text_style, row_fill=ROW_FILL), _rows(4))

    calls = recording_surface.calls
    for pos, call in enumerate(calls):
        if call["kind"] == "rect":
            following = calls[pos + 1]
            assert following["kind"] == "text"
            assert following["content"] == "a"
            assert following["y"] == call["y"] + 5


def test_cells_use_cumulative_column_offsets(ctx, recording_surface, text_style):
    render_table(ctx, _layout(text_style), [["x", "y", "z"]])

    header = recording_surface.of_kind("text")[:3]
    cells = recording_surface.of_kind("text")[3:]
    assert [c["x"] for c in cells] == [20, 70, 170]
    assert [c["width"] for c in cells] == [50, 100, 80]
    assert [c["align"] for c in cells] == ["left", "right", "center"]
    assert [c["align"] for c in header] == ["left", "right", "left"]
    assert all(c["y"] == 45 for c in cells)


def test_row_arity_mismatch_fails_fast(ctx, recording_surface, text_style):
    with pytest.raises(ValueError, match="2 cells"):
        render_table(ctx, _layout(text_style), [["a", "b"]])


def test_column_offsets_and_width(text_style):
    layout = _layout(text_style)
    assert column_offsets(40, layout.columns) == [40, 90, 190]
    assert layout.width == 230
    assert layout.row_break_height == 20


def test_zero_row_table_near_floor_stays_on_page(ctx, recording_surface, text_style):
    # header alone ends at 245, under the 260 floor
    ctx.move_to(225)

    breaks = render_table(ctx, _layout(text_style), [])

    assert breaks == 0
    assert recording_surface.page_count() == 1
    assert recording_surface.texts(page=0) == ["A", "B", "C"]
    assert ctx.y == 245
