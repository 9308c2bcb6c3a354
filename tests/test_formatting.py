"""
Frame rendering tests
"""

import pytest

from tracestack import (
    CommandFrame,
    ContentFrame,
    Frame,
    FrameKind,
    GenericFrame,
    TextFrame,
    format_trace_head,
    frame_to_string,
)


@pytest.mark.parametrize(
    "frame, expected",
    [
        (CommandFrame(command="foo", file="a.tex", lno=3, col=9), "a.tex:3:9: in \\foo"),
        (CommandFrame(command="foo", file="a.tex", lno=3), "a.tex:3: in \\foo"),
        (CommandFrame(command="foo", file="a.tex"), "a.tex: in \\foo"),
        (CommandFrame(command="foo", lno=3), "3: in \\foo"),
        # column is only shown together with a line number
        (CommandFrame(command="foo", col=9), "in \\foo"),
        (CommandFrame(command="foo"), "in \\foo"),
    ],
)
def test_location_segments(frame, expected):
    assert frame_to_string(frame) == expected


def test_skip_file():
    frame = CommandFrame(command="foo", file="a.tex", lno=3)
    assert frame_to_string(frame, skip_file=True) == "3: in \\foo"
    assert frame_to_string(CommandFrame(command="foo", file="a.tex"), True) == "in \\foo"


def test_command_options():
    frame = CommandFrame(command="font", options={"family": "Gentium", "size": "12pt"})
    assert frame_to_string(frame) == "in \\font[family=Gentium, size=12pt]"


def test_sequence_options():
    frame = CommandFrame(command="font", options=["12pt", "bold"])
    assert frame_to_string(frame) == "in \\font[12pt, bold]"
    assert frame.to_dict()["options"] == ["12pt", "bold"]


def test_content_frame_renders_like_command():
    content = ContentFrame(command="em", file="a.tex", lno=1, options={"style": "italic"})
    command = CommandFrame(command="em", file="a.tex", lno=1, options={"style": "italic"})
    assert frame_to_string(content) == frame_to_string(command)
    assert content.kind is FrameKind.CONTENT
    assert command.kind is FrameKind.COMMAND


def test_missing_command_renders_empty_name():
    assert frame_to_string(CommandFrame()) == "in \\"


def test_short_text_is_quoted():
    assert frame_to_string(TextFrame(text="0123456789")) == 'in "0123456789"'


def test_long_text_is_truncated():
    text = "abcdefghijklmnopqrstuvwxyz0123"
    assert len(text) == 30
    assert frame_to_string(TextFrame(text=text)) == 'in "abcdefghijklmnopqr…"'


@pytest.mark.parametrize(
    "length, truncated",
    [(20, False), (21, True)],
)
def test_truncation_threshold(length, truncated):
    text = "x" * length
    rendered = frame_to_string(TextFrame(text=text))
    if truncated:
        assert rendered == 'in "' + "x" * 18 + '…"'
    else:
        assert rendered == 'in "' + text + '"'


def test_control_characters_use_glyphs():
    assert frame_to_string(TextFrame(text="a\nb")) == 'in "a␤b"'
    assert frame_to_string(TextFrame(text="a\tb\vc")) == 'in "a␉b␋c"'
    assert "\n" not in frame_to_string(TextFrame(text="line\n" * 10))


def test_generic_frames():
    assert frame_to_string(GenericFrame(extra={"note": "x"}, lno=2)) == "2: in {'note': 'x'}"
    assert frame_to_string(GenericFrame()) == "in "
    assert frame_to_string(Frame(file="a.tex")) == "a.tex: in "


def test_push_id_not_rendered():
    frame = CommandFrame(command="foo", push_id=42)
    assert "42" not in frame_to_string(frame)
    assert frame == CommandFrame(command="foo")


def test_head_empty():
    assert format_trace_head([], None) is None
    assert format_trace_head([], TextFrame(text="t")) == 'after in "t"'


def test_head_near_skips_same_file():
    frames = [
        CommandFrame(command="sec", file="doc.tex", lno=5),
        ContentFrame(command="x", file="doc.tex"),
    ]
    assert format_trace_head(frames, None) == "doc.tex: in \\x near 5: in \\sec"


def test_head_near_picks_nearest_positional_frame():
    frames = [
        CommandFrame(command="document", file="doc.tex", lno=1),
        CommandFrame(command="section", file="doc.tex", lno=12),
        CommandFrame(command="hbox", file="doc.tex"),
        TextFrame(text="word"),
    ]
    assert format_trace_head(frames, None) == 'in "word" near doc.tex:12: in \\section'


def test_head_after_matches_near_frame_file():
    frames = [
        CommandFrame(command="sec", file="doc.tex", lno=5),
        TextFrame(text="a"),
    ]
    after = CommandFrame(command="par", file="doc.tex", lno=9)
    assert format_trace_head(frames, after) == 'in "a" near doc.tex:5: in \\sec after 9: in \\par'

    elsewhere = CommandFrame(command="par", file="other.tex", lno=9)
    assert format_trace_head(frames, elsewhere) == 'in "a" near doc.tex:5: in \\sec'


def test_head_after_without_files():
    assert format_trace_head([TextFrame(text="a")], TextFrame(text="b")) == 'in "a" after in "b"'


def test_head_does_not_mutate_frames():
    frames = [CommandFrame(command="sec", file="doc.tex", lno=5), TextFrame(text="a")]
    before = list(frames)
    format_trace_head(frames, None)
    assert frames == before
