from chordsheet.annotator import (
    _split_lines,
    annotate,
    extract_chords_with_offsets,
    merge_chord_lyric_lines,
    wrap_chord_line,
)

# "        G         C" puts G over "grace" and C over "sweet"
ALIGNED_ROW = " " * 8 + "G" + " " * 9 + "C"
LYRIC = "Amazing grace how sweet"

# ---------------------------------------------------------------------------
# _split_lines
# ---------------------------------------------------------------------------


def test_split_lines_keeps_line_breaks():
    assert _split_lines("a\r\nb\nc") == [("a", "\r\n"), ("b", "\n"), ("c", "")]


def test_split_lines_trailing_newline():
    assert _split_lines("a\n") == [("a", "\n"), ("", "")]


# ---------------------------------------------------------------------------
# extract_chords_with_offsets
# ---------------------------------------------------------------------------


def test_extract_offsets():
    assert extract_chords_with_offsets("G        C") == [(0, "G"), (9, "C")]


def test_extract_offsets_skips_non_chords():
    assert extract_chords_with_offsets("C  x2  G") == [(0, "C"), (7, "G")]


def test_extract_offsets_repeated_chord():
    # Each occurrence gets its own column
    assert extract_chords_with_offsets("G  G  G") == [(0, "G"), (3, "G"), (6, "G")]


def test_extract_offsets_empty_line():
    assert extract_chords_with_offsets("   ") == []


# ---------------------------------------------------------------------------
# merge_chord_lyric_lines
# ---------------------------------------------------------------------------


def test_merge_inserts_at_columns():
    assert merge_chord_lyric_lines(ALIGNED_ROW, LYRIC) == "Amazing [G]grace how [C]sweet"


def test_merge_uses_exact_columns():
    assert merge_chord_lyric_lines("G        C", LYRIC) == "[G]Amazing g[C]race how sweet"


def test_merge_chord_past_end_appended_with_space():
    chord_line = "G" + " " * 4 + "C" + " " * 10 + "D"
    assert merge_chord_lyric_lines(chord_line, "Hi there") == "[G]Hi th[C]ere [D]"


def test_merge_several_chords_past_end_keep_order():
    assert merge_chord_lyric_lines(" " * 8 + "G   C", "Hi") == "Hi [G] [C]"


def test_merge_chord_at_exact_end():
    assert merge_chord_lyric_lines(" " * 5 + "G", "Hello") == "Hello[G]"


def test_merge_unicode_lyric():
    chord_line = "    C#m7        F#7"
    lyric_line = "Él es Jesús Hijo de Dios"
    assert merge_chord_lyric_lines(chord_line, lyric_line) == "Él e[C#m7]s Jesús Hijo[F#7] de Dios"


def test_merge_no_chords_returns_lyric_unchanged():
    assert merge_chord_lyric_lines("   ", "Some lyrics here") == "Some lyrics here"


# ---------------------------------------------------------------------------
# wrap_chord_line
# ---------------------------------------------------------------------------


def test_wrap_keeps_spacing():
    assert wrap_chord_line("C   G   Am   F") == "[C]   [G]   [Am]   [F]"


def test_wrap_leaves_non_chord_words():
    assert wrap_chord_line("C  G  x2") == "[C]  [G]  x2"


def test_wrap_does_not_rewrap_brackets():
    assert wrap_chord_line("[Intro] C G") == "[Intro] [C] [G]"


# ---------------------------------------------------------------------------
# annotate
# ---------------------------------------------------------------------------


def test_annotate_stacked_layout():
    assert annotate("G        C\nAmazing grace how sweet\n") == "[G]Amazing g[C]race how sweet\n"


def test_annotate_stacked_layout_aligned():
    text = f"{ALIGNED_ROW}\n{LYRIC}\n"
    assert annotate(text) == "Amazing [G]grace how [C]sweet\n"


def test_annotate_standalone_intro():
    assert annotate("C   G   Am   F") == "[C]   [G]   [Am]   [F]"


def test_annotate_chord_line_before_blank():
    assert annotate("C  G\n\nLyrics here") == "[C]  [G]\n\nLyrics here"


def test_annotate_consecutive_chord_lines():
    text = "C  G\nAm  F\nHello world"
    assert annotate(text) == "[C]  [G]\n[Am]Hell[F]o world"


def test_annotate_chord_line_at_end():
    assert annotate("Hello\nC G") == "Hello\n[C] [G]"


def test_annotate_chord_line_above_section_label():
    assert annotate("C  G\n[Chorus]") == "[C]  [G]\n[Chorus]"


def test_annotate_lyrics_pass_through():
    text = "Just some lyrics\n  indented line  \n"
    assert annotate(text) == text


def test_annotate_already_bracketed_pass_through():
    text = "[Chorus]\n[G]  [C]\n[C]Bless the Lord [G]oh my soul\n"
    assert annotate(text) == text


def test_annotate_preserves_crlf():
    assert annotate("G   C\r\nHello world\r\n") == "[G]Hell[C]o world\r\n"


def test_annotate_preserves_trailing_spaces():
    assert annotate("C\nla la  ") == "[C]la la  "


def test_annotate_full_sheet():
    text = (
        "Verse 1\n"
        "    C#m7        F#7\n"
        "Él es Jesús Hijo de Dios\n"
        "\n"
        "E   B   A\n"
    )
    expected = (
        "Verse 1\n"
        "Él e[C#m7]s Jesús Hijo[F#7] de Dios\n"
        "\n"
        "[E]   [B]   [A]\n"
    )
    assert annotate(text) == expected


def test_annotate_empty_input():
    assert annotate("") == ""
    assert annotate("\n\n") == "\n\n"


def test_annotate_row_with_unknown_chord_not_folded():
    # Folding would drop Am7b5; keep the row and the lyric as they are
    text = "Am7b5   D7   Gm\nHello there my friend\n"
    assert annotate(text) == "Am7b5   [D7]   [Gm]\nHello there my friend\n"


def test_annotate_row_with_repeat_marker_not_folded():
    assert annotate("C  G  x2\nHello world\n") == "[C]  [G]  x2\nHello world\n"
