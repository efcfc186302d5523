import pytest

from kora.display import (
    BAR_CHARS,
    VisualizerMode,
    eq_bar_rows,
    format_duration,
    lyrics_window,
    next_device_index,
    next_theme_index,
    progress_ratio,
    sleep_label,
    spectrum_column,
)


def _parse(label):
    minutes, secs = label.split(":")
    return int(minutes), secs


class TestVisualizerMode:
    def test_toggle(self):
        assert VisualizerMode.OFF.toggled() is VisualizerMode.NORMAL
        assert VisualizerMode.NORMAL.toggled() is VisualizerMode.OFF
        assert VisualizerMode.FULLSCREEN.toggled() is VisualizerMode.OFF

    def test_fullscreen_toggle(self):
        assert VisualizerMode.FULLSCREEN.fullscreen_toggled() is VisualizerMode.NORMAL
        assert VisualizerMode.NORMAL.fullscreen_toggled() is VisualizerMode.FULLSCREEN
        assert VisualizerMode.OFF.fullscreen_toggled() is VisualizerMode.FULLSCREEN

    def test_fullscreen_twice_from_normal_returns(self):
        mode = VisualizerMode.NORMAL
        assert mode.fullscreen_toggled().fullscreen_toggled() is mode


class TestFormatDuration:
    @pytest.mark.parametrize("seconds", [0, 1, 59, 60, 61, 599, 3600, 7325])
    def test_round_trip(self, seconds):
        minutes, secs = _parse(format_duration(seconds))
        assert len(secs) == 2
        assert minutes * 60 + int(secs) == seconds

    def test_pinned(self):
        assert format_duration(65) == "1:05"

    def test_fraction_truncated(self):
        assert format_duration(59.9) == format_duration(59)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_duration(-1)


class TestSleepLabel:
    def test_fading(self):
        assert sleep_label(30, True) == " | Sleep: fading..."

    def test_remaining(self):
        assert sleep_label(125, False) == " | Sleep: " + format_duration(125)


class TestSpectrumColumn:
    def test_length_matches_height(self):
        assert len(spectrum_column(0.37, 9)) == 9

    def test_zero_is_empty(self):
        assert set(spectrum_column(0.0, 6)) == {" "}

    def test_full_is_solid(self):
        assert spectrum_column(1.0, 5) == ["█"] * 5

    def test_over_full_clamped_to_height(self):
        assert spectrum_column(3.0, 4) == ["█"] * 4

    def test_negative_magnitude_is_empty(self):
        assert set(spectrum_column(-0.5, 3)) == {" "}

    def test_partial_top(self):
        assert spectrum_column(3 / 8, 1) == [BAR_CHARS[2]]

    def test_half_height(self):
        column = spectrum_column(0.5, 4)
        assert column[:2] == ["█", "█"]
        assert column[2:] == [" ", " "]

    def test_filled_cells_grow_with_magnitude(self):
        counts = [
            sum(ch != " " for ch in spectrum_column(m / 20, 8)) for m in range(21)
        ]
        assert counts == sorted(counts)

    def test_bottom_filled_first(self):
        column = spectrum_column(0.6, 10)
        filled = [ch != " " for ch in column]
        assert filled == sorted(filled, reverse=True)


class TestLyricsWindow:
    @pytest.mark.parametrize("current", [None, 0, 3, 10, 19])
    def test_size_and_contains_current(self, current):
        start, end = lyrics_window(20, current, 6)
        assert end - start == 6
        if current is not None:
            assert start <= current < end

    def test_short_lyrics_show_all(self):
        assert lyrics_window(3, 1, 10) == (0, 3)

    def test_near_end_keeps_window_full(self):
        start, end = lyrics_window(10, 9, 4)
        assert end == 10
        assert end - start == 4

    def test_zero_visible(self):
        start, end = lyrics_window(10, 2, 0)
        assert start == end


class TestEqBarRows:
    def test_zero_gain(self):
        assert eq_bar_rows(0.0, 5) == 0

    def test_full_range(self):
        assert eq_bar_rows(12.0, 5) == 5
        assert eq_bar_rows(-12.0, 5) == -5

    def test_clamped(self):
        assert eq_bar_rows(30.0, 4) == 4
        assert eq_bar_rows(-30.0, 4) == -4

    @pytest.mark.parametrize("gain", [1.0, 3.5, 6.0, 9.0, 11.0])
    def test_symmetric(self, gain):
        assert eq_bar_rows(-gain, 6) == -eq_bar_rows(gain, 6)

    def test_monotonic(self):
        rows = [eq_bar_rows(g / 2, 6) for g in range(0, 25)]
        assert rows == sorted(rows)

    def test_negative_half_rejected(self):
        with pytest.raises(ValueError):
            eq_bar_rows(3.0, -1)


class TestNextDeviceIndex:
    def test_empty(self):
        assert next_device_index([], "Speakers") is None

    def test_cycles(self):
        names = ["A", "B", "C"]
        assert next_device_index(names, "A") == 1
        assert next_device_index(names, "C") == 0

    def test_case_insensitive(self):
        names = ["Speakers", "Headphones"]
        assert next_device_index(names, "speakers") == next_device_index(
            names, "Speakers"
        )


class TestNextThemeIndex:
    def test_advance_and_wrap(self):
        assert next_theme_index(0, 10) == 1
        assert next_theme_index(9, 10) == 0

    def test_full_cycle_returns(self):
        index = 4
        for _ in range(10):
            index = next_theme_index(index, 10)
        assert index == 4

    def test_no_themes(self):
        with pytest.raises(ValueError):
            next_theme_index(0, 0)


class TestProgressRatio:
    def test_unknown_duration(self):
        assert progress_ratio(30.0, 0.0) == 0.0

    def test_half(self):
        assert progress_ratio(50.0, 100.0) == pytest.approx(0.5)

    def test_capped(self):
        assert progress_ratio(150.0, 100.0) == 1.0

    def test_range(self):
        for pos in range(0, 200, 7):
            assert 0.0 <= progress_ratio(float(pos), 120.0) <= 1.0