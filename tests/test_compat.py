"""
Delay filter layout tests: old files store DelayLP, new ones DelayFilter
"""

import pytest

from babylon.compat import DelayFilterLayout, read_delay_filter
from babylon.decoder import read_bytes
from babylon.effect import DelayFilterMode
from babylon.params import ParameterBag, RawParam


class TestLayoutDetection:

    def test_modern_when_delay_filter_present(self):
        bag = ParameterBag([RawParam('DelayFilter', '0.5')])
        assert DelayFilterLayout.detect(bag) is DelayFilterLayout.MODERN

    def test_legacy_otherwise(self):
        assert DelayFilterLayout.detect(ParameterBag()) is DelayFilterLayout.LEGACY
        bag = ParameterBag([RawParam('DelayLP', '0.5')])
        assert DelayFilterLayout.detect(bag) is DelayFilterLayout.LEGACY

    def test_detection_does_not_consume(self):
        bag = ParameterBag([RawParam('DelayFilter', '0.5')])
        DelayFilterLayout.detect(bag)
        assert bag.contains('DelayFilter')


class TestReadDelayFilter:

    def test_legacy_position(self):
        bag = ParameterBag([RawParam('DelayLP', '0.708')])
        position, mode = read_delay_filter(bag, DelayFilterLayout.LEGACY)

        assert position == pytest.approx(0.708)
        assert mode is DelayFilterMode.BAND_PASS_3000
        assert len(bag) == 0

    def test_modern_position(self):
        bag = ParameterBag([RawParam('DelayFilter', '0.667')])
        position, mode = read_delay_filter(bag, DelayFilterLayout.MODERN)

        assert position == pytest.approx(0.667)
        assert mode is DelayFilterMode.HIGH_PASS_100

    def test_modern_wins_over_legacy(self):
        """Both ids present: DelayFilter is used and DelayLP is consumed"""
        bag = ParameterBag([RawParam('DelayLP', '0.25'), RawParam('DelayFilter', '0.333')])
        position, mode = read_delay_filter(bag, DelayFilterLayout.detect(bag))

        assert mode is DelayFilterMode.LOW_PASS_200
        assert position == pytest.approx(0.333)
        assert bag.remaining() == []

    def test_absent_is_off(self):
        position, mode = read_delay_filter(ParameterBag(), DelayFilterLayout.LEGACY)
        assert (position, mode) == (0.0, DelayFilterMode.OFF)

    def test_position_between_stops_is_off(self):
        bag = ParameterBag([RawParam('DelayFilter', '0.1')])
        position, mode = read_delay_filter(bag, DelayFilterLayout.MODERN)

        assert position == pytest.approx(0.1)
        assert mode is DelayFilterMode.OFF

    @pytest.mark.parametrize('layout,param_id', [
        (DelayFilterLayout.LEGACY, 'DelayLP'),
        (DelayFilterLayout.MODERN, 'DelayFilter'),
    ])
    def test_every_stop_in_both_layouts(self, layout, param_id):
        for expected in DelayFilterMode:
            bag = ParameterBag([RawParam(param_id, repr(expected.position))])
            _, mode = read_delay_filter(bag, layout)
            assert mode is expected

    @pytest.mark.parametrize('param_id', ['DelayLP', 'DelayFilter'])
    @pytest.mark.parametrize('text', ['1e306', '-1e306'])
    def test_huge_position_is_off(self, preset_xml, param_id, text):
        """Positions too large to scale to a stop fall back instead of failing the decode"""
        preset = read_bytes(preset_xml([(param_id, text)]))

        assert preset.delay.filter == float(text)
        assert preset.delay.filter_mode is DelayFilterMode.OFF
