"""
Parameter bag and container reading tests

Run with: pytest tests/ -v
"""

import io

import pytest

from babylon.errors import InvalidDataError
from babylon.params import EFFECT_ORDER_SLOTS, ParameterBag, RawParam


class TestParameterBag:
    """Consumable lookup of raw parameters"""

    def test_remove_returns_and_consumes(self):
        """A removed parameter is gone from the bag"""
        bag = ParameterBag([RawParam('EnvAttack', '2.0'), RawParam('EnvDecay', '150')])

        assert bag.remove('EnvAttack') == RawParam('EnvAttack', '2.0')
        assert bag.remove('EnvAttack') is None
        assert len(bag) == 1

    def test_remove_missing_is_none(self):
        bag = ParameterBag()
        assert bag.remove('Nope') is None

    def test_duplicate_ids_come_out_in_file_order(self):
        """The first occurrence is returned first, the second stays behind"""
        bag = ParameterBag([RawParam('Glide', '1'), RawParam('Glide', '2')])

        assert bag.remove('Glide').value == '1'
        assert bag.remaining() == [RawParam('Glide', '2')]
        assert bag.remove('Glide').value == '2'
        assert not bag.contains('Glide')

    def test_contains_does_not_consume(self):
        bag = ParameterBag([RawParam('DelayFilter', '0.5')])

        assert bag.contains('DelayFilter')
        assert bag.contains('DelayFilter')
        assert len(bag) == 1

    def test_remaining_keeps_file_order(self):
        """Leftovers are listed in the order the file had them"""
        params = [RawParam('C', '3'), RawParam('A', '1'), RawParam('B', '2'), RawParam('A', '4')]
        bag = ParameterBag(params)
        bag.remove('B')

        assert [p.id for p in bag.remaining()] == ['C', 'A', 'A']
        assert [p.value for p in bag.remaining()] == ['3', '1', '4']

    def test_effect_order_must_have_seven_slots(self):
        with pytest.raises(ValueError):
            ParameterBag(effect_order=(0, 1, 2))

    def test_default_effect_order_is_empty_slots(self):
        bag = ParameterBag()
        assert bag.effect_order == (None,) * EFFECT_ORDER_SLOTS


class TestContainerReading:
    """Building a bag from the XML document"""

    def test_root_attributes(self, preset_xml):
        data = preset_xml(name='Bass', info='Round', Scale=2, CustomScale=1, Root=5,
                          PresetID=40, PresetFolder=7, FX_Order_0=3)
        bag = ParameterBag.from_bytes(data)

        assert bag.preset_name == 'Bass'
        assert bag.preset_info == 'Round'
        assert (bag.scale, bag.custom_scale, bag.root_key) == (2, 1, 5)
        assert (bag.preset_id, bag.preset_folder) == (40, 7)
        assert bag.effect_order == (3, None, None, None, None, None, None)

    def test_absent_optional_attributes(self, preset_xml):
        bag = ParameterBag.from_bytes(preset_xml())

        assert (bag.scale, bag.custom_scale, bag.root_key) == (0, 0, 0)
        assert bag.preset_id is None
        assert bag.preset_folder is None

    def test_param_children(self, preset_xml):
        """Children become raw params; a missing value attribute is None"""
        bag = ParameterBag.from_bytes(preset_xml([('EnvAttack', '2.0'), ('OSCSwitch_1', None)]))

        assert bag.remaining() == [RawParam('EnvAttack', '2.0'), RawParam('OSCSwitch_1', None)]

    @pytest.mark.parametrize('missing', ['name', 'info'])
    def test_missing_required_attribute(self, preset_xml, missing):
        data = preset_xml(**{missing: None})
        with pytest.raises(InvalidDataError):
            ParameterBag.from_bytes(data)

    def test_non_integer_root_attribute(self, preset_xml):
        with pytest.raises(InvalidDataError, match='FX_Order_2'):
            ParameterBag.from_bytes(preset_xml(FX_Order_2='two'))

    def test_malformed_xml(self):
        """Parser errors are wrapped, and still count as ValueError"""
        with pytest.raises(InvalidDataError) as excinfo:
            ParameterBag.from_bytes(b'<PluginParamTree PresetName="x"')
        assert isinstance(excinfo.value, ValueError)

    def test_param_without_id(self):
        data = b'<PluginParamTree PresetName="x" PresetInfo="y"><PARAM value="1"/></PluginParamTree>'
        with pytest.raises(InvalidDataError):
            ParameterBag.from_bytes(data)

    def test_from_stream_uses_source_name(self, preset_xml):
        bag = ParameterBag.from_stream(io.BytesIO(preset_xml()), source='memory.bab')
        assert bag.source == 'memory.bab'

    def test_from_file(self, data_file):
        bag = ParameterBag.from_file(data_file('legacy_lead.bab'))

        assert bag.preset_name == 'Legacy Lead'
        assert bag.source.endswith('legacy_lead.bab')
        assert bag.contains('DelayLP')

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ParameterBag.from_file(tmp_path / 'missing.bab')
