"""
Raw parameters of a Babylon preset
Reads the XML container into a consumable bag of (id, value) pairs

A .bab file is a single JUCE value tree:

    <PluginParamTree Scale="0" CustomScale="0" Root="0" PresetName="init"
                     PresetInfo="Preset Info" FX_Order_0="0" ...>
      <PARAM id="EnvAttack" value="2.0"/>
      <PARAM id="OSCSwitch_1" value="1.0"/>
      ...
    </PluginParamTree>

The root attributes are read eagerly into typed fields. The PARAM children
stay raw until the decoder takes them out one by one; whatever is left at
the end is unknown to this reader.
"""

import xml.etree.ElementTree as ET
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Deque, Dict, List, Optional, Tuple, Union

from .errors import InvalidDataError

PARAM_TAG = 'PARAM'

# Number of effect order slots stored as FX_Order_0 .. FX_Order_6
EFFECT_ORDER_SLOTS = 7


@dataclass(frozen=True)
class RawParam:
    id: str
    value: Optional[str] = None


class ParameterBag:
    """
    Parameters of one preset, consumed as the decoder reads them.

    Lookups are by identifier. If a file repeats an identifier the first
    occurrence is returned first and the next one stays in the bag.
    """

    def __init__(self, params: Optional[List[RawParam]] = None, *,
                 preset_name: str = '',
                 preset_info: str = '',
                 scale: int = 0,
                 custom_scale: int = 0,
                 root_key: int = 0,
                 preset_id: Optional[int] = None,
                 preset_folder: Optional[int] = None,
                 effect_order: Optional[Tuple[Optional[int], ...]] = None,
                 source: str = '<memory>'):
        self.preset_name = preset_name
        self.preset_info = preset_info
        self.scale = scale
        self.custom_scale = custom_scale
        self.root_key = root_key
        self.preset_id = preset_id
        self.preset_folder = preset_folder
        if effect_order is None:
            effect_order = (None,) * EFFECT_ORDER_SLOTS
        if len(effect_order) != EFFECT_ORDER_SLOTS:
            raise ValueError(f"Expected {EFFECT_ORDER_SLOTS} effect order slots, got {len(effect_order)}")
        self.effect_order = tuple(effect_order)
        self.source = source

        # id -> queue of (position in file, param)
        self._index: Dict[str, Deque[Tuple[int, RawParam]]] = {}
        self._count = 0
        for param in params or []:
            self.add(param)

    def add(self, param: RawParam):
        self._index.setdefault(param.id, deque()).append((self._count, param))
        self._count += 1

    def remove(self, param_id: str) -> Optional[RawParam]:
        """Take the first parameter with this id out of the bag"""
        entries = self._index.get(param_id)
        if not entries:
            return None
        _, param = entries.popleft()
        if not entries:
            del self._index[param_id]
        return param

    def contains(self, param_id: str) -> bool:
        """Whether a parameter with this id is still in the bag. Does not consume it."""
        return param_id in self._index

    def remaining(self) -> List[RawParam]:
        """Parameters not yet consumed, in file order"""
        entries = [entry for queue in self._index.values() for entry in queue]
        entries.sort(key=lambda entry: entry[0])
        return [param for _, param in entries]

    def __len__(self) -> int:
        return sum(len(queue) for queue in self._index.values())

    # ------------------------------------------------------------------
    # Reading the XML container
    # ------------------------------------------------------------------

    @classmethod
    def from_element(cls, root: ET.Element, source: str = '<memory>') -> 'ParameterBag':
        attrs = root.attrib
        for required in ('PresetName', 'PresetInfo'):
            if required not in attrs:
                raise InvalidDataError(f"{source}: missing attribute {required} on <{root.tag}>")

        params = []
        for element in root.findall(PARAM_TAG):
            param_id = element.get('id')
            if param_id is None:
                raise InvalidDataError(f"{source}: <{PARAM_TAG}> element without an id")
            params.append(RawParam(param_id, element.get('value')))

        return cls(
            params,
            preset_name=attrs['PresetName'],
            preset_info=attrs['PresetInfo'],
            scale=_int_attribute(attrs, 'Scale', source) or 0,
            custom_scale=_int_attribute(attrs, 'CustomScale', source) or 0,
            root_key=_int_attribute(attrs, 'Root', source) or 0,
            preset_id=_int_attribute(attrs, 'PresetID', source),
            preset_folder=_int_attribute(attrs, 'PresetFolder', source),
            effect_order=tuple(
                _int_attribute(attrs, f'FX_Order_{slot}', source)
                for slot in range(EFFECT_ORDER_SLOTS)
            ),
            source=source,
        )

    @classmethod
    def from_bytes(cls, data: Union[bytes, str], source: str = '<memory>') -> 'ParameterBag':
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise InvalidDataError(f"{source}: {e}") from e
        return cls.from_element(root, source)

    @classmethod
    def from_stream(cls, stream: BinaryIO, source: str = '<stream>') -> 'ParameterBag':
        try:
            tree = ET.parse(stream)
        except ET.ParseError as e:
            raise InvalidDataError(f"{source}: {e}") from e
        return cls.from_element(tree.getroot(), source)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'ParameterBag':
        with open(path, 'rb') as f:
            return cls.from_stream(f, str(path))


def _int_attribute(attrs: Dict[str, str], name: str, source: str) -> Optional[int]:
    text = attrs.get(name)
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidDataError(f"{source}: attribute {name} is not an integer: {text!r}") from None
