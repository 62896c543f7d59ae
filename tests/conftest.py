"""
Shared fixtures for the Babylon Preset test suite
"""

import os
import sys
import xml.etree.ElementTree as ET

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')


def build_preset_xml(params=(), name='Test', info='Preset Info', **attributes) -> bytes:
    """
    Serialize a preset document. params is a sequence of (id, value) pairs;
    a value of None writes a PARAM without a value attribute. Pass name or
    info as None to leave that root attribute out.
    """
    root = ET.Element('PluginParamTree')
    if name is not None:
        root.set('PresetName', name)
    if info is not None:
        root.set('PresetInfo', info)
    for key, value in attributes.items():
        root.set(key, str(value))
    for param_id, value in params:
        element = ET.SubElement(root, 'PARAM', id=param_id)
        if value is not None:
            element.set('value', str(value))
    return ET.tostring(root, encoding='utf-8')


@pytest.fixture
def preset_xml():
    return build_preset_xml


@pytest.fixture
def data_file():
    def path(name):
        return os.path.join(DATA_DIR, name)
    return path
