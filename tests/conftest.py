import os

import pytest

os.environ.setdefault("FQBN_VERBOSE", "0")


AVR_BOARDS = """\
# Arduino AVR Core and platform.
menu.cpu=Processor

uno.name=Arduino Uno
uno.vid.0=0x2341
uno.pid.0=0x0043
uno.vid.1=0x2341
uno.pid.1=0x0001
uno.upload.tool=avrdude
uno.upload.maximum_size=32256

leonardo.name=Arduino Leonardo
leonardo.vid.0=0x2341
leonardo.pid.0=0x0036
leonardo.vid.1=0x2341
leonardo.pid.1=0x8036
leonardo.build.mcu=atmega32u4
"""

SAMD_BOARDS = """\
mkr1000.name=Arduino MKR1000
mkr1000.vid.0=0x2341
mkr1000.pid.0=0x804e
mkr1000.build.board=SAMD_MKR1000
"""


def write_boards(root, rel_dir, text, name="boards.txt"):
    d = root / rel_dir if rel_dir else root
    d.mkdir(parents=True, exist_ok=True)
    p = d / name
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture
def hardware(tmp_path):
    root = tmp_path / "hardware"
    write_boards(root, "arduino/avr", AVR_BOARDS)
    write_boards(root, "arduino/samd", SAMD_BOARDS)
    return root
