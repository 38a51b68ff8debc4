import pytest

from jled.hal import Esp32ChanMapper, Hal, MemoryHal, SystemHal, scale_to_10bit


def test_hal_is_abstract():
    with pytest.raises(TypeError):
        Hal()


def test_first_analog_write_configures_output():
    hal = MemoryHal(10)
    assert hal.is_output is False
    hal.analog_write(123)
    assert hal.is_output is True


def test_memory_hal_writes_value():
    hal = MemoryHal(10)
    hal.analog_write(123)
    assert hal.value == 123
    assert hal.pin == 10


def test_memory_hal_returns_time():
    hal = MemoryHal(1)
    assert hal.millis() == 0
    hal.set_millis(99)
    assert hal.millis() == 99


def test_memory_hal_time_wraps_at_32_bit():
    hal = MemoryHal(1, millis=2**32 + 5)
    assert hal.millis() == 5


def test_scale_to_10bit():
    assert scale_to_10bit(0) == 0
    assert scale_to_10bit(127) == (127 << 2) + 3
    assert scale_to_10bit(255) == 1023


def test_system_hal_ten_bit_writes_scaled_value():
    written = []
    hal = SystemHal(10, lambda pin, val: written.append((pin, val)), ten_bit=True)
    hal.analog_write(123)
    assert written == [(10, (123 << 2) + 3)]
    assert hal.value == (123 << 2) + 3


def test_system_hal_writes_plain_value():
    written = []
    hal = SystemHal(3, lambda pin, val: written.append((pin, val)))
    hal.analog_write(200)
    assert written == [(3, 200)]


def test_system_hal_millis_counts_from_creation():
    times = iter([10.0, 10.0, 10.5])
    hal = SystemHal(1, clock=lambda: next(times))
    assert hal.millis() == 0
    assert hal.millis() == 500


def test_channel_mapper_returns_new_channels_for_different_pins():
    m = Esp32ChanMapper()
    assert m.chan_for_pin(10) == 0
    assert m.chan_for_pin(15) == 1
    assert m.chan_for_pin(3) == 2
    assert m.chan_for_pin(1) == 3

    assert m.chan_for_pin(10) == 0
    assert m.chan_for_pin(15) == 1
    assert m.chan_for_pin(3) == 2
    assert m.chan_for_pin(1) == 3

    assert m.chan_for_pin(7) == 4


def test_channel_mapper_starts_over_when_exhausted():
    m = Esp32ChanMapper()
    for i in range(Esp32ChanMapper.MAX_CHANNELS):
        assert m.chan_for_pin(i) == i

    assert m.chan_for_pin(100) == 0
    assert m.chan_for_pin(101) == 1


def test_channel_mapper_same_pin_same_channel():
    m = Esp32ChanMapper()
    assert m.chan_for_pin(10) == m.chan_for_pin(10)
    assert m.chan_for_pin(10) != m.chan_for_pin(11)