import pytest

from jled.hal import MemoryHal
from jled.led import JLed
from jled.sequence import JLedSequence, SequenceMode

MODES = [SequenceMode.SEQUENCE, SequenceMode.PARALLEL]


def _set_time(leds, time):
    for led in leds:
        led.hal.set_millis(time)


def test_parallel_sequence_performs_all_updates():
    expected1 = [255, 0, 0]
    expected2 = [0, 255, 255]
    leds = [
        JLed(MemoryHal(1)).blink(1, 1).repeat(1),
        JLed(MemoryHal(2)).blink(1, 1).repeat(1).low_active(),
    ]
    seq = JLedSequence(SequenceMode.PARALLEL, leds)
    for i, (val1, val2) in enumerate(zip(expected1, expected2)):
        res = seq.update()
        assert res == (i < 1)
        assert leds[0].hal.value == val1
        assert leds[1].hal.value == val2
        _set_time(leds, i + 1)


def test_sequence_performs_all_updates():
    expected1 = [255, 0, 0, 0, 0]
    expected2 = [0, 0, 255, 0, 0]
    leds = [
        JLed(MemoryHal(1)).blink(1, 1).repeat(1),
        JLed(MemoryHal(2)).blink(1, 1).repeat(1),
    ]
    seq = JLedSequence(SequenceMode.SEQUENCE, leds)
    for i, (val1, val2) in enumerate(zip(expected1, expected2)):
        res = seq.update()
        assert res == (i < 3)
        assert leds[0].hal.value == val1
        assert leds[1].hal.value == val2
        _set_time(leds, i + 1)


@pytest.mark.parametrize("mode", MODES)
def test_stop_stops_all_leds_and_turns_them_off(mode):
    leds = [JLed(MemoryHal(1)).blink(100, 100)]
    seq = JLedSequence(mode, leds)
    seq.update()
    assert leds[0].hal.value == 255
    seq.stop()
    assert leds[0].hal.value == 0
    assert not leds[0].is_running


@pytest.mark.parametrize("mode", MODES)
def test_sequence_stays_off_after_stop(mode):
    leds = [JLed(MemoryHal(1)).on()]
    seq = JLedSequence(mode, leds).forever()
    assert seq.update()
    seq.stop()
    assert not leds[0].is_running
    assert not seq.update()


@pytest.mark.parametrize("mode", MODES)
def test_repeat_plays_the_sequence_n_times(mode):
    expected = [255, 0, 255, 0, 0]
    leds = [JLed(MemoryHal(1)).blink(1, 1)]
    seq = JLedSequence(mode, leds).repeat(2)
    for time, val in enumerate(expected):
        seq.update()
        assert leds[0].hal.value == val
        leds[0].hal.set_millis(time + 1)
    assert not seq.update()


@pytest.mark.parametrize("mode", MODES)
def test_forever_plays_the_sequence_forever(mode):
    expected = [255, 0, 0]
    leds = [JLed(MemoryHal(1)).blink(1, 2)]
    seq = JLedSequence(mode, leds).forever()
    for time in range(1000):
        leds[0].hal.set_millis(time)
        assert seq.update()
        assert leds[0].hal.value == expected[time % len(expected)]


@pytest.mark.parametrize("mode", MODES)
def test_forever_flag_is_initially_false(mode):
    seq = JLedSequence(mode, [JLed(MemoryHal(1)).blink(1, 1)])
    assert seq.is_forever is False


@pytest.mark.parametrize("mode", MODES)
def test_forever_flag_is_set_by_forever(mode):
    seq = JLedSequence(mode, [JLed(MemoryHal(1)).blink(1, 1)]).forever()
    assert seq.is_forever is True


def test_forever_and_repeat_can_be_chained():
    seq = JLedSequence(SequenceMode.PARALLEL, [JLed(MemoryHal(0))]).repeat(1).forever()
    assert seq.is_forever is True
    seq.repeat(3)
    assert seq.is_forever is False


@pytest.mark.parametrize("mode", MODES)
def test_reset_resets_all_leds(mode):
    expected = [255, 0, 255, 0, 0]
    leds = [JLed(MemoryHal(1)).blink(1, 1)]
    seq = JLedSequence(mode, leds)
    time = 0
    for val in expected:
        seq.update()
        assert leds[0].hal.value == val
        time += 1
        leds[0].hal.set_millis(time)
        if time == 2:
            assert not seq.update()
            seq.reset()


@pytest.mark.parametrize("mode", MODES)
def test_empty_sequence_does_not_run(mode):
    seq = JLedSequence(mode, [])
    assert seq.update() is False