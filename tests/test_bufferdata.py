from fmsound.bufferdata import BufferData


def test_length_defaults_to_data_size():
    buffer = BufferData(b"\x00\x01\x02\x03", 2, 16, 22050.0)
    assert buffer.length == 4


def test_explicit_length_is_kept():
    buffer = BufferData(b"\x00\x01", 1, 8, 8000.0, length=10)
    assert buffer.length == 10


def test_missing_data_has_zero_length():
    buffer = BufferData(None, 1, 8, 8000.0)
    assert buffer.length == 0


def test_detach_returns_data_and_clears_it():
    buffer = BufferData(b"abcd", 1, 8, 8000.0)
    assert buffer.detach_data() == b"abcd"
    assert buffer.data is None
    assert buffer.length == 4
    assert buffer.detach_data() is None


def test_fields_are_stored():
    buffer = BufferData(b"", 2, 16, 44100.0)
    assert (buffer.num_channels, buffer.bits_per_sample, buffer.sample_frequency) == (2, 16, 44100.0)