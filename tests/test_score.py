import pytest

from fmsound.score import KEY_B, KEY_C, Note, Phrase, SoundSetting


def test_quarter_note_at_120_lasts_half_second():
    note = Note(120, 3, 0, "C")
    assert note.sec == pytest.approx(0.5)


def test_dotted_note_is_one_and_half_times_longer():
    plain = Note(100, 3, 0, "C", length=12)
    dotted = Note(100, 3, 0, "C", dot=True, length=12)
    assert dotted.sec == pytest.approx(plain.sec * 1.5)


def test_zero_tempo_raises():
    with pytest.raises(ValueError):
        Note(0, 3, 0, "C")


@pytest.mark.parametrize(
    "ch, expected",
    [("C", 0), ("D", 2), ("E", 4), ("F", 5), ("G", 7), ("A", 9), ("B", 11)],
)
def test_key_from_letter(ch, expected):
    assert Note(120, 3, 0, ch).key == expected


def test_sharp_and_flat_wrap_around():
    assert Note(120, 3, 0, "B", sign="+").key == KEY_C
    assert Note(120, 3, 0, "B", sign="#").key == KEY_C
    assert Note(120, 3, 0, "C", sign="-").key == KEY_B
    assert Note(120, 3, 0, "D", sign="-").key == Note(120, 3, 0, "C", sign="+").key


@pytest.mark.parametrize("rest", ["R", None, "\0"])
def test_rest_has_no_key(rest):
    assert Note(120, 3, 0, rest).key == -1


def test_invalid_letter_raises():
    with pytest.raises(ValueError):
        Note(120, 3, 0, "X")


def test_setting_reset_restores_defaults():
    setting = SoundSetting(tempo=200, octave=6, length=12, tone=5, fm=True)
    setting.volume = 15
    setting.quantity = 4
    setting.reset()
    assert setting == SoundSetting()


def test_phrase_copies_setting():
    setting = SoundSetting(tempo=90)
    phrase = Phrase(setting)
    setting.tempo = 60
    assert phrase.setting.tempo == 90


def test_add_note_uses_setting_defaults():
    phrase = Phrase(SoundSetting(tempo=150, octave=5, length=12, tone=3))
    phrase.add_note("E")
    note = phrase.notes[0]
    assert (note.tempo, note.octave, note.tone, note.length) == (150, 5, 3, 12.0)
    assert note.quantity == phrase.setting.quantity
    assert note.volume == phrase.setting.volume


def test_add_key_maps_96_to_zero():
    phrase = Phrase()
    phrase.add_key(96)
    phrase.add_key(40)
    assert [n.key for n in phrase.notes] == [0, 40]
    assert phrase.notes[0].octave == 0


def test_calc_total_sets_gates_and_goal():
    phrase = Phrase()
    for letter in "CDE":
        phrase.add_note(letter)
    phrase.calc_total()
    secs = [n.sec for n in phrase.notes]
    assert [n.gate for n in phrase.notes] == pytest.approx([0.0, secs[0], secs[0] + secs[1]])
    assert phrase.goal == pytest.approx(sum(secs))


def test_rescan_merges_tied_notes():
    phrase = Phrase()
    phrase.add_note("C", length=24, and_=True)
    phrase.add_note("C", length=12, and_=True)
    phrase.add_note("C", length=6)
    phrase.add_note("D")
    total_sec = sum(n.sec for n in phrase.notes[:3])
    phrase.rescan_notes()
    assert len(phrase.notes) == 2
    assert phrase.notes[0].length == pytest.approx(42.0)
    assert phrase.notes[0].sec == pytest.approx(total_sec)
    assert phrase.notes[1].key == 2


def test_rescan_keeps_untied_notes():
    phrase = Phrase()
    for letter in "CDEF":
        phrase.add_note(letter)
    phrase.rescan_notes()
    assert [n.key for n in phrase.notes] == [0, 2, 4, 5]


def test_rescan_trailing_tie_does_not_fail():
    phrase = Phrase()
    phrase.add_note("C", and_=True)
    phrase.rescan_notes()
    assert len(phrase.notes) == 1
    assert phrase.notes[0].length == pytest.approx(phrase.setting.length)