import pytest

from candybox.audio.sound import Cue, SoundBoard
from candybox.core.cell import BoxCell
from candybox.core.models import ContentType, EndCause, Phase
from candybox.core.state import Settings
from helpers import FakeMixer


@pytest.fixture()
def clips(tmp_path):
    paths = {}
    for cue in Cue:
        path = tmp_path / f"{cue.value}.wav"
        path.write_bytes(b"RIFF")
        paths[cue] = str(path)
    return paths


def box(content):
    cell = BoxCell()
    cell.content = content
    return cell


def test_reveals_and_game_over_play_cues(clips):
    mixer = FakeMixer()
    board = SoundBoard(clips, mixer=mixer)
    assert board.ready

    board.on_cell_revealed(box(ContentType.CANDY))
    board.on_cell_revealed(box(ContentType.BOMB))
    board.on_phase_changed(Phase.OVER, EndCause.BOMB_HIT)

    assert mixer.sounds[clips[Cue.CANDY]].plays == 1
    assert mixer.sounds[clips[Cue.BOMB]].plays == 1
    assert mixer.sounds[clips[Cue.GAME_OVER]].plays == 1


def test_missing_or_broken_clip_is_skipped(clips, tmp_path):
    clips[Cue.BOMB] = str(tmp_path / "gone.wav")
    bad = tmp_path / "candy.bad"
    bad.write_bytes(b"")
    clips[Cue.CANDY] = str(bad)
    clips[Cue.GAME_OVER] = None

    board = SoundBoard(clips, mixer=FakeMixer())
    for cue in Cue:
        assert not board.has_cue(cue)
        assert board.play(cue) is False


def test_no_audio_device(clips):
    board = SoundBoard(clips, mixer=FakeMixer(init_error=True))
    assert not board.ready
    assert board.play(Cue.CANDY) is False
    board.on_phase_changed(Phase.PAUSED)


def test_disabled_board_is_silent(clips):
    mixer = FakeMixer()
    board = SoundBoard(clips, enabled=False, mixer=mixer)
    assert board.play(Cue.CANDY) is False

    board.set_enabled(True)
    assert board.play(Cue.CANDY) is True
    board.set_enabled(False)
    assert mixer.calls == ["stop"]


def test_pause_and_resume_follow_phase(clips):
    mixer = FakeMixer()
    board = SoundBoard(clips, mixer=mixer)
    board.on_phase_changed(Phase.PAUSED)
    board.on_phase_changed(Phase.ACTIVE)
    board.on_phase_changed(Phase.TRANSITIONING)
    assert mixer.calls == ["pause", "unpause"]


def test_from_settings(clips):
    s = Settings()
    s.sound_candy = clips[Cue.CANDY]
    s.sound_bomb = None
    s.sound_game_over = clips[Cue.GAME_OVER]
    board = SoundBoard.from_settings(s, mixer=FakeMixer())
    assert board.has_cue(Cue.CANDY)
    assert not board.has_cue(Cue.BOMB)
    assert board.has_cue(Cue.GAME_OVER)
