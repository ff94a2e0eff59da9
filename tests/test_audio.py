import pytest

from ptsd.asset_store import AssetStore
from ptsd.audio import BGM, MAX_VOLUME, SFX, load_chunk, load_music


class FakePlayer:
    def __init__(self):
        self.calls = []
        self._volume = 1.0

    def load(self, path):
        self.calls.append(("load", path))

    def play(self, loops=0, start=0.0, fade_ms=0):
        self.calls.append(("play", loops, fade_ms))

    def fadeout(self, ms):
        self.calls.append(("fadeout", ms))

    def pause(self):
        self.calls.append(("pause",))

    def unpause(self):
        self.calls.append(("unpause",))

    def get_volume(self):
        return self._volume

    def set_volume(self, value):
        self._volume = value


class FakeSound:
    def __init__(self, path):
        self.path = path
        self.calls = []
        self._volume = 1.0

    def get_volume(self):
        return self._volume

    def set_volume(self, value):
        self._volume = value

    def play(self, loops=0, maxtime=0, fade_ms=0):
        self.calls.append((loops, maxtime, fade_ms))


@pytest.fixture
def music_file(tmp_path):
    path = tmp_path / "song.ogg"
    path.write_bytes(b"")
    return str(path)


@pytest.fixture
def player():
    return FakePlayer()


def make_bgm(path, player):
    return BGM(path, player=player, store=AssetStore(load_music))


def test_load_music(music_file, tmp_path):
    assert load_music(music_file) == music_file
    assert load_music(str(tmp_path / "missing.ogg")) is None


def test_load_chunk_missing_file(tmp_path):
    assert load_chunk(str(tmp_path / "missing.wav")) is None


def test_bgm_play_loads_then_plays(music_file, player):
    bgm = make_bgm(music_file, player)
    bgm.play()
    assert player.calls == [("load", music_file), ("play", -1, 0)]


def test_bgm_fade_pause_resume(music_file, player):
    bgm = make_bgm(music_file, player)
    bgm.fade_in(1000)
    bgm.fade_out(1000)
    bgm.pause()
    bgm.resume()
    assert player.calls == [
        ("load", music_file),
        ("play", -1, 1000),
        ("fadeout", 1000),
        ("pause",),
        ("unpause",),
    ]


def test_bgm_missing_music_plays_nothing(tmp_path, player):
    bgm = make_bgm(str(tmp_path / "missing.ogg"), player)
    assert bgm.music is None
    bgm.play()
    bgm.fade_in(500)
    assert player.calls == []


def test_bgm_load_media_switches_music(music_file, tmp_path, player):
    other = tmp_path / "other.ogg"
    other.write_bytes(b"")
    bgm = make_bgm(music_file, player)
    bgm.load_media(str(other))
    assert bgm.music == str(other)
    bgm.play(2)
    assert player.calls == [("load", str(other)), ("play", 2, 0)]


def test_bgm_volume(music_file, player):
    bgm = make_bgm(music_file, player)
    assert bgm.volume == MAX_VOLUME
    bgm.volume = 30
    assert bgm.volume == 30
    bgm.volume_up(5)
    assert bgm.volume == 30 + 5
    bgm.volume_down()
    assert bgm.volume == 30 + 5 - 1
    bgm.volume = 1000
    assert bgm.volume == MAX_VOLUME
    bgm.volume = -3
    assert bgm.volume == MAX_VOLUME


def test_bgm_volume_down_below_zero_is_ignored(music_file, player):
    bgm = make_bgm(music_file, player)
    bgm.volume = 0
    bgm.volume_down()
    assert bgm.volume == 0


def test_bgm_store_loads_each_path_once(music_file, player):
    loaded = []

    def loader(path):
        loaded.append(path)
        return path

    store = AssetStore(loader)
    BGM(music_file, player=player, store=store)
    BGM(music_file, player=player, store=store)
    assert loaded == [music_file]


def test_sfx_play_and_fade_in():
    sfx = SFX("click.wav", store=AssetStore(FakeSound))
    sfx.play()
    sfx.play(2, 300)
    sfx.fade_in(1000)
    assert sfx.chunk.calls == [(0, 0, 0), (2, 300, 0), (-1, 0, 1000)]


def test_sfx_volume():
    sfx = SFX("click.wav", store=AssetStore(FakeSound))
    assert sfx.volume == MAX_VOLUME
    sfx.volume = 30
    assert sfx.volume == 30
    sfx.volume_up(10)
    assert sfx.volume == 30 + 10
    sfx.volume = 0
    sfx.volume_down()
    assert sfx.volume == 0
    sfx.volume = 500
    assert sfx.volume == MAX_VOLUME


def test_sfx_without_chunk():
    sfx = SFX("missing.wav", store=AssetStore(lambda path: None))
    assert sfx.chunk is None
    assert sfx.volume == -1
    sfx.volume = 50
    assert sfx.volume == -1
    sfx.play()


def test_sfx_load_media_shares_cached_chunk():
    store = AssetStore(FakeSound)
    first = SFX("a.wav", store=store)
    second = SFX("b.wav", store=store)
    second.load_media("a.wav")
    assert second.chunk is first.chunk
    assert second.chunk.path == "a.wav"