import pytest
import requests
from pathlib import Path

from wordscramble.dictionary import (
    create_dictionary, get_dictionary_ids, LexiconDictionary, RemoteDictionary, WordfreqDictionary,
)
from wordscramble.errors import DictionaryUnavailable


def test_registry_lists_providers():
    assert get_dictionary_ids() == ["lexicon", "remote", "wordfreq"]
    with pytest.raises(ValueError):
        create_dictionary("spellcheck")


def test_lexicon_from_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Silent\ntin\n\nlist\n", encoding="utf-8")
    d = create_dictionary("lexicon", path=str(p))
    assert len(d) == 3
    assert d.is_recognized_word("silent", "en") is True
    assert d.is_recognized_word("nets", "en") is False


def test_lexicon_language_and_missing_file(tmp_path: Path):
    d = LexiconDictionary(["tin"], language="en")
    with pytest.raises(DictionaryUnavailable):
        d.is_recognized_word("tin", "fr")
    with pytest.raises(DictionaryUnavailable):
        LexiconDictionary(path=tmp_path / "nope.txt")
    with pytest.raises(ValueError):
        LexiconDictionary()


def test_wordfreq_recognizes_common_words():
    d = WordfreqDictionary()
    assert d.is_recognized_word("silent", "en") is True
    assert d.is_recognized_word("listen", "en") is True
    assert d.is_recognized_word("qzxvbnm", "en") is False
    assert d.is_recognized_word("it's", "en") is False
    with pytest.raises(DictionaryUnavailable):
        d.is_recognized_word("silent", "xx")


@pytest.mark.parametrize("word", ["slk", "rmw", "nle", "lst", "eln", "mws", "lsi", "wor",
                                  "sil", "rom", "ors", "kil", "ilm"])
def test_wordfreq_rejects_short_fragments(word):
    assert WordfreqDictionary().is_recognized_word(word, "en") is False


@pytest.mark.parametrize("word", ["owl", "tin", "ski", "ilk", "silk", "worm", "milk", "lens"])
def test_wordfreq_accepts_short_words(word):
    assert WordfreqDictionary().is_recognized_word(word, "en") is True


@pytest.mark.parametrize("tag", ["en", "EN", "en-US", "en_GB"])
def test_wordfreq_language_tags(tag):
    d = WordfreqDictionary()
    assert d.resolve_language(tag) == "en"
    assert d.is_recognized_word("owl", tag) is True


def test_wordfreq_short_word_list_is_per_language(tmp_path: Path):
    d = WordfreqDictionary(short_words={"en": ["zzz"]})
    assert d.is_recognized_word("zzz", "en") is True
    assert d.is_recognized_word("owl", "en") is False

    # no bundled short list for French: short words can't be checked, long ones still can
    fr = WordfreqDictionary(data_dir=tmp_path)
    with pytest.raises(DictionaryUnavailable):
        fr.is_recognized_word("oui", "fr")
    assert fr.is_recognized_word("bonjour", "fr") is True


def test_wordfreq_rejects_non_positive_threshold():
    with pytest.raises(ValueError):
        WordfreqDictionary(min_zipf=0)


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code


class FakeSession:
    def __init__(self, status_code=200, exc=None):
        self.status_code = status_code
        self.exc = exc
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        if self.exc:
            raise self.exc
        return FakeResponse(self.status_code)


@pytest.mark.parametrize("status,expected", [(200, True), (404, False)])
def test_remote_status_mapping(status, expected):
    s = FakeSession(status)
    d = RemoteDictionary(session=s)
    assert d.is_recognized_word("Silent", "en") is expected
    assert s.urls == ["https://api.dictionaryapi.dev/api/v2/entries/en/silent"]


def test_remote_caches_verdicts():
    s = FakeSession(200)
    d = RemoteDictionary(session=s)
    d.is_recognized_word("silent", "en")
    d.is_recognized_word("silent", "en")
    assert len(s.urls) == 1


@pytest.mark.parametrize("session", [
    FakeSession(500),
    FakeSession(exc=requests.ConnectionError("down")),
    FakeSession(exc=requests.Timeout("slow")),
])
def test_remote_failures_raise_unavailable(session):
    d = RemoteDictionary(session=session)
    with pytest.raises(DictionaryUnavailable):
        d.is_recognized_word("silent", "en")


def test_lexicon_unreadable_file(tmp_path: Path):
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"caf\xe9\n")
    with pytest.raises(DictionaryUnavailable):
        LexiconDictionary(path=bad)
    with pytest.raises(DictionaryUnavailable):
        LexiconDictionary(path=tmp_path)
