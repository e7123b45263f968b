from capturelive.core.text.sentences import count_words, ends_with_complete_sentence, split_sentences


def test_split_sentences_drops_trailing_fragment() -> None:
    assert split_sentences("One. Two! Three? and then") == ["One.", "Two!", "Three?"]


def test_split_sentences_keep_fragment() -> None:
    assert split_sentences("One. and then ", keep_fragment=True) == ["One.", "and then"]


def test_split_sentences_every_terminator_cuts() -> None:
    assert split_sentences("Wait... what?") == ["Wait.", ".", ".", "what?"]


def test_split_sentences_empty_and_whitespace() -> None:
    assert split_sentences("") == []
    assert split_sentences("   ") == []
    assert split_sentences("   ", keep_fragment=True) == []


def test_ends_with_complete_sentence_ignores_trailing_whitespace() -> None:
    assert ends_with_complete_sentence("Done.  ")
    assert ends_with_complete_sentence("Really?")
    assert ends_with_complete_sentence("Stop!\n")
    assert not ends_with_complete_sentence("not yet")
    assert not ends_with_complete_sentence("")


def test_count_words_runs_of_alphanumerics() -> None:
    assert count_words("Hello, world!") == 2
    assert count_words("it's 3pm") == 3
    assert count_words("snake_case") == 2
    assert count_words("") == 0
    assert count_words("... --- ...") == 0
