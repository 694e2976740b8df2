from quickadd.nlp.tags import extract_tags


def test_hashtags_are_lowercased_and_deduplicated():
    assert extract_tags("Ship it #Work #URGENT #work") == ("work", "urgent")


def test_hashtag_allows_hyphen_and_underscore():
    assert extract_tags("#follow-up #q3_plan") == ("follow-up", "q3_plan")


def test_tag_list_with_commas_and_semicolons():
    assert set(extract_tags("TAG: Alpha, beta; Gamma")) == {"alpha", "beta", "gamma"}


def test_tag_list_drops_empty_items():
    assert extract_tags("tag: a, , b,") == ("a", "b")


def test_both_syntaxes_merge():
    tags = extract_tags("Fix bug #bug tag: urgent, critical")
    assert set(tags) == {"bug", "urgent", "critical"}


def test_multiple_tag_lists_contribute():
    assert set(extract_tags("tag: one #two tag: three")) == {"one", "two", "three"}


def test_multi_word_list_item_is_kept_whole():
    assert extract_tags("tag: deep work") == ("deep work",)


def test_no_tags():
    assert extract_tags("plain text with a # sign") == ()
