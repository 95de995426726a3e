from db.crud.tutorials import filter_tutorials


def slugs(result):
    tutorials, _ = result
    return [tutorial.slug for tutorial in tutorials]


def test_no_filters_lists_published_newest_first(db, catalog):
    tutorials, total = filter_tutorials(db)

    assert total == 5
    assert [t.slug for t in tutorials] == [
        "number-of-islands",
        "word-ladder",
        "container-with-most-water",
        "three-sum",
        "two-sum",
    ]


def test_drafts_never_listed(db, catalog):
    assert "draft-problem" not in slugs(filter_tutorials(db, categories=["arrays"], topics=["hashing"]))
    assert "draft-problem" not in slugs(filter_tutorials(db, search="draft"))


def test_difficulty_is_multi_select(db, catalog):
    assert slugs(filter_tutorials(db, difficulties=["hard"])) == ["word-ladder"]
    assert set(slugs(filter_tutorials(db, difficulties=["easy", "hard"]))) == {"two-sum", "word-ladder"}


def test_category_filter(db, catalog):
    assert set(slugs(filter_tutorials(db, categories=["graphs"]))) == {"word-ladder", "number-of-islands"}


def test_topic_filter_matches_any_tag(db, catalog):
    result = filter_tutorials(db, topics=["two-pointers", "bfs"])
    assert set(slugs(result)) == {"three-sum", "container-with-most-water", "word-ladder", "number-of-islands"}
    assert result[1] == 4


def test_dimensions_intersect(db, catalog):
    result = filter_tutorials(db, difficulties=["medium"], categories=["arrays"], topics=["hashing"])
    assert slugs(result) == ["three-sum"]

    result = filter_tutorials(db, difficulties=["easy"], categories=["arrays"])
    assert slugs(result) == ["two-sum"]


def test_empty_lists_do_not_constrain(db, catalog):
    _, total = filter_tutorials(db, search="", difficulties=[], categories=[], topics=[])
    assert total == 5


def test_unknown_slugs_match_nothing(db, catalog):
    assert filter_tutorials(db, topics=["dynamic-programming"]) == ([], 0)
    assert filter_tutorials(db, categories=["trees"]) == ([], 0)


def test_known_tag_without_tutorials_matches_nothing(db, catalog, make_tag):
    make_tag("Trie", "trie")
    assert filter_tutorials(db, topics=["trie"]) == ([], 0)


def test_search_is_case_insensitive_on_title_or_description(db, catalog):
    assert slugs(filter_tutorials(db, search="WORD")) == ["word-ladder"]
    assert slugs(filter_tutorials(db, search="adding up")) == ["two-sum"]


def test_search_treats_wildcards_literally(db, catalog, make_tutorial):
    make_tutorial("percent", day=9, title="100% coverage")
    assert slugs(filter_tutorials(db, search="%")) == ["percent"]


def test_pages_do_not_overlap(db, catalog):
    seen = []
    for page in (1, 2, 3):
        tutorials, total = filter_tutorials(db, page=page, page_size=2)
        assert total == 5
        seen.extend(t.slug for t in tutorials)

    assert len(seen) == 5
    assert len(set(seen)) == 5


def test_ties_on_publish_time_are_stable(db, make_tutorial):
    for i in range(5):
        make_tutorial(f"same-day-{i}", day=1)

    first = slugs(filter_tutorials(db, page=1, page_size=3))
    second = slugs(filter_tutorials(db, page=2, page_size=3))

    assert first == ["same-day-4", "same-day-3", "same-day-2"]
    assert second == ["same-day-1", "same-day-0"]


def test_page_past_the_end_is_empty(db, catalog):
    tutorials, total = filter_tutorials(db, page=10, page_size=12)
    assert tutorials == []
    assert total == 5


def test_page_below_one_is_first_page(db, catalog):
    assert slugs(filter_tutorials(db, page=0, page_size=1)) == ["number-of-islands"]
