from gnostic.openapi_generator.utils import append_unique, contains, singular


def test_contains():
    assert contains(["a", "b"], "b") is True
    assert contains(["a", "b"], "c") is False
    assert contains([], "a") is False


def test_append_unique_adds_new_value():
    assert append_unique(["a"], "b") == ["a", "b"]


def test_append_unique_skips_existing_value():
    assert append_unique(["a", "b"], "a") == ["a", "b"]


def test_append_unique_result_has_no_duplicates():
    values = []
    for item in ["x", "y", "x", "z", "y"]:
        values = append_unique(values, item)
    assert len(values) == len(set(values))
    assert set(values) == {"x", "y", "z"}


def test_singular_ves():
    assert singular("shelves") == "shelf"


def test_singular_ies():
    assert singular("libraries") == "library"


def test_singular_s():
    assert singular("books") == "book"


def test_singular_unchanged():
    assert singular("data") == "data"
    assert singular("") == ""