from utils.json_path import dig, get_step


RESPONSE = {"candidates": [{"content": {"parts": [{"text": "hi there"}]}}]}
PATH = ("candidates", 0, "content", "parts", 0, "text")


def test_dig_full_path():
    assert dig(RESPONSE, PATH) == "hi there"


def test_dig_missing_steps_fall_back():
    assert dig({"candidates": []}, PATH, "none") == "none"
    assert dig({}, PATH, "none") == "none"
    assert dig(None, PATH, "none") == "none"
    assert dig({"candidates": [{"content": None}]}, PATH, "none") == "none"


def test_dig_wrong_types_fall_back():
    # content as a list instead of an object
    assert dig({"candidates": [{"content": [{"parts": []}]}]}, PATH) is None
    assert dig({"candidates": "oops"}, PATH) is None
    assert dig("plain text", PATH) is None


def test_get_step_index_bounds():
    assert get_step([1, 2], 1) == 2
    assert get_step([1, 2], -1) == 2
    assert get_step([1, 2], 2, 'x') == 'x'
    assert get_step({"0": 1}, 0, 'x') == 'x'
