import pytest

from sdkswitch.printer.select import KV, Key, PageKVSelect


def paged(page, size, options):
    start = page * size
    if start > len(options):
        raise IndexError("page is out of range")
    return options[start:start + size]


def make_source():
    return [KV(key=str(n), value=str(n)) for n in range(1, 6)]


def make_select(**kwargs):
    kwargs.setdefault("options", make_source())
    kwargs.setdefault("size", 3)
    select = PageKVSelect(source_func=paged, **kwargs)
    select.search()
    select.load_page_data(0)
    return select


def values(kvs):
    return [kv.value for kv in kvs]


def test_first_page():
    select = make_select()
    assert values(select.search_options) == ["1", "2", "3", "4", "5"]
    assert values(select.page_options) == ["1", "2", "3"]
    assert select.is_empty is False


def test_second_page_is_last():
    select = make_select()
    select.load_page_data(1)
    assert values(select.page_options) == ["4", "5"]
    assert select.is_empty is True


def test_out_of_range_page_error_propagates():
    select = make_select()
    with pytest.raises(IndexError, match="page is out of range"):
        select.load_page_data(5)


def test_paging_with_keys():
    select = make_select()
    assert select.handle_key(Key.RIGHT) is False
    assert select.page == 1
    assert values(select.page_options) == ["4", "5"]
    select.handle_key(Key.RIGHT)
    assert select.page == 1
    select.handle_key(Key.LEFT)
    assert select.page == 0
    assert values(select.page_options) == ["1", "2", "3"]


def test_change_index_wraps():
    select = make_select()
    select.change_index(-1)
    assert select.index == 2
    select.change_index(1)
    assert select.index == 0


def test_enter_selects_current():
    select = make_select()
    select.handle_key(Key.DOWN)
    assert select.handle_key(Key.ENTER) is True
    assert select.result == KV(key="2", value="2")


def test_enter_on_disabled_option_continues():
    select = make_select(disabled_options={"1"})
    assert select.handle_key(Key.ENTER) is False
    select.handle_key(Key.DOWN)
    assert select.handle_key(Key.ENTER) is True
    assert select.result.key == "2"


def test_ctrl_c_stops_without_result():
    select = make_select()
    select.render()
    assert select.handle_key(Key.CTRL_C) is True
    assert select.result is None


def test_typing_filters_and_backspace_restores():
    select = make_select(filterable=True)
    select.handle_key("4")
    assert select.search_text == "4"
    assert values(select.page_options) == ["4"]
    select.handle_key(Key.BACKSPACE)
    assert select.search_text == ""
    assert values(select.page_options) == ["1", "2", "3"]


def test_typing_ignored_without_filter():
    select = make_select()
    assert select.handle_key("4") is False
    assert select.search_text == ""
    assert values(select.page_options) == ["1", "2", "3"]


def test_fuzzy_search_orders_substring_matches_first():
    options = [KV("a", "javascript"), KV("b", "go"), KV("c", "jdava"), KV("d", "java")]
    select = make_select(options=options, filterable=True)
    for char in "java":
        select.handle_key(char)
    assert values(select.search_options) == ["java", "javascript", "jdava"]


def test_fuzzy_search_is_case_insensitive():
    options = [KV("a", "OpenJDK"), KV("b", "graal")]
    select = make_select(options=options, filterable=True)
    select.handle_key("j")
    select.handle_key("d")
    assert values(select.search_options) == ["OpenJDK"]


def test_no_match_gives_empty_page():
    select = make_select(filterable=True)
    select.handle_key("x")
    assert select.page_options == []
    assert select.handle_key(Key.ENTER) is True
    assert select.result is None


def test_render_marks_current_and_highlights():
    select = make_select(top_text="Choose", highlight_options={"3"})
    text = select.render()
    lines = text.splitlines()
    assert lines[0] == "Choose:"
    assert "-> " in lines[1] and lines[1].endswith("1")
    assert lines[2] == "   2"
    assert lines[3] != "   3" and "3" in lines[3]
    assert lines[-1].startswith("Press")
    assert select.result == KV("1", "1")


def test_render_filter_header():
    select = make_select(top_text="Pick", filterable=True)
    select.handle_key("2")
    first_line = select.render().splitlines()[0]
    assert first_line.startswith("Pick ")
    assert "[type to search]" in first_line
    assert first_line.endswith(": 2")


def test_render_no_data_when_page_is_missing():
    select = make_select()
    select.page_options = []
    assert select.render() == "No data\n"