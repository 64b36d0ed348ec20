import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import main, merge_sort, quick_sort

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


@pytest.mark.parametrize("sort", [merge_sort, quick_sort])
@given(values=int_lists)
def test_sorts_match_builtin(sort, values):
    assert sort(values) == sorted(values)


@pytest.mark.parametrize("sort", [merge_sort, quick_sort])
@given(values=int_lists)
def test_sorts_leave_input_untouched(sort, values):
    original = list(values)
    sort(values)
    assert values == original


@pytest.mark.parametrize("sort", [merge_sort, quick_sort])
def test_sorts_handle_already_sorted_long_input(sort):
    values = list(range(3000))
    assert sort(values) == values
    assert sort(reversed(values)) == values


@pytest.mark.parametrize("sort", [merge_sort, quick_sort])
def test_sorts_accept_iterables(sort):
    assert sort(iter([3, 1, 2])) == [1, 2, 3]
    assert sort([]) == []


def _numbers(text):
    return [int(token) for token in text.split()]


@pytest.mark.parametrize("algorithm", ["merge", "quick"])
def test_main_prints_sorted_values(capsys, algorithm):
    assert main(["--algorithm", algorithm, "--count", "20", "--seed", "3"]) == 0
    values = _numbers(capsys.readouterr().out)
    assert len(values) == 20
    assert values == sorted(values)
    assert all(0 <= v < 1000 for v in values)


def test_main_algorithms_agree_for_same_seed(capsys):
    main(["--algorithm", "merge", "--count", "50", "--seed", "7"])
    merged = capsys.readouterr().out
    main(["--algorithm", "quick", "--count", "50", "--seed", "7"])
    quick = capsys.readouterr().out
    assert merged == quick


def test_main_prompts_for_count(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    main(["--seed", "1"])
    out = capsys.readouterr().out
    assert out.startswith("Enter the number of elements :  ")
    values = _numbers(out.split(":", 1)[1])
    assert len(values) == 4
    assert values == sorted(values)


@pytest.mark.parametrize("count", ["1001", "-1"])
def test_main_rejects_bad_count(count):
    with pytest.raises(SystemExit):
        main(["--count", count])


def test_main_rejects_non_numeric_answer(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("many\n"))
    with pytest.raises(SystemExit):
        main([])