import io

import pytest

from threadkit.text import StringTokenizer, format_container, print_container


def _all_tokens(tok, delims):
    tokens = []
    while True:
        t = tok.get_token(delims)
        if t == "":
            return tokens
        tokens.append(t)


def test_tokenizer_splits_on_runs_of_delimiters():
    tok = StringTokenizer("alpha  beta,gamma")
    assert _all_tokens(tok, " ,") == ["alpha", "beta", "gamma"]


def test_tokenizer_leading_delimiter_gives_empty_first_token():
    tok = StringTokenizer(" word")
    assert tok.get_token(" ") == ""


def test_tokenizer_trailing_delimiter_ignored():
    tok = StringTokenizer("one two ")
    assert _all_tokens(tok, " ") == ["one", "two"]


def test_tokenizer_no_delimiters_returns_whole_string():
    tok = StringTokenizer("abc")
    assert tok.get_token(",") == "abc"
    assert tok.get_token(",") == ""


def test_format_single_line():
    assert format_container([1, 2, 3]) == "container:\n1 2 3 \n"


def test_format_empty():
    assert format_container([], "items:") == "items:\nContainer is empty! \n"


def test_format_one_per_line():
    out = format_container(["a", "b"], "L", 1)
    lines = out.split("\n")
    assert lines[0] == "L"
    assert lines[1:3] == ["a", "b"]


@pytest.mark.parametrize("cols", [2, 3, 4])
def test_format_columns_preserve_elements(cols):
    data = list(range(10))
    out = format_container(data, "grid", cols)
    lines = out.split("\n")
    assert lines[0] == "grid"
    assert out.split()[1:] == [str(x) for x in data]
    rows = [line.split() for line in lines[1:] if line.strip()]
    assert all(len(row) <= cols for row in rows)
    assert out.endswith("\n")


def test_print_container_writes_to_file():
    buf = io.StringIO()
    print_container((5, 6), "t", 0, buf)
    assert buf.getvalue() == format_container((5, 6), "t", 0)