import pytest

from sandpile_model.parser import Args, UsageError, parse_args, read_sandpile


def test_parse_long_options():
    args = parse_args(
        ["--input", "in.tsv", "--output", "out", "--max-iter", "100", "--freq", "10"]
    )
    assert args == Args("in.tsv", "out", 100, 10)


def test_parse_short_options_any_order():
    args = parse_args(["-f", "5", "-m", "7", "-o", "dir", "-i", "grains.tsv"])
    assert args == Args("grains.tsv", "dir", 7, 5)


def test_parse_numbers_with_trailing_text():
    args = parse_args(["-i", "a", "-o", "b", "-m", "12abc", "-f", " 3"])
    assert args.max_iter == 12
    assert args.freq == 3


def test_parse_too_few_arguments():
    with pytest.raises(UsageError):
        parse_args(["-i", "a", "-o", "b"])


def test_parse_unknown_argument():
    with pytest.raises(UsageError):
        parse_args(["-i", "a", "-o", "b", "-m", "1", "-x", "2"])


def test_parse_missing_value():
    with pytest.raises(UsageError):
        parse_args(["-i", "a", "-o", "b", "-m", "1", "-f", "2", "-i"])


def test_parse_missing_input():
    with pytest.raises(UsageError):
        parse_args(["-o", "b", "-m", "1", "-f", "2", "-o", "c"])


def test_parse_empty_output():
    with pytest.raises(UsageError):
        parse_args(["-i", "a", "-o", "", "-m", "1", "-f", "2"])


@pytest.mark.parametrize("value", ["abc", "-3"])
def test_parse_bad_number(value):
    with pytest.raises(UsageError):
        parse_args(["-i", "a", "-o", "b", "-m", value, "-f", "2"])


def test_usage_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args([])


def test_read_builds_bounding_box(tmp_path):
    path = tmp_path / "grains.tsv"
    path.write_text("0\t0\t5\n2\t1\t3\n")
    sandpile = read_sandpile(path)
    assert sandpile.matrix == [[5, 0, 0], [0, 0, 3]]
    assert sandpile.unstables == 1


def test_read_negative_coordinates(tmp_path):
    path = tmp_path / "grains.tsv"
    path.write_text("-1 -1 1\n1 0 2\n")
    sandpile = read_sandpile(str(path))
    assert sandpile.matrix == [[1, 0, 0], [0, 0, 2]]
    assert sandpile.is_stable()


def test_read_stops_at_garbage(tmp_path):
    path = tmp_path / "grains.tsv"
    path.write_text("0 0 1\n1 0 2\nfoo 3 3\n2 0 3\n")
    sandpile = read_sandpile(path)
    assert sandpile.matrix == [[1, 2]]


def test_read_ignores_incomplete_triple(tmp_path):
    path = tmp_path / "grains.tsv"
    path.write_text("0 0 4\n1 1\n")
    sandpile = read_sandpile(path)
    assert sandpile.matrix == [[4]]
    assert sandpile.unstables == 1


def test_read_empty_file(tmp_path):
    path = tmp_path / "grains.tsv"
    path.write_text("")
    with pytest.raises(ValueError):
        read_sandpile(path)


def test_read_negative_piles(tmp_path):
    path = tmp_path / "grains.tsv"
    path.write_text("0 0 -1\n")
    with pytest.raises(ValueError):
        read_sandpile(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_sandpile(tmp_path / "absent.tsv")


def test_read_then_shake_conserves_grains(tmp_path):
    path = tmp_path / "grains.tsv"
    path.write_text("0 0 9\n1 0 6\n0 1 3\n")
    sandpile = read_sandpile(path)
    sandpile.shake()
    assert sandpile.is_stable()
    assert sum(sum(row) for row in sandpile.matrix) == 18