import io

import pytest

from caesar.python_generator import simple_function_chart, simple_function_chart_of


def _lines(text):
    return text.splitlines()


def test_chart_contains_data_lines():
    out = io.StringIO()
    simple_function_chart([1.0, 2.0, 3.0], [4.0, 5.5, 6.0], out)
    lines = _lines(out.getvalue())
    assert "xs = [1, 2, 3]" in lines
    assert "ys = [4, 5.5, 6]" in lines
    assert "from matplotlib import pyplot as plt" in lines
    assert "plt.plot(xs, ys)" in lines
    assert "plt.show()" in lines


def test_chart_header_and_footer():
    out = io.StringIO()
    simple_function_chart([0.0], [1.0], out)
    lines = _lines(out.getvalue())
    assert lines[0].startswith("# ---")
    assert lines[1] == "# This code is generated from crys for running in Jupiter Notebook."
    assert lines[-2] == "# End of code generated from crys."
    assert lines[-1] == lines[0]


def test_chart_single_point():
    out = io.StringIO()
    simple_function_chart([2.5], [-1.0], out)
    lines = _lines(out.getvalue())
    assert "xs = [2.5]" in lines
    assert "ys = [-1]" in lines


def test_chart_size_mismatch_raises():
    with pytest.raises(ValueError):
        simple_function_chart([1.0, 2.0], [1.0], io.StringIO())


def test_chart_empty_raises():
    with pytest.raises(ValueError):
        simple_function_chart([], [], io.StringIO())


def test_chart_defaults_to_stdout(capsys):
    simple_function_chart([1.0], [2.0])
    assert "xs = [1]" in capsys.readouterr().out


def test_chart_of_function_samples_segment():
    out = io.StringIO()
    simple_function_chart_of(lambda x: 2.0 * x, [0.0, 1.0], 4, out)
    lines = _lines(out.getvalue())
    assert "xs = [0, 0.25, 0.5, 0.75, 1]" in lines
    assert "ys = [0, 0.5, 1, 1.5, 2]" in lines


def test_chart_of_function_default_count():
    out = io.StringIO()
    simple_function_chart_of(lambda x: x, [0.0, 3.0], out=out)
    xs_line = next(line for line in _lines(out.getvalue()) if line.startswith("xs = "))
    assert len(xs_line[len("xs = [") : -1].split(", ")) == 301


@pytest.mark.parametrize("segment", [[1.0, 1.0], [2.0, 1.0]])
def test_chart_of_function_wrong_segment_raises(segment):
    with pytest.raises(ValueError):
        simple_function_chart_of(lambda x: x, segment, 10, io.StringIO())


def test_chart_of_function_zero_pieces_raises():
    with pytest.raises(ValueError):
        simple_function_chart_of(lambda x: x, [0.0, 1.0], 0, io.StringIO())