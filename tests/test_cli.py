import pytest

from mlprims.activation import sigmoid
from mlprims.cli import main
from mlprims.linalg import dot_product, mean_squared_error
from mlprims.matrix import determinant
from mlprims.stats import correlation_coefficient, mean


@pytest.fixture
def output_lines(capsys):
    status = main([])
    lines = capsys.readouterr().out.splitlines()
    return status, lines


def test_main_returns_zero(output_lines):
    status, _ = output_lines
    assert status == 0


def test_activation_lines_come_first(output_lines):
    _, lines = output_lines
    assert lines[0] == f"Sigmoid(1.000000) = {sigmoid(1.0):f}"
    assert lines[1].startswith("ReLU(1.000000) = ")


def test_dot_product_and_loss_lines(output_lines):
    _, lines = output_lines
    assert f"Dot Product = {dot_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]):f}" in lines
    expected = mean_squared_error([1.0, 0.0, 1.0], [0.8, 0.2, 0.6])
    assert f"Mean Squared Error = {expected:f}" in lines


def test_matrix_section(output_lines):
    _, lines = output_lines
    assert f"Matrix Determinant = {determinant([[1.0, 2.0], [3.0, 4.0]]):f}" in lines
    index = lines.index("Matrix Inversion Result:")
    assert len(lines[index + 1].split()) == 2
    assert "Matrix inversion failed" not in lines


def test_learning_rate_schedule_prints_twenty_steps(output_lines):
    _, lines = output_lines
    steps = [line for line in lines if line.startswith("Learning Rate at step ")]
    assert len(steps) == 20
    assert steps[0].startswith("Learning Rate at step 0: ")
    assert steps[-1].startswith("Learning Rate at step 19: ")


def test_statistics_lines_end_output(output_lines):
    _, lines = output_lines
    assert f"Mean = {mean([1.0, 2.0, 3.0, 4.0]):f}" in lines
    corr = correlation_coefficient([1.0, 2.0, 3.0, 4.0], [5.0, 6.0, 7.0, 8.0])
    assert lines[-1] == f"Correlation Coefficient = {corr:f}"


def test_one_hot_line_has_nine_values(output_lines):
    _, lines = output_lines
    line = next(l for l in lines if l.startswith("One-Hot Encoded Data: "))
    values = [float(v) for v in line.split(": ", 1)[1].split()]
    assert len(values) == 9
    assert sum(values) == 3.0


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2