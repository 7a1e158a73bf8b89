import pytest

from squaremat.demo import build_demo_matrices, main, render_demo


def _block(report: str, title: str) -> str:
    start = report.index(title + "\n") + len(title) + 1
    end = report.index("\n\n", start)
    return report[start:end + 1]


def test_build_demo_matrices_elements():
    mat1, mat2 = build_demo_matrices()
    assert mat1.size == 3
    assert mat2.size == 3
    for i in range(3):
        for j in range(3):
            assert mat1[i][j] == i + j
            assert mat2[i][j] == i * j


def test_build_demo_matrices_returns_fresh_objects():
    first_pair = build_demo_matrices()
    first_pair[0].increment()
    second_pair = build_demo_matrices()
    assert second_pair[0][0][0] == 0


def test_report_sections_match_operations():
    report = render_demo()
    mat1, mat2 = build_demo_matrices()
    assert _block(report, "Matrix 1:") == str(mat1)
    assert _block(report, "Matrix 2:") == str(mat2)
    assert _block(report, "Matrix 1 + Matrix 2:") == str(mat1 + mat2)
    assert _block(report, "Matrix 1 - Matrix 2:") == str(mat1 - mat2)
    assert _block(report, "Matrix 1 * Matrix 2:") == str(mat1 * mat2)
    assert _block(report, "Matrix 1 * 2.0:") == str(mat1 * 2.0)
    assert _block(report, "Matrix 1 % Matrix 2:") == str(mat1 % mat2)
    assert _block(report, "Matrix 1 % 3:") == str(mat1 % 3)
    assert _block(report, "Matrix 1 ^ 2:") == str(mat1 ** 2)
    assert _block(report, "~Matrix 1:") == str(~mat1)


def test_report_increment_then_decrement_restores():
    report = render_demo()
    mat1, _ = build_demo_matrices()
    assert _block(report, "--Matrix 1:") == str(mat1)
    assert _block(report, "++Matrix 1:") == str(mat1.copy().increment())


def test_report_determinant_line():
    report = render_demo()
    assert "Determinant of Matrix 1: 0\n" in report


def test_report_comparison_lines():
    report = render_demo()
    mat1, mat2 = build_demo_matrices()
    tail = report.splitlines()[-4:]
    assert tail == [
        f"Matrix 1 == Matrix 2: {int(mat1 == mat2)}",
        f"Matrix 1 != Matrix 2: {int(mat1 != mat2)}",
        f"Matrix 1 < Matrix 2: {int(mat1 < mat2)}",
        f"Matrix 1 > Matrix 2: {int(mat1 > mat2)}",
    ]
    assert tail[0].endswith("0")
    assert tail[1].endswith("1")


def test_report_is_deterministic():
    first = render_demo()
    second = render_demo()
    assert first.startswith("Matrix 1:\n0 1 2 \n1 2 3 \n2 3 4 \n\n")
    assert second.startswith("Matrix 1:\n0 1 2 \n1 2 3 \n2 3 4 \n\n")
    assert first == second


def test_main_prints_report(capsys):
    code = main([])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == render_demo()
    assert captured.err == ""


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--unknown"])
    assert info.value.code == 2