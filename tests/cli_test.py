import os

import pytest

from sudoku_generator.cli import GridGenerator, main
from sudoku_generator.generator import SizeClass

from .helpers import assert_complete_grid


def test_main_prints_grid_without_saving(capsys, tmp_path):
    results = main(["--size", "small", "--seed", "3", "--no-save", "--output", str(tmp_path)])

    assert len(results) == 1
    assert results[0]['complete']
    assert results[0]['image_path'] is None
    assert_complete_grid(results[0]['grid'])
    assert os.listdir(tmp_path) == []

    out = capsys.readouterr().out
    assert "Generating 4x4 grid: grid_001" in out
    assert "✓ Grid is complete and valid" in out


def test_main_saves_images(tmp_path):
    results = main(["-s", "9", "-n", "2", "--seed", "1", "-o", str(tmp_path), "--cell-size", "20"])

    assert [os.path.basename(r['image_path']) for r in results] == [
        "grid_001_9x9.png",
        "grid_002_9x9.png",
    ]
    for r in results:
        assert os.path.exists(r['image_path'])


def test_main_same_seed_same_output():
    first = main(["-s", "small", "-n", "3", "--seed", "8", "--no-save"])
    second = main(["-s", "small", "-n", "3", "--seed", "8", "--no-save"])
    assert [r['grid'].tolist() for r in first] == [r['grid'].tolist() for r in second]


@pytest.mark.parametrize("argv", [["--size", "6"], ["--count", "0"]])
def test_main_rejects_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["--no-save"])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_main_reports_generation_error(tmp_path, capsys):
    # A file where the output directory should be makes the image write fail.
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(SystemExit) as exc:
        main(["-s", "small", "-o", str(blocker)])
    assert exc.value.code == 1
    assert "Error during generation" in capsys.readouterr().out


def test_grid_generator_result_fields(tmp_path):
    generator = GridGenerator(cell_size=10, save_images=True, seed=4)
    result = generator.generate_grid(SizeClass.SMALL, str(tmp_path), name="sample")

    assert result['complete']
    assert result['reason'] == ""
    assert result['image_path'] == os.path.join(str(tmp_path), "sample_4x4.png")
    assert os.path.exists(result['image_path'])
