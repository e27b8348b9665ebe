import pytest
from PIL import Image

from fractalia.cli import main
from fractalia.koch import nearest_vertex, star_vertices


def test_renders_escape_fractal(tmp_path, capsys):
    output = tmp_path / "m.png"
    status = main(["mandelbrot", "--width", "20", "--height", "16", "-o", str(output)])
    assert status == 0
    with Image.open(output) as image:
        assert image.size == (20, 16)
    assert str(output) in capsys.readouterr().out


def test_keys_change_image(tmp_path):
    plain = tmp_path / "plain.png"
    keyed = tmp_path / "keyed.png"
    assert main(["julia", "--width", "16", "--height", "16", "-o", str(plain)]) == 0
    assert (
        main(["julia", "--width", "16", "--height", "16", "--keys", "q,c,up", "-o", str(keyed)])
        == 0
    )
    with Image.open(plain) as first, Image.open(keyed) as second:
        assert first.tobytes() != second.tobytes()


def test_unknown_key_is_rejected(tmp_path):
    with pytest.raises(SystemExit):
        main(["julia", "--keys", "zoom", "-o", str(tmp_path / "x.png")])


def test_unbound_key_is_rejected(tmp_path):
    with pytest.raises(SystemExit):
        main(["julia", "--keys", "x", "-o", str(tmp_path / "x.png")])


def test_unknown_fractal_is_rejected(tmp_path):
    with pytest.raises(SystemExit):
        main(["sponge", "-o", str(tmp_path / "x.png")])


def test_bad_scheme_fails(tmp_path, capsys):
    status = main(["tribrot", "--width", "8", "--height", "8", "--scheme", "9",
                   "-o", str(tmp_path / "x.png")])
    assert status == 1
    assert "scheme" in capsys.readouterr().err


def test_ifs_with_seed_is_reproducible(tmp_path):
    first = tmp_path / "a.png"
    second = tmp_path / "b.png"
    args = ["crystal", "--points", "500", "--seed", "5", "--width", "50", "--height", "50"]
    assert main([*args, "-o", str(first)]) == 0
    assert main([*args, "-o", str(second)]) == 0
    with Image.open(first) as a, Image.open(second) as b:
        assert a.tobytes() == b.tobytes()


def test_koch_click_reports_nearest_distance(tmp_path, capsys):
    status = main(["koch", "--iteration", "2", "--click", "140", "350",
                   "-o", str(tmp_path / "k.png")])
    assert status == 0
    distance, _ = nearest_vertex(140 - 350, 350 - 350, star_vertices(2))
    assert f"nearest distance: {distance}" in capsys.readouterr().out


def test_koch_negative_iteration_fails(tmp_path):
    status = main(["koch", "--iteration", "-1", "-o", str(tmp_path / "k.png")])
    assert status == 1