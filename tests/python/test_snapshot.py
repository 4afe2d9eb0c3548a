from playground.utils.config import PlaygroundConfig
from playground.utils.random_source import NumpyRandomSource
from playground.utils.session import PlaygroundSession
from scripts.snapshot_playground import hue_to_rgb, render


def test_render_writes_png(tmp_path, capsys):
    session = PlaygroundSession(PlaygroundConfig(), rng=NumpyRandomSource(4), n=12)
    session.set_candidate(0.5, -1.0)
    out = render(session, tmp_path / "artifacts" / "playground.png")
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert "[snapshot] Wrote" in capsys.readouterr().out


def test_hue_to_rgb_endpoints():
    r, g, b = hue_to_rgb(120.0)
    assert g > r and g > b
    r, g, b = hue_to_rgb(0.0)
    assert r > g and r > b
