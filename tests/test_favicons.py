"""Favicon generation with an in-memory source image."""

import logging

import pytest
from PIL import Image

from wedding_site import favicons
from wedding_site.favicons import (
    APPLE_TOUCH_SIZES,
    ICO_SIZES,
    PNG_SIZES,
    build_ico,
    generate_favicons,
    render_icon,
)


@pytest.fixture
def source():
    # Wider than tall, to check the icon is padded rather than stretched
    return Image.new("RGBA", (200, 100), (200, 30, 60, 255))


def test_render_icon_contains_source(source):
    icon = render_icon(source, 64)
    assert icon.size == (64, 64)
    assert icon.mode == "RGBA"
    assert icon.getpixel((0, 0))[3] == 0
    assert icon.getpixel((32, 32))[3] == 255


def test_generates_full_matrix(tmp_path, source):
    svg = tmp_path / "wedding_bell.svg"
    svg.write_text("<svg/>", encoding="utf-8")
    out_dir = tmp_path / "favicon"

    outputs = generate_favicons(svg, out_dir, loader=lambda path: source)

    names = {p.name for p in outputs}
    assert {f"wedding_bell_{s}x{s}.png" for s in PNG_SIZES} <= names
    assert {f"apple_touch_icon_{s}x{s}.png" for s in APPLE_TOUCH_SIZES} <= names
    assert "wedding_bell_favicon.ico" in names
    assert len(outputs) == len(PNG_SIZES) + len(APPLE_TOUCH_SIZES) + 1

    with Image.open(out_dir / "apple_touch_icon_180x180.png") as img:
        assert img.size == (180, 180)


def test_ico_bundles_small_sizes(tmp_path, source):
    ico_path = build_ico(source, tmp_path)
    with Image.open(ico_path) as ico:
        assert set(ico.info["sizes"]) == {(s, s) for s in ICO_SIZES}


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        generate_favicons(tmp_path / "missing.svg", tmp_path, loader=lambda path: None)


def test_main_exits_non_zero_on_missing_source(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="wedding_site.favicons"):
        code = favicons.main(["--source", str(tmp_path / "missing.svg"), "--out-dir", str(tmp_path)])
    assert code == 1
    assert "Favicon generation failed" in caplog.text


def test_main_reports_generated_files(tmp_path, source, monkeypatch, caplog):
    (tmp_path / "favicon").mkdir()
    (tmp_path / "favicon" / "wedding_bell.svg").write_text("<svg/>", encoding="utf-8")
    monkeypatch.setenv("SITE_ROOT", str(tmp_path))
    monkeypatch.setattr(favicons, "load_source", lambda path: source)

    with caplog.at_level(logging.INFO, logger="wedding_site.favicons"):
        assert favicons.main([]) == 0
    assert (tmp_path / "favicon" / "wedding_bell_favicon.ico").is_file()
    assert "wedding_bell_512x512.png" in caplog.text


@pytest.fixture
def cairosvg():
    # cairocffi raises OSError when the cairo system library is absent
    try:
        import cairosvg
    except (ImportError, OSError):
        pytest.skip("cairosvg with a cairo library is not available")
    return cairosvg


def test_load_source_rasterizes_svg(tmp_path, cairosvg):
    svg = tmp_path / "bell.svg"
    svg.write_text(
        '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">'
        '<rect width="10" height="10" fill="#c81e3c"/></svg>',
        encoding="utf-8",
    )

    image = favicons.load_source(svg)
    assert image.mode == "RGBA"
    assert image.size == (favicons.RENDER_SIZE, favicons.RENDER_SIZE)
    assert image.getpixel((512, 512)) == (200, 30, 60, 255)
