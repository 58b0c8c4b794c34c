"""View/thumbnail URL formatting on top of id extraction."""
import pytest

try:
    from backend.app.utils.drive import drive_view_url, drive_thumbnail_url, resolve_drive_image
except Exception:
    from app.utils.drive import drive_view_url, drive_thumbnail_url, resolve_drive_image


FILE_ID = "1OTcP60EwXnT73FYy-yjbB2C7yU6mVMTf"
SHARE = f"https://drive.google.com/file/d/{FILE_ID}/view?usp=sharing"


def test_view_url_from_share_link():
    assert drive_view_url(SHARE) == f"https://drive.google.com/uc?export=view&id={FILE_ID}"


def test_view_url_from_bare_id():
    assert drive_view_url(FILE_ID) == f"https://drive.google.com/uc?export=view&id={FILE_ID}"


def test_view_url_is_idempotent():
    canonical = "https://drive.google.com/uc?export=view&id=XYZ"
    assert drive_view_url(canonical) == canonical
    assert drive_view_url(drive_view_url(SHARE)) == drive_view_url(SHARE)


def test_thumbnail_default_size():
    assert drive_thumbnail_url(SHARE) == f"https://drive.google.com/thumbnail?id={FILE_ID}&sz=w1200"


def test_thumbnail_custom_size():
    url = drive_thumbnail_url(SHARE, "w500")
    assert f"id={FILE_ID}&sz=w500" in url
    assert url.endswith("&sz=w500")


def test_thumbnail_empty_size_uses_default():
    assert drive_thumbnail_url(FILE_ID, "").endswith("&sz=w1200")


@pytest.mark.parametrize(
    "ref",
    ["https://example.com/cover.png", "https://example.com/a/b/photo.JPG", "photo.gif"],
)
def test_direct_images_pass_through(ref):
    assert drive_view_url(ref) == ref
    assert drive_thumbnail_url(ref, "w200") == ref


def test_direct_image_with_query_string_passes_through():
    ref = "https://cdn.example.com/a.webp?v=3"
    assert drive_view_url(ref) == ref


def test_formula_wrapping_direct_image_is_unwrapped():
    ref = '=HYPERLINK("https://cdn.example.com/a.png"; "Foto")'
    assert drive_view_url(ref) == "https://cdn.example.com/a.png"


def test_formula_wrapping_drive_link():
    ref = '=HYPERLINK("https://drive.google.com/open?id=ABC123"; "label")'
    assert drive_view_url(ref) == "https://drive.google.com/uc?export=view&id=ABC123"
    assert drive_thumbnail_url(ref, "h300") == "https://drive.google.com/thumbnail?id=ABC123&sz=h300"


@pytest.mark.parametrize("ref", ["abc", "hello world", "https://example.com/about"])
def test_unresolvable_returns_input(ref):
    assert drive_view_url(ref) == ref
    assert drive_thumbnail_url(ref) == ref


@pytest.mark.parametrize("ref", [None, ""])
def test_empty_returns_empty_string(ref):
    assert drive_view_url(ref) == ""
    assert drive_thumbnail_url(ref) == ""


def test_id_that_is_already_a_url_is_returned_as_is():
    ref = "https://proxy.example.com/fetch?id=https://cdn.example.com/x"
    assert drive_view_url(ref) == "https://cdn.example.com/x"


def test_resolve_drive_image_bundle():
    link = resolve_drive_image(SHARE, "w640")
    assert link.file_id == FILE_ID
    assert link.direct is False
    assert link.resolved is True
    assert link.view_url.endswith(f"id={FILE_ID}")
    assert link.thumbnail_url.endswith(f"id={FILE_ID}&sz=w640")
    assert link.size == "w640"


def test_resolve_drive_image_direct_and_missing():
    direct = resolve_drive_image("https://example.com/cover.png")
    assert direct.direct is True and direct.file_id is None and direct.resolved is True
    assert direct.view_url == "https://example.com/cover.png"

    missing = resolve_drive_image("abc")
    assert missing.resolved is False
    assert missing.view_url == "abc"
    assert missing.size == "w1200"


def test_direct_image_with_trailing_newline_is_trimmed():
    assert drive_view_url("https://cdn.example.com/a.png\n") == "https://cdn.example.com/a.png"
    assert drive_thumbnail_url("  https://cdn.example.com/a.png \n") == "https://cdn.example.com/a.png"


def test_semicolon_params_are_part_of_the_path():
    ref = "https://x.example.com/a.png;v=1"
    assert drive_view_url(ref) == ref
    assert resolve_drive_image(ref).direct is False
