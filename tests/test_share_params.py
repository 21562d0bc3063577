import pytest

from sharekit.capability.types import Rect, ShareFile, ShareParams, ShareResult, ShareResultStatus, ShareUri


def test_copy_with_replaces_non_none_fields():
    params = ShareParams(text="a", title="b", download_fallback_enabled=True)

    updated = params.copy_with(title="c", text=None, download_fallback_enabled=False)

    assert updated.text == "a"
    assert updated.title == "c"
    assert updated.download_fallback_enabled is False
    assert params.title == "b"


def test_copy_with_rejects_unknown_field():
    with pytest.raises(TypeError, match="Unknown ShareParams field"):
        ShareParams().copy_with(thumbnail=None)


def test_copy_with_geometry_and_files():
    origin = Rect(left=0, top=0, width=10, height=20)
    files = [ShareFile(path="/tmp/report.pdf", mime_type="application/pdf")]

    updated = ShareParams(text="x").copy_with(share_position_origin=origin, files=files)

    assert updated.share_position_origin == origin
    assert updated.files == files


def test_share_file_requires_path_or_data():
    with pytest.raises(ValueError, match="path or data"):
        ShareFile()


def test_share_file_display_name():
    assert ShareFile(path="/tmp/report.pdf").display_name == "report.pdf"
    assert ShareFile(data=b"x", name="note.txt").display_name == "note.txt"
    assert ShareFile(data=b"x").display_name == "file"


def test_to_dict_serializes_uri_and_file_names():
    params = ShareParams(
        subject="s",
        uri=ShareUri("https://example.com/a"),
        files=[ShareFile(data=b"x", name="a.txt")],
    )

    assert params.to_dict() == {
        "subject": "s",
        "uri": "https://example.com/a",
        "files": ["a.txt"],
    }


def test_unavailable_result_constant():
    assert ShareResult.unavailable.status is ShareResultStatus.UNAVAILABLE
    assert ShareResult.unavailable.to_dict() == {"raw": "", "status": "unavailable"}
