from pathlib import Path

from photocore.utils import file_classifier


def test_destination_folder_by_extension() -> None:
    assert file_classifier.destination_folder(Path("DSC_0001.NEF")) == "RAW"
    assert file_classifier.destination_folder(Path("img.arw")) == "RAW"
    assert file_classifier.destination_folder(Path("img.Dng")) == "RAW"
    assert file_classifier.destination_folder(Path("IMG_0001.JPG")) == "JPG"
    assert file_classifier.destination_folder(Path("IMG_0001.jpeg")) == "JPG"
    assert file_classifier.destination_folder(Path("scan.png")) is None
    assert file_classifier.destination_folder(Path("README")) is None


def test_media_and_renderable_sets() -> None:
    assert file_classifier.is_media_file(Path("a.CR2"))
    assert not file_classifier.is_media_file(Path("a.png"))
    assert file_classifier.is_renderable(Path("a.png"))
    assert not file_classifier.is_renderable(Path("a.nef"))
    assert file_classifier.is_raw_file(Path("a.RAW"))
