from pathlib import Path

from photocore.models import (
    CardDetectedEvent,
    PreviewSpan,
    TransferErrorCode,
    TransferResult,
    TransferSummary,
)


def test_preview_span_size() -> None:
    assert PreviewSpan(start=100, end=350).size == 250


def test_card_event_from_scan_keeps_first_ten() -> None:
    files = [Path(f"/media/u/CARD/DCIM/IMG_{index:04d}.JPG") for index in range(12)]

    event = CardDetectedEvent.from_scan(Path("/media/u/CARD"), Path("/media/u/CARD/DCIM"), files)

    assert event.image_count == 12
    assert event.images == tuple(files[:10])


def test_transfer_result_serialization() -> None:
    result = TransferResult.failed(Path("a.nef"), TransferErrorCode.ALREADY_EXISTS, "exists")
    data = result.to_dict()
    assert data["success"] is False
    assert data["error_code"] == "ALREADY_EXISTS"
    assert data["destination"] is None


def test_transfer_summary_counts() -> None:
    results = [
        TransferResult.ok(Path("a.nef"), Path("p/RAW/a.nef")),
        TransferResult.failed(Path("b.mov"), TransferErrorCode.UNSUPPORTED_FORMAT, ".mov"),
        TransferResult.ok(Path("c.jpg"), Path("p/JPG/c.jpg")),
    ]
    assert TransferSummary.from_results(results) == TransferSummary(total=3, succeeded=2, failed=1)
