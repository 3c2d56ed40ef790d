from __future__ import annotations

import pytest

from railfinder.adapters.aws import s3_client
from railfinder.adapters.persistence import S3JsonRepository, SnapshotRepository
from railfinder.app.services.booking_lookup_service import BookingLookupService
from railfinder.domain.exceptions import CatalogUnavailable
from railfinder.domain.models.reference import DEFAULT_STATIONS


@pytest.mark.integration
def test_s3_repository_loads_sample_documents(data_bucket: str) -> None:
    repo = S3JsonRepository(bucket=data_bucket, prefix="data")

    catalog = repo.load_catalog()

    assert len(catalog.trains) == 4
    assert catalog.station_by_code("GWL") is not None
    assert len(repo.load_passengers()) == 2


@pytest.mark.integration
def test_s3_repository_reads_bucket_from_env(
    data_bucket: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("RAILFINDER_DATA_BUCKET", data_bucket)
    monkeypatch.delenv("RAILFINDER_DATA_PREFIX", raising=False)

    repo = SnapshotRepository(upstream=S3JsonRepository())
    service = BookingLookupService(passenger_repository=repo, catalog_repository=repo)

    status = service.lookup("4521678944")
    assert status is not None
    assert status.to_station_name == "Ahmedabad Junction"


@pytest.mark.integration
def test_s3_repository_missing_documents_fall_back(data_bucket: str) -> None:
    repo = S3JsonRepository(bucket=data_bucket, prefix="elsewhere")

    with pytest.raises(CatalogUnavailable):
        repo.read_document("trains.json")

    catalog = repo.load_catalog()
    assert catalog.trains == ()
    assert catalog.stations == DEFAULT_STATIONS


@pytest.mark.integration
def test_s3_repository_skips_malformed_json(data_bucket: str) -> None:
    s3_client().put_object(
        Bucket=data_bucket, Key="broken/trains.json", Body=b"[{\"trainNumber\": "
    )
    repo = S3JsonRepository(bucket=data_bucket, prefix="broken/")

    assert repo.load_catalog().trains == ()
