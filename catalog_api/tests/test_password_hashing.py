from __future__ import annotations

import statistics
from time import perf_counter

import pytest

from catalog_api.application.services.password_hashing import WerkzeugPasswordHasher
from catalog_api.domain.users import HashingFailureError


def test_hash_round_trip(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("correct horse")

    assert hashed.startswith("pbkdf2:sha256:1000$")
    assert hasher.verify("correct horse", hashed) is True
    assert hasher.verify("wrong horse", hashed) is False


@pytest.mark.parametrize(
    "stored",
    ["", "not-a-hash", "plain$text", "bogus-method$salt$digest", "pbkdf2:sha256:1000$salt$zz"],
)
def test_malformed_stored_hash_is_rejected(hasher: WerkzeugPasswordHasher, stored: str) -> None:
    assert hasher.verify("anything", stored) is False


def test_unknown_method_raises_hashing_failure() -> None:
    with pytest.raises(HashingFailureError):
        WerkzeugPasswordHasher(method="no-such-method").hash("pw")


def _median_verify_seconds(hasher: WerkzeugPasswordHasher, password: str, stored: str) -> float:
    samples = []
    for _ in range(7):
        t0 = perf_counter()
        hasher.verify(password, stored)
        samples.append(perf_counter() - t0)
    return statistics.median(samples)


def test_verify_effort_is_similar_for_all_outcomes() -> None:
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:60000")
    stored = hasher.hash("s3cret")

    correct = _median_verify_seconds(hasher, "s3cret", stored)
    wrong = _median_verify_seconds(hasher, "guess", stored)
    malformed = _median_verify_seconds(hasher, "s3cret", "garbage")

    slowest = max(correct, wrong, malformed)
    for elapsed in (correct, wrong, malformed):
        assert elapsed / slowest > 0.25


def test_unknown_method_raises_hashing_failure_on_verify() -> None:
    hasher = WerkzeugPasswordHasher(method="no-such-method")

    with pytest.raises(HashingFailureError):
        hasher.verify("pw", "garbage")
