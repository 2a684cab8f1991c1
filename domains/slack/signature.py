"""Slack request signature verification (signing secret, v0 scheme)."""

from slack_sdk.signature import Clock, SignatureVerifier


class _FixedClock(Clock):
    def __init__(self, now: float):
        self._now = now

    def now(self) -> float:
        return self._now


def _verifier(signing_secret: str, now: float = None) -> SignatureVerifier:
    if now is None:
        return SignatureVerifier(signing_secret)
    return SignatureVerifier(signing_secret, clock=_FixedClock(now))


def compute_signature(signing_secret: str, timestamp: str, body: bytes) -> str:
    """Compute the ``v0=`` signature Slack sends for a request body."""
    return _verifier(signing_secret).generate_signature(timestamp=timestamp, body=body)


def verify_request(
    signing_secret: str,
    timestamp: str | None,
    signature: str | None,
    body: bytes,
    now: float = None
) -> bool:
    """Check X-Slack-Request-Timestamp / X-Slack-Signature for a request.

    Requests older than five minutes are rejected as replays.

    Returns:
        True if the signature matches and the timestamp is recent
    """
    if not timestamp or not signature or not timestamp.isdigit():
        return False
    return _verifier(signing_secret, now).is_valid(body=body, timestamp=timestamp, signature=signature)
