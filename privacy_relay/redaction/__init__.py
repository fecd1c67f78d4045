from privacy_relay.redaction.known_names import KnownNameScrubber, scrub_known_names
from privacy_relay.redaction.models import Artifact, KnownNames, ScrubResult
from privacy_relay.redaction.pii_scrubber import PiiScrubber, scrub_pii

__all__ = [
    "Artifact",
    "KnownNameScrubber",
    "KnownNames",
    "PiiScrubber",
    "ScrubResult",
    "scrub_known_names",
    "scrub_pii",
]
