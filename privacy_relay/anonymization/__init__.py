from privacy_relay.anonymization.anonymizer import DataAnonymizer
from privacy_relay.anonymization.deanonymizer import DataDeanonymizer, deanonymize
from privacy_relay.anonymization.factory import AnonymizerFactory
from privacy_relay.anonymization.models import AnonymizationResult, IdentityMap
from privacy_relay.anonymization.pseudonyms import PseudonymAllocator

__all__ = [
    "AnonymizationResult",
    "AnonymizerFactory",
    "DataAnonymizer",
    "DataDeanonymizer",
    "IdentityMap",
    "PseudonymAllocator",
    "deanonymize",
]
