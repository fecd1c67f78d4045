from privacy_relay.anonymization.anonymizer import DataAnonymizer
from privacy_relay.config.settings import Settings


class AnonymizerFactory:
    """Creates the data anonymizer from settings."""

    @classmethod
    def create(cls, settings: Settings) -> DataAnonymizer:
        return DataAnonymizer(company_pseudonym=settings.company_pseudonym)
