from privacy_relay.config.settings import Settings
from privacy_relay.contracts.scoring import ChunkSelector
from privacy_relay.logging.logger import Log
from privacy_relay.pdf.base import BasePdfExtractor
from privacy_relay.pdf.factory import PdfExtractorFactory
from privacy_relay.processor.models import RedactionResult, RedactionStats
from privacy_relay.processor.pipeline import PipelineStep, RedactionContext
from privacy_relay.processor.steps import (
    ChunkStep,
    DetectScannedStep,
    ExtractTextStep,
    ScrubKnownNamesStep,
    ScrubPiiStep,
    SelectChunksStep,
)
from privacy_relay.redaction.known_names import KnownNameScrubber
from privacy_relay.redaction.models import Artifact, KnownNames
from privacy_relay.redaction.pii_scrubber import PiiScrubber


class ContractRedactor:
    """Prepares contract text for an external term-extraction call.

    Pipeline: extract -> detect scanned -> chunk -> select -> scrub PII ->
    scrub known names.
    """

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        *,
        min_chunk_length: int,
        chunk_limit: int,
        min_chars_per_page: int,
    ) -> None:
        text_steps: list[PipelineStep] = [
            ChunkStep(min_chunk_length),
            SelectChunksStep(ChunkSelector(), chunk_limit),
            ScrubPiiStep(PiiScrubber()),
            ScrubKnownNamesStep(KnownNameScrubber()),
        ]
        self._text_steps = text_steps
        self._pdf_steps: list[PipelineStep] = [
            ExtractTextStep(pdf_extractor),
            DetectScannedStep(min_chars_per_page),
            *text_steps,
        ]

    def redact_pdf(self, pdf_bytes: bytes, known_names: KnownNames) -> RedactionResult:
        """Redact a contract PDF.

        Raises:
            PdfExtractionError: if the bytes are not a readable PDF.
        """
        context = RedactionContext(known_names=known_names, pdf_bytes=pdf_bytes)
        return self._run(self._pdf_steps, context)

    def redact_text(self, text: str, known_names: KnownNames) -> RedactionResult:
        """Redact contract text that is already extracted."""
        context = RedactionContext(known_names=known_names, raw_text=text)
        return self._run(self._text_steps, context)

    @staticmethod
    def _run(steps: list[PipelineStep], context: RedactionContext) -> RedactionResult:
        for step in steps:
            context = step.run(context)

        if context.is_scanned_pdf:
            return RedactionResult(
                redacted_text="",
                is_scanned_pdf=True,
                stats=RedactionStats(original_length=len(context.raw_text)),
            )

        artifacts: list[Artifact] = []
        redactions = 0
        for scrub_result in (context.pii_result, context.name_result):
            if scrub_result is not None:
                artifacts.extend(scrub_result.artifacts)
                redactions += scrub_result.count

        Log.info(
            f"Contract redacted: {len(context.selected_chunks)}/{len(context.chunks)} chunks kept, "
            f"{redactions} redactions applied"
        )
        return RedactionResult(
            redacted_text=context.text,
            is_scanned_pdf=False,
            stats=RedactionStats(
                original_length=len(context.raw_text),
                chunks_kept=len(context.selected_chunks),
                chunks_total=len(context.chunks),
                redactions_applied=redactions,
            ),
            artifacts=artifacts,
        )


def build_redactor(settings: Settings) -> ContractRedactor:
    """Build a ContractRedactor with the configured PDF engine and limits."""
    return ContractRedactor(
        PdfExtractorFactory.create(settings),
        min_chunk_length=settings.chunk_min_length,
        chunk_limit=settings.chunk_select_limit,
        min_chars_per_page=settings.scanned_pdf_min_chars_per_page,
    )
