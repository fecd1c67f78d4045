from privacy_relay.contracts.chunker import split_into_chunks
from privacy_relay.contracts.scoring import ChunkSelector
from privacy_relay.logging.logger import Log
from privacy_relay.pdf.base import BasePdfExtractor
from privacy_relay.processor.pipeline import PipelineStep, RedactionContext
from privacy_relay.redaction.known_names import KnownNameScrubber
from privacy_relay.redaction.pii_scrubber import PiiScrubber


class ExtractTextStep(PipelineStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: RedactionContext) -> RedactionContext:
        extracted = self._pdf_extractor.extract(context.pdf_bytes)
        context.raw_text = extracted.text
        context.page_count = extracted.page_count
        Log.info(f"Extracted {len(extracted.text)} chars from {extracted.page_count} pages")
        return context


class DetectScannedStep(PipelineStep):
    """Flags documents whose text layer is too thin to be a real contract text."""

    def __init__(self, min_chars_per_page: int) -> None:
        self._min_chars_per_page = min_chars_per_page

    def run(self, context: RedactionContext) -> RedactionContext:
        density = len(context.raw_text) / max(context.page_count, 1)
        context.is_scanned_pdf = density < self._min_chars_per_page
        if context.is_scanned_pdf:
            Log.warning(
                f"Document looks scanned: {density:.0f} chars/page "
                f"(threshold {self._min_chars_per_page})"
            )
        return context


class ChunkStep(PipelineStep):
    def __init__(self, min_length: int) -> None:
        self._min_length = min_length

    def run(self, context: RedactionContext) -> RedactionContext:
        if context.is_scanned_pdf:
            return context
        context.chunks = split_into_chunks(context.raw_text, self._min_length)
        return context


class SelectChunksStep(PipelineStep):
    def __init__(self, selector: ChunkSelector, limit: int) -> None:
        self._selector = selector
        self._limit = limit

    def run(self, context: RedactionContext) -> RedactionContext:
        if context.is_scanned_pdf:
            return context
        context.selected_chunks = self._selector.select(context.chunks, self._limit)
        context.text = "\n\n".join(context.selected_chunks)
        Log.info(f"Kept {len(context.selected_chunks)} of {len(context.chunks)} chunks")
        return context


class ScrubPiiStep(PipelineStep):
    def __init__(self, scrubber: PiiScrubber) -> None:
        self._scrubber = scrubber

    def run(self, context: RedactionContext) -> RedactionContext:
        if context.is_scanned_pdf:
            return context
        context.pii_result = self._scrubber.scrub(context.text)
        context.text = context.pii_result.scrubbed_text
        return context


class ScrubKnownNamesStep(PipelineStep):
    def __init__(self, scrubber: KnownNameScrubber) -> None:
        self._scrubber = scrubber

    def run(self, context: RedactionContext) -> RedactionContext:
        if context.is_scanned_pdf:
            return context
        context.name_result = self._scrubber.scrub(context.text, context.known_names)
        context.text = context.name_result.scrubbed_text
        return context
