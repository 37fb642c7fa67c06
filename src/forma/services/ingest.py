"""Neural Ingest: AI-assisted bulk population of the exercise catalog.

An uploaded document is reduced to plain text, sent to the extraction model,
and the loosely-typed records it returns are normalized onto the catalog
vocabulary before insertion. Names already in the catalog (compared
case-insensitively) are skipped.

The duplicate check and the insert are separate statements, so a concurrent
insert of the same name between them is not prevented.
"""

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path

import aiosqlite
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from ..agents.client import ClientFactory, gemini_client_factory
from ..agents.dispatcher import is_rate_limit_error, parse_json_reply
from ..agents.prompts import build_extraction_prompt
from ..config import INGEST_MAX_CHARS, INGEST_MIN_CHARS, ApiCredential, Settings
from ..db.repositories import ExerciseRepository
from ..errors import (
    ConfigurationError,
    InputValidationError,
    MalformedResponseError,
    StorageError,
    UnsupportedFileError,
    UpstreamRateLimitError,
)
from ..models.exercises import DifficultyTier, ExerciseDraft, TargetMuscle

logger = logging.getLogger(__name__)

MUSCLE_SYNONYMS: dict[str, str] = {
    "chest": TargetMuscle.CHEST.value,
    "pecs": TargetMuscle.CHEST.value,
    "pectorals": TargetMuscle.CHEST.value,
    "back": TargetMuscle.BACK.value,
    "lats": TargetMuscle.BACK.value,
    "traps": TargetMuscle.BACK.value,
    "legs": TargetMuscle.LEGS.value,
    "quads": TargetMuscle.LEGS.value,
    "hamstrings": TargetMuscle.LEGS.value,
    "glutes": TargetMuscle.LEGS.value,
    "calves": TargetMuscle.LEGS.value,
    "shoulders": TargetMuscle.SHOULDERS.value,
    "delts": TargetMuscle.SHOULDERS.value,
    "deltoids": TargetMuscle.SHOULDERS.value,
    "arms": TargetMuscle.ARMS.value,
    "biceps": TargetMuscle.ARMS.value,
    "triceps": TargetMuscle.ARMS.value,
    "forearms": TargetMuscle.ARMS.value,
    "abs": TargetMuscle.ABS.value,
    "core": TargetMuscle.ABS.value,
    "abdominals": TargetMuscle.ABS.value,
}

TEXT_CONTENT_TYPES = {"text/csv", "text/plain"}
TEXT_SUFFIXES = {".txt", ".csv"}


def normalize_target_muscle(muscle: str) -> str:
    """Map a free-form muscle name onto the catalog labels.

    Unknown names are returned capitalized as-is ("obliques" -> "Obliques").
    """
    lower = muscle.lower().strip()
    if lower in MUSCLE_SYNONYMS:
        return MUSCLE_SYNONYMS[lower]
    return muscle[:1].upper() + muscle[1:].lower()


def normalize_equipment(equipment: str | list) -> list[str]:
    """Accept a list or a ``,``/``;`` separated string."""
    if isinstance(equipment, (list, tuple)):
        items = [str(item) for item in equipment]
    else:
        items = str(equipment).replace(";", ",").split(",")
    return [item.strip() for item in items if item.strip()]


def map_difficulty_to_tier(difficulty: str) -> int:
    """Keyword-match a difficulty description to a tier (1-3)."""
    lower = difficulty.lower()
    if "beginner" in lower or "easy" in lower:
        return DifficultyTier.BEGINNER
    if "advanced" in lower or "hard" in lower or "expert" in lower:
        return DifficultyTier.ADVANCED
    return DifficultyTier.INTERMEDIATE


def normalize_name(raw: dict) -> str:
    """Trimmed record name, or "Unknown Exercise" when blank."""
    return str(raw.get("name") or "").strip() or "Unknown Exercise"


def normalize_record(raw: dict) -> ExerciseDraft:
    """Turn one extracted record into an insertable draft."""
    instructions = str(raw.get("instructions") or "").strip()
    return ExerciseDraft(
        name=normalize_name(raw),
        target_muscle=normalize_target_muscle(str(raw.get("target_muscle") or "Chest")),
        equipment=normalize_equipment(raw.get("equipment") or ["Bodyweight"]),
        difficulty_tier=map_difficulty_to_tier(str(raw.get("difficulty") or "Intermediate")),
        science_note=instructions or None,
    )


def filter_duplicates(candidates: list[dict], existing_names: list[str]) -> tuple[list[dict], int]:
    """Drop candidates whose normalized name is already known (case-insensitive).

    Blank names compare as "Unknown Exercise", the name they are stored under.
    A name repeated within ``candidates`` is kept once.

    Returns:
        (unique candidates, number skipped)
    """
    seen = {name.lower() for name in existing_names}
    unique = []
    for candidate in candidates:
        key = normalize_name(candidate).lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(candidate)
    return unique, len(candidates) - len(unique)


def extract_text(filename: str, content_type: str | None, data: bytes) -> str:
    """Read the text out of an uploaded PDF, CSV or plain-text file.

    Raises:
        UnsupportedFileError: for any other file type
        InputValidationError: if a PDF cannot be parsed
    """
    content_type = (content_type or "").split(";")[0].strip().lower()
    suffix = Path(filename or "").suffix.lower()

    if content_type == "application/pdf" or suffix == ".pdf" or data[:5] == b"%PDF-":
        try:
            reader = PdfReader(io.BytesIO(data))
            text = "\n".join(page.extract_text() or "" for page in reader.pages)
        except (PyPdfError, ValueError) as e:
            raise InputValidationError(f"Could not read PDF: {e}")
        logger.info("[Ingest] Extracted %d chars from PDF", len(text))
        return text

    if content_type in TEXT_CONTENT_TYPES or suffix in TEXT_SUFFIXES:
        text = data.decode("utf-8", errors="replace")
        logger.info("[Ingest] Read %d chars from text file", len(text))
        return text

    raise UnsupportedFileError(
        f"Unsupported file type: {content_type or suffix or 'unknown'}. Use PDF, CSV, or TXT."
    )


@dataclass
class IngestResult:
    """Outcome of an ingest batch."""

    count: int
    duplicates: int
    exercises: list[str] = field(default_factory=list)
    message: str | None = None

    def to_dict(self) -> dict:
        data = {
            "success": True,
            "count": self.count,
            "duplicates": self.duplicates,
            "exercises": self.exercises,
        }
        if self.message:
            data["message"] = self.message
        return data


class IngestService:
    """Extracts exercises from documents and adds the new ones to the catalog."""

    def __init__(
        self,
        repository: ExerciseRepository,
        api_key: str | None,
        model: str,
        client_factory: ClientFactory | None = None,
        max_chars: int = INGEST_MAX_CHARS,
    ):
        self.repository = repository
        self.api_key = api_key
        self.model = model
        self.client_factory = client_factory or gemini_client_factory()
        self.max_chars = max_chars

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        repository: ExerciseRepository,
        client_factory: ClientFactory | None = None,
    ) -> "IngestService":
        return cls(
            repository=repository,
            api_key=settings.ingest_api_key(),
            model=settings.ingest_model,
            client_factory=client_factory or gemini_client_factory(settings.base_url),
        )

    async def ingest_document(
        self, filename: str, content_type: str | None, data: bytes
    ) -> IngestResult:
        """Full pipeline for one uploaded file."""
        logger.info("[Ingest] Processing file: %s (%s)", filename, content_type)

        text = extract_text(filename, content_type, data)
        if len(text.strip()) < INGEST_MIN_CHARS:
            raise InputValidationError("File contains insufficient text content")

        if len(text) > self.max_chars:
            logger.info("[Ingest] Truncating text from %d to %d chars", len(text), self.max_chars)
            text = text[: self.max_chars]

        records = await self.extract_exercises(text)
        return await self.add_exercises(records)

    async def extract_exercises(self, text: str) -> list[dict]:
        """Ask the extraction model for exercise records in ``text``."""
        if not self.api_key:
            raise ConfigurationError("API key not configured")

        client = self.client_factory(
            ApiCredential(key=self.api_key, model=self.model, name="Ingest")
        )

        logger.info("[Ingest] Sending to %s for analysis...", self.model)
        try:
            reply = await client.generate_json(build_extraction_prompt(text))
        except Exception as e:
            if is_rate_limit_error(e):
                raise UpstreamRateLimitError("High traffic. Please wait 1 minute.")
            raise
        logger.debug("[Ingest] AI response: %s...", reply[:200])

        try:
            parsed = parse_json_reply(reply)
        except MalformedResponseError:
            logger.error("[Ingest] JSON parse error in AI response")
            raise MalformedResponseError("AI returned invalid JSON. Try a cleaner document.")

        if isinstance(parsed, dict):
            parsed = parsed.get("exercises") or []
        records = [item for item in parsed if isinstance(item, dict)] if isinstance(parsed, list) else []

        if not records:
            raise InputValidationError("No exercises found in document")

        logger.info("[Ingest] Extracted %d exercises from AI", len(records))
        return records

    async def add_exercises(self, records: list[dict]) -> IngestResult:
        """Normalize, deduplicate against the catalog, and insert."""
        try:
            existing = await self.repository.list_names()
        except aiosqlite.Error as e:
            raise StorageError(f"Database error: {e}")

        unique, skipped = filter_duplicates(records, existing)
        logger.info("[Ingest] %d new exercises after filtering duplicates", len(unique))

        if not unique:
            return IngestResult(
                count=0,
                duplicates=skipped,
                message="No new exercises found. All were duplicates.",
            )

        drafts = [normalize_record(record) for record in unique]
        try:
            ids = await self.repository.add_many(drafts)
        except aiosqlite.Error as e:
            logger.error("[Ingest] Insert error: %s", e)
            raise StorageError(f"Database error: {e}")

        logger.info(
            "[Ingest] Successfully inserted %d exercises (%d duplicates skipped)",
            len(ids),
            skipped,
        )
        return IngestResult(
            count=len(ids),
            duplicates=skipped,
            exercises=[draft.name for draft in drafts],
        )
