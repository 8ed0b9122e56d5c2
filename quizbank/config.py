import os
from pathlib import Path

BASE_DIR = Path(__file__).parent.parent.resolve()

MIN_STRUCTURED_CANDIDATES = int(os.getenv("MIN_STRUCTURED_CANDIDATES", "5"))
MIN_BLOCK_LENGTH = int(os.getenv("MIN_BLOCK_LENGTH", "20"))
MIN_QUESTION_LENGTH = int(os.getenv("MIN_QUESTION_LENGTH", "10"))
DEFAULT_ANSWER = os.getenv("DEFAULT_ANSWER", "A").strip().upper() or "A"

DUPLICATE_POLICY = os.getenv("DUPLICATE_POLICY", "last").strip().lower()
if DUPLICATE_POLICY not in {"last", "first", "reject"}:
    raise ValueError(f"DUPLICATE_POLICY must be one of last/first/reject, got {DUPLICATE_POLICY!r}")

QUESTIONS_PER_ROUND = int(os.getenv("QUESTIONS_PER_ROUND", "20"))
TOTAL_ROUNDS = int(os.getenv("TOTAL_ROUNDS", "3"))
MIN_POOL_SIZE = int(os.getenv("MIN_POOL_SIZE", str(QUESTIONS_PER_ROUND)))

EXTRA_NOISE_PHRASES = [
    phrase.strip()
    for phrase in os.getenv("EXTRA_NOISE_PHRASES", "").split(",")
    if phrase.strip()
]

DOCUMENTS_DIR = Path(os.getenv("DOCUMENTS_DIR", str(BASE_DIR / "documents")))
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", "12582912"))
MAX_QUESTIONS_PER_RUN = int(os.getenv("MAX_QUESTIONS_PER_RUN", "100"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
