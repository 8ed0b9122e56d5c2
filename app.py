import json
import os
import threading
import uuid
from typing import Dict

from flask import Flask, abort, jsonify, request
from werkzeug.exceptions import HTTPException

from quizbank import config
from quizbank.models import QuestionPool
from quizbank.pdf_source import PdfDocument, iter_pdf_documents
from quizbank.pipeline import ExtractionPipeline
from quizbank.sampler import sample, sample_rounds

LIBRARY_POOL_ID = "library"

app = Flask(__name__)
app.config.update(
    MAX_CONTENT_LENGTH=config.MAX_UPLOAD_BYTES,
)

_pipeline = ExtractionPipeline()
_POOLS: Dict[str, QuestionPool] = {}
_LIBRARY_LOCK = threading.Lock()


@app.errorhandler(HTTPException)
def _json_http_error(exc: HTTPException):
    if request.path.startswith("/api/"):
        response = exc.get_response()
        payload = {"error": exc.name, "description": exc.description}
        response.data = json.dumps(payload)
        response.content_type = "application/json"
        response.status_code = exc.code or 500
        return response
    return exc


@app.errorhandler(Exception)
def _json_generic_error(exc: Exception):
    if isinstance(exc, HTTPException):
        return _json_http_error(exc)
    if request.path.startswith("/api/"):
        app.logger.exception("Unhandled error during API request")
        return jsonify({"error": "Internal Server Error", "description": str(exc)}), 500
    raise exc


def _get_library_pool() -> QuestionPool:
    pool = _POOLS.get(LIBRARY_POOL_ID)
    if pool is not None:
        return pool
    with _LIBRARY_LOCK:
        pool = _POOLS.get(LIBRARY_POOL_ID)
        if pool is None:
            pool = _pipeline.run_sync(list(iter_pdf_documents(config.DOCUMENTS_DIR)))
            if pool.failures:
                app.logger.warning(f"Library load: {pool.failure_summary()}")
            _POOLS[LIBRARY_POOL_ID] = pool
    return pool


def _get_pool(pool_id: str) -> QuestionPool:
    if pool_id == LIBRARY_POOL_ID:
        return _get_library_pool()
    pool = _POOLS.get(pool_id)
    if pool is None:
        abort(404, "Pool not found")
    return pool


def _json_payload() -> Dict[str, object]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _positive_int(payload, key: str, default: int) -> int:
    value = payload.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        abort(400, f"{key} must be a positive integer")
    return value


def _exclude_ids(payload) -> list:
    exclude_ids = payload.get("exclude_ids") or []
    if not isinstance(exclude_ids, list):
        abort(400, "exclude_ids must be a list")
    return exclude_ids


def _pool_summary(pool_id: str, pool: QuestionPool) -> Dict[str, object]:
    return {
        "id": pool_id,
        "question_count": len(pool),
        "documents": [r.name for r in pool.reports],
        "failed": pool.failure_summary(),
    }


@app.route("/api/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/api/pools")
def list_pools():
    _get_library_pool()
    return jsonify([_pool_summary(pid, pool) for pid, pool in _POOLS.items()])


@app.route("/api/pools", methods=["POST"])
def upload_pool():
    files = request.files.getlist("files") or request.files.getlist("file")
    if not files:
        abort(400, "No file")

    documents = []
    for f in files:
        raw = f.read()
        if len(raw) > config.MAX_UPLOAD_BYTES:
            abort(413, "Too large")
        documents.append(PdfDocument(raw, f.filename or "upload.pdf"))

    pool = _pipeline.run_sync(documents)
    shortfall = pool.shortfall_message(config.MIN_POOL_SIZE)
    if shortfall:
        failed = pool.failure_summary()
        abort(400, f"{shortfall} ({failed})" if failed else shortfall)

    uid = f"u-{uuid.uuid4().hex[:8]}"
    _POOLS[uid] = pool
    return jsonify(_pool_summary(uid, pool))


@app.route("/api/pools/<pool_id>/questions")
def get_questions(pool_id):
    pool = _get_pool(pool_id)
    qs = pool.records
    count = request.args.get("count", type=int)
    if count and count > 0:
        qs = qs[:min(count, config.MAX_QUESTIONS_PER_RUN)]

    return jsonify({
        "pool": {"id": pool_id, "total": len(pool)},
        "questions": [q.to_dict() for q in qs],
        "selected_count": len(qs),
    })


@app.route("/api/pools/<pool_id>/sample", methods=["POST"])
def sample_questions(pool_id):
    pool = _get_pool(pool_id)
    payload = _json_payload()
    count = min(_positive_int(payload, "count", config.QUESTIONS_PER_ROUND), config.MAX_QUESTIONS_PER_RUN)
    exclude_ids = _exclude_ids(payload)

    questions = sample(pool, count, exclude_ids)
    return jsonify({
        "pool": {"id": pool_id, "total": len(pool)},
        "questions": [q.to_dict(include_answer=False) for q in questions],
        "selected_count": len(questions),
        "depleted": len(questions) < count,
    })


@app.route("/api/pools/<pool_id>/rounds", methods=["POST"])
def sample_quiz_rounds(pool_id):
    pool = _get_pool(pool_id)
    payload = _json_payload()
    count = min(_positive_int(payload, "count", config.QUESTIONS_PER_ROUND), config.MAX_QUESTIONS_PER_RUN)
    rounds = _positive_int(payload, "rounds", config.TOTAL_ROUNDS)

    drawn = sample_rounds(pool, count, rounds, _exclude_ids(payload))
    return jsonify({
        "pool": {"id": pool_id, "total": len(pool)},
        "rounds": [[q.to_dict(include_answer=False) for q in batch] for batch in drawn],
        "depleted": len(drawn) < rounds or any(len(batch) < count for batch in drawn),
    })


@app.route("/api/pools/<pool_id>/check/<question_id>", methods=["POST"])
def check_answer(pool_id, question_id):
    pool = _get_pool(pool_id)
    q = pool.get(question_id)
    if not q:
        abort(404, "Question not found")

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        abort(400, "JSON body required")
    choice = payload.get("choice")
    if not choice:
        abort(400, "Choice required")

    is_correct = str(choice).strip().upper() == q.answer
    return jsonify({"correct": is_correct, "answer": q.answer})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(debug=True, host="0.0.0.0", port=port)
