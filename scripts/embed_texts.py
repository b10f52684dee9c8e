#!/usr/bin/env python3
"""
Embed texts with the Gemini code-index embedder and print a summary (count, dimension, usage).
Usage: python scripts/embed_texts.py [TEXT ...] [--file PATH] [--model MODEL_ID] [--task-type TASK_TYPE]
- Texts come from positional args and/or a file (one text per non-empty line).
- Needs GEMINI_API_KEY (env or .env). Model and task type default from settings.
"""
import argparse
import logging
import sys
from pathlib import Path

# Project root when run from a checkout
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from code_index.config import TaskType, get_settings
from code_index.exceptions import EmbeddingError
from code_index.gemini_embedder import GeminiEmbedder

logger = logging.getLogger(__name__)


def read_texts(texts: list[str], file_path: Path | None) -> list[str]:
    out = [t for t in texts if t.strip()]
    if file_path is not None:
        out.extend(line.strip() for line in file_path.read_text(encoding="utf-8").splitlines() if line.strip())
    return out


def main(argv: list[str] | None = None, embedder: GeminiEmbedder | None = None) -> int:
    parser = argparse.ArgumentParser(description="Embed texts with Gemini and print a summary")
    parser.add_argument("texts", nargs="*", help="Texts to embed")
    parser.add_argument("--file", type=Path, default=None, help="File with one text per line")
    parser.add_argument("--model", type=str, default=None, help="Model id override for this call")
    parser.add_argument(
        "--task-type",
        type=str.upper,
        default=None,
        choices=[t.value for t in TaskType],
        help="Task type hint (default: settings or CODE_RETRIEVAL_QUERY)",
    )
    args = parser.parse_args(argv)

    if args.file is not None and not args.file.exists():
        logger.error("File not found: %s", args.file)
        return 1
    texts = read_texts(args.texts, args.file)
    if not texts:
        logger.error("No texts to embed")
        return 1

    if embedder is None:
        settings = get_settings()
        if not settings.gemini_api_key:
            logger.error("Set GEMINI_API_KEY")
            return 1
        if args.task_type:
            settings = settings.model_copy(update={"gemini_embedding_task_type": TaskType(args.task_type)})
        embedder = GeminiEmbedder(settings)

    try:
        result = embedder.create_embeddings(texts, model=args.model)
    except EmbeddingError as e:
        logger.error("%s", e)
        return 1

    dimension = len(result.embeddings[0]) if result.embeddings else 0
    print("Embedder: %s model=%s task_type=%s" % (
        embedder.embedder_info.name, args.model or embedder.config.model_id, embedder.config.task_type,
    ))
    print("Embeddings: texts=%s vectors=%s dimension=%s" % (len(texts), len(result.embeddings), dimension))
    if result.usage:
        print("Usage: prompt_tokens=%s total_tokens=%s" % (result.usage.prompt_tokens, result.usage.total_tokens))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(main())
