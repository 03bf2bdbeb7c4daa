"""Query encoder: natural-language text to an embedding vector.

Uses fastembed (ONNX-based) with the same model Smart Connections used to
build the vault's vectors, so query and record vectors are comparable.

The model is loaded lazily on the first encode() call; constructing an
encoder performs no network or disk I/O.
"""

from __future__ import annotations

import asyncio
import os
import re
import threading
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np
import structlog

from smartsearch.core.errors import EncoderError, SearchError

if TYPE_CHECKING:
    from smartsearch.config.models import EncoderConfig

log = structlog.get_logger(__name__)

_TRAILING_PARTIAL_WORD = re.compile(r"\s+\S*$")


class QueryEncoder(Protocol):
    """Anything that can turn query text into a vector."""

    async def encode(self, text: str) -> Sequence[float]: ...


def validate_query_text(text: object) -> str:
    """Return ``text`` if it is a non-blank string.

    Raises:
        SearchError: If text is not a string or is empty / whitespace-only.
    """
    if not isinstance(text, str):
        received = "None" if text is None else type(text).__name__
        raise SearchError.invalid_query(f"expected a string, but received {received}")
    if not text.strip():
        raise SearchError.invalid_query(
            "empty or whitespace-only string; provide meaningful text to embed"
        )
    return text


def truncate_text(text: str, max_chars: int) -> str:
    """Cut text to max_chars, dropping a trailing partial word where possible."""
    if len(text) <= max_chars:
        return text
    head = text[:max_chars]
    trimmed = _TRAILING_PARTIAL_WORD.sub("", head)
    return trimmed or head


def _detect_providers() -> list[str]:
    """Detect available ONNX Runtime execution providers."""
    try:
        import onnxruntime as ort  # type: ignore[import-not-found]
    except ImportError:
        return []

    available = set(ort.get_available_providers())
    providers: list[str] = []
    if "CUDAExecutionProvider" in available:
        providers.append("CUDAExecutionProvider")
    providers.append("CPUExecutionProvider")
    return providers


def _register_custom_model(text_embedding: Any, config: EncoderConfig) -> None:
    """Teach fastembed about the model if it is not in its built-in catalog."""
    supported = {m["model"] for m in text_embedding.list_supported_models()}
    if config.model_id in supported:
        return

    from fastembed.common.model_description import (  # type: ignore[import-not-found]
        ModelSource,
        PoolingType,
    )

    text_embedding.add_custom_model(
        model=config.model_id,
        pooling=PoolingType.MEAN,
        normalization=True,
        sources=ModelSource(hf=config.model_id),
        dim=config.dimensions,
        model_file=config.model_file,
    )
    log.debug("encoder.custom_model_registered", model=config.model_id)


class FastEmbedEncoder:
    """Mean-pooled, L2-normalized query embeddings via fastembed."""

    def __init__(self, config: EncoderConfig) -> None:
        self._config = config
        self._model: Any | None = None
        self._lock = threading.Lock()

    @property
    def model_id(self) -> str:
        return self._config.model_id

    async def encode(self, text: str) -> np.ndarray[Any, np.dtype[np.float32]]:
        """Encode text into a normalized vector.

        Raises:
            SearchError: If text is not a non-blank string.
            EncoderError: If fastembed is not installed.
        """
        validate_query_text(text)
        safe_text = truncate_text(text, self._config.max_chars)
        return await asyncio.to_thread(self._embed, safe_text)

    def _embed(self, text: str) -> np.ndarray[Any, np.dtype[np.float32]]:
        model = self._ensure_model()
        vectors = list(model.embed([text]))
        return np.asarray(vectors[0], dtype=np.float32)

    def _ensure_model(self) -> Any:
        """Lazy-load the fastembed TextEmbedding model with GPU auto-detect."""
        with self._lock:
            if self._model is not None:
                return self._model

            try:
                from fastembed import TextEmbedding  # type: ignore[import-not-found]
            except ImportError as e:
                raise EncoderError.unavailable(
                    self._config.model_id, "fastembed is not installed (pip install fastembed)"
                ) from e

            _register_custom_model(TextEmbedding, self._config)

            providers = _detect_providers()
            threads = self._config.threads or max(1, (os.cpu_count() or 4) // 2)
            start = time.monotonic()
            kwargs: dict[str, Any] = {
                "model_name": self._config.model_id,
                "threads": threads,
            }
            if providers:
                kwargs["providers"] = providers
            self._model = TextEmbedding(**kwargs)
            log.info(
                "encoder.model_loaded",
                model=self._config.model_id,
                providers=providers or ["CPUExecutionProvider"],
                threads=threads,
                elapsed_s=round(time.monotonic() - start, 2),
            )
            return self._model


def create_encoder(config: EncoderConfig) -> QueryEncoder:
    return FastEmbedEncoder(config)
